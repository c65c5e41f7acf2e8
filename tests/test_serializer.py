# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import pytest

from canonjava.runtime import canonical_serializer, LexerRule, ParserRule, TokenKind

from java_trees import lit, p, ref, t


def generic_type(name, argument):
    return p('TYPE', p('JAVA_CODE_REFERENCE', t(name), p('REFERENCE_PARAMETER_LIST', t('<'), p('TYPE', t(argument)), t('>'))))


def empty_method(*modifiers):
    return p('METHOD',
             p('MODIFIER_LIST', *modifiers),
             p('TYPE', t('void')),
             t('foo'),
             p('PARAMETER_LIST', t('('), t(')')),
             p('CODE_BLOCK', t('{'), p('RETURN_STATEMENT', t('return'), t(';')), t('}')))


@pytest.mark.parametrize('root, expected', [
    # Infix operators.
    (p('BINARY_EXPRESSION', ref('a'), t('+'), ref('b')), 'a + b'),
    (p('BINARY_EXPRESSION', ref('a'), t('<'), ref('b')), 'a < b'),
    (p('BINARY_EXPRESSION', ref('a'), t('>>>'), lit('2')), 'a >>> 2'),
    (p('POLYADIC_EXPRESSION', ref('a'), t('&&'), ref('b'), t('&&'), ref('c')), 'a && b && c'),
    (p('EXPRESSION_STATEMENT', p('ASSIGNMENT_EXPRESSION', ref('x'), t('='), p('BINARY_EXPRESSION', ref('y'), t('*'), lit('2'))), t(';')), 'x=y * 2;\n'),

    # Conditional expressions.
    (p('CONDITIONAL_EXPRESSION', ref('a'), t('?'), ref('b'), t(':'), ref('c')), 'a ? b : c'),
    (p('CONDITIONAL_EXPRESSION', p('PARENTH_EXPRESSION', t('('), ref('a'), t(')')), t('?'), lit('1'), t(':'), lit('2')), '(a) ? 1 : 2'),

    # Return statements.
    (p('RETURN_STATEMENT', t('return'), ref('x'), t(';')), 'return x;\n'),
    (p('RETURN_STATEMENT', t('return'), t(';')), 'return;\n'),
    (p('RETURN_STATEMENT', t('return'), p('PARENTH_EXPRESSION', t('('), ref('x'), t(')')), t(';')), 'return (x);\n'),
    (p('RETURN_STATEMENT', t('return'), p('PREFIX_EXPRESSION', t('!'), ref('flag')), t(';')), 'return !flag;\n'),
    # Only a leading return is guarded.
    (p('CODE_BLOCK', t('{'), p('RETURN_STATEMENT', t('return'), p('PARENTH_EXPRESSION', t('('), ref('x'), t(')')), t(';')), t('}')), '{\nreturn(x);\n}\n'),

    # Declarations.
    (p('DECLARATION_STATEMENT', p('LOCAL_VARIABLE', generic_type('List', 'String'), t('names'), t('='), lit('null'), t(';'))), 'List<String> names=null;\n'),
    (p('LOCAL_VARIABLE', generic_type('List', 'String'), t('names')), 'List<String>names'),
    (p('DECLARATION_STATEMENT', p('LOCAL_VARIABLE', p('TYPE', t('int'), t('['), t(']')), t('a'), t('='),
                                  p('ARRAY_INITIALIZER_EXPRESSION', t('{'), lit('1'), t(','), lit('2'), t('}')), t(';'))), 'int[] a={1,2};\n'),
    (p('PARAMETER', p('TYPE', t('String'), t('...')), t('args')), 'String... args'),

    # Methods.
    (empty_method(t('public')), 'public void foo(){\nreturn;\n}\n'),
    (p('METHOD', generic_type('List', 'String'), t('foo'), p('PARAMETER_LIST', t('('), t(')')), t(';')), 'List<String> foo();\n'),
    (p('METHOD', p('TYPE_PARAMETER_LIST', t('<'), p('TYPE_PARAMETER', t('T')), t('>')), p('TYPE', t('T')), t('id'),
       p('PARAMETER_LIST', t('('), p('PARAMETER', p('TYPE', t('T')), t('x')), t(')')), t(';')), '<T>T id(T x);\n'),

    # Annotations.
    (p('ANNOTATION', t('@'), p('JAVA_CODE_REFERENCE', t('Override'))), '@Override'),
    (empty_method(p('ANNOTATION', t('@'), p('JAVA_CODE_REFERENCE', t('Override'))), t('public')), '@Override public void foo(){\nreturn;\n}\n'),
    (p('ANNOTATION', t('@'), p('JAVA_CODE_REFERENCE', t('SuppressWarnings')),
       p('ANNOTATION_PARAMETER_LIST', t('('), p('NAME_VALUE_PAIR', p('ARRAY_INITIALIZER_EXPRESSION', t('{'), lit('"a"'), t(','), lit('"b"'), t('}'))), t(')'))),
     '@SuppressWarnings({"a","b"})'),
    # Semicolons still end lines inside array initializers.
    (p('ARRAY_INITIALIZER_EXPRESSION', t('{'),
       p('LAMBDA_EXPRESSION', p('PARAMETER_LIST', t('('), t(')')), t('->'), p('CODE_BLOCK', t('{'), p('RETURN_STATEMENT', t('return'), t(';')), t('}'))),
       t('}')),
     '{()-> {return;\n}}'),

    # Other expressions.
    (p('METHOD_CALL_EXPRESSION', p('REFERENCE_EXPRESSION', ref('list'), t('.'), t('add')), p('EXPRESSION_LIST', t('('), ref('x'), t(','), ref('y'), t(')'))), 'list.add(x,y)'),
    (p('METHOD_REFERENCE_EXPRESSION', ref('String'), t('::'), t('valueOf')), 'String::valueOf'),
    (p('SWITCH_LABEL_STATEMENT', t('case'), lit('1'), t(':')), 'case 1 :'),
])
def test_canonical_serializer(root, expected):
    assert canonical_serializer(root) == expected


def test_right_brace_in_array_initializer():
    # A closing brace following a token that needs a space after itself.
    initializer = p('ARRAY_INITIALIZER_EXPRESSION', t('{'), lit('1'), t('}'))
    block = p('CODE_BLOCK', t('{'), ref('x'), t('}'))

    assert canonical_serializer(initializer) == '{1}'
    assert canonical_serializer(block) == '{\nx }\n'


def test_formatting_is_ignored():
    compact = p('BINARY_EXPRESSION', ref('a'), t('+'), ref('b'))
    formatted = p('BINARY_EXPRESSION',
                  t('\t'),
                  p('REFERENCE_EXPRESSION', t('a'), t('  ')),
                  t('/* plus */'),
                  t('+'),
                  t('\n   '),
                  t('// b follows', TokenKind.END_OF_LINE_COMMENT),
                  t('\n'),
                  ref('b'),
                  t('/** done */'))

    assert canonical_serializer(formatted) == canonical_serializer(compact) == 'a + b'


def test_trivia_is_erased():
    root = empty_method(t('/* modifiers */'), t('public'), t('\n\n'))
    root.children[-1].insert_child(1, t('// nothing to do', TokenKind.END_OF_LINE_COMMENT))

    text = canonical_serializer(root)
    assert 'modifiers' not in text
    assert 'nothing' not in text
    assert '\n\n' not in text
    assert text == 'public void foo(){\nreturn;\n}\n'


def test_deterministic():
    root = p('CONDITIONAL_EXPRESSION', p('BINARY_EXPRESSION', ref('a'), t('=='), lit('0')), t('?'), ref('b'), t(':'), ref('c'))
    assert canonical_serializer(root) == canonical_serializer(root) == 'a == 0 ? b : c'


def test_subtrees_serialize_independently():
    statement = p('RETURN_STATEMENT', t('return'), p('BINARY_EXPRESSION', ref('a'), t('-'), ref('b')), t(';'))
    block = p('CODE_BLOCK', t('{'), statement, t('}'))

    assert canonical_serializer(block) == '{\nreturn a - b;\n}\n'
    assert canonical_serializer(statement) == 'return a - b;\n'
    assert canonical_serializer(statement.children[1]) == 'a - b'


def test_empty_tokens_are_skipped():
    root = p('RETURN_STATEMENT', t('return'), t('', TokenKind.IDENTIFIER), ref('x'), t(';'))
    assert canonical_serializer(root) == 'return x;\n'


def test_single_token():
    assert canonical_serializer(LexerRule(name=TokenKind.IDENTIFIER, src='x')) == 'x'
    assert canonical_serializer(LexerRule(name=TokenKind.WHITE_SPACE, src=' ')) == ''
    assert canonical_serializer(ParserRule(name='unknown')) == ''


def test_unknown_kinds():
    root = ParserRule(name='templateExpression', children=[
        LexerRule(name='DOLLAR', src='$'),
        LexerRule(name=TokenKind.IDENTIFIER, src='x'),
        LexerRule(name='DOLLAR', src='$'),
    ])
    assert canonical_serializer(root) == '$ x $'


def test_cyclic_ancestry():
    operator = t('+')
    root = p('BINARY_EXPRESSION', ref('a'), operator, ref('b'))
    root.parent = operator

    assert canonical_serializer(root) == 'a + b'


def test_foreign_nodes():
    class Token(object):
        def __init__(self, name, src):
            self.name = name
            self.src = src

    class Node(object):
        def __init__(self, *children):
            self.children = list(children)

    # Nodes without parent links match no context-dependent rule.
    root = Node(Token(TokenKind.IDENTIFIER, 'a'), Token(TokenKind.PLUS, '+'), Token(TokenKind.IDENTIFIER, 'b'), Token(TokenKind.LBRACE, '{'))
    assert canonical_serializer(root) == 'a + b {\n'
