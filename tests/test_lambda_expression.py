# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import pytest

from canonjava.runtime import ConstructKind, LambdaExpression

from java_trees import lit, p, ref, t


def typed_parameter(type_name, name):
    return p('PARAMETER', p('TYPE', t(type_name)), t(name))


def test_expression_body():
    node = p('LAMBDA_EXPRESSION',
             p('PARAMETER_LIST', t('('), typed_parameter('int', 'a'), t(','), t(' '), typed_parameter('int', 'b'), t(')')),
             t(' '), t('->'), t(' '),
             p('BINARY_EXPRESSION', ref('a'), t('+'), ref('b')))
    lambda_expression = LambdaExpression(node)

    assert lambda_expression.parameters == ['a', 'b']
    assert lambda_expression.has_parameter_types
    assert lambda_expression.expression.name == ConstructKind.BINARY_EXPRESSION
    assert lambda_expression.statements == []
    assert lambda_expression.expression_string() == 'a + b'
    assert lambda_expression.statement_strings() == []
    assert str(lambda_expression) == '(a, b) -> a + b'


def test_inferred_parameter():
    node = p('LAMBDA_EXPRESSION',
             p('PARAMETER_LIST', p('PARAMETER', t('x'))),
             t(' '), t('->'), t(' '),
             p('METHOD_CALL_EXPRESSION', p('REFERENCE_EXPRESSION', ref('x'), t('.'), t('foo')), p('EXPRESSION_LIST', t('('), t(')'))))
    lambda_expression = LambdaExpression(node)

    assert lambda_expression.parameters == ['x']
    assert not lambda_expression.has_parameter_types
    assert str(lambda_expression) == 'x -> x.foo()'


def test_bare_identifier_parameter():
    lambda_expression = LambdaExpression(p('LAMBDA_EXPRESSION', p('PARAMETER_LIST', t('x')), t('->'), ref('x')))

    assert lambda_expression.parameters == ['x']
    assert str(lambda_expression) == 'x -> x'


def test_block_body():
    node = p('LAMBDA_EXPRESSION',
             p('PARAMETER_LIST', t('('), p('PARAMETER', t('x')), t(','), p('PARAMETER', t('y')), t(')')),
             t('->'),
             p('CODE_BLOCK',
               t('{'),
               t('\n    '),
               p('DECLARATION_STATEMENT', p('LOCAL_VARIABLE', p('TYPE', t('int')), t('s'), t('='), p('BINARY_EXPRESSION', ref('x'), t('+'), ref('y')), t(';'))),
               t('// the sum'),
               p('RETURN_STATEMENT', t('return'), ref('s'), t(';')),
               t('}')))
    lambda_expression = LambdaExpression(node)

    assert lambda_expression.parameters == ['x', 'y']
    assert not lambda_expression.has_parameter_types
    assert lambda_expression.expression is None
    assert lambda_expression.expression_string() is None
    assert [statement.name for statement in lambda_expression.statements] == [ConstructKind.DECLARATION_STATEMENT, ConstructKind.RETURN_STATEMENT]
    assert lambda_expression.statement_strings() == ['int s=x + y;\n', 'return s;\n']
    assert str(lambda_expression) == 'x, y -> int s=x + y;\nreturn s;\n'


def test_no_parameters():
    lambda_expression = LambdaExpression(p('LAMBDA_EXPRESSION', p('PARAMETER_LIST', t('('), t(')')), t('->'), lit('42')))

    assert lambda_expression.parameters == []
    assert str(lambda_expression) == '42'


def test_method_reference():
    node = p('METHOD_REFERENCE_EXPRESSION', ref('String'), t('::'), t('valueOf'))
    lambda_expression = LambdaExpression(node)

    assert lambda_expression.parameters == []
    assert lambda_expression.expression is node
    assert str(lambda_expression) == 'String::valueOf'


def test_custom_serializer():
    node = p('LAMBDA_EXPRESSION', p('PARAMETER_LIST', t('x')), t('->'), p('BINARY_EXPRESSION', ref('x'), t(' '), t('*'), ref('x')))

    assert LambdaExpression(node, serializer=str).expression_string() == 'x *x'


def test_not_a_lambda():
    with pytest.raises(ValueError):
        LambdaExpression(p('BINARY_EXPRESSION', ref('a'), t('+'), ref('b')))
