# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import re

from enum import auto, Enum


class _NamedEnum(Enum):

    @staticmethod
    def _generate_next_value_(name, start, count, last_values):
        return name

    def __repr__(self):
        return f'{self.__class__.__name__}.{self.name}'


class TokenKind(_NamedEnum):
    """
    Kinds of the leaves (tokens) of Java syntax trees.
    """

    # Trivia.
    WHITE_SPACE = auto()
    C_STYLE_COMMENT = auto()
    END_OF_LINE_COMMENT = auto()
    DOC_COMMENT = auto()

    # Tokens with variable text.
    IDENTIFIER = auto()
    INTEGER_LITERAL = auto()
    LONG_LITERAL = auto()
    FLOAT_LITERAL = auto()
    DOUBLE_LITERAL = auto()
    CHARACTER_LITERAL = auto()
    STRING_LITERAL = auto()
    TEXT_BLOCK_LITERAL = auto()

    # Keywords (the lowercased name without the _KEYWORD suffix is the text).
    ABSTRACT_KEYWORD = auto()
    ASSERT_KEYWORD = auto()
    BOOLEAN_KEYWORD = auto()
    BREAK_KEYWORD = auto()
    BYTE_KEYWORD = auto()
    CASE_KEYWORD = auto()
    CATCH_KEYWORD = auto()
    CHAR_KEYWORD = auto()
    CLASS_KEYWORD = auto()
    CONST_KEYWORD = auto()
    CONTINUE_KEYWORD = auto()
    DEFAULT_KEYWORD = auto()
    DO_KEYWORD = auto()
    DOUBLE_KEYWORD = auto()
    ELSE_KEYWORD = auto()
    ENUM_KEYWORD = auto()
    EXTENDS_KEYWORD = auto()
    FALSE_KEYWORD = auto()
    FINAL_KEYWORD = auto()
    FINALLY_KEYWORD = auto()
    FLOAT_KEYWORD = auto()
    FOR_KEYWORD = auto()
    GOTO_KEYWORD = auto()
    IF_KEYWORD = auto()
    IMPLEMENTS_KEYWORD = auto()
    IMPORT_KEYWORD = auto()
    INSTANCEOF_KEYWORD = auto()
    INT_KEYWORD = auto()
    INTERFACE_KEYWORD = auto()
    LONG_KEYWORD = auto()
    NATIVE_KEYWORD = auto()
    NEW_KEYWORD = auto()
    NULL_KEYWORD = auto()
    PACKAGE_KEYWORD = auto()
    PRIVATE_KEYWORD = auto()
    PROTECTED_KEYWORD = auto()
    PUBLIC_KEYWORD = auto()
    RECORD_KEYWORD = auto()
    RETURN_KEYWORD = auto()
    SHORT_KEYWORD = auto()
    STATIC_KEYWORD = auto()
    STRICTFP_KEYWORD = auto()
    SUPER_KEYWORD = auto()
    SWITCH_KEYWORD = auto()
    SYNCHRONIZED_KEYWORD = auto()
    THIS_KEYWORD = auto()
    THROW_KEYWORD = auto()
    THROWS_KEYWORD = auto()
    TRANSIENT_KEYWORD = auto()
    TRUE_KEYWORD = auto()
    TRY_KEYWORD = auto()
    VAR_KEYWORD = auto()
    VOID_KEYWORD = auto()
    VOLATILE_KEYWORD = auto()
    WHILE_KEYWORD = auto()
    YIELD_KEYWORD = auto()

    # Separators and operators.
    LPARENTH = auto()
    RPARENTH = auto()
    LBRACE = auto()
    RBRACE = auto()
    LBRACKET = auto()
    RBRACKET = auto()
    SEMICOLON = auto()
    COMMA = auto()
    DOT = auto()
    ELLIPSIS = auto()
    AT = auto()
    DOUBLE_COLON = auto()
    ARROW = auto()
    EQ = auto()
    EQEQ = auto()
    NE = auto()
    EXCL = auto()
    TILDE = auto()
    QUEST = auto()
    COLON = auto()
    LT = auto()
    GT = auto()
    LE = auto()
    GE = auto()
    ANDAND = auto()
    OROR = auto()
    PLUSPLUS = auto()
    MINUSMINUS = auto()
    PLUS = auto()
    MINUS = auto()
    ASTERISK = auto()
    DIV = auto()
    PERC = auto()
    AND = auto()
    OR = auto()
    XOR = auto()
    LTLT = auto()
    GTGT = auto()
    GTGTGT = auto()
    PLUSEQ = auto()
    MINUSEQ = auto()
    ASTERISKEQ = auto()
    DIVEQ = auto()
    PERCEQ = auto()
    ANDEQ = auto()
    OREQ = auto()
    XOREQ = auto()
    LTLTEQ = auto()
    GTGTEQ = auto()
    GTGTGTEQ = auto()


class ConstructKind(_NamedEnum):
    """
    Kinds of the composite nodes of Java syntax trees.
    """

    JAVA_FILE = auto()
    PACKAGE_STATEMENT = auto()
    IMPORT_LIST = auto()
    IMPORT_STATEMENT = auto()
    CLASS = auto()
    CLASS_INITIALIZER = auto()
    ENUM_CONSTANT = auto()
    FIELD = auto()
    METHOD = auto()
    MODIFIER_LIST = auto()
    ANNOTATION = auto()
    ANNOTATION_PARAMETER_LIST = auto()
    NAME_VALUE_PAIR = auto()
    TYPE = auto()
    TYPE_PARAMETER_LIST = auto()
    TYPE_PARAMETER = auto()
    REFERENCE_PARAMETER_LIST = auto()
    JAVA_CODE_REFERENCE = auto()
    PARAMETER_LIST = auto()
    PARAMETER = auto()
    THROWS_LIST = auto()
    CODE_BLOCK = auto()

    # Statements.
    BLOCK_STATEMENT = auto()
    DECLARATION_STATEMENT = auto()
    LOCAL_VARIABLE = auto()
    EXPRESSION_STATEMENT = auto()
    EXPRESSION_LIST_STATEMENT = auto()
    EMPTY_STATEMENT = auto()
    RETURN_STATEMENT = auto()
    THROW_STATEMENT = auto()
    YIELD_STATEMENT = auto()
    IF_STATEMENT = auto()
    WHILE_STATEMENT = auto()
    DO_WHILE_STATEMENT = auto()
    FOR_STATEMENT = auto()
    FOREACH_STATEMENT = auto()
    SWITCH_STATEMENT = auto()
    SWITCH_LABEL_STATEMENT = auto()
    BREAK_STATEMENT = auto()
    CONTINUE_STATEMENT = auto()
    TRY_STATEMENT = auto()
    CATCH_SECTION = auto()
    SYNCHRONIZED_STATEMENT = auto()
    ASSERT_STATEMENT = auto()
    LABELED_STATEMENT = auto()

    # Expressions.
    ARRAY_INITIALIZER_EXPRESSION = auto()
    ARRAY_ACCESS_EXPRESSION = auto()
    ASSIGNMENT_EXPRESSION = auto()
    BINARY_EXPRESSION = auto()
    POLYADIC_EXPRESSION = auto()
    CONDITIONAL_EXPRESSION = auto()
    PREFIX_EXPRESSION = auto()
    POSTFIX_EXPRESSION = auto()
    TYPE_CAST_EXPRESSION = auto()
    INSTANCE_OF_EXPRESSION = auto()
    PARENTH_EXPRESSION = auto()
    LITERAL_EXPRESSION = auto()
    REFERENCE_EXPRESSION = auto()
    METHOD_CALL_EXPRESSION = auto()
    EXPRESSION_LIST = auto()
    NEW_EXPRESSION = auto()
    THIS_EXPRESSION = auto()
    SUPER_EXPRESSION = auto()
    CLASS_OBJECT_ACCESS_EXPRESSION = auto()
    LAMBDA_EXPRESSION = auto()
    METHOD_REFERENCE_EXPRESSION = auto()
    SWITCH_EXPRESSION = auto()


TRIVIA = frozenset({
    TokenKind.WHITE_SPACE,
    TokenKind.C_STYLE_COMMENT,
    TokenKind.END_OF_LINE_COMMENT,
    TokenKind.DOC_COMMENT,
})

_SYMBOLS = {
    TokenKind.LPARENTH: '(',
    TokenKind.RPARENTH: ')',
    TokenKind.LBRACE: '{',
    TokenKind.RBRACE: '}',
    TokenKind.LBRACKET: '[',
    TokenKind.RBRACKET: ']',
    TokenKind.SEMICOLON: ';',
    TokenKind.COMMA: ',',
    TokenKind.DOT: '.',
    TokenKind.ELLIPSIS: '...',
    TokenKind.AT: '@',
    TokenKind.DOUBLE_COLON: '::',
    TokenKind.ARROW: '->',
    TokenKind.EQ: '=',
    TokenKind.EQEQ: '==',
    TokenKind.NE: '!=',
    TokenKind.EXCL: '!',
    TokenKind.TILDE: '~',
    TokenKind.QUEST: '?',
    TokenKind.COLON: ':',
    TokenKind.LT: '<',
    TokenKind.GT: '>',
    TokenKind.LE: '<=',
    TokenKind.GE: '>=',
    TokenKind.ANDAND: '&&',
    TokenKind.OROR: '||',
    TokenKind.PLUSPLUS: '++',
    TokenKind.MINUSMINUS: '--',
    TokenKind.PLUS: '+',
    TokenKind.MINUS: '-',
    TokenKind.ASTERISK: '*',
    TokenKind.DIV: '/',
    TokenKind.PERC: '%',
    TokenKind.AND: '&',
    TokenKind.OR: '|',
    TokenKind.XOR: '^',
    TokenKind.LTLT: '<<',
    TokenKind.GTGT: '>>',
    TokenKind.GTGTGT: '>>>',
    TokenKind.PLUSEQ: '+=',
    TokenKind.MINUSEQ: '-=',
    TokenKind.ASTERISKEQ: '*=',
    TokenKind.DIVEQ: '/=',
    TokenKind.PERCEQ: '%=',
    TokenKind.ANDEQ: '&=',
    TokenKind.OREQ: '|=',
    TokenKind.XOREQ: '^=',
    TokenKind.LTLTEQ: '<<=',
    TokenKind.GTGTEQ: '>>=',
    TokenKind.GTGTGTEQ: '>>>=',
}

_FIXED_TEXTS = {**_SYMBOLS, **{kind: kind.name[:-len('_KEYWORD')].lower()
                               for kind in TokenKind if kind.name.endswith('_KEYWORD')}}
_FIXED_KINDS = {text: kind for kind, text in _FIXED_TEXTS.items()}

_LEXEMES = [
    (re.compile(r'\s+'), TokenKind.WHITE_SPACE),
    (re.compile(r'/\*\*.*\*/', re.DOTALL), TokenKind.DOC_COMMENT),
    (re.compile(r'/\*.*\*/', re.DOTALL), TokenKind.C_STYLE_COMMENT),
    (re.compile(r'//[^\r\n]*'), TokenKind.END_OF_LINE_COMMENT),
    (re.compile(r'[A-Za-z_$][\w$]*'), TokenKind.IDENTIFIER),
    (re.compile(r'(0[xX][\da-fA-F_]+|0[bB][01_]+|\d[\d_]*)[lL]'), TokenKind.LONG_LITERAL),
    (re.compile(r'0[xX][\da-fA-F_]+|0[bB][01_]+|\d[\d_]*'), TokenKind.INTEGER_LITERAL),
    (re.compile(r'(\d[\d_]*\.?[\d_]*|\.\d[\d_]*)([eE][+-]?\d+)?[fF]'), TokenKind.FLOAT_LITERAL),
    (re.compile(r'(\d[\d_]*\.[\d_]*|\.\d[\d_]*)([eE][+-]?\d+)?[dD]?|\d[\d_]*([eE][+-]?\d+)[dD]?|\d[\d_]*[dD]'), TokenKind.DOUBLE_LITERAL),
    (re.compile(r'""".*"""', re.DOTALL), TokenKind.TEXT_BLOCK_LITERAL),
    (re.compile(r'"([^"\\\r\n]|\\.)*"'), TokenKind.STRING_LITERAL),
    (re.compile(r"'([^'\\\r\n]|\\.)+'"), TokenKind.CHARACTER_LITERAL),
]


def fixed_text(kind):
    """
    Get the text of a token kind that always has the same text (keywords,
    separators and operators).

    :param TokenKind kind: The kind of the token.
    :return: The text of the token or ``None`` if ``kind`` has variable text.
    :rtype: str
    """
    return _FIXED_TEXTS.get(kind)


def token_kind(text):
    """
    Classify a lexeme. Fixed-text tokens take precedence over identifiers,
    i.e., keywords are not classified as identifiers.

    :param str text: The text of the token.
    :return: The kind of the token or ``None`` if ``text`` is not a valid Java
        lexeme.
    :rtype: TokenKind
    """
    kind = _FIXED_KINDS.get(text)
    if kind is not None:
        return kind

    for pattern, kind in _LEXEMES:
        if pattern.fullmatch(text):
            return kind
    return None


def kind_from_name(enum, name):
    """
    Look up a member of a kind enumeration by its name.

    :param type enum: :class:`TokenKind` or :class:`ConstructKind`.
    :param str name: Name of the kind.
    :return: The matching member, or ``name`` itself if it is not a known kind.
    """
    try:
        return enum[name]
    except KeyError:
        return name


def kind_name(kind):
    """
    Inverse of :func:`kind_from_name`.
    """
    return kind.name if isinstance(kind, Enum) else kind
