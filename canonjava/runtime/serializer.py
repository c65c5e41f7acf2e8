# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from .kinds import ConstructKind, TokenKind, TRIVIA
from .rule import Rule

NO_SPACE_AROUND = frozenset({
    TokenKind.EQ, TokenKind.LT, TokenKind.GT,
    TokenKind.DOT, TokenKind.COMMA,
    TokenKind.RBRACKET, TokenKind.LBRACKET,
    TokenKind.LPARENTH, TokenKind.RPARENTH,
    TokenKind.SEMICOLON, TokenKind.DOUBLE_COLON,
})
NO_SPACE_AFTER = frozenset({
    TokenKind.AT, TokenKind.LBRACE, TokenKind.RBRACE, TokenKind.EXCL,
})
NO_SPACE_BEFORE = frozenset({
    TokenKind.ELLIPSIS,
})
END_LINE_AFTER = frozenset({
    TokenKind.LBRACE, TokenKind.RBRACE, TokenKind.SEMICOLON,
})
# Inside annotations and array initializers, braces do not break lines.
ANNOTATION_NO_SPACE_BEFORE = frozenset({
    TokenKind.ELLIPSIS, TokenKind.RBRACE,
})
ANNOTATION_END_LINE_AFTER = frozenset({
    TokenKind.SEMICOLON,
})
CONDITIONAL_EXPRESSION_TOKENS = frozenset({
    TokenKind.QUEST, TokenKind.COLON,
})
INFIX_OPERATORS = frozenset({
    TokenKind.ASTERISK, TokenKind.DIV, TokenKind.PERC, TokenKind.PLUS, TokenKind.MINUS,
    TokenKind.LTLT, TokenKind.GTGT, TokenKind.GTGTGT,
    TokenKind.LT, TokenKind.GT, TokenKind.LE, TokenKind.GE, TokenKind.EQEQ, TokenKind.NE,
    TokenKind.XOR, TokenKind.AND, TokenKind.OR, TokenKind.ANDAND, TokenKind.OROR,
})

_ANNOTATION_CONTEXTS = frozenset({ConstructKind.ANNOTATION, ConstructKind.ARRAY_INITIALIZER_EXPRESSION})
_INFIX_EXPRESSIONS = frozenset({ConstructKind.BINARY_EXPRESSION, ConstructKind.POLYADIC_EXPRESSION})


def canonical_serializer(root):
    """
    Serializer producing the canonical text of a Java syntax tree. Comments and
    the original whitespace of the source are dropped, and the tokens are
    joined with single spaces and line breaks decided by the kind and the
    context of each token. Trees that differ only in their formatting or
    commentary serialize to the same string, thus the result can be used as a
    key to compare code fragments structurally.

    :param Rule root: The root node of the tree or subtree to serialize.
    :return: The canonical text of the tree.
    :rtype: str
    """
    out = []
    _serialize(root, out, False)
    return ''.join(out)


def _serialize(node, out, need_space):
    """
    Append the canonical text of the subtree of ``node`` to ``out``.

    :param Rule node: Root of the subtree.
    :param list[str] out: Pieces of the text emitted so far.
    :param bool need_space: Whether the previously emitted token demands a
        space after itself.
    :return: Whether the last emitted token demands a space after itself.
    :rtype: bool
    """
    children = getattr(node, 'children', None)
    if children:
        for child in children:
            need_space = _serialize(child, out, need_space)
        return need_space

    kind = getattr(node, 'name', None)
    text = getattr(node, 'src', None)
    if kind in TRIVIA or not text:
        return need_space

    annotation = _inside_annotation_or_array_initializer(node)
    if (need_space and _need_space_before(kind, annotation)) or _must_have_space_before(node, kind):
        out.append(' ')
    if text != ';' and _text_equals(out, 'return'):
        out.append(' ')
    out.append(text)
    if kind in (ANNOTATION_END_LINE_AFTER if annotation else END_LINE_AFTER):
        out.append('\n')
    return _need_space_after(node, kind)


def _text_equals(out, text):
    # Every piece is non-empty, so a longer list cannot add up to ``text``.
    return len(out) <= len(text) and ''.join(out) == text


def _need_space_before(kind, annotation):
    return kind not in NO_SPACE_AROUND and kind not in (ANNOTATION_NO_SPACE_BEFORE if annotation else NO_SPACE_BEFORE)


def _need_space_after(node, kind):
    return (kind not in NO_SPACE_AROUND and kind not in NO_SPACE_AFTER) or _is_infix_operator(node, kind)


def _must_have_space_before(node, kind):
    return (_is_conditional_expression_token(node, kind)
            or _is_local_variable_name(node, kind)
            or _is_method_name(node, kind)
            or _is_infix_operator(node, kind))


def _parent_kind(node, level=1):
    for _ in range(level):
        node = getattr(node, 'parent', None)
    return getattr(node, 'name', None)


def _is_conditional_expression_token(node, kind):
    return kind in CONDITIONAL_EXPRESSION_TOKENS and _parent_kind(node) == ConstructKind.CONDITIONAL_EXPRESSION


def _is_infix_operator(node, kind):
    return kind in INFIX_OPERATORS and _parent_kind(node) in _INFIX_EXPRESSIONS


def _is_method_name(node, kind):
    return kind == TokenKind.IDENTIFIER and _parent_kind(node) == ConstructKind.METHOD


def _is_local_variable_name(node, kind):
    return (kind == TokenKind.IDENTIFIER
            and _parent_kind(node) == ConstructKind.LOCAL_VARIABLE
            and _parent_kind(node, 2) == ConstructKind.DECLARATION_STATEMENT)


def _inside_annotation_or_array_initializer(node):
    return any(getattr(ancestor, 'name', None) in _ANNOTATION_CONTEXTS for ancestor in Rule.ancestors(node))
