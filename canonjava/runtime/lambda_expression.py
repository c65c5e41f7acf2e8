# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from .kinds import ConstructKind, TokenKind, TRIVIA
from .rule import LexerRule, ParserRule
from .serializer import canonical_serializer


class LambdaExpression(object):
    """
    View of a lambda expression (or of a method reference, which is handled as
    a lambda with an expression body and no parameters) that decomposes it into
    its parameters and its body. The body is either a single expression or a
    sequence of statements, each of which can be serialized independently.
    """

    def __init__(self, node, serializer=canonical_serializer):
        """
        :param ParserRule node: A ``LAMBDA_EXPRESSION`` or a
            ``METHOD_REFERENCE_EXPRESSION`` node.
        :param serializer: Function producing the text of a subtree (default:
            :func:`~canonjava.runtime.canonical_serializer`).
        :raises ValueError: if ``node`` is of another kind.
        """
        self.node = node
        self._serializer = serializer
        self._parameters = []
        self._parameter_types = False
        self._expression = None
        self._statements = []

        if node.name == ConstructKind.METHOD_REFERENCE_EXPRESSION:
            self._expression = node
        elif node.name == ConstructKind.LAMBDA_EXPRESSION:
            self._decompose(node)
        else:
            raise ValueError(f'{node.name!r} is neither a lambda expression nor a method reference.')

    def _decompose(self, node):
        body = None
        after_arrow = False
        for child in node.children:
            if child.name == ConstructKind.PARAMETER_LIST:
                for param in child.children:
                    self._add_parameter(param)
            elif child.name == TokenKind.ARROW:
                after_arrow = True
            elif after_arrow and child.name not in TRIVIA:
                body = child
                break

        if body is None:
            return

        if body.name == ConstructKind.CODE_BLOCK:
            self._statements = [child for child in body.children if isinstance(child, ParserRule)]
        else:
            self._expression = body

    def _add_parameter(self, param):
        # Inferred single parameters (``x -> ...``) may appear as bare identifiers.
        if isinstance(param, LexerRule):
            if param.name == TokenKind.IDENTIFIER:
                self._parameters.append(param.src)
            return

        if param.name != ConstructKind.PARAMETER:
            return

        names = [child.src for child in param.children if child.name == TokenKind.IDENTIFIER]
        if names:
            self._parameters.append(names[-1])
        if any(child.name == ConstructKind.TYPE for child in param.children):
            self._parameter_types = True

    @property
    def parameters(self):
        """
        Names of the parameters of the lambda.

        :rtype: list[str]
        """
        return list(self._parameters)

    @property
    def has_parameter_types(self):
        """
        Whether the parameters of the lambda are declared with explicit types.

        :rtype: bool
        """
        return self._parameter_types

    @property
    def expression(self):
        """
        The body of the lambda if it is an expression (or the method reference
        itself), otherwise ``None``.

        :rtype: Rule
        """
        return self._expression

    @property
    def statements(self):
        """
        The statements of the body of the lambda if it is a code block,
        otherwise an empty list.

        :rtype: list[ParserRule]
        """
        return list(self._statements)

    def expression_string(self):
        """
        :return: Text of the expression body or ``None`` if the body is a code
            block.
        :rtype: str
        """
        return self._serializer(self._expression) if self._expression is not None else None

    def statement_strings(self):
        """
        :return: Texts of the statements of the code block body, each
            serialized on its own.
        :rtype: list[str]
        """
        return [self._serializer(statement) for statement in self._statements]

    def __str__(self):
        parameters = ', '.join(self._parameters)
        if self._parameter_types:
            parameters = f'({parameters})'
        if self._parameters or self._parameter_types:
            parameters += ' -> '

        if self._expression is not None:
            return parameters + self.expression_string()
        return parameters + ''.join(self.statement_strings())
