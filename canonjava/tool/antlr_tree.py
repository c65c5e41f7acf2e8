# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import logging
import re

from antlr4 import ParserRuleContext, TerminalNode, Token

from ..runtime import ConstructKind, LexerRule, ParserRule, token_kind, TokenKind


logger = logging.getLogger(__name__)


# Symbolic token names of the Java lexer of the grammars-v4 repository that do
# not match the name of a TokenKind. Keywords (e.g., RETURN -> RETURN_KEYWORD)
# and literals (classified by their text) need no entry.
JAVA_LEXER_TOKEN_KINDS = {
    'IDENTIFIER': TokenKind.IDENTIFIER,
    'LPAREN': TokenKind.LPARENTH,
    'RPAREN': TokenKind.RPARENTH,
    'LBRACE': TokenKind.LBRACE,
    'RBRACE': TokenKind.RBRACE,
    'LBRACK': TokenKind.LBRACKET,
    'RBRACK': TokenKind.RBRACKET,
    'SEMI': TokenKind.SEMICOLON,
    'COMMA': TokenKind.COMMA,
    'DOT': TokenKind.DOT,
    'ASSIGN': TokenKind.EQ,
    'GT': TokenKind.GT,
    'LT': TokenKind.LT,
    'BANG': TokenKind.EXCL,
    'TILDE': TokenKind.TILDE,
    'QUESTION': TokenKind.QUEST,
    'COLON': TokenKind.COLON,
    'EQUAL': TokenKind.EQEQ,
    'LE': TokenKind.LE,
    'GE': TokenKind.GE,
    'NOTEQUAL': TokenKind.NE,
    'AND': TokenKind.ANDAND,
    'OR': TokenKind.OROR,
    'INC': TokenKind.PLUSPLUS,
    'DEC': TokenKind.MINUSMINUS,
    'ADD': TokenKind.PLUS,
    'SUB': TokenKind.MINUS,
    'MUL': TokenKind.ASTERISK,
    'DIV': TokenKind.DIV,
    'BITAND': TokenKind.AND,
    'BITOR': TokenKind.OR,
    'CARET': TokenKind.XOR,
    'MOD': TokenKind.PERC,
    'ADD_ASSIGN': TokenKind.PLUSEQ,
    'SUB_ASSIGN': TokenKind.MINUSEQ,
    'MUL_ASSIGN': TokenKind.ASTERISKEQ,
    'DIV_ASSIGN': TokenKind.DIVEQ,
    'AND_ASSIGN': TokenKind.ANDEQ,
    'OR_ASSIGN': TokenKind.OREQ,
    'XOR_ASSIGN': TokenKind.XOREQ,
    'MOD_ASSIGN': TokenKind.PERCEQ,
    'LSHIFT_ASSIGN': TokenKind.LTLTEQ,
    'RSHIFT_ASSIGN': TokenKind.GTGTEQ,
    'URSHIFT_ASSIGN': TokenKind.GTGTGTEQ,
    'ARROW': TokenKind.ARROW,
    'COLONCOLON': TokenKind.DOUBLE_COLON,
    'AT': TokenKind.AT,
    'ELLIPSIS': TokenKind.ELLIPSIS,
    'WS': TokenKind.WHITE_SPACE,
    'COMMENT': TokenKind.C_STYLE_COMMENT,
    'LINE_COMMENT': TokenKind.END_OF_LINE_COMMENT,
}


# Rule and labeled alternative names of the Java parser of the grammars-v4
# repository that do not match the name of a ConstructKind. Rules mapped to
# None are spliced into their parents, thus names and operands become direct
# children of the constructs they belong to.
JAVA_PARSER_RULE_KINDS = {
    'compilationUnit': ConstructKind.JAVA_FILE,
    'packageDeclaration': ConstructKind.PACKAGE_STATEMENT,
    'importDeclaration': ConstructKind.IMPORT_STATEMENT,
    'classDeclaration': ConstructKind.CLASS,
    'interfaceDeclaration': ConstructKind.CLASS,
    'enumDeclaration': ConstructKind.CLASS,
    'recordDeclaration': ConstructKind.CLASS,
    'fieldDeclaration': ConstructKind.FIELD,
    'methodDeclaration': ConstructKind.METHOD,
    'constructorDeclaration': ConstructKind.METHOD,
    'interfaceCommonBodyDeclaration': ConstructKind.METHOD,
    'methodBody': None,
    'typeType': ConstructKind.TYPE,
    'typeTypeOrVoid': ConstructKind.TYPE,
    'typeParameters': ConstructKind.TYPE_PARAMETER_LIST,
    'typeArguments': ConstructKind.REFERENCE_PARAMETER_LIST,
    'formalParameters': ConstructKind.PARAMETER_LIST,
    'formalParameterList': None,
    'formalParameter': ConstructKind.PARAMETER,
    'lastFormalParameter': ConstructKind.PARAMETER,
    'identifier': None,
    'typeIdentifier': None,
    'elementValuePair': ConstructKind.NAME_VALUE_PAIR,
    'elementValueArrayInitializer': ConstructKind.ARRAY_INITIALIZER_EXPRESSION,
    'arrayInitializer': ConstructKind.ARRAY_INITIALIZER_EXPRESSION,
    'block': ConstructKind.CODE_BLOCK,
    'localVariableDeclaration': ConstructKind.LOCAL_VARIABLE,
    'variableDeclarators': None,
    'variableDeclarator': None,
    'variableDeclaratorId': None,
    'variableInitializer': None,
    'switchLabel': ConstructKind.SWITCH_LABEL_STATEMENT,
    'catchClause': ConstructKind.CATCH_SECTION,
    'parExpression': ConstructKind.PARENTH_EXPRESSION,
    'arguments': ConstructKind.EXPRESSION_LIST,
    'methodCall': ConstructKind.METHOD_CALL_EXPRESSION,
    'literal': ConstructKind.LITERAL_EXPRESSION,
    'lambdaParameters': ConstructKind.PARAMETER_LIST,
    'lambdaBody': None,
    # Labeled alternatives of the expression rule.
    'primaryExpression': None,
    'memberReferenceExpression': ConstructKind.REFERENCE_EXPRESSION,
    'methodCallExpression': ConstructKind.METHOD_CALL_EXPRESSION,
    'squareBracketExpression': ConstructKind.ARRAY_ACCESS_EXPRESSION,
    'objectCreationExpression': ConstructKind.NEW_EXPRESSION,
    'castExpression': ConstructKind.TYPE_CAST_EXPRESSION,
    'postIncrementDecrementOperatorExpression': ConstructKind.POSTFIX_EXPRESSION,
    'unaryOperatorExpression': ConstructKind.PREFIX_EXPRESSION,
    'binaryOperatorExpression': ConstructKind.BINARY_EXPRESSION,
    'instanceOfOperatorExpression': ConstructKind.INSTANCE_OF_EXPRESSION,
    'ternaryExpression': ConstructKind.CONDITIONAL_EXPRESSION,
    'expressionLambda': None,
    'expressionSwitch': None,
}


def _upper_snake(name):
    return re.sub(r'(?<=[a-z0-9])(?=[A-Z])', '_', name).upper()


class AntlrTreeBuilder:
    """
    Converter of ANTLR parse trees to canonjava trees. Parser rule contexts
    become :class:`~canonjava.runtime.ParserRule` nodes and terminals become
    :class:`~canonjava.runtime.LexerRule` nodes, with their kinds looked up
    from the rule and token names of the parser.
    """

    def __init__(self, parser, rule_kinds=None, token_kinds=None, hidden=False):
        """
        :param antlr4.Parser parser: Parser object that created the ANTLR trees
            (used for its ``ruleNames``, ``symbolicNames`` and token stream).
        :param dict[str,~canonjava.runtime.ConstructKind] rule_kinds: Mapping of
            parser rule names (or labeled alternative names) to construct kinds
            (default: :data:`JAVA_PARSER_RULE_KINDS`). Rules mapped to ``None``
            produce no node, their children are added to the parent node.
            Unmapped rules are looked up in :class:`~canonjava.runtime.ConstructKind`
            by the UPPER_SNAKE form of their name, e.g., ``localVariable`` ->
            ``LOCAL_VARIABLE``. The infix and conditional operator spacing of
            the canonical serializer applies only to operators whose parent
            node is a ``BINARY_EXPRESSION`` or a ``CONDITIONAL_EXPRESSION``,
            so parsers other than the grammars-v4 Java parser need a mapping
            for these constructs.
        :param dict[str,~canonjava.runtime.TokenKind] token_kinds: Mapping of
            symbolic token names to token kinds (default:
            :data:`JAVA_LEXER_TOKEN_KINDS`).
        :param bool hidden: Insert the hidden tokens (whitespace and comments)
            of the token stream into the tree as well (default: False).
        """
        self._parser = parser
        self._rule_kinds = JAVA_PARSER_RULE_KINDS if rule_kinds is None else rule_kinds
        self._token_kinds = JAVA_LEXER_TOKEN_KINDS if token_kinds is None else token_kinds
        self._hidden = hidden
        self._unknown = set()

    def build(self, antlr_node):
        """
        Convert an ANTLR tree.

        :param antlr4.ParserRuleContext or antlr4.TerminalNode antlr_node: Root
            of the ANTLR tree to convert.
        :return: Root of the converted tree.
        :rtype: ~canonjava.runtime.Rule
        """
        node = self._convert(antlr_node, set())
        if isinstance(node, list):
            root = ParserRule(name=ConstructKind.JAVA_FILE)
            root += node
            return root
        return node

    def _convert(self, antlr_node, visited):
        if isinstance(antlr_node, ParserRuleContext):
            kind = self._rule_kind(antlr_node)
            children = []
            for antlr_child in (antlr_node.children or []):
                child = self._convert(antlr_child, visited)
                if isinstance(child, list):
                    children.extend(child)
                elif child is not None:
                    children.append(child)
            if kind is None:
                return children
            return ParserRule(name=kind, children=children)

        assert isinstance(antlr_node, TerminalNode), f'An ANTLR node must either be a ParserRuleContext or a TerminalNode but {antlr_node.__class__.__name__} was found.'
        token = antlr_node.symbol
        if token.type == Token.EOF:
            return None

        node = LexerRule(name=self._token_kind(token), src=token.text)
        if not self._hidden:
            return node

        stream = self._parser.getTokenStream()
        left = self._hidden_rules(stream.getHiddenTokensToLeft(token.tokenIndex, -1), visited)
        right = self._hidden_rules(stream.getHiddenTokensToRight(token.tokenIndex, -1), visited)
        return left + [node] + right

    def _hidden_rules(self, tokens, visited):
        nodes = []
        for token in tokens or []:
            if token.tokenIndex not in visited:
                nodes.append(LexerRule(name=self._token_kind(token), src=token.text))
                visited.add(token.tokenIndex)
        return nodes

    def _rule_kind(self, ctx):
        rule_name = self._parser.ruleNames[ctx.getRuleIndex()]
        names = [rule_name]
        # Labeled alternatives have their own context classes.
        class_name = ctx.__class__.__name__
        alt_name = class_name[:-len('Context')] if class_name.endswith('Context') else ''
        if alt_name and alt_name.lower() != rule_name.lower():
            names.insert(0, alt_name[0].lower() + alt_name[1:])

        for name in names:
            if name in self._rule_kinds:
                return self._rule_kinds[name]
            if _upper_snake(name) in ConstructKind.__members__:
                return ConstructKind[_upper_snake(name)]

        self._log_unknown(rule_name)
        return rule_name

    def _token_kind(self, token):
        symbolic_names = self._parser.symbolicNames
        name = symbolic_names[token.type] if 0 <= token.type < len(symbolic_names) else '<INVALID>'

        if name in self._token_kinds:
            return self._token_kinds[name]
        if f'{name}_KEYWORD' in TokenKind.__members__:
            return TokenKind[f'{name}_KEYWORD']
        kind = token_kind(token.text)
        if kind is not None:
            return kind

        self._log_unknown(name)
        return name

    def _log_unknown(self, name):
        if name not in self._unknown:
            self._unknown.add(name)
            logger.debug('No kind is known for %r, keeping its name.', name)
