# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

import json
import pickle

from ..runtime import ConstructKind, kind_from_name, kind_name, LexerRule, ParserRule, Rule, TokenKind


class TreeCodec:
    """
    Abstract base class of tree codecs that convert between trees and bytes.
    """

    def encode(self, root):
        """
        Encode a tree into an array of bytes.

        Raises :exc:`NotImplementedError` by default.

        :param ~canonjava.runtime.Rule root: Root of the tree to be encoded.
        :return: The encoded form of the tree.
        :rtype: bytes
        """
        raise NotImplementedError()

    def decode(self, data):
        """
        Decode a tree from an array of bytes.

        Raises :exc:`NotImplementedError` by default.

        :param bytes data: The encoded form of a tree.
        :return: Root of the decoded tree, or ``None`` if ``data`` does not
            contain a valid tree.
        :rtype: ~canonjava.runtime.Rule
        """
        raise NotImplementedError()


class PickleTreeCodec(TreeCodec):
    """
    Tree codec based on Python's :mod:`pickle` module.
    """

    def encode(self, root):
        return pickle.dumps(root)

    def decode(self, data):
        try:
            root = pickle.loads(data)
        except (pickle.UnpicklingError, EOFError):
            return None
        return root if isinstance(root, Rule) else None


class JsonTreeCodec(TreeCodec):
    """
    JSON-based tree codec. Parser rules are encoded as
    ``{"t": "p", "n": kind, "c": [children]}`` and lexer rules as
    ``{"t": "l", "n": kind, "s": text}``, where kinds are given by name.
    """

    def __init__(self, encoding='utf-8', encoding_errors='surrogatepass'):
        """
        :param str encoding: The encoding to use when converting between
            json-formatted text and bytes (default: utf-8).
        :param str encoding_errors: Encoding error handling scheme (default:
            surrogatepass).
        """
        self._encoding = encoding
        self._encoding_errors = encoding_errors

    def encode(self, root):
        def _rule_to_dict(node):
            if isinstance(node, LexerRule):
                return {'t': 'l', 'n': kind_name(node.name), 's': node.src}
            if isinstance(node, ParserRule):
                return {'t': 'p', 'n': kind_name(node.name), 'c': node.children}
            raise TypeError(f'Object of type {node.__class__.__name__} is not a tree node.')
        return json.dumps(root, default=_rule_to_dict).encode(encoding=self._encoding, errors=self._encoding_errors)

    def decode(self, data):
        def _dict_to_rule(dct):
            if not isinstance(dct['n'], str):
                raise ValueError(f'Node name must be a string, not {dct["n"]!r}.')
            if dct['t'] == 'l':
                if not isinstance(dct['s'], str):
                    raise ValueError(f'Token text must be a string, not {dct["s"]!r}.')
                return LexerRule(name=kind_from_name(TokenKind, dct['n']), src=dct['s'])
            if dct['t'] == 'p':
                children = dct.get('c', [])
                if not isinstance(children, list) or not all(isinstance(child, Rule) for child in children):
                    raise ValueError('Children must be a list of nodes.')
                return ParserRule(name=kind_from_name(ConstructKind, dct['n']), children=children)
            raise ValueError(f'Unknown node type {dct["t"]!r}.')

        try:
            root = json.loads(data.decode(encoding=self._encoding, errors=self._encoding_errors), object_hook=_dict_to_rule)
        except (ValueError, KeyError, TypeError, AttributeError):
            return None
        return root if isinstance(root, Rule) else None
