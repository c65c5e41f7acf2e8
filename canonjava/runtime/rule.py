# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from .kinds import kind_name


class Rule(object):
    """
    Base class of syntax tree nodes.
    """

    def __init__(self, *, name, parent=None):
        """
        :param name: Kind of the node, i.e., a :class:`~canonjava.runtime.ConstructKind`
            for parser rules and a :class:`~canonjava.runtime.TokenKind` for
            lexer rules. Kinds unknown to canonjava can be given as strings.
        :param Rule parent: Parent node object (default: None).

        :ivar name: Kind of the node.
        :ivar Rule parent: Parent node object.
        :ivar list[Rule] children: Children of the rule.
        """
        self.name = name
        self.parent = None
        self.children = []
        if parent is not None:
            parent += self

    def __iadd__(self, child):
        """
        Support for ``+=`` operation to add one or more children to the current node. An alias to
        :meth:`add_child` or :meth:`add_children` depending on the type of ``child``.

        :param Rule or list[Rule] child: The node(s) to be added as child.
        :return: The current node with extended children.
        :rtype: Rule
        """
        if isinstance(child, list):
            self.add_children(child)
        else:
            self.add_child(child)
        return self

    def insert_child(self, idx, node):
        """
        Insert node as child at position.

        :param int idx: Index of position to insert ``node`` to.
        :param Rule node: Node object to be insert.
        """
        if node is None:
            return

        node.parent = self
        self.children.insert(idx, node)

    def add_child(self, node):
        """
        Add node to the end of the list of the children.

        :param Rule node: Node to be added to children.
        """
        if node is None:
            return

        self.children.append(node)
        node.parent = self

    def add_children(self, nodes):
        """
        Add multiple nodes to the end of the list of the children.

        :param list[Rule] nodes: List of nodes to be added to children.
        """
        for node in nodes:
            self.add_child(node)

    def delete(self):
        """
        Delete the current node from the tree.
        """
        if self.parent:
            self.parent.children.remove(self)
            self.parent = None

    def ancestors(self):
        """
        Iterate over the ancestors of the node, starting with its parent and
        ending with the root of the tree. The walk stops at the first node
        without a parent and never visits a node twice, so inconsistent parent
        links cannot make it loop forever.

        :return: Iterator over the ancestor nodes.
        :rtype: collections.abc.Iterator[Rule]
        """
        visited = {id(self)}
        node = getattr(self, 'parent', None)
        while node is not None and id(node) not in visited:
            yield node
            visited.add(id(node))
            node = getattr(node, 'parent', None)

    def leaves(self):
        """
        Iterate over the leaves of the subtree of the node in document order.

        :return: Iterator over the leaves.
        :rtype: collections.abc.Iterator[LexerRule]
        """
        if not self.children:
            if isinstance(self, LexerRule):
                yield self
            return

        for child in self.children:
            yield from child.leaves()

    def equals(self, other):
        """
        Compare two subtrees structurally: node types, kinds, texts and
        children must all match.

        :param Rule other: The root of the other subtree.
        :return: Whether the two subtrees are identical.
        :rtype: bool
        """
        return (type(self) is type(other)
                and self.name == other.name
                and len(self.children) == len(other.children)
                and all(child.equals(other_child) for child, other_child in zip(self.children, other.children)))

    def __str__(self):
        """
        Concatenates the string representation of the children. This is the
        raw source text of the subtree (including trivia), not its canonical
        form.

        :return: String representation of the current rule.
        :rtype: str
        """
        return ''.join(str(child) for child in self.children)

    def __format__(self, format_spec):
        """
        Support for the ``|`` format specifier, which renders the structure of
        the subtree on multiple lines (for debugging purposes). Any other
        format specifier is applied to :meth:`__str__`.
        """
        if format_spec != '|':
            return format(str(self), format_spec)

        def _walk(node, indent):
            if isinstance(node, LexerRule):
                lines.append(f'{"  " * indent}{kind_name(node.name)}: {node.src!r}')
            else:
                lines.append(f'{"  " * indent}{kind_name(node.name)}')
                for child in node.children:
                    _walk(child, indent + 1)

        lines = []
        _walk(self, 0)
        return '\n'.join(lines)


class ParserRule(Rule):
    """
    Tree node representing a composite construct (e.g., an expression, a
    statement, or a declaration). It can have zero or more :class:`ParserRule`
    or :class:`LexerRule` children.
    """

    def __init__(self, *, name, parent=None, children=None):
        """
        :param ~canonjava.runtime.ConstructKind name: Kind of the construct.
        :param Rule parent: Parent node object (default: None).
        :param list[Rule] children: Children of the construct (default: None).
        """
        super().__init__(name=name, parent=parent)
        if children:
            self.add_children(children)


class LexerRule(Rule):
    """
    Tree node representing a token. It has no children but a string constant
    set in its ``src`` field.
    """

    def __init__(self, *, name, parent=None, src=''):
        """
        :param ~canonjava.runtime.TokenKind name: Kind of the token.
        :param Rule parent: Parent node object (default: None).
        :param str src: Text of the token (default: empty string).

        :ivar str src: Text of the token.
        """
        super().__init__(name=name, parent=parent)
        self.src = src

    def equals(self, other):
        return super().equals(other) and self.src == other.src

    def __str__(self):
        """
        Return the text of the token.

        :return: String representation of ``LexerRule``.
        :rtype: str
        """
        return self.src or ''
