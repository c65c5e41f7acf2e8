# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from .antlr_tree import AntlrTreeBuilder, JAVA_LEXER_TOKEN_KINDS, JAVA_PARSER_RULE_KINDS
from .tree_codec import JsonTreeCodec, PickleTreeCodec, TreeCodec
