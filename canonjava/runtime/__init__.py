# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from .kinds import ConstructKind, fixed_text, kind_from_name, kind_name, token_kind, TokenKind, TRIVIA
from .lambda_expression import LambdaExpression
from .rule import LexerRule, ParserRule, Rule
from .serializer import canonical_serializer
