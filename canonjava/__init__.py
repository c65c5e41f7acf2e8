# Copyright (c) 2025-2026 Renata Hodovan, Akos Kiss.
#
# Licensed under the BSD 3-Clause License
# <LICENSE.rst or https://opensource.org/licenses/BSD-3-Clause>.
# This file may not be copied, modified, or distributed except
# according to those terms.

from . import runtime
from . import tool
from .pkgdata import __version__
from .runtime import canonical_serializer
