"""paramstyle constants — style identifiers and the deepObject bracket pattern.

Style identifiers are literal, case-sensitive keys into the template table
(see _styles.py).  Anything else is an unknown style.
"""

from __future__ import annotations

import re
from typing import Tuple

# OpenAPI parameter serialization grammar this package decodes.
__grammar_version__ = "3.0"

# ── Style identifiers ─────────────────────────────────────────
STYLE_MATRIX: str = "matrix"
STYLE_LABEL: str = "label"
STYLE_FORM: str = "form"
STYLE_SIMPLE: str = "simple"
STYLE_SPACE_DELIMITED: str = "spaceDelimited"
STYLE_PIPE_DELIMITED: str = "pipeDelimited"
STYLE_DEEP_OBJECT: str = "deepObject"

STYLES: Tuple[str, ...] = (
    STYLE_MATRIX,
    STYLE_LABEL,
    STYLE_FORM,
    STYLE_SIMPLE,
    STYLE_SPACE_DELIMITED,
    STYLE_PIPE_DELIMITED,
    STYLE_DEEP_OBJECT,
)

# ── deepObject bracket groups ─────────────────────────────────
# One bracket group holding one or more word characters: "[R]", "[a_1]".
# ASCII only, so "[é]" is not a group.  Empty "[]" is not a group either.
BRACKET_GROUP = re.compile(r"\[\w+\]", re.ASCII)

# Joins a bracket key back onto its value when a deepObject name is unpacked.
BRACKET_KV_JOIN: str = "="
