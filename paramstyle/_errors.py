"""paramstyle error codes and exception class.

Decoding is fail-soft by default: an unknown style or an explode flag the
style does not define decodes to nothing.  Callers who want to tell
"no parameters present" apart from "style not recognized" pass
``strict=True`` and get a ParamError carrying one of the codes below.
"""

from __future__ import annotations

# ── Error codes ───────────────────────────────────────────────

ERR_UNKNOWN_STYLE: str = "ERR_UNKNOWN_STYLE"      # not one of the seven styles
ERR_UNKNOWN_EXPLODE: str = "ERR_UNKNOWN_EXPLODE"  # style has no template for this explode
ERR_SHAPE: str = "ERR_SHAPE"                      # declared shape is not a ParamType


class ParamError(Exception):
    """Exception for strict-mode decoding errors.

    The `.code` attribute is one of the ERR_* strings above.
    """

    def __init__(self, code: str, msg: str = "") -> None:
        super().__init__(msg or code)
        self.code = code
