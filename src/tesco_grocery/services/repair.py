"""Textual patches for known malformations in grocery API payloads.

Both patches run on the raw text before decoding because the payload is not
valid JSON until they are applied.
"""

import re

_QUOTED_STATUS_CODE = re.compile(r'"StatusCode"(\s*):(\s*)"(-?\d+)"')
_MISSING_COMMA = "}\r\n{"
_WITH_COMMA = "},\r\n{"


def repair_quoted_status_code(text: str) -> str:
    """Unquote the first ``"StatusCode": "<n>"`` pair (LOGIN sends 150 quoted)."""
    return _QUOTED_STATUS_CODE.sub(r'"StatusCode"\1:\2\3', text, count=1)


def repair_missing_commas(text: str) -> str:
    """Insert the comma missing between adjacent objects in extended arrays."""
    return text.replace(_MISSING_COMMA, _WITH_COMMA)
