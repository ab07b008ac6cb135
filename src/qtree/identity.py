"""
Node identity generation.

Fresh ids are UUID4 strings. Copied link ids keep the source link id as a
readable prefix and append the copy marker plus a short base-36 token
derived from the current time in milliseconds. Tokens are strictly
increasing within the process, so two copies issued in the same
millisecond still differ.
"""

import re
import time
import uuid
from typing import Optional

from qtree.config import DEFAULT_CONFIG


_BASE36 = "0123456789abcdefghijklmnopqrstuvwxyz"

_last_token_ms = 0


def new_question_id() -> str:
    return str(uuid.uuid4())


def _to_base36(n: int) -> str:
    if n == 0:
        return "0"
    digits = []
    while n:
        n, rem = divmod(n, 36)
        digits.append(_BASE36[rem])
    return "".join(reversed(digits))


def _next_token() -> str:
    global _last_token_ms
    now = time.time_ns() // 1_000_000
    if now <= _last_token_ms:
        now = _last_token_ms + 1
    _last_token_ms = now
    return _to_base36(now)


def copy_link_id(link_id: str, marker: Optional[str] = None) -> str:
    """
    Derive the link id for a copy of a question.

    Args:
        link_id: Link id of the source question
        marker: Copy marker (defaults to DEFAULT_CONFIG.copy_marker)

    Returns:
        "<link_id>-<marker>-<token>"
    """
    marker = marker or DEFAULT_CONFIG.copy_marker
    return f"{link_id}-{marker}-{_next_token()}"


def is_copied_link_id(link_id: str, marker: Optional[str] = None) -> bool:
    """True when link_id ends with a copy marker and token."""
    marker = marker or DEFAULT_CONFIG.copy_marker
    return re.search(rf"-{re.escape(marker)}-[0-9a-z]+$", link_id) is not None
