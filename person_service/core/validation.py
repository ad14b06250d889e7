"""Input validation helpers."""

from __future__ import annotations

import re
from typing import Optional

# Lowercase only: addresses with capital letters are rejected.
EMAIL_PATTERN = re.compile(r"[a-z0-9._%+\-]+@[a-z0-9.\-]+\.[a-z]{2,4}")


def is_email_valid(email: Optional[str]) -> bool:
    """Check ``email`` against :data:`EMAIL_PATTERN`.

    The whole string must match; a trailing newline is not tolerated.
    """
    if not email:
        return False
    return EMAIL_PATTERN.fullmatch(email) is not None
