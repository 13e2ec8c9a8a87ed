"""Helpers for pulling numbers out of text."""

from __future__ import annotations

import re
from typing import Iterator

_DIGITS = re.compile(r"[0-9]+")


def nums(text: str) -> Iterator[int]:
    """Yield every run of decimal digits in `text` as an integer."""
    return (int(match.group()) for match in _DIGITS.finditer(text))