"""Three-part version numbers."""

from __future__ import annotations

import re
from dataclasses import dataclass

from nmode.tokeniser import tokenise

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True, order=True)
class Version:
    """A version ``major.minor.patch``, ordered component by component."""

    major: int = 0
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: str) -> Version:
        """Parse ``major.minor.patch``; non-numeric parts count as zero."""
        parts = tokenise(text, ".")
        if len(parts) < 3:
            raise ValueError(f"invalid version string {text!r}")
        return cls(*(_leading_int(part) for part in parts[:3]))

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"