"""
Nightly build dates.

A Date is a validated (year, month, day) triple. Validation is
deliberately permissive: the bounds are fixed constants and there is no
real calendar check, so 2019-02-31 is accepted.
"""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass

from ..config.constants import MAX_DAY, MAX_MONTH, MAX_YEAR_EXCLUSIVE


def parse_unsigned(text: str) -> int:
    """
    Parse a plain non-negative decimal integer.

    Only ASCII digits are accepted: no sign, no whitespace, no underscores.

    Raises:
        ValueError: If text is empty or contains anything but digits.
    """
    if not text or not text.isascii() or not text.isdigit():
        raise ValueError(f"not an unsigned integer: {text!r}")
    return int(text)


@dataclass(frozen=True, order=True)
class Date:
    """
    Calendar date of a nightly build.

    Ordered lexicographically by (year, month, day) through the generated
    dataclass ordering; field order matters.

    Attributes:
        year: Four-digit year, below 3000
        month: 0..12
        day: 0..31
    """
    year: int
    month: int
    day: int

    def __post_init__(self):
        """Validate component ranges."""
        if not 0 <= self.year < MAX_YEAR_EXCLUSIVE:
            raise ValueError(f"Date: year must be below {MAX_YEAR_EXCLUSIVE}, got {self.year}")
        if not 0 <= self.month <= MAX_MONTH:
            raise ValueError(f"Date: month must be <= {MAX_MONTH}, got {self.month}")
        if not 0 <= self.day <= MAX_DAY:
            raise ValueError(f"Date: day must be <= {MAX_DAY}, got {self.day}")

    def __str__(self) -> str:
        return f"{self.year:04}-{self.month:02}-{self.day:02}"

    def __repr__(self) -> str:
        return f"Date({self})"

    @classmethod
    def from_str(cls, text: str) -> "Date":
        """
        Parse the YYYY-MM-DD form found in `rustc --version` output.

        Raises:
            ValueError: If text is not three dash-separated unsigned
                integers, or a component is out of range.
        """
        parts = text.split("-")
        if len(parts) != 3:
            raise ValueError(f"expected YYYY-MM-DD, got {text!r}")
        year, month, day = (parse_unsigned(part) for part in parts)
        return cls(year, month, day)

    @classmethod
    def today(cls) -> "Date":
        """Today's date (UTC)."""
        now = _dt.datetime.now(_dt.timezone.utc).date()
        return cls(now.year, now.month, now.day)


__all__ = ["Date", "parse_unsigned"]
