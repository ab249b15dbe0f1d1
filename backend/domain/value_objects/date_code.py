"""
DateCode Value Object

Immutable representation of a calendar date encoded as a YYYYMMDD integer.
"""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class DateCode:
    """
    Immutable YYYYMMDD date code.

    Loan start and end dates are stored in the ledger as plain integers;
    this wrapper validates them and converts to datetime.date when needed.
    """

    value: int

    def __post_init__(self):
        """Validate the encoded date."""
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValueError(f"Date code must be an integer: {self.value!r}")
        if not 10_000_000 <= self.value <= 99_999_999:
            raise ValueError(f"Date code must have 8 digits (YYYYMMDD): {self.value}")
        try:
            self.to_date()
        except ValueError:
            raise ValueError(f"Date code is not a calendar date: {self.value}")

    def to_date(self) -> date:
        """Convert to datetime.date."""
        return date(self.value // 10_000, self.value // 100 % 100, self.value % 100)

    def __str__(self) -> str:
        return self.to_date().isoformat()

    def __lt__(self, other: "DateCode") -> bool:
        """Compare date codes."""
        if not isinstance(other, DateCode):
            raise TypeError(f"Cannot compare DateCode and {type(other)}")
        return self.value < other.value
