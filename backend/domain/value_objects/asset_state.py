"""
AssetState Value Object

Immutable representation of a loan asset's position in its lifecycle.
"""

from enum import IntEnum


_UNKNOWN = "UNKNOWN"


class AssetState(IntEnum):
    """
    Loan asset lifecycle state.

    Numeric codes start at 1; zero is never a valid state.
    """

    ISSUED = 1
    PENDING = 2
    TRADING = 3
    REDEEMED = 4

    def __str__(self) -> str:
        return self.name

    def is_terminal(self) -> bool:
        """Check if this state is terminal (no further transitions)."""
        return self is AssetState.REDEEMED

    def can_transition_to(self, new_state: "AssetState") -> bool:
        """
        Check if transition to new state is valid.

        Args:
            new_state: Target state

        Returns:
            True if transition is allowed
        """
        return new_state in _VALID_TRANSITIONS.get(self, frozenset())

    @classmethod
    def from_name(cls, value: str) -> "AssetState":
        """
        Create AssetState from its display name.

        Args:
            value: Display name, e.g. "TRADING"

        Returns:
            AssetState instance

        Raises:
            ValueError: If value is not a valid state name
        """
        try:
            return cls[value]
        except KeyError:
            raise ValueError(f"Invalid asset state: {value}")


_VALID_TRANSITIONS = {
    AssetState.ISSUED: frozenset({AssetState.PENDING, AssetState.TRADING}),
    AssetState.PENDING: frozenset({AssetState.ISSUED, AssetState.TRADING}),
    AssetState.TRADING: frozenset({AssetState.REDEEMED}),
    AssetState.REDEEMED: frozenset(),  # Terminal state
}


def state_name(code: int) -> str:
    """
    Display name for a numeric state code.

    Codes outside the defined range map to "UNKNOWN".
    """
    try:
        return AssetState(code).name
    except ValueError:
        return _UNKNOWN
