"""
Domain Value Objects

Value objects are immutable types that represent descriptive aspects of the domain.
They have no conceptual identity and are compared by their values, not by ID.

Examples:
- AssetState: Lifecycle state of a loan asset with its transition table
- DateCode: Validated YYYYMMDD date encoding
"""

from .asset_state import AssetState, state_name
from .date_code import DateCode

__all__ = ["AssetState", "state_name", "DateCode"]
