"""
Domain Entities

Entities are business objects with identity and lifecycle.
They are mutable and have a unique identifier that persists through their lifetime.

Examples:
- Asset entity: Represents a loan instrument stored on the ledger
"""

from .asset import Asset

__all__ = ["Asset"]
