"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - PersonId wraps the integer primary key assigned by the database
    - AddressType has exactly two members; a Person holds one address of each

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enum: values serialize to JSON as "Home" / "Business" without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

PersonId = NewType("PersonId", int)


# ─── Enums ───────────────────────────────────────────────────────

class AddressType(str, Enum):
    """Address slot on a Person — maps to DB `address_type` column."""
    HOME = "Home"
    BUSINESS = "Business"
