"""ORM Models — SQLAlchemy declarative models for the Person aggregate.

Invariants:
    - All models inherit from Base (db/base.py)
    - PersonRecord is the aggregate root; addresses and phone numbers are owned rows

Design Decisions:
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from contact_book.models.person import (  # noqa: F401
    PersonRecord, AddressRecord, PhoneNumberRecord,
)
