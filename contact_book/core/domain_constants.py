"""Domain Constants — length limits and patterns shared by the aggregate and request schemas.

Invariants:
    - Single source of truth: schemas/person.py and core/ value objects import from here
    - Bounds are inclusive
"""

MAX_FULL_NAME_LENGTH: int = 70

MIN_ADDRESS_LENGTH: int = 2
MAX_ADDRESS_LENGTH: int = 256

MIN_PHONE_NUMBER_LENGTH: int = 5
MAX_PHONE_NUMBER_LENGTH: int = 20
PHONE_NUMBER_PATTERN: str = r"^\+\d+$"

DEFAULT_PAGE_NUMBER: int = 1
DEFAULT_PAGE_SIZE: int = 10

# Largest id an INTEGER primary key can hold
MAX_ID: int = 2**31 - 1
