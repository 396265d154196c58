"""Contact Book Application Package — people, addresses and phone numbers.

Invariants:
    - Package root holds only the version string (no import side-effects)
"""

__version__ = "1.0.0"
