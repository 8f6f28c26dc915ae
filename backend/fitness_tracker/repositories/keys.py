"""Surrogate key range shared by the repositories."""

# Signed 64-bit, the widest integer key SQLite and PostgreSQL store
MIN_ID = -(2 ** 63)
MAX_ID = 2 ** 63 - 1


def is_storable_id(value: int) -> bool:
    """Whether ``value`` can exist as a primary key at all."""
    return MIN_ID <= value <= MAX_ID
