"""Fixed character pools and length bounds for generated passwords."""

from __future__ import annotations

# Visually confusable characters (I, O, l, 0, 1) are left out of the pools.
UPPERCASE_POOL = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LOWERCASE_POOL = "abcdefghijkmnopqrstuvwxyz"
NUMERIC_POOL = "23456789"
DEFAULT_SPECIAL_CHARACTERS = "!@#$%^*()-_=+?"

MIN_PASSWORD_LENGTH = 8
MAX_PASSWORD_LENGTH = 32


def combined_pool(*, special_chars: str | None) -> str:
    """Return the pool used to fill positions beyond the required minimums."""

    return UPPERCASE_POOL + LOWERCASE_POOL + NUMERIC_POOL + (special_chars or "")
