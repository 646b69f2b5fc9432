"""Random seed material drawn from the operating system entropy pool."""

import secrets

DEFAULT_STRING_LENGTH = 32
CHAR_CODE_RANGE = 1 << 16


def generate_string(count: int = DEFAULT_STRING_LENGTH) -> str:
    """
    Build a string of ``count`` characters with uniformly random code points.

    Code points come from [0, 2^16) and are not reproducible. The result is
    meant for hashing into a seed, not for display, so it may contain lone
    surrogates and control characters.

    Args:
        count: Number of characters to generate

    Returns:
        Random string of length ``max(count, 0)``
    """
    return "".join(chr(secrets.randbelow(CHAR_CODE_RANGE)) for _ in range(count))
