"""Text case conversions."""

import string

_SWAP = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)


def swap_ascii_case(text: str) -> str:
    """Swap the case of ASCII letters, leaving every other character alone."""
    return text.translate(_SWAP)