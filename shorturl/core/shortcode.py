"""Short code generation.

Short codes are derived from the content of the long URL: the SHA-256
digest of the URL is encoded in base 62 and truncated. The same URL
therefore always maps to the same code, and distinct URLs may collide.
"""

import hashlib
import string

# Digits, then lowercase, then uppercase
BASE62_ALPHABET = string.digits + string.ascii_lowercase + string.ascii_uppercase

DEFAULT_CODE_LENGTH = 7


def encode_base62(data: bytes) -> str:
    """Encode bytes as a base62 string.

    The bytes are read as a big-endian unsigned integer. Each leading zero
    byte is written as one leading ``"0"`` so that the encoding keeps the
    width of the input the same way base58/base-x encoders do.

    Args:
        data: Raw bytes to encode

    Returns:
        Base62 string
    """
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))
    num = int.from_bytes(data, "big")

    result = []
    base = len(BASE62_ALPHABET)

    while num > 0:
        num, remainder = divmod(num, base)
        result.append(BASE62_ALPHABET[remainder])

    return BASE62_ALPHABET[0] * leading_zeros + "".join(reversed(result))


def generate_short_code(long_url: str, length: int = DEFAULT_CODE_LENGTH) -> str:
    """Derive the short code for a URL.

    Args:
        long_url: The URL as submitted, hashed verbatim
        length: Number of leading base62 characters to keep

    Returns:
        Short code of ``length`` characters
    """
    digest = hashlib.sha256(long_url.encode("utf-8")).digest()
    return encode_base62(digest)[:length]


def is_valid_code(code: str) -> bool:
    """Check that every character of a code belongs to the base62 alphabet."""
    return bool(code) and all(c in BASE62_ALPHABET for c in code)
