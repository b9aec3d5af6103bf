import string
from .errors import DecodeError

# digit alphabet shared by every base from 2 to 36, letters are case-insensitive
DIGITS = string.digits + string.ascii_lowercase
MIN_BASE = 2
MAX_BASE = 36


def decode(value: str, base: int, key=None) -> int:
    """
    Decode `value`, written in radix `base`, into an integer.
    Stricter than int(): no sign, no whitespace, no underscores and no 0x/0b/0o prefixes.
        key: only used to say which entry failed in the DecodeError
    """
    if isinstance(base, bool) or not isinstance(base, int) or not MIN_BASE <= base <= MAX_BASE:
        raise DecodeError(key, value, base, f"base must be an integer between {MIN_BASE} and {MAX_BASE}")

    if not isinstance(value, str) or value == "":
        raise DecodeError(key, value, base, "value must be a non-empty string")

    # str.lower() maps some non-ascii characters (e.g the kelvin sign) to ascii letters
    if not value.isascii():
        raise DecodeError(key, value, base, "value must only contain ascii digits and letters")

    allowed = DIGITS[:base]
    for char in value.lower():
        if char not in allowed:
            raise DecodeError(key, value, base, f"{char!r} is not a digit in base {base}")

    return int(value, base)
