import secrets
import string

# Base62 alphabet, case-sensitive
ALPHABET = string.ascii_letters + string.digits
SHORT_CODE_LENGTH = 6

_ALPHABET_SET = frozenset(ALPHABET)


def generate_short_code(length: int = SHORT_CODE_LENGTH) -> str:
    """Generate a cryptographically secure random alphanumeric code."""
    return ''.join(secrets.choice(ALPHABET) for _ in range(length))


def is_alphanumeric(code: str) -> bool:
    return bool(code) and all(ch in _ALPHABET_SET for ch in code)
