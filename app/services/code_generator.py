import secrets
import string

from app.core.config import settings

QUIZ_CODE_ALPHABET = string.digits + string.ascii_uppercase


def generate_quiz_code(length: int = settings.QUIZ_CODE_LENGTH) -> str:
    """Generate a random, uppercase, shareable quiz code."""
    return "".join(secrets.choice(QUIZ_CODE_ALPHABET) for _ in range(length))


def normalize_quiz_code(code: str) -> str:
    return code.strip().upper()
