import random
import string

ALPHABET = string.ascii_letters + string.digits
SEED_LENGTH = 64

_rng = random.SystemRandom()


def generate_seed(length: int = SEED_LENGTH) -> str:
    """Случайная alphanumeric-строка, разнообразит ответы модели между запусками."""
    return "".join(_rng.choice(ALPHABET) for _ in range(length))
