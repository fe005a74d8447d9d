import random
import string
import time
from typing import Callable, Optional

BASE36_ALPHABET = string.digits + string.ascii_lowercase
RANDOM_PART_LENGTH = 9


def to_base36(value: int) -> str:
    if value == 0:
        return "0"
    digits = []
    while value:
        value, rem = divmod(value, 36)
        digits.append(BASE36_ALPHABET[rem])
    return "".join(reversed(digits))


class IdGenerator:
    """
    Genera identificatori unici per ogni record del documento.
    Formato: "<epoch in ms, base36>-<9 caratteri casuali base36>".
    Clock e sorgente casuale sono iniettabili per i test.
    """

    def __init__(self, clock: Optional[Callable[[], float]] = None, rng: Optional[random.Random] = None):
        self.clock = clock or time.time
        self.rng = rng or random.Random()

    def generate(self) -> str:
        millis = int(self.clock() * 1000)
        suffix = "".join(self.rng.choice(BASE36_ALPHABET) for _ in range(RANDOM_PART_LENGTH))
        return f"{to_base36(millis)}-{suffix}"

    __call__ = generate


default_id_generator = IdGenerator()
