import logging
import random
from typing import Optional

log = logging.getLogger("guessgame.core.secret")

LOWEST = 1
HIGHEST = 100


def make_rng(seed: Optional[int] = None) -> random.Random:
    """
    Returns a generator seeded with the given value, or one backed by the OS entropy pool if no seed is given.
    """
    if seed is None:
        return random.SystemRandom()

    log.debug(f"make_rng: (seed={seed})")
    return random.Random(seed)


def generate_secret(rng: Optional[random.Random] = None) -> int:
    if rng is None:
        rng = make_rng()

    # randint is inclusive on both ends
    return rng.randint(LOWEST, HIGHEST)
