"""Process-wide default random source.

Seeded once from RANDOM_SEED; every generator that is not handed its own
``random.Random`` draws from this one instance.
"""
import random
from functools import lru_cache

from core.config import settings


@lru_cache
def default_rng() -> random.Random:
    return random.Random(settings.RANDOM_SEED)
