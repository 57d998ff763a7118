"""
generation/generator.py
-----------------------
Random generation of syntactically valid, checksum-correct HKID numbers.

The random source is always explicit: pass a :class:`random.Random` (or a
seed) for reproducible output.  A generator may be shared between threads;
each number is drawn under the generator's own lock.
"""

from __future__ import annotations

import logging
import random
import string
import threading
from typing import List, Optional

from hkid.core.number import HKIDNumber
from hkid.registry.prefixes import DEFINED_PREFIX_CODES

logger = logging.getLogger(__name__)

NUMERALS_UPPER_BOUND = 1_000_000


class HKIDGenerator:
    """
    Draws random :class:`~hkid.core.number.HKIDNumber` instances.

    Args:
        rng:  Random source to draw from.  Takes precedence over ``seed``.
        seed: Seed for a new :class:`random.Random` when ``rng`` is omitted;
              ``None`` seeds from OS entropy.

    Example::

        generator = HKIDGenerator(seed=7)
        numbers = generator.generate_many(3)
    """

    def __init__(self, rng: Optional[random.Random] = None, seed: Optional[int] = None) -> None:
        self.rng = rng if rng is not None else random.Random(seed)
        self._lock = threading.Lock()

    def generate(self, only_defined_prefix: Optional[bool] = True) -> HKIDNumber:
        """
        Generate one number.

        Args:
            only_defined_prefix: Draw the prefix from the defined-prefix
                registry (``True`` or ``None``), or build a random one- or
                two-letter prefix (``False``).
        """
        with self._lock:
            if only_defined_prefix is None or only_defined_prefix:
                prefix = self.rng.choice(DEFINED_PREFIX_CODES)
            else:
                length = self.rng.randint(1, 2)
                prefix = "".join(
                    self.rng.choice(string.ascii_uppercase) for _ in range(length)
                )
            numerals = f"{self.rng.randrange(NUMERALS_UPPER_BOUND):06d}"

        number = HKIDNumber.from_parts(prefix, numerals)
        logger.debug("Generated HKID number %r", number)
        return number

    def generate_many(self, count: int, only_defined_prefix: Optional[bool] = True) -> List[HKIDNumber]:
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}.")
        return [self.generate(only_defined_prefix) for _ in range(count)]


def gen_random_hkid_number(
    only_defined_prefix: Optional[bool] = True,
    rng: Optional[random.Random] = None,
) -> HKIDNumber:
    """Generate one random number from *rng*, or from a freshly seeded source."""
    return HKIDGenerator(rng=rng).generate(only_defined_prefix)
