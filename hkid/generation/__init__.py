"""generation sub-package — random HKID numbers from an explicit random source."""

from hkid.generation.generator import HKIDGenerator, gen_random_hkid_number

__all__ = ["HKIDGenerator", "gen_random_hkid_number"]
