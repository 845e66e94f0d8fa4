import math
import struct

from hostdetail.config import PRNG_MULTIPLIER, PRNG_INCREMENT


def seed_from_identifier(identifier: str) -> int:
    """
    Sum the UTF-16 code units of the identifier.
    Characters outside the BMP count as their two surrogate halves.
    """
    units = identifier.encode("utf-16-le", "surrogatepass")
    return sum(struct.unpack(f"<{len(units) // 2}H", units))


def seeded_fraction(seed: int) -> float:
    """
    Fractional part of sin(seed * 9301 + 49297), sign kept (range (-1, 1)).
    """
    return math.fmod(math.sin(seed * PRNG_MULTIPLIER + PRNG_INCREMENT), 1)


def seeded_rand(seed: int):
    """
    Return rand(low, high) scaling one fixed fraction into [low, high).
    Every call made with the same bounds yields the same number.
    """
    x = abs(seeded_fraction(seed))

    def rand(low: float, high: float) -> float:
        return low + x * (high - low)

    return rand
