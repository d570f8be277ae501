# Copyright (c) 2026 Jeroen Visser. All rights reserved.
# Licensed under the MIT License — see LICENSE.
"""
Deterministic pseudo-random streams.

Linear congruential generator used for all procedural placement so that
the same identifiers always produce the same universe.
No external dependencies — only stdlib typing.
"""
from typing import Callable

# Numerical Recipes parameters: state' = (state * A + C) mod M
LCG_A: int = 9301
LCG_C: int = 49297
LCG_M: int = 233280


def create_seeded_random(seed: int) -> Callable[[], float]:
    """
    Create an independent random stream for an integer seed.

    Each call to the returned function advances only its own state, so two
    generators built from the same seed always produce the same sequence.

    Args:
        seed: Integer seed.

    Returns:
        Zero-argument function returning floats in [0, 1).
    """
    state = int(seed)

    def next_value() -> float:
        nonlocal state
        state = (state * LCG_A + LCG_C) % LCG_M
        return state / LCG_M

    return next_value


def derive_seed(identifier: str, offset: int = 0) -> int:
    """
    Turn a string identifier into an integer seed.

    Sum of the character code points plus offset. Anagrams collide; the
    seed is meant for visual variety, not hashing.
    """
    return sum(ord(ch) for ch in identifier) + offset
