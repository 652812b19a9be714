from __future__ import annotations

from collections.abc import Iterable

# Conway's PRIMEGAME: started from 2, the powers of two it reaches are 2^p for
# successive primes p.
PRIMEGAME = [
    (17, 91),
    (78, 85),
    (19, 51),
    (23, 38),
    (29, 33),
    (77, 29),
    (95, 23),
    (77, 19),
    (1, 17),
    (11, 13),
    (13, 11),
    (15, 14),
    (15, 2),
    (55, 1),
]

# Computes 2^a * 3^b -> 5^(a*b).
MULTIPLY = [(455, 33), (11, 13), (1, 11), (3, 7), (11, 2), (1, 3)]


def collect_powers_of_two(states: Iterable, *, want: int) -> list[int]:
    powers: list[int] = []
    for state in states:
        exp = state.prime_power()
        if exp is not None:
            powers.append(exp)
            if len(powers) == want:
                break
    return powers
