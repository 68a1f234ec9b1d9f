"""Primality testing and random prime generation.

Small numbers are looked up in a fixed table of the primes below 100, everything larger goes through a
Fermat-style witness test: a random odd witness `w < d` must satisfy `w^d ≡ w (mod d)` for 50 rounds. This is not
Miller-Rabin, so Carmichael numbers such as 561 are reported as prime.

Prime candidates are random odd integers of a requested magnitude, counted either in decimal digits or in bytes,
that are walked upwards in steps of two until the oracle accepts one.

All randomness comes from an explicit `random.Random`. Leaving it out gives each top-level call its own
generator seeded from the wall clock.

Typical usage example:

    is_prime(671998030559713968361666935769)
    p = prime(64)
    q = prime(16, "bytes", rng=random.Random(42))
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
import logging
import random
import time
from typing import Literal

from ecrypt import arith

logger = logging.getLogger(__name__)

SMALL_PRIMES: tuple[int, ...] = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53, 59, 61, 67, 71, 73, 79, 83,
                                 89, 97)
FERMAT_ROUNDS: int = 50

Unit = Literal["digits", "bytes"]


def session_rng(rng: random.Random | None) -> random.Random:
    """Hand back `rng`, or a new generator seeded from the wall clock if there is none."""
    if rng is None:
        return random.Random(time.time_ns())
    return rng


def random_odd_integer(magnitude: int, unit: Unit = "digits", rng: random.Random | None = None) -> int:
    """Draw a random odd integer of the given magnitude.

    In digit mode `magnitude` digits from 1-9 are followed by an odd units digit, so the result has
    `magnitude + 1` decimal digits; a magnitude of 0 gives a single odd digit. In byte mode the result is
    `magnitude` bytes long, big-endian, with the leading byte fixed to 0xFF, the trailing byte fixed to 0x01 and
    the bytes in between drawn from [1, 255]. A single byte is always 0xFF.

    Args:
        magnitude: Number of digits or bytes.
        unit: Either "digits" or "bytes". Defaults to "digits".
        rng: Random source. Optional, a wall-clock seeded one is used otherwise.

    Returns:
        An odd positive integer.

    Raises:
        PreconditionError: If the magnitude is out of range for the unit or the unit is unknown.
    """
    rng = session_rng(rng)
    if unit == "digits":
        if magnitude < 0:
            raise arith.PreconditionError("Digit magnitude must be >= 0.")
        body = "".join(str(rng.randint(1, 9)) for _ in range(magnitude))
        return int(body + str(rng.randint(1, 5) * 2 - 1))
    if unit == "bytes":
        if magnitude < 1:
            raise arith.PreconditionError("Byte magnitude must be >= 1.")
        if magnitude == 1:
            return 0xFF
        middle = bytes(rng.randint(1, 255) for _ in range(magnitude - 2))
        return int.from_bytes(b"\xff" + middle + b"\x01", byteorder="big", signed=False)
    raise arith.PreconditionError(f"Unknown magnitude unit {unit!r}, expected 'digits' or 'bytes'.")


def _fermat_test(d: int, rounds: int, rng: random.Random) -> bool:
    """Run `rounds` rounds of the witness test on `d`, which must be at least 100.

    Witnesses have between 2 and `len(str(d))` digits. Draws that are not below `d` are redrawn and do not count
    as a round.
    """
    digits = len(str(d)) - 1
    done = 0
    while done < rounds:
        w = random_odd_integer(rng.randint(1, digits), "digits", rng)
        if w >= d:
            continue
        if arith.exp_mod(w, d, d) != w:
            return False
        done += 1
    return True


def is_prime(d: int, rng: random.Random | None = None) -> bool:
    """Determine whether `d` is prime.

    Numbers below 100 are checked against `SMALL_PRIMES`, larger ones with `FERMAT_ROUNDS` rounds of the Fermat
    witness test. The answer for large numbers is probabilistic, and Carmichael numbers pass.

    Args:
        d: The candidate.
        rng: Random source for the witnesses. Optional, a wall-clock seeded one is used otherwise.

    Returns:
        True if `d` is (probably) prime, False otherwise.
    """
    if d < 10:
        return d in SMALL_PRIMES[:4]
    if d < 100:
        return d in SMALL_PRIMES[4:]
    return _fermat_test(d, FERMAT_ROUNDS, session_rng(rng))


def next_prime(candidate: int, rng: random.Random | None = None) -> int:
    """Walk upwards from `candidate` in steps of two until a prime is found.

    Args:
        candidate: Starting point, normally odd.
        rng: Random source shared by every primality check of the walk.

    Returns:
        The first (probable) prime in `candidate, candidate + 2, ...`.
    """
    rng = session_rng(rng)
    while not is_prime(candidate, rng):
        candidate += 2
    return candidate


def prime(magnitude: int, unit: Unit = "digits", rng: random.Random | None = None) -> int:
    """Generate a random prime of the requested magnitude.

    Args:
        magnitude: Size of the starting candidate, in `unit`.
        unit: Either "digits" or "bytes". Defaults to "digits".
        rng: Random source. Optional, a wall-clock seeded one is used otherwise.

    Returns:
        A (probable) prime at or just above a random odd candidate of that magnitude.
    """
    rng = session_rng(rng)
    start = random_odd_integer(magnitude, unit, rng)
    found = next_prime(start, rng)
    logger.debug("Found prime %d steps above a %d %s candidate.", (found - start) // 2, magnitude, unit)
    return found


def primes(n: int) -> list[int]:
    """Return every prime up to and including `n`."""
    return arith.sieve(n)
