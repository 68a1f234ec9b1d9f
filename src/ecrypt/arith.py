"""The Number Theory Kernel, everything RSA needs from arithmetic apart from randomness.

Greatest common divisors, Bezout coefficients, modular exponentiation by repeated squaring and the linear coprime
scan used to pick a public exponent. Everything operates on plain Python integers of arbitrary size and is written
as loops, as recursion would run into the interpreter's recursion limit for keys of a few hundred digits.

Typical usage example:

    gcd(3120, 17)
    x, y = extended_gcd(17, 3120)
    c = exp_mod(65, 3233, 17)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0


class PreconditionError(ValueError):
    """Raised when an operation is called with arguments outside its contract."""


def gcd(a: int, b: int) -> int:
    """Find the greatest common divisor of `a` and `b` by the Euclidean algorithm.

    Args:
        a: First non-negative integer.
        b: Second non-negative integer.

    Returns:
        The greatest common divisor. `gcd(a, 0) == a`.
    """
    if a < b:
        a, b = b, a
    while b != 0:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> tuple[int, int]:
    """Implements the Extended Euclidean Algorithm.

    Such that a*x + b*y = gcd(a, b). The coefficients are the ones produced by classic back-substitution, where a
    remainder of zero yields (0, 1), and every level above returns (y', x' - y' * (a // b)).

    Args:
        a: The first natural number.
        b: The second natural number. Must be non-zero.

    Returns:
        The Bezout coefficients (x, y). The gcd itself is not returned.

    Raises:
        PreconditionError: If `b` is zero.
    """
    if b == 0:
        raise PreconditionError("extended_gcd requires a non-zero second operand")
    r0, r1 = a, b
    s0, s1, t0, t1 = 1, 0, 0, 1
    while r1 != 0:
        q = r0 // r1
        r0, r1 = r1, r0 - q * r1
        s0, s1 = s1, s0 - q * s1
        t0, t1 = t1, t0 - q * t1
    return s0, t0


def exp_mod(base: int, modulus: int, exponent: int) -> int:
    """Modular exponentiation; base ^ exponent mod modulus.

    Squares the base while the exponent is even and peels off one factor of the base while it is odd, until a
    single factor is left.

    Args:
        base: The number to raise.
        modulus: The modulus. Must be >= 1.
        exponent: The exponent. Must be >= 1.

    Returns:
        base ^ exponent reduced modulo `modulus`.

    Raises:
        PreconditionError: If `exponent` or `modulus` is smaller than 1.
    """
    if exponent < 1:
        raise PreconditionError("exp_mod requires an exponent >= 1")
    if modulus < 1:
        raise PreconditionError("exp_mod requires a modulus >= 1")
    acc = 1
    while exponent > 1:
        if exponent % 2 == 0:
            base = (base * base) % modulus
            exponent //= 2
        else:
            acc = (acc * base) % modulus
            exponent -= 1
    return (acc * base) % modulus


def coprime(n: int, start: int) -> int:
    """Find the smallest number that is at least `start` and coprime to `n`.

    Args:
        n: The number to be coprime with. Must be >= 1.
        start: Where the linear scan starts.

    Returns:
        The first `e >= start` with gcd(n, e) == 1.
    """
    if n < 1:
        raise PreconditionError("coprime requires n >= 1")
    e = start
    while gcd(n, e) != 1:
        e += 1
    return e


def small_coprime(n: int) -> int:
    """Find the smallest coprime of `n` greater than 1."""
    return coprime(n, 2)


def sieve(n: int = 10000) -> list[int]:
    """Implements the Sieve of Eratosthenes.

    Uses the textbook Sieve of Eratosthenes on odd numbers only, sieving until root.

    Args:
        n: The number up to which to generate primes. Defaults to 10000.

    Returns:
        A list of primes up to and including `n`.
    """
    if n < 2:
        return []
    i_size = (n - 1) // 2
    candidate: list[bool] = [True] * i_size
    for i in range(int(n**0.5) // 2):
        if candidate[i]:
            r = 2 * i + 3
            for j in range((r * r - 3) // 2, i_size, r):
                candidate[j] = False
    return [2] + [(no * 2 + 3) for no, ele in enumerate(candidate) if ele]
