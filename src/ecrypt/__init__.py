"""Textbook RSA built from first principles, in an Academic Sense.

Provides RSA key generation, encryption and decryption on plain integers, together with the number theory it rests
on: gcd, the extended Euclidean algorithm, modular exponentiation, a Fermat primality test and random prime
generation. Keys can be exported to PKCS1 (Public Key) and PKCS8 (Private Key) PEM files.

Not suitable for protecting anything: no secure padding, no constant-time arithmetic, no secure entropy.

Typical usage example:

    keys = keygen(64)
    c = encrypt(42, *keys.public)
    m = decrypt(c, keys.private.modulus, keys.private.exponent)
"""
# Copyright (c) 2025-present Tech. TTGames
# SPDX-License-Identifier: EPL-2.0
from ecrypt.arith import exp_mod
from ecrypt.arith import extended_gcd
from ecrypt.arith import gcd
from ecrypt.arith import PreconditionError
from ecrypt.primegen import is_prime
from ecrypt.primegen import next_prime
from ecrypt.primegen import prime
from ecrypt.primegen import primes
from ecrypt.rsa import decrypt
from ecrypt.rsa import encrypt
from ecrypt.rsa import key_pair
from ecrypt.rsa import KeyPair
from ecrypt.rsa import keygen
from ecrypt.rsa import NegativeExponentError
from ecrypt.rsa import padded_decrypt
from ecrypt.rsa import padded_encrypt
from ecrypt.rsa import PrivateKey
from ecrypt.rsa import PublicKey

__version__ = "0.1.0"
__all__ = [
    "KeyPair",
    "PublicKey",
    "PrivateKey",
    "NegativeExponentError",
    "PreconditionError",
    "keygen",
    "key_pair",
    "encrypt",
    "decrypt",
    "padded_encrypt",
    "padded_decrypt",
    "is_prime",
    "prime",
    "next_prime",
    "primes",
    "gcd",
    "extended_gcd",
    "exp_mod",
]
