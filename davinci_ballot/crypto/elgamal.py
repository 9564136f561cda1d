"""
ElGamal encryption on BabyJubJub.

A plaintext m is embedded as m * Base8, so for public key P and
randomness k a ciphertext is (k * Base8, m * Base8 + k * P).
"""

from dataclasses import dataclass
from typing import List, Tuple

from .curve import BASE8, TEPoint, add_points, mul_point_scalar
from .errors import DomainError
from .field import FieldLike, field_element
from .randomness import random_scalar


@dataclass(frozen=True)
class CipherField:
    """One ElGamal ciphertext in TE coordinates"""
    c1: TEPoint
    c2: TEPoint

    def coordinates(self) -> List[int]:
        return [self.c1.x, self.c1.y, self.c2.x, self.c2.y]

    def to_strings(self) -> List[List[str]]:
        return [list(self.c1.as_strings()), list(self.c2.as_strings())]


def embed_plaintext(plaintext: int) -> TEPoint:
    return mul_point_scalar(BASE8, plaintext)


def encrypt_field(plaintext: FieldLike, pub_key: TEPoint, randomness: FieldLike) -> CipherField:
    """Deterministic for a fixed (plaintext, pub_key, randomness)"""
    if not isinstance(pub_key, TEPoint):
        raise DomainError("Public key must be in Twisted Edwards form")
    plaintext = field_element(plaintext)
    randomness = field_element(randomness)

    c1 = mul_point_scalar(BASE8, randomness)
    shared = mul_point_scalar(pub_key, randomness)
    c2 = add_points(embed_plaintext(plaintext), shared)
    return CipherField(c1, c2)


def generate_key_pair() -> Tuple[int, TEPoint]:
    private_key = random_scalar()
    return private_key, mul_point_scalar(BASE8, private_key)
