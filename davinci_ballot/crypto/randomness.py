"""Seed expansion and secret sampling."""

import secrets
from typing import List

from .curve import SUBGROUP_ORDER
from .errors import DomainError, SizingError
from .field import FIELD_MODULUS
from .poseidon import poseidon_hash


def derive_chain(seed: int, count: int) -> List[int]:
    """
    Expand a seed into count + 1 values: ks[0] = seed, ks[i] = H(ks[i-1]).

    H is single-input Poseidon, the same hash the circuit applies.
    """
    if count < 0:
        raise SizingError("Chain length must be non-negative")
    if seed < 0 or seed >= FIELD_MODULUS:
        raise DomainError("Seed is outside the field range")

    chain = [seed]
    for _ in range(count):
        chain.append(poseidon_hash([chain[-1]]))
    return chain


def random_scalar() -> int:
    """Non-zero scalar below the subgroup order, from 32 CSPRNG bytes"""
    while True:
        value = int.from_bytes(secrets.token_bytes(32), "little") % SUBGROUP_ORDER
        if value:
            return value
