"""
Cryptographic primitives for ballot encoding
BN254 field arithmetic, BabyJubJub points, Poseidon and ElGamal
"""

from .errors import (
    BallotEncodingError,
    SizingError,
    DomainError,
    DegenerateInputError,
    ConfigurationError,
)
from .field import FIELD_MODULUS, field_element
from .curve import (
    TEPoint,
    RTEPoint,
    BASE8,
    IDENTITY,
    SCALING_FACTOR,
    SUBGROUP_ORDER,
    rte_to_te,
    te_to_rte,
    is_on_curve,
    pack_point,
    unpack_point,
)
from .poseidon import poseidon_hash, multi_hash
from .randomness import derive_chain, random_scalar
from .elgamal import CipherField, encrypt_field, generate_key_pair

__all__ = [
    # Exceptions
    'BallotEncodingError',
    'SizingError',
    'DomainError',
    'DegenerateInputError',
    'ConfigurationError',

    # Field and curve
    'FIELD_MODULUS',
    'field_element',
    'TEPoint',
    'RTEPoint',
    'BASE8',
    'IDENTITY',
    'SCALING_FACTOR',
    'SUBGROUP_ORDER',
    'rte_to_te',
    'te_to_rte',
    'is_on_curve',
    'pack_point',
    'unpack_point',

    # Hashing and encryption
    'poseidon_hash',
    'multi_hash',
    'derive_chain',
    'random_scalar',
    'CipherField',
    'encrypt_field',
    'generate_key_pair',
]
