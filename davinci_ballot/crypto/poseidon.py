"""
Circom-compatible Poseidon hash over BN254.

Round constants and MDS matrices are derived per width with the Grain LFSR
parameter generator of the Poseidon reference implementation, which is how
circomlib's constant tables were produced.
"""

import logging
import time
from functools import lru_cache
from typing import List, Sequence, Tuple

from .errors import SizingError
from .field import FIELD_MODULUS

logger = logging.getLogger(__name__)

MAX_INPUTS = 16
FULL_ROUNDS = 8
# Partial rounds indexed by t - 2, t = number of inputs + 1
PARTIAL_ROUNDS = [56, 57, 56, 60, 60, 63, 64, 63, 60, 66, 60, 65, 70, 60, 64, 68]

FIELD_SIZE_BITS = FIELD_MODULUS.bit_length()  # 254
_GRAIN_STATE_BITS = 80


class GrainLFSR:
    """Self-shrinking Grain LFSR seeded from the Poseidon instance parameters"""

    def __init__(self, width: int, full_rounds: int, partial_rounds: int):
        bits = (
            _to_bits(1, 2)  # prime field
            + _to_bits(0, 4)  # x^alpha S-box
            + _to_bits(FIELD_SIZE_BITS, 12)
            + _to_bits(width, 12)
            + _to_bits(full_rounds, 10)
            + _to_bits(partial_rounds, 10)
            + [1] * 30
        )
        # bit i of the integer is position i of the shift register
        self._state = sum(bit << i for i, bit in enumerate(bits))
        for _ in range(160):
            self._step()

    def _step(self) -> int:
        s = self._state
        new_bit = ((s >> 62) ^ (s >> 51) ^ (s >> 38) ^ (s >> 23) ^ (s >> 13) ^ s) & 1
        self._state = (s >> 1) | (new_bit << (_GRAIN_STATE_BITS - 1))
        return new_bit

    def next_bit(self) -> int:
        bit = self._step()
        while bit == 0:
            self._step()
            bit = self._step()
        return self._step()

    def random_bits(self, num_bits: int) -> int:
        value = 0
        for _ in range(num_bits):
            value = (value << 1) | self.next_bit()
        return value

    def field_element(self) -> int:
        """Rejection-sampled element, as used for round constants"""
        value = self.random_bits(FIELD_SIZE_BITS)
        while value >= FIELD_MODULUS:
            value = self.random_bits(FIELD_SIZE_BITS)
        return value


def _to_bits(value: int, width: int) -> List[int]:
    return [int(b) for b in bin(value)[2:].zfill(width)]


@lru_cache(maxsize=None)
def poseidon_parameters(width: int) -> Tuple[Tuple[int, ...], Tuple[Tuple[int, ...], ...]]:
    """Round constants and MDS matrix for state width t"""
    if width < 2 or width > MAX_INPUTS + 1:
        raise SizingError(f"Unsupported Poseidon width {width}")

    start = time.time()
    partial_rounds = PARTIAL_ROUNDS[width - 2]
    grain = GrainLFSR(width, FULL_ROUNDS, partial_rounds)

    constants = tuple(
        grain.field_element()
        for _ in range((FULL_ROUNDS + partial_rounds) * width)
    )

    # Cauchy matrix M[i][j] = 1 / (x_i + y_j)
    while True:
        samples = [grain.random_bits(FIELD_SIZE_BITS) % FIELD_MODULUS for _ in range(2 * width)]
        if len(set(samples)) != len(samples):
            continue
        xs, ys = samples[:width], samples[width:]
        if any((x + y) % FIELD_MODULUS == 0 for x in xs for y in ys):
            continue
        mds = tuple(
            tuple(pow(x + y, -1, FIELD_MODULUS) for y in ys)
            for x in xs
        )
        break

    logger.debug(f"Derived Poseidon parameters for t={width} in {time.time() - start:.2f}s")
    return constants, mds


class Poseidon:
    """Poseidon permutation matching circomlib's poseidon for 1..16 inputs"""

    PRIME = FIELD_MODULUS

    @staticmethod
    def ark(state: List[int], constants: Sequence[int], offset: int) -> List[int]:
        """Add round constants"""
        return [(s + constants[offset + i]) % FIELD_MODULUS for i, s in enumerate(state)]

    @staticmethod
    def sbox(state: List[int], full_round: bool) -> List[int]:
        """Apply S-box (x^5 mod p)"""
        if full_round:
            return [pow(s, 5, FIELD_MODULUS) for s in state]
        return [pow(state[0], 5, FIELD_MODULUS)] + state[1:]

    @staticmethod
    def mix(state: List[int], mds: Sequence[Sequence[int]]) -> List[int]:
        """Apply MDS matrix multiplication"""
        return [
            sum(m * s for m, s in zip(row, state)) % FIELD_MODULUS
            for row in mds
        ]

    @staticmethod
    def hash(inputs: Sequence[int]) -> int:
        if not inputs:
            raise SizingError("Poseidon needs at least one input")
        if len(inputs) > MAX_INPUTS:
            raise SizingError(f"Poseidon takes at most {MAX_INPUTS} inputs, got {len(inputs)}")

        width = len(inputs) + 1
        constants, mds = poseidon_parameters(width)
        partial_rounds = PARTIAL_ROUNDS[width - 2]
        half_full = FULL_ROUNDS // 2

        state = [0] + [int(x) % FIELD_MODULUS for x in inputs]
        for r in range(FULL_ROUNDS + partial_rounds):
            state = Poseidon.ark(state, constants, r * width)
            full = r < half_full or r >= half_full + partial_rounds
            state = Poseidon.sbox(state, full)
            state = Poseidon.mix(state, mds)

        return state[0]


poseidon_hash = Poseidon.hash


def multi_hash(inputs: Sequence[int], chunk_size: int = MAX_INPUTS) -> int:
    """
    Hash an arbitrary-length vector the way the circuit's multi-Poseidon does.

    Up to ``chunk_size`` inputs are hashed directly. Longer vectors are split
    into consecutive chunks, each chunk is hashed, and the chunk hashes are
    combined with the same rule.
    """
    if not inputs:
        raise SizingError("Cannot hash an empty vector")
    if chunk_size < 2 or chunk_size > MAX_INPUTS:
        raise SizingError(f"Chunk size must be within [2, {MAX_INPUTS}]")

    if len(inputs) <= chunk_size:
        return poseidon_hash(inputs)

    chunk_hashes = [
        poseidon_hash(inputs[i:i + chunk_size])
        for i in range(0, len(inputs), chunk_size)
    ]
    return multi_hash(chunk_hashes, chunk_size)
