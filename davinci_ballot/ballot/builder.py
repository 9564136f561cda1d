"""
Ballot proof input assembly.

Turns a voter's plaintext choices into the witness record expected by the
ballot proof circuit: padded field vector, per-slot ElGamal ciphertexts,
vote identifier and the multi-Poseidon hash of the public inputs.
"""

import logging
import time
from typing import List, Optional, Sequence

from ..crypto.curve import IDENTITY, RTEPoint, TEPoint, in_subgroup, rte_to_te
from ..crypto.elgamal import CipherField, encrypt_field
from ..crypto.errors import ConfigurationError, DegenerateInputError, DomainError, SizingError
from ..crypto.field import FieldLike, field_element
from ..crypto.poseidon import MAX_INPUTS, multi_hash, poseidon_hash
from ..crypto.randomness import derive_chain, random_scalar
from ..utils.utils import PerformanceMonitor
from .types import BallotConfig, BallotInputs, ProcessData

logger = logging.getLogger(__name__)

DEFAULT_CIRCUIT_CAPACITY = 8
VOTE_ID_BITS = 160


def compute_vote_id(process_id: int, address: int, k: int) -> int:
    """Poseidon(process_id, address, k) truncated to 160 bits"""
    return poseidon_hash([process_id, address, k]) % (1 << VOTE_ID_BITS)


def flatten_public_inputs(
    process_id: int,
    config: BallotConfig,
    pub_key: TEPoint,
    address: int,
    vote_id: int,
    cipherfields: Sequence[CipherField],
    weight: int,
) -> List[int]:
    """Public inputs in the order the circuit hashes them"""
    values = [process_id]
    values.extend(config.scalars())
    values.extend([pub_key.x, pub_key.y])
    values.extend([address, vote_id])
    for cipherfield in cipherfields:
        values.extend(cipherfield.coordinates())
    values.append(weight)
    return values


class BallotBuilder:
    """Builds ballot proof inputs for a fixed circuit capacity"""

    def __init__(self, circuit_capacity: int = DEFAULT_CIRCUIT_CAPACITY,
                 monitor: Optional[PerformanceMonitor] = None):
        if isinstance(circuit_capacity, bool) or not isinstance(circuit_capacity, int):
            raise ConfigurationError("circuit_capacity must be an integer")
        if circuit_capacity < 1 or circuit_capacity > MAX_INPUTS:
            raise ConfigurationError(f"circuit_capacity must be within [1, {MAX_INPUTS}]")
        self.circuit_capacity = circuit_capacity
        self.monitor = monitor

    @classmethod
    def from_config(cls, config, monitor: Optional[PerformanceMonitor] = None) -> "BallotBuilder":
        """Build from an EngineConfig"""
        if monitor is None and config.enable_benchmarking:
            monitor = PerformanceMonitor()
        return cls(circuit_capacity=config.circuit_capacity, monitor=monitor)

    @staticmethod
    def random_k() -> str:
        return str(random_scalar())

    def build_ballot_inputs(
        self,
        fields: Sequence[FieldLike],
        weight: FieldLike,
        pub_key: RTEPoint,
        process_id: FieldLike,
        address: FieldLike,
        k: FieldLike,
        config: BallotConfig,
    ) -> BallotInputs:
        """
        Assemble the circuit inputs for one vote.

        ``pub_key`` is the sequencer's encryption key in RTE form; it is
        converted to TE before any encryption. ``process_id`` and ``address``
        accept ints, decimal strings or 0x-prefixed hex strings.
        """
        if self.monitor is not None:
            with self.monitor.start_operation("build_ballot_inputs"):
                return self._build(fields, weight, pub_key, process_id, address, k, config)
        return self._build(fields, weight, pub_key, process_id, address, k, config)

    def build_from_process(self, process: ProcessData, fields: Sequence[FieldLike],
                           weight: FieldLike, k: Optional[FieldLike] = None) -> BallotInputs:
        if k is None:
            k = self.random_k()
        return self.build_ballot_inputs(
            fields, weight, process.encryption_key,
            process.process_id, process.address, k, process.ballot_config,
        )

    def _build(self, fields, weight, pub_key, process_id, address, k, config) -> BallotInputs:
        start = time.time()

        if not isinstance(config, BallotConfig):
            raise ConfigurationError("config must be a BallotConfig")
        if config.num_fields > self.circuit_capacity:
            raise SizingError(
                f"num_fields {config.num_fields} exceeds circuit capacity {self.circuit_capacity}")
        if len(fields) != config.num_fields:
            raise SizingError(
                f"Expected {config.num_fields} field values, got {len(fields)}")

        plaintexts = [field_element(v) for v in fields]
        weight = field_element(weight)
        process_id = field_element(process_id)
        address = field_element(address)

        k = field_element(k)
        if k == 0:
            raise DegenerateInputError("Seed k must be non-zero")

        pub_key_te = self._encryption_key(pub_key)

        padded = plaintexts + [0] * (self.circuit_capacity - len(plaintexts))

        # ks[0] is k itself, ks[1..capacity] encrypt one slot each
        ks = derive_chain(k, self.circuit_capacity)
        cipherfields = [
            encrypt_field(value, pub_key_te, ks[i + 1])
            for i, value in enumerate(padded)
        ]

        vote_id = compute_vote_id(process_id, address, ks[0])

        public_inputs = flatten_public_inputs(
            process_id, config, pub_key_te, address, vote_id, cipherfields, weight)
        inputs_hash = multi_hash(public_inputs)

        logger.debug(
            f"Built ballot inputs: {config.num_fields}/{self.circuit_capacity} fields, "
            f"{len(public_inputs)} public inputs in {time.time() - start:.3f}s")

        return BallotInputs(
            fields=padded,
            config=config,
            address=address,
            weight=weight,
            process_id=process_id,
            vote_id=vote_id,
            encryption_pubkey=pub_key_te,
            k=k,
            cipherfields=cipherfields,
            inputs_hash=inputs_hash,
        )

    @staticmethod
    def _encryption_key(pub_key) -> TEPoint:
        if isinstance(pub_key, TEPoint):
            raise DomainError("Encryption key must be given in RTE form")
        if not isinstance(pub_key, RTEPoint):
            raise DomainError("Encryption key must be an RTEPoint")
        if pub_key.x == 0 and pub_key.y == 0:
            raise DegenerateInputError("Encryption key is zero")

        pub_key_te = rte_to_te(pub_key)
        if pub_key_te == IDENTITY:
            raise DegenerateInputError("Encryption key is the identity point")
        # small-order keys leave c2 decryptable without the secret
        if not in_subgroup(pub_key_te):
            raise DomainError("Encryption key is not in the prime-order subgroup")
        return pub_key_te
