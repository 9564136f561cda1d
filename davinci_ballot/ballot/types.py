"""Ballot configuration, sequencer process data and prover input records."""

import json
from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping

from ..crypto.curve import RTEPoint, TEPoint
from ..crypto.elgamal import CipherField
from ..crypto.errors import ConfigurationError, DomainError
from ..crypto.field import field_element


def hex_to_decimal(value: str) -> str:
    """Convert a hex string, with or without 0x prefix, to a decimal string"""
    if not isinstance(value, str):
        raise DomainError("Expected a hex string")
    text = value.strip()
    if text[:2].lower() == "0x":
        text = text[2:]
    try:
        return str(int(text, 16))
    except ValueError:
        raise DomainError("String is not valid hex") from None


@dataclass(frozen=True)
class BallotConfig:
    """On-chain ballot mode rules, copied verbatim into the circuit inputs"""
    num_fields: int
    unique_values: bool
    max_value: int
    min_value: int
    max_value_sum: int
    min_value_sum: int
    cost_exponent: int
    cost_from_weight: bool

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if f.type is bool:
                if not isinstance(value, bool):
                    raise ConfigurationError(f"{f.name} must be a boolean")
            else:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ConfigurationError(f"{f.name} must be an integer")
                if value < 0:
                    raise ConfigurationError(f"{f.name} must be non-negative")
        if self.num_fields < 1:
            raise ConfigurationError("num_fields must be at least 1")

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BallotConfig":
        """Build from snake_case keys, rejecting unknown or missing keys"""
        expected = {f.name for f in fields(cls)}
        unknown = set(data) - expected
        missing = expected - set(data)
        if unknown:
            raise ConfigurationError(f"Unknown ballot config keys: {sorted(unknown)}")
        if missing:
            raise ConfigurationError(f"Missing ballot config keys: {sorted(missing)}")
        return cls(**data)

    @classmethod
    def from_ballot_mode(cls, mode: Mapping[str, Any]) -> "BallotConfig":
        """Parse the sequencer's camelCase ballot mode"""
        keys = {
            'numFields': 'num_fields',
            'uniqueValues': 'unique_values',
            'maxValue': 'max_value',
            'minValue': 'min_value',
            'maxValueSum': 'max_value_sum',
            'minValueSum': 'min_value_sum',
            'costExponent': 'cost_exponent',
            'costFromWeight': 'cost_from_weight',
        }
        unknown = set(mode) - set(keys)
        missing = set(keys) - set(mode)
        if unknown:
            raise ConfigurationError(f"Unknown ballot mode keys: {sorted(unknown)}")
        if missing:
            raise ConfigurationError(f"Missing ballot mode keys: {sorted(missing)}")

        parsed = {}
        for camel, snake in keys.items():
            value = mode[camel]
            if snake in ('unique_values', 'cost_from_weight'):
                parsed[snake] = _parse_flag(camel, value)
            else:
                parsed[snake] = _parse_int(camel, value)
        return cls(**parsed)

    def scalars(self) -> List[int]:
        """Config values in circuit order, booleans as 0/1"""
        return [
            self.num_fields,
            int(self.unique_values),
            self.max_value,
            self.min_value,
            self.max_value_sum,
            self.min_value_sum,
            self.cost_exponent,
            int(self.cost_from_weight),
        ]


def _parse_flag(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str) and value.strip().lower() in ("true", "false", "0", "1"):
        return value.strip().lower() in ("true", "1")
    raise ConfigurationError(f"{name} must be a boolean")


def _parse_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{name} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 10)
        except ValueError:
            pass
    raise ConfigurationError(f"{name} must be an integer")


@dataclass(frozen=True)
class ProcessData:
    """Voting process as published by the sequencer"""
    process_id: int
    address: int
    encryption_key: RTEPoint
    ballot_config: BallotConfig

    @classmethod
    def from_sequencer(cls, data: Mapping[str, Any]) -> "ProcessData":
        try:
            process_id = data['processId']
            address = data['address']
            pub_x, pub_y = data['pubKeyX'], data['pubKeyY']
            ballot_mode = data['ballotMode']
        except KeyError as e:
            raise ConfigurationError(f"Missing process field: {e.args[0]}") from None

        return cls(
            process_id=field_element(hex_to_decimal(process_id)),
            address=field_element(hex_to_decimal(address)),
            encryption_key=RTEPoint.parse(pub_x, pub_y),
            ballot_config=BallotConfig.from_ballot_mode(ballot_mode),
        )


@dataclass(frozen=True)
class BallotInputs:
    """Witness record for the ballot proof circuit"""
    fields: List[int]
    config: BallotConfig
    address: int
    weight: int
    process_id: int
    vote_id: int
    encryption_pubkey: TEPoint
    k: int
    cipherfields: List[CipherField]
    inputs_hash: int

    def to_dict(self) -> Dict[str, Any]:
        """Circuit input JSON shape: field order is part of the prover contract"""
        return {
            'fields': [str(v) for v in self.fields],
            'num_fields': str(self.config.num_fields),
            'unique_values': str(int(self.config.unique_values)),
            'max_value': str(self.config.max_value),
            'min_value': str(self.config.min_value),
            'max_value_sum': str(self.config.max_value_sum),
            'min_value_sum': str(self.config.min_value_sum),
            'cost_exponent': str(self.config.cost_exponent),
            'cost_from_weight': str(int(self.config.cost_from_weight)),
            'address': str(self.address),
            'weight': str(self.weight),
            'process_id': str(self.process_id),
            'vote_id': str(self.vote_id),
            'encryption_pubkey': list(self.encryption_pubkey.as_strings()),
            'k': str(self.k),
            'cipherfields': [cf.to_strings() for cf in self.cipherfields],
            'inputs_hash': str(self.inputs_hash),
        }

    def to_json(self, indent=None) -> str:
        return json.dumps(self.to_dict(), indent=indent)
