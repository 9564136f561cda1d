"""Ballot proof input assembly."""

from .types import BallotConfig, BallotInputs, ProcessData, hex_to_decimal
from .builder import (
    BallotBuilder,
    DEFAULT_CIRCUIT_CAPACITY,
    compute_vote_id,
    flatten_public_inputs,
)

__all__ = [
    'BallotBuilder',
    'BallotConfig',
    'BallotInputs',
    'ProcessData',
    'DEFAULT_CIRCUIT_CAPACITY',
    'compute_vote_id',
    'flatten_public_inputs',
    'hex_to_decimal',
]
