"""
Ballot cryptographic encoding for the DAVINCI voting protocol
Builds ballot proof circuit inputs: ElGamal ciphertexts, vote ID and inputs hash
"""

from .ballot import (
    BallotBuilder,
    BallotConfig,
    BallotInputs,
    ProcessData,
    hex_to_decimal,
)
from .crypto import (
    RTEPoint,
    TEPoint,
    rte_to_te,
    te_to_rte,
    BallotEncodingError,
    SizingError,
    DomainError,
    DegenerateInputError,
    ConfigurationError,
)
from .config import EngineConfig, load_config, save_config

__version__ = "0.1.0"

__all__ = [
    # Assembly
    'BallotBuilder',
    'BallotConfig',
    'BallotInputs',
    'ProcessData',
    'hex_to_decimal',

    # Points
    'RTEPoint',
    'TEPoint',
    'rte_to_te',
    'te_to_rte',

    # Configuration
    'EngineConfig',
    'load_config',
    'save_config',

    # Exceptions
    'BallotEncodingError',
    'SizingError',
    'DomainError',
    'DegenerateInputError',
    'ConfigurationError',
]
