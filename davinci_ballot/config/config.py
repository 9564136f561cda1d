import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from ..crypto.errors import ConfigurationError
from ..crypto.poseidon import MAX_INPUTS
from ..utils.utils import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path("config.yaml")


@dataclass
class EngineConfig:
    circuit_capacity: int = 8
    log_level: str = "INFO"
    log_dir: Path = field(default_factory=lambda: Path("logs"))
    enable_benchmarking: bool = False

    def __post_init__(self):
        self.log_dir = Path(self.log_dir)

        if isinstance(self.circuit_capacity, bool) or not isinstance(self.circuit_capacity, int):
            raise ConfigurationError("circuit_capacity must be an integer")
        if not 1 <= self.circuit_capacity <= MAX_INPUTS:
            raise ConfigurationError(
                f"circuit_capacity must be within [1, {MAX_INPUTS}]")
        if not isinstance(self.log_level, str) or \
                not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ConfigurationError(f"Unknown log level: {self.log_level}")

    def setup_logging(self, log_file: Optional[Path] = None):
        """Configure logging at log_level, writing under log_dir unless log_file is given"""
        return setup_logging(self.log_level, log_file=log_file, log_dir=self.log_dir)


def load_config(config_path: Optional[Path] = None) -> EngineConfig:
    """Load configuration from YAML, or return defaults if the file is absent"""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH
    config_path = Path(config_path)

    if not config_path.exists():
        logger.debug(f"No config file at {config_path}, using defaults")
        return EngineConfig()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse config file {config_path}: {e}") from e

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")

    engine_data = config_data.get('ballot_engine', {})
    unknown = set(engine_data) - {'circuit_capacity', 'enable_benchmarking'}
    unknown |= set(config_data) - {'ballot_engine', 'log_level', 'log_dir'}
    if unknown:
        raise ConfigurationError(f"Unknown config keys: {sorted(unknown)}")

    return EngineConfig(
        circuit_capacity=engine_data.get('circuit_capacity', 8),
        enable_benchmarking=engine_data.get('enable_benchmarking', False),
        log_level=config_data.get('log_level', 'INFO'),
        log_dir=Path(config_data.get('log_dir', 'logs')),
    )


def save_config(config: EngineConfig, config_path: Optional[Path] = None):
    """Save configuration to YAML file"""
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    config_data = {
        'ballot_engine': {
            'circuit_capacity': config.circuit_capacity,
            'enable_benchmarking': config.enable_benchmarking,
        },
        'log_level': config.log_level,
        'log_dir': str(config.log_dir),
    }

    with open(config_path, 'w') as f:
        yaml.dump(config_data, f, default_flow_style=False)
