"""Configuration management for the ballot encoding engine."""

from .config import EngineConfig, load_config, save_config

__all__ = ['EngineConfig', 'load_config', 'save_config']
