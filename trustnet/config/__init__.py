"""Configuration management for trustnet runs."""

from trustnet.config.schema import Config, ExperimentConfig, InputConfig, SamplingConfig, OutputConfig
from trustnet.config.loader import load_config, save_config

__all__ = [
    "Config",
    "ExperimentConfig",
    "InputConfig",
    "SamplingConfig",
    "OutputConfig",
    "load_config",
    "save_config",
]
