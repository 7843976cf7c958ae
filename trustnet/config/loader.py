"""Configuration loading and saving utilities."""

from pathlib import Path
from typing import Any, Dict, Union
import yaml
import json

from trustnet.config.schema import Config

_YAML_SUFFIXES = (".yaml", ".yml")


def _unsupported(path: Path) -> ValueError:
    return ValueError(
        f"Unsupported config format: {path.suffix}. Use .yaml, .yml, or .json"
    )


def _read_mapping(config_path: Path) -> Dict[str, Any]:
    if config_path.suffix not in _YAML_SUFFIXES + (".json",):
        raise _unsupported(config_path)

    with open(config_path, "r") as f:
        try:
            if config_path.suffix in _YAML_SUFFIXES:
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ValueError(f"Invalid config file {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config file must contain a mapping at top level: {config_path}")
    return data


def load_config(config_path: Union[str, Path]) -> Config:
    """Load a run configuration from YAML or JSON.

    A relative `input.path` or `output.directory` is resolved against the
    directory holding the config file, so configs can live next to their data.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        Config object

    Raises:
        ValueError: If the format is unsupported or the file is not a mapping
        FileNotFoundError: If config file doesn't exist
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    config = Config(**_read_mapping(config_path))

    base = config_path.parent
    input_path = Path(config.input.path)
    if not input_path.is_absolute():
        config.input.path = str(base / input_path)
    output_dir = Path(config.output.directory)
    if not output_dir.is_absolute():
        config.output.directory = str(base / output_dir)

    return config


def save_config(config: Config, output_path: Union[str, Path]) -> None:
    """Write a configuration as YAML or JSON, chosen by file extension.

    Raises:
        ValueError: If file format is not supported
    """
    output_path = Path(output_path)
    if output_path.suffix not in _YAML_SUFFIXES + (".json",):
        raise _unsupported(output_path)

    data = config.model_dump()
    with open(output_path, "w") as f:
        if output_path.suffix in _YAML_SUFFIXES:
            yaml.safe_dump(data, f, default_flow_style=False, sort_keys=False)
        else:
            json.dump(data, f, indent=2)
