"""
YAML configuration loader.

Loads session configurations from YAML files so ranges, methods and starting
cash can be changed without code changes.
"""
import yaml
from pathlib import Path
from typing import Union

from .config import SimulationConfig
from .defaults import (
    STARTING_CASH,
    DEFAULT_DISPLAY_RANGE,
    DEFAULT_METHOD,
    HORIZON_FRACTION,
)
from .errors import ConfigError


def load_config_from_yaml(yaml_path: Union[str, Path]) -> SimulationConfig:
    """
    Load session configuration from YAML file.

    Expected layout (all keys optional):

        ledger:
          starting_cash: 10000
        forecast:
          range: 1M
          method: hybrid
          sentiment: 0.0
          horizon_fraction: 0.2
        market:
          seed: 42

    Args:
        yaml_path: Path to YAML configuration file

    Returns:
        SimulationConfig object

    Raises:
        FileNotFoundError: If YAML file doesn't exist
        ConfigError: If YAML is empty, malformed, or has invalid values
    """
    yaml_path = Path(yaml_path)

    if not yaml_path.exists():
        raise FileNotFoundError(f"Config file not found: {yaml_path}")

    with open(yaml_path, 'r') as f:
        try:
            config_dict = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_path}: {e}") from e

    if not config_dict:
        raise ConfigError(f"Empty config file: {yaml_path}")
    if not isinstance(config_dict, dict):
        raise ConfigError(f"Config root must be a mapping: {yaml_path}")

    ledger = config_dict.get('ledger') or {}
    forecast = config_dict.get('forecast') or {}
    market = config_dict.get('market') or {}

    return SimulationConfig(
        starting_cash=ledger.get('starting_cash', STARTING_CASH),
        display_range=forecast.get('range', DEFAULT_DISPLAY_RANGE),
        method=forecast.get('method', DEFAULT_METHOD),
        sentiment_score=forecast.get('sentiment', 0.0),
        horizon_fraction=forecast.get('horizon_fraction', HORIZON_FRACTION),
        seed=market.get('seed'),
    )
