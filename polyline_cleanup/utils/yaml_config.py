# utils/yaml_config.py
import logging
from pathlib import Path
from typing import Iterable

import yaml

logger = logging.getLogger(__name__)


def load_config(config_path: Path) -> dict:
    """Load YAML configuration file from the calling script's directory."""
    try:
        with open(config_path, "r") as f:
            script_config = yaml.safe_load(f)
    except FileNotFoundError:
        logger.error(f"Config file not found at {config_path}")
        raise
    except yaml.YAMLError as e:
        logger.error(f"Error parsing YAML config: {e}")
        raise

    # An empty file parses to None
    return script_config or {}


def check_missing_keys(required_keys: Iterable[str], script_config: dict) -> None:
    missing_keys = [key for key in required_keys if key not in script_config]
    if missing_keys:
        logger.error(f"Missing required config keys: {missing_keys}")
        raise ValueError(f"Missing required config keys: {missing_keys}")
