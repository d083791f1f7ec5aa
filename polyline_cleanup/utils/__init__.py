from .logging import setup_logging
from .yaml_config import check_missing_keys, load_config

__all__ = [
    # Logging
    "setup_logging",
    # Config
    "load_config",
    "check_missing_keys",
]
