# utils/logging.py
import logging
from pathlib import Path


def setup_logging(script_name: str, data_dir: Path) -> logging.Logger:
    """Log INFO to console and DEBUG to <data_dir>/logs/<script_name>.log."""
    log_dir = Path(data_dir) / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    log_path = log_dir / f"{script_name}.log"

    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler()
    console_handler.set_name(f"{script_name}_console")
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(formatter)

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.set_name(f"{script_name}_file")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Replace handlers left by an earlier call for the same script
    own_names = {console_handler.get_name(), file_handler.get_name()}
    for handler in list(root_logger.handlers):
        if handler.get_name() in own_names:
            root_logger.removeHandler(handler)
            handler.close()

    root_logger.addHandler(console_handler)
    root_logger.addHandler(file_handler)

    logger = logging.getLogger(script_name)
    logger.debug(f"Logging to {log_path}")
    return logger
