from pathlib import Path

from polyline_cleanup.config import DATA_DIR
from polyline_cleanup.utils import check_missing_keys, load_config, setup_logging

script_name = Path(__file__).parent.name
logger = setup_logging(script_name, DATA_DIR)

from polyline_cleanup.clean_polylines import PolylineCleaningContext, clean_polylines

logger.info("Starting polyline cleaning pipeline")

# Get script specific configs
CONFIG_PATH = Path(__file__).parent.resolve() / "config.yaml"

logger.info(f"Loading config from: {CONFIG_PATH}")
script_config = load_config(CONFIG_PATH)

required_keys = [
    "input_filename",
    "output_filename",
]
check_missing_keys(required_keys, script_config)

INPUT_FILENAME = script_config["input_filename"]
OUTPUT_FILENAME = script_config["output_filename"]
DIMENSION = int(script_config.get("dimension", 3))
WRAP_AROUND = bool(script_config.get("wrap_around", False))

logger.info(f"Data directory: {DATA_DIR}")

# Clean polylines
context = PolylineCleaningContext(
    data_dir=DATA_DIR,
    input_filename=INPUT_FILENAME,
    output_filename=OUTPUT_FILENAME,
    dimension=DIMENSION,
    wrap_around=WRAP_AROUND,
)

# Task main function
clean_polylines(context)
