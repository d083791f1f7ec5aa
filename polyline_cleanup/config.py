from pathlib import Path
from dotenv import load_dotenv
import os

# Load environment variables from .env file
load_dotenv()

# Get the DATA path from the .env file, defaulting to the working directory
DATA_DIR = Path(os.getenv("DATA_DIR", ".")).resolve()

if not DATA_DIR.exists():
    raise ValueError(f"DATA_DIR path '{DATA_DIR}' from .env does not exist.")
