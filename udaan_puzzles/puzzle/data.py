from typing import Dict, List, Optional, Union
import json
import logging
import os
import sys

logger = logging.getLogger(__name__)

# Define DATA_DIR using the sys._MEIPASS check so frozen builds find the bundled data
try:
    # PyInstaller creates a temp folder and stores path in _MEIPASS
    base_path = os.path.join(sys._MEIPASS, "udaan_puzzles")
except AttributeError:
    # Not frozen, resolve relative to the package root
    base_path = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
DATA_DIR = os.path.join(base_path, "game_data")


def load_json_data(filename: str, data_dir: Optional[str] = None) -> Union[Dict, List]:
    """Loads one JSON data file from the game_data directory (or data_dir if given)."""
    directory = data_dir or DATA_DIR
    filepath = os.path.join(directory, filename)
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            return json.load(f)
    except FileNotFoundError:
        logger.error(f"Data file not found: {filepath}")
        # Propagate error upwards, as data is critical
        raise FileNotFoundError(f"Required data file missing: {filepath}")
    except json.JSONDecodeError as e:
        logger.error(f"Error decoding JSON from {filepath}: {e}")
        raise ValueError(f"Invalid JSON format in {filepath}") from e
