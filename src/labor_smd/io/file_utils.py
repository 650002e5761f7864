# labor_smd/io/file_utils.py
"""
File I/O utilities for loading configuration and saving results.

This module provides safe file operations with proper error handling
and logging for configuration files and estimation summaries.

Example:
    >>> from labor_smd.io.file_utils import load_json_file, save_json_file
    >>> data = load_json_file("hyperparam/smd_params.json")
    >>> save_json_file(data, "results/smd/config_backup.json")
"""

import json
import os
import sys
import logging
from typing import Dict, Any

import numpy as np

logger = logging.getLogger(__name__)


def load_json_file(filename: str) -> Dict[str, Any]:
    """
    Safely load a JSON file with comprehensive error handling.

    Args:
        filename: Path to the JSON file.

    Returns:
        Parsed JSON data as a dictionary.

    Raises:
        SystemExit: If file not found, invalid JSON, or read error.
    """
    if not os.path.exists(filename):
        logger.error(f"File '{filename}' not found.")
        sys.exit(1)

    try:
        with open(filename, 'r') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"Invalid JSON in {filename}: {e}")
        sys.exit(1)
    except OSError as e:
        logger.error(f"Error reading {filename}: {e}")
        sys.exit(1)


def to_jsonable(obj: Any) -> Any:
    """Recursively convert NumPy containers and scalars to JSON-native types."""
    if isinstance(obj, dict):
        return {str(k): to_jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(v) for v in obj]
    if isinstance(obj, np.ndarray):
        return [to_jsonable(v) for v in obj.tolist()]
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        return float(obj)
    return obj


def save_json_file(data: Dict[str, Any], filename: str) -> None:
    """
    Save data to a JSON file with directory creation.

    NumPy arrays and scalars are converted to native types first; NaN and
    infinity are written as the JavaScript literals ``NaN``/``Infinity``.

    Args:
        data: Dictionary to serialize to JSON.
        filename: Target file path.

    Raises:
        IOError: If write operation fails.
    """
    os.makedirs(os.path.dirname(filename) or ".", exist_ok=True)
    try:
        with open(filename, 'w') as f:
            json.dump(to_jsonable(data), f, indent=4)
        logger.info(f"Saved data to {filename}")
    except IOError as e:
        logger.error(f"Failed to save to {filename}: {e}")
        raise
