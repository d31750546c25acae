# traveltide_features/utils.py

import os
import logging
import pandas as pd  # type: ignore
import yaml  # type: ignore
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)


# ============================================================
# 📁 DIRECTORY MANAGEMENT
# ============================================================

# Absolute path to this file
current_file = os.path.abspath(__file__)

# Project root = 2 levels above (traveltide_features/utils.py → traveltide_features → project)
project_root = os.path.dirname(os.path.dirname(current_file))

# --- Project-level paths ---
data_path = os.path.join(project_root, "data")
config_path = os.path.join(project_root, "config")

# --- Data directories ---
csv_path = os.path.join(data_path, "csv")
sql_path = os.path.join(data_path, "sql")

raw_data_path = os.path.join(csv_path, "raw")
processed_data_path = os.path.join(csv_path, "processed")

# processed subfolders
feature_processed_path = os.path.join(processed_data_path, "features")


# ============================================================
# ⚙️ CONFIG UTILITIES
# ============================================================

DEFAULT_CONFIG: Dict[str, Any] = {
    "pipeline": {
        "activity_start": "2023-01-04",
        "min_sessions": 7,
    },
    "input": {
        "source": "csv",
        "chunk_size": None,
    },
    "output": {
        "features_file": "user_features.csv",
        "raw_extract_file": "user_session_extract.csv",
    },
}


def load_yaml(path: str) -> Dict[str, Any]:
    """General YAML loader with validation."""
    if not os.path.exists(path):
        raise FileNotFoundError(f"❌ YAML file not found: {path}")

    try:
        with open(path, "r") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"❌ Invalid YAML in {path}: {e}")

    if config is None:
        raise ValueError(f"❌ YAML file empty: {path}")

    logger.info(f"✅ Loaded YAML: {path}")
    return config


def load_config(config_file: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the main YAML config from the config/ directory.

    Sections missing from the file are filled from DEFAULT_CONFIG. A missing
    default config file falls back to the defaults entirely; an explicitly
    requested file that cannot be read is an error.
    """
    default_path = os.path.join(config_path, "config.yaml")
    final_path = config_file or default_path

    try:
        loaded = load_yaml(final_path)
    except FileNotFoundError:
        if config_file:
            raise
        logger.warning(f"⚠️ Config '{final_path}' not found, using default configuration")
        loaded = {}

    merged: Dict[str, Any] = {}
    for section, defaults in DEFAULT_CONFIG.items():
        merged[section] = {**defaults, **(loaded.get(section) or {})}
    return merged


# ============================================================
# 📝 LOGGING
# ============================================================

def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the package logger once with a stream handler."""
    root = logging.getLogger("traveltide_features")
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        handler.setFormatter(formatter)
        root.addHandler(handler)
    root.setLevel(level.upper())
    return root


# ============================================================
# 🧮 DATAFRAME UTILITIES
# ============================================================

TRUE_VALUES = {"true", "t", "1", "yes", "y"}
FALSE_VALUES = {"false", "f", "0", "no", "n"}


def to_datetime(df: pd.DataFrame, cols: List[str]) -> pd.DataFrame:
    for col in cols:
        if col in df.columns:
            df[col] = pd.to_datetime(df[col], errors="coerce", format="mixed")
    return df


def to_numeric(df: pd.DataFrame, cols: List[str]) -> pd.DataFrame:
    for col in cols:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")
    return df


def _parse_flag(value: Any) -> Any:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return pd.NA
    if isinstance(value, str):
        lowered = value.strip().lower()
        if not lowered:
            return pd.NA
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
        raise ValueError(f"❌ Cannot interpret '{value}' as a boolean flag")
    return bool(value)


def to_boolean(df: pd.DataFrame, cols: List[str]) -> pd.DataFrame:
    """Coerce flag columns to the nullable "boolean" dtype; absent flags stay <NA>."""
    for col in cols:
        if col in df.columns:
            df[col] = df[col].map(_parse_flag).astype("boolean")
    return df


def _key_to_str(value: Any) -> Any:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return None
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def to_join_key(df: pd.DataFrame, cols: List[str]) -> pd.DataFrame:
    """Normalize join keys to strings so numeric and textual ids match; absent keys become None."""
    for col in cols:
        if col in df.columns:
            df[col] = df[col].map(_key_to_str).astype(object)
    return df


def calculate_duration(df: pd.DataFrame, start_col: str, end_col: str,
                       new_col: str = "duration") -> pd.DataFrame:
    """Add end - start as a timedelta column; NaT where either side is absent."""
    df = to_datetime(df, [start_col, end_col])
    df[new_col] = df[end_col] - df[start_col]
    return df


# ============================================================
# 🔍 PATH RESOLVER
# ============================================================

def get_path(path_type: str) -> str:
    """
    Convenient path resolver with automatic directory creation.

    Returns any project directory path based on a keyword.
    """

    paths = {
        # Project root structure
        "project": project_root,

        # Config
        "config": config_path,

        # Data-level folders
        "data": data_path,
        "csv": csv_path,
        "sql": sql_path,
        "raw": raw_data_path,
        "processed": processed_data_path,

        # Processed subfolders
        "features_processed": feature_processed_path,
    }

    if path_type not in paths:
        raise ValueError(
            f"❌ Unknown path type '{path_type}'. Allowed values: {list(paths.keys())}"
        )

    resolved = os.path.abspath(paths[path_type])
    os.makedirs(resolved, exist_ok=True)
    return resolved
