# traveltide_features/__init__.py
"""
TravelTide user feature pipeline
"""
__version__ = "0.1.0"

from .db import Database
from .utils import (
    # Directory paths
    project_root,
    config_path,
    raw_data_path,
    processed_data_path,
    feature_processed_path,
    get_path,

    # Config
    load_config,
    load_yaml,

    # Logging
    setup_logging,
)

from .core import (
    # Preparing data
    DataLoader,
    InputPreparer,

    # Feature Metrics
    ActiveUserFilter,
    PipelineConfig,
    SessionJoiner,
    SpendAggregator,
    HotelSpendScaler,
    UserBehaviorMetrics,
    UserBehaviorIndices,
    FeatureAssembler,
    RawExtractProjector,
    UserFeaturePipeline,

    # Export
    DataExporter,
)


__all__ = [
    # Database
    "Database",

    # Paths
    "project_root",
    "config_path",
    "raw_data_path",
    "processed_data_path",
    "feature_processed_path",
    "get_path",

    # Config
    "load_config",
    "load_yaml",

    # Logging
    "setup_logging",

    # Preparing Data
    "DataLoader",
    "InputPreparer",

    # Feature Metrics
    "ActiveUserFilter",
    "PipelineConfig",
    "SessionJoiner",
    "SpendAggregator",
    "HotelSpendScaler",
    "UserBehaviorMetrics",
    "UserBehaviorIndices",
    "FeatureAssembler",
    "RawExtractProjector",
    "UserFeaturePipeline",

    # Export
    "DataExporter",
]
