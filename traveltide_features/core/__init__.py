# traveltide_features/core/__init__.py
"""
Core module initializer for the TravelTide feature pipeline.

Provides input loading/preparation, the feature stages, and output export.
"""

from .processing import DataLoader, InputPreparer
from .features import (
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
)
from .export import DataExporter

__all__ = [
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
