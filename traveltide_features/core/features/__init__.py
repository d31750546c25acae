from .features_helpers import (
    mean_ignoring_nulls,
    mean_defaulting_nulls,
    safe_divide,
    coalesce,
)
from .active_users import ActiveUserFilter, PipelineConfig
from .session_frame import SessionJoiner
from .spend_metrics import SpendAggregator
from .hotel_spend_scaler import HotelSpendScaler
from .user_behavior_metrics import UserBehaviorMetrics
from .user_behavior_indices import UserBehaviorIndices
from .feature_assembler import FeatureAssembler, OUTPUT_COLUMNS
from .raw_extract import RawExtractProjector, EXTRACT_COLUMNS
from .user_feature_pipeline import UserFeaturePipeline

__all__ = [
    # Feature helper functions
    'mean_ignoring_nulls',
    'mean_defaulting_nulls',
    'safe_divide',
    'coalesce',

    # Pipeline stages
    'ActiveUserFilter',
    'PipelineConfig',
    'SessionJoiner',
    'SpendAggregator',
    'HotelSpendScaler',
    'UserBehaviorMetrics',
    'UserBehaviorIndices',
    'FeatureAssembler',
    'OUTPUT_COLUMNS',
    'RawExtractProjector',
    'EXTRACT_COLUMNS',
    'UserFeaturePipeline'

]
