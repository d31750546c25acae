# traveltide_features/core/features/user_feature_pipeline.py
"""
Pipeline to turn raw users, sessions, flights and hotels into one feature row per active user.

Stages run strictly in dependency order, each materialized once:
1. ActiveUserFilter      - cohort of users active since the configured date
2. SessionJoiner         - sessions of the cohort joined to flight/hotel legs
3. SpendAggregator       - hotel/flight spend totals and average daily hotel spend
4. HotelSpendScaler      - global min/max scaling of the average daily hotel spend
5. UserBehaviorMetrics   - discount, booking-mix, click and cancellation metrics
6. UserBehaviorIndices   - rates and composite indices
7. FeatureAssembler      - final table incl. hotel hunter index

The raw extract (one row per active user session) shares stages 1-2 only.
"""

import logging
from typing import Optional

import pandas as pd  # type: ignore

from traveltide_features.core.processing import InputPreparer
from .active_users import ActiveUserFilter, PipelineConfig
from .session_frame import SessionJoiner
from .spend_metrics import SpendAggregator
from .hotel_spend_scaler import HotelSpendScaler
from .user_behavior_metrics import UserBehaviorMetrics
from .user_behavior_indices import UserBehaviorIndices
from .feature_assembler import FeatureAssembler
from .raw_extract import RawExtractProjector

logger = logging.getLogger(__name__)


class UserFeaturePipeline:
    def __init__(
        self,
        df_users: pd.DataFrame,
        df_sessions: pd.DataFrame,
        df_flights: pd.DataFrame,
        df_hotels: pd.DataFrame,
        config: Optional[PipelineConfig] = None,
    ):
        self.config = config or PipelineConfig()

        prepared = InputPreparer().prepare(df_users, df_sessions, df_flights, df_hotels)
        self.df_users = prepared['users']
        self.df_sessions = prepared['sessions']
        self.df_flights = prepared['flights']
        self.df_hotels = prepared['hotels']

        self.scaler = HotelSpendScaler()

        # Stage outputs
        self.active_users: Optional[pd.Series] = None
        self.session_frame: Optional[pd.DataFrame] = None
        self.spend: Optional[pd.DataFrame] = None
        self.scaled: Optional[pd.DataFrame] = None
        self.behavior: Optional[pd.DataFrame] = None
        self.indices: Optional[pd.DataFrame] = None
        self.features: Optional[pd.DataFrame] = None

    def _prepare_cohort(self) -> None:
        if self.session_frame is not None:
            return
        self.active_users = ActiveUserFilter(self.config).run(self.df_sessions)
        self.session_frame = SessionJoiner().run(
            self.active_users, self.df_sessions, self.df_flights, self.df_hotels
        )

    def run(self) -> pd.DataFrame:
        """
        Execute the full feature engineering pipeline.

        Returns:
            pd.DataFrame: One feature record per active user, ordered by user_id.
        """
        logger.info("🔧 Starting user feature pipeline...")

        # Step 1-2: Cohort and session frame
        self._prepare_cohort()

        # Step 3-4: Spend and scaled spend (the scaler needs every user's spend first)
        self.spend = SpendAggregator().run(self.active_users, self.session_frame)
        self.scaled = self.scaler.run(self.spend)

        # Step 5-6: Behavior metrics and indices
        self.behavior = UserBehaviorMetrics().run(self.active_users, self.session_frame)
        self.indices = UserBehaviorIndices(self.behavior).compute_all_indices()

        # Step 7: Final assembly
        self.features = FeatureAssembler().run(
            self.active_users,
            self.df_users,
            self.session_frame,
            self.spend,
            self.scaled,
            self.behavior,
            self.indices,
        )

        logger.info(f"✅ Feature pipeline complete: {len(self.features):,} users")
        return self.features

    def raw_extract(self) -> pd.DataFrame:
        """
        Build the per-session raw extract for the active cohort.

        Returns:
            pd.DataFrame: One row per (active user, session).
        """
        self._prepare_cohort()
        return RawExtractProjector().run(self.session_frame, self.df_users)
