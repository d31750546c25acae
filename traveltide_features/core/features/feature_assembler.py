# traveltide_features/core/features/feature_assembler.py
"""Assembly of the final one-row-per-user feature table."""

import logging

import pandas as pd  # type: ignore

from .features_helpers import coalesce

logger = logging.getLogger(__name__)

PROFILE_COLUMNS = ['user_id', 'birthdate', 'gender', 'married', 'has_children', 'home_country', 'home_city']

# Profile text fields shown as empty strings when unknown
TEXT_PROFILE_COLUMNS = ['gender', 'home_country', 'home_city']

OUTPUT_COLUMNS = [
    'user_id', 'birthdate', 'gender', 'married', 'has_children', 'home_country', 'home_city',
    'latest_session',
    'total_trips', 'total_cancellations', 'total_sessions',
    'total_cancellation_rate', 'average_checked_bags',
    'prefers_flights', 'prefers_hotels', 'prefers_both',
    'conversion_rate', 'average_clicks', 'total_clicks', 'click_efficiency',
    'average_hotel_discount', 'average_flight_discount',
    'flight_discount_proportion', 'hotel_discount_proportion', 'both_discount_proportion',
    'discount_responsiveness',
    'total_hotel_usd_spent', 'total_flight_usd_spent', 'total_usd_spent',
    'hotel_hunter_index',
]


class FeatureAssembler:
    def build_profile(self, active_users: pd.Series, df_users: pd.DataFrame) -> pd.DataFrame:
        base = pd.DataFrame({'user_id': active_users})

        profiles = df_users[PROFILE_COLUMNS]
        duplicated = profiles['user_id'].duplicated(keep='first')
        if duplicated.any():
            logger.warning(f"⚠️ {int(duplicated.sum())} duplicate user profiles ignored")
            profiles = profiles[~duplicated]

        df = base.merge(profiles, on='user_id', how='left', validate='one_to_one')

        missing = ~df['user_id'].isin(profiles['user_id'])
        if missing.any():
            logger.warning(f"⚠️ {int(missing.sum())} active users have no profile row")

        for col in TEXT_PROFILE_COLUMNS:
            df[col] = coalesce(df[col], '')
        return df

    def latest_session(self, df_session_frame: pd.DataFrame) -> pd.DataFrame:
        """Latest session end per user, date part only."""
        latest = pd.to_datetime(df_session_frame.groupby('user_id')['session_end'].max())
        return latest.dt.date.rename('latest_session').reset_index()

    def run(
        self,
        active_users: pd.Series,
        df_users: pd.DataFrame,
        df_session_frame: pd.DataFrame,
        df_spend: pd.DataFrame,
        df_scaled: pd.DataFrame,
        df_behavior: pd.DataFrame,
        df_indices: pd.DataFrame,
    ) -> pd.DataFrame:
        """
        Joins profile, latest session, spend, scaled spend, behavior metrics and
        indices into exactly one record per active user, ordered by user_id.

        Returns:
            pd.DataFrame: The feature table with OUTPUT_COLUMNS.
        """
        df = self.build_profile(active_users, df_users)
        df = df.merge(self.latest_session(df_session_frame), on='user_id', how='left', validate='one_to_one')
        df = df.merge(df_behavior.drop(columns=['average_checked_bags']), on='user_id', how='left', validate='one_to_one')
        df = df.merge(df_indices, on='user_id', how='left', validate='one_to_one')
        df = df.merge(df_spend, on='user_id', how='left', validate='one_to_one')
        df = df.merge(df_scaled[['user_id', 'scaled_hotel_ads']], on='user_id', how='left', validate='one_to_one')

        # Hotel hunter: users concentrating on discounted, high-value hotel stays
        df['hotel_hunter_index'] = (
            df['scaled_hotel_ads'].fillna(0)
            * df['hotel_discount_proportion'].fillna(0)
            * df['average_hotel_discount'].fillna(0)
        )

        df = df[OUTPUT_COLUMNS].sort_values('user_id', kind='mergesort').reset_index(drop=True)

        if len(df) != len(active_users) or df['user_id'].duplicated().any():
            raise ValueError(
                f"❌ Expected one feature row per active user ({len(active_users)}), got {len(df)}"
            )

        logger.info(f"🧩 Feature table assembled: {len(df.columns)} features for {len(df):,} users")
        return df
