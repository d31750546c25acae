# traveltide_features/core/features/user_behavior_metrics.py
"""Module to compute user behavior metrics from session and trip data."""

# Standard library imports
import logging

# Third-party imports
import pandas as pd  # type: ignore

# Imported helper functions
from .features_helpers import (
    mean_defaulting_nulls,  # Discount amounts: absent counts as 0
    mean_ignoring_nulls,    # Checked bags: sessions without a flight leg drop out
)

logger = logging.getLogger(__name__)

SESSION_FLAGS = ['flight_booked', 'hotel_booked', 'flight_discount', 'hotel_discount', 'cancellation']


class UserBehaviorMetrics:
    """
    Computes per-user discount, booking-mix, click and cancellation counts
    over every session of the active users.
    """

    def enrich_sessions(self, df_session_frame: pd.DataFrame) -> pd.DataFrame:
        """
        Adds per-session indicator columns:
        - only-flight / only-hotel / both discount usage (mutually exclusive).
        - booking mix of sessions that carry a trip_id.
        - cancelled trip id (trip_id when the session is a cancellation).
        """
        df = df_session_frame.copy()

        # Absent session flags count as not set
        for col in SESSION_FLAGS:
            df[col] = df[col].fillna(False).astype(bool)

        has_trip = df['trip_id'].notna()
        positive_flight_discount = df['flight_discount'] & (df['flight_discount_amount'] > 0)
        positive_hotel_discount = df['hotel_discount'] & (df['hotel_discount_amount'] > 0)

        # --- Discount usage ---
        df['only_flight_discount'] = (positive_flight_discount & ~df['hotel_discount']).astype(int)
        df['only_hotel_discount'] = (positive_hotel_discount & ~df['flight_discount']).astype(int)
        df['both_discounts'] = (positive_flight_discount & positive_hotel_discount).astype(int)

        # --- Booking mix (only sessions that belong to a trip) ---
        df['only_flight_trip'] = (has_trip & df['flight_booked'] & ~df['hotel_booked']).astype(int)
        df['only_hotel_trip'] = (has_trip & df['hotel_booked'] & ~df['flight_booked']).astype(int)
        df['together_trip'] = (has_trip & df['flight_booked'] & df['hotel_booked']).astype(int)
        df['is_trip'] = has_trip.astype(int)

        # --- Cancellations: counted once per trip ---
        df['cancelled_trip_id'] = df['trip_id'].where(df['cancellation'] & has_trip)

        # --- Checked bags only exist on flight legs ---
        df['leg_checked_bags'] = df['checked_bags'].where(df['has_flight_leg'])
        return df

    def aggregate_user_sessions(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Aggregates the enriched sessions by user_id.

        Returns:
            pd.DataFrame: One row per user with averages, proportions and counts.
        """
        return df.groupby('user_id').agg(
            # 1. DISCOUNTS
            average_flight_discount=('flight_discount_amount', mean_defaulting_nulls),
            average_hotel_discount=('hotel_discount_amount', mean_defaulting_nulls),
            flight_discount_proportion=('only_flight_discount', 'mean'),
            hotel_discount_proportion=('only_hotel_discount', 'mean'),
            both_discount_proportion=('both_discounts', 'mean'),

            # 2. BOOKING MIX
            total_only_flights=('only_flight_trip', 'sum'),
            total_only_hotels=('only_hotel_trip', 'sum'),
            total_together=('together_trip', 'sum'),
            total_trips=('is_trip', 'sum'),
            total_sessions=('session_id', 'size'),

            # 3. ENGAGEMENT
            average_clicks=('page_clicks', 'mean'),
            total_clicks=('page_clicks', 'sum'),

            # 4. CANCELLATIONS & LOGISTICS
            total_cancellations=('cancelled_trip_id', 'nunique'),
            average_checked_bags=('leg_checked_bags', mean_ignoring_nulls),
        )

    def finalize_user_table(self, active_users: pd.Series, user_base: pd.DataFrame) -> pd.DataFrame:
        """
        Aligns the aggregates to the active user set (exactly one row per user)
        and applies zero defaults where a user has nothing to aggregate.
        """
        user_base = user_base.reindex(pd.Index(active_users, name='user_id'))

        count_cols = [
            'total_only_flights', 'total_only_hotels', 'total_together',
            'total_trips', 'total_sessions', 'total_clicks', 'total_cancellations',
        ]
        ratio_cols = [
            'average_flight_discount', 'average_hotel_discount',
            'flight_discount_proportion', 'hotel_discount_proportion', 'both_discount_proportion',
            'average_clicks', 'average_checked_bags',
        ]
        user_base[count_cols] = user_base[count_cols].fillna(0).astype(int)
        user_base[ratio_cols] = user_base[ratio_cols].astype(float).fillna(0.0)
        return user_base.reset_index()

    def run(self, active_users: pd.Series, df_session_frame: pd.DataFrame) -> pd.DataFrame:
        """
        Executes the behavior metrics computation.

        Returns:
            pd.DataFrame: The behavior metrics per active user.
        """
        logger.info("1/3: Enriching session data...")
        df = self.enrich_sessions(df_session_frame)

        logger.info("2/3: Aggregating session metrics...")
        user_base = self.aggregate_user_sessions(df)

        logger.info("3/3: Finalizing user table...")
        final_df = self.finalize_user_table(active_users, user_base)

        logger.info(f"📊 Behavior metrics complete: shape={final_df.shape}")
        return final_df
