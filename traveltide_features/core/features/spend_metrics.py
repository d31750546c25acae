# traveltide_features/core/features/spend_metrics.py
"""Per-user spend totals and the average daily hotel spend (ADS) proxy."""

import logging

import pandas as pd  # type: ignore

from .features_helpers import mean_ignoring_nulls

logger = logging.getLogger(__name__)


class SpendAggregator:
    """
    Aggregates hotel and flight spend per active user.

    Absent legs contribute nothing to the totals. ``ads_hotel`` averages
    hotel_discount_amount × hotel_per_room_usd × rooms over the sessions where
    every factor is present, and stays NaN for a user without such a session.
    """

    def run(self, active_users: pd.Series, df_session_frame: pd.DataFrame) -> pd.DataFrame:
        """
        Args:
            active_users (pd.Series): Active user ids.
            df_session_frame (pd.DataFrame): Output of SessionJoiner.

        Returns:
            pd.DataFrame: One row per active user with total_hotel_usd_spent,
            total_flight_usd_spent, total_usd_spent and ads_hotel.
        """
        df = df_session_frame.copy()

        # hotel_per_room_usd already covers the nightly stay cost per room
        df['hotel_usd'] = df['hotel_per_room_usd'] * df['rooms']
        df['ads_hotel_term'] = df['hotel_discount_amount'] * df['hotel_usd']

        spend = df.groupby('user_id').agg(
            total_hotel_usd_spent=('hotel_usd', 'sum'),
            total_flight_usd_spent=('base_fare_usd', 'sum'),
            ads_hotel=('ads_hotel_term', mean_ignoring_nulls),
        )

        spend = spend.reindex(pd.Index(active_users, name='user_id'))
        spend['total_hotel_usd_spent'] = spend['total_hotel_usd_spent'].fillna(0).astype(float)
        spend['total_flight_usd_spent'] = spend['total_flight_usd_spent'].fillna(0).astype(float)
        spend['ads_hotel'] = spend['ads_hotel'].astype(float)
        spend['total_usd_spent'] = spend['total_hotel_usd_spent'] + spend['total_flight_usd_spent']

        spend = spend.reset_index()[
            ['user_id', 'total_hotel_usd_spent', 'total_flight_usd_spent', 'total_usd_spent', 'ads_hotel']
        ]
        logger.info(
            f"💵 Spend metrics complete: shape={spend.shape}, "
            f"users without ADS={int(spend['ads_hotel'].isna().sum())}"
        )
        return spend
