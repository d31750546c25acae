# traveltide_features/core/features/user_behavior_indices.py

import logging

import pandas as pd  # type: ignore

from .features_helpers import safe_divide

logger = logging.getLogger(__name__)


class UserBehaviorIndices:
    """
    Derives rates and composite indices from the behavior counts.
    Every ratio is 0 when its denominator is 0.
    """

    REQUIRED_COLUMNS = [
        'user_id', 'total_cancellations', 'total_trips', 'total_sessions',
        'total_only_flights', 'total_only_hotels', 'total_together',
        'average_clicks', 'total_clicks', 'average_checked_bags',
        'flight_discount_proportion', 'hotel_discount_proportion', 'both_discount_proportion',
    ]

    INDEX_COLUMNS = [
        'user_id', 'average_checked_bags', 'total_cancellation_rate', 'engagement_index',
        'conversion_rate', 'prefers_flights', 'prefers_hotels', 'prefers_both',
        'discount_responsiveness', 'click_efficiency',
    ]

    def __init__(self, df: pd.DataFrame):
        """
        Parameters
        ----------
        df : pd.DataFrame
            Output of UserBehaviorMetrics
        """
        missing = [col for col in self.REQUIRED_COLUMNS if col not in df.columns]
        if missing:
            raise ValueError(f"❌ Behavior metrics are missing columns: {missing}")
        self.df = df.copy()

    def compute_all_indices(self) -> pd.DataFrame:
        """
        Compute all behavior indices.

        Returns
        -------
        pd.DataFrame
            user_id, average_checked_bags and the derived indices
        """
        self._compute_cancellation_rate()
        self._compute_engagement_index()
        self._compute_conversion_rate()
        self._compute_preferences()
        self._compute_discount_responsiveness()
        self._compute_click_efficiency()

        logger.info(f"🧭 Behavior indices complete: shape={self.df.shape}")
        return self.df[self.INDEX_COLUMNS]

    def _compute_cancellation_rate(self) -> None:
        """Cancelled trips / total trips"""
        self.df['total_cancellation_rate'] = safe_divide(self.df['total_cancellations'], self.df['total_trips'])

    def _compute_engagement_index(self) -> None:
        """(average clicks × total trips) / total clicks"""
        self.df['engagement_index'] = safe_divide(
            self.df['average_clicks'] * self.df['total_trips'],
            self.df['total_clicks']
        )

    def _compute_conversion_rate(self) -> None:
        """Trips / sessions"""
        self.df['conversion_rate'] = safe_divide(self.df['total_trips'], self.df['total_sessions'])

    def _compute_preferences(self) -> None:
        """Share of trips that were flight-only, hotel-only, or flight + hotel"""
        for column, count_column in [
            ('prefers_flights', 'total_only_flights'),
            ('prefers_hotels', 'total_only_hotels'),
            ('prefers_both', 'total_together'),
        ]:
            self.df[column] = safe_divide(self.df[count_column], self.df['total_trips'])

    def _compute_discount_responsiveness(self) -> None:
        """Discount proportions weighted by the matching booking-mix counts, per trip"""
        weighted = (
            self.df['flight_discount_proportion'] * self.df['total_only_flights']
            + self.df['hotel_discount_proportion'] * self.df['total_only_hotels']
            + self.df['both_discount_proportion'] * self.df['total_together']
        )
        self.df['discount_responsiveness'] = safe_divide(weighted, self.df['total_trips'])

    def _compute_click_efficiency(self) -> None:
        """Clicks per trip"""
        self.df['click_efficiency'] = safe_divide(self.df['total_clicks'], self.df['total_trips'])
