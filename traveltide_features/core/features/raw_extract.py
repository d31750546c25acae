# traveltide_features/core/features/raw_extract.py
"""
One row per (active user, session) for downstream distance and clustering work.

Absent values follow a per-column policy that differs from the
aggregated features: text defaults to '', amounts and clicks to 0, while
timestamps, flags, durations, counts and coordinates pass through as null.
"""

import logging

import pandas as pd  # type: ignore

from traveltide_features.utils import calculate_duration
from .features_helpers import coalesce

logger = logging.getLogger(__name__)

# output column -> (source column, default or None to pass nulls through)
EXTRACT_COLUMNS = {
    'user_id': ('user_id', None),
    'trip_id': ('trip_id', ''),
    'birthdate': ('birthdate', None),
    'gender': ('gender', ''),
    'married': ('married', None),
    'has_children': ('has_children', None),
    'home_country': ('home_country', ''),
    'home_city': ('home_city', ''),
    'sign_up_date': ('sign_up_date', None),
    'f_discount': ('flight_discount', None),
    'h_discount': ('hotel_discount', None),
    'fd_amount': ('flight_discount_amount', 0),
    'hd_amount': ('hotel_discount_amount', 0),
    'f_booked': ('flight_booked', None),
    'h_booked': ('hotel_booked', None),
    's_timestamp': ('session_end', None),
    'cancelled': ('cancellation', None),
    'page_clicks': ('page_clicks', 0),
    'h_hotel': ('hotel_name', ''),
    'h_rooms': ('rooms', None),
    'h_timespent': ('hotel_timespent', None),
    'hotel_per_room_usd': ('hotel_per_room_usd', None),
    'f_destination': ('destination', ''),
    'f_return_booked': ('return_flight_booked', None),
    'f_timespent': ('flight_timespent', None),
    'f_checked_bags': ('checked_bags', None),
    'home_airport_lat': ('home_airport_lat', None),
    'home_airport_lon': ('home_airport_lon', None),
    'destination_airport_lat': ('destination_airport_lat', None),
    'destination_airport_lon': ('destination_airport_lon', None),
    'base_fare_usd': ('base_fare_usd', 0),
}

USER_COLUMNS = [
    'user_id', 'birthdate', 'gender', 'married', 'has_children', 'home_country',
    'home_city', 'sign_up_date', 'home_airport_lat', 'home_airport_lon',
]


class RawExtractProjector:
    def run(self, df_session_frame: pd.DataFrame, df_users: pd.DataFrame) -> pd.DataFrame:
        """
        Args:
            df_session_frame (pd.DataFrame): Output of SessionJoiner (active users only).
            df_users (pd.DataFrame): Prepared users table.

        Returns:
            pd.DataFrame: EXTRACT_COLUMNS, ordered by user_id then session_id.
        """
        users = df_users[USER_COLUMNS].drop_duplicates(subset=['user_id'], keep='first')
        df = df_session_frame.merge(users, on='user_id', how='left', validate='many_to_one')

        df = calculate_duration(df, 'check_in_time', 'check_out_time', new_col='hotel_timespent')
        df = calculate_duration(df, 'departure_time', 'return_time', new_col='flight_timespent')

        # Flags of a missing leg stay unknown rather than False
        df['return_flight_booked'] = df['return_flight_booked'].where(df['has_flight_leg'])

        df = df.sort_values(['user_id', 'session_id'], kind='mergesort').reset_index(drop=True)

        extract = pd.DataFrame(index=df.index)
        for out_col, (src_col, default) in EXTRACT_COLUMNS.items():
            extract[out_col] = df[src_col] if default is None else coalesce(df[src_col], default)

        logger.info(f"🗂️ Raw extract built: {len(extract):,} rows, {len(extract.columns)} columns")
        return extract
