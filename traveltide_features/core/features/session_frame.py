# traveltide_features/core/features/session_frame.py

import logging

import pandas as pd  # type: ignore

logger = logging.getLogger(__name__)

FLIGHT_COLUMNS = [
    'trip_id', 'base_fare_usd', 'destination',
    'destination_airport_lat', 'destination_airport_lon',
    'checked_bags', 'departure_time', 'return_time', 'return_flight_booked',
]
HOTEL_COLUMNS = [
    'trip_id', 'hotel_name', 'rooms',
    'check_in_time', 'check_out_time', 'hotel_per_room_usd',
]


class SessionJoiner:
    """
    Builds the session-level frame shared by all aggregation stages: every session
    of an active user, left joined to its flight and hotel legs through trip_id.

    Leg indicator columns ``has_flight_leg`` / ``has_hotel_leg`` record whether a
    joined leg exists, independent of which leg columns happen to be null.
    """

    def run(self, active_users: pd.Series, df_sessions: pd.DataFrame,
            df_flights: pd.DataFrame, df_hotels: pd.DataFrame) -> pd.DataFrame:
        sessions = df_sessions[df_sessions['user_id'].isin(active_users)]

        flights = df_flights[FLIGHT_COLUMNS].assign(has_flight_leg=True)
        hotels = df_hotels[HOTEL_COLUMNS].assign(has_hotel_leg=True)

        df = sessions.merge(flights, on='trip_id', how='left', validate='many_to_one')
        df = df.merge(hotels, on='trip_id', how='left', validate='many_to_one')
        df['has_flight_leg'] = df['has_flight_leg'].eq(True)
        df['has_hotel_leg'] = df['has_hotel_leg'].eq(True)

        if len(df) != len(sessions):
            raise ValueError(
                f"❌ Session join changed the row count ({len(sessions)} → {len(df)}); "
                "flight/hotel legs must be unique per trip_id"
            )

        df = df.sort_values(['user_id', 'session_id'], kind='mergesort').reset_index(drop=True)
        logger.info(f"🔗 Session frame built: shape={df.shape}")
        return df
