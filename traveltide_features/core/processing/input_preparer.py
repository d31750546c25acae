# traveltide_features/core/processing/input_preparer.py

import logging
from typing import Dict, List

import pandas as pd  # type: ignore

from traveltide_features.utils import to_boolean, to_datetime, to_join_key, to_numeric

logger = logging.getLogger(__name__)


REQUIRED_COLUMNS: Dict[str, List[str]] = {
    "users": [
        "user_id", "birthdate", "gender", "married", "has_children",
        "home_country", "home_city", "sign_up_date",
        "home_airport_lat", "home_airport_lon",
    ],
    "sessions": [
        "session_id", "user_id", "trip_id", "session_start", "session_end",
        "page_clicks", "flight_booked", "hotel_booked",
        "flight_discount", "hotel_discount",
        "flight_discount_amount", "hotel_discount_amount", "cancellation",
    ],
    "flights": [
        "trip_id", "base_fare_usd", "destination",
        "destination_airport_lat", "destination_airport_lon",
        "checked_bags", "departure_time", "return_time", "return_flight_booked",
    ],
    "hotels": [
        "trip_id", "hotel_name", "rooms",
        "check_in_time", "check_out_time", "hotel_per_room_usd",
    ],
}

DATE_COLUMNS = {
    "users": ["birthdate", "sign_up_date"],
    "sessions": ["session_start", "session_end"],
    "flights": ["departure_time", "return_time"],
    "hotels": ["check_in_time", "check_out_time"],
}

FLAG_COLUMNS = {
    "sessions": ["flight_booked", "hotel_booked", "flight_discount", "hotel_discount", "cancellation"],
    "flights": ["return_flight_booked"],
}

NUMERIC_COLUMNS = {
    "users": ["home_airport_lat", "home_airport_lon"],
    "sessions": ["page_clicks", "flight_discount_amount", "hotel_discount_amount"],
    "flights": ["base_fare_usd", "checked_bags", "destination_airport_lat", "destination_airport_lon"],
    "hotels": ["rooms", "hotel_per_room_usd"],
}


class InputPreparer:
    """
    Validates and type-normalizes the raw input tables.

    Profile flags (married, has_children) are left untouched so that an unknown
    value stays unknown; session and flight flags are coerced to bool.
    """

    def check_columns(self, table: str, df: pd.DataFrame) -> None:
        missing = [col for col in REQUIRED_COLUMNS[table] if col not in df.columns]
        if missing:
            raise ValueError(f"❌ Table '{table}' is missing required columns: {missing}")

    def prepare_table(self, table: str, df: pd.DataFrame) -> pd.DataFrame:
        self.check_columns(table, df)
        df = df.copy()
        to_datetime(df, DATE_COLUMNS.get(table, []))
        to_numeric(df, NUMERIC_COLUMNS.get(table, []))
        to_boolean(df, FLAG_COLUMNS.get(table, []))
        to_join_key(df, ["trip_id"])
        return df

    def _drop_duplicate_legs(self, table: str, df: pd.DataFrame) -> pd.DataFrame:
        """A trip links to at most one leg per table; extra rows would duplicate sessions in the join."""
        deduped = df.dropna(subset=["trip_id"]).drop_duplicates(subset=["trip_id"], keep="first")
        dropped = len(df) - len(deduped)
        if dropped:
            logger.warning(f"⚠️ Dropped {dropped} {table} rows with a missing or repeated trip_id")
        return deduped

    def prepare(self, users: pd.DataFrame, sessions: pd.DataFrame,
                flights: pd.DataFrame, hotels: pd.DataFrame) -> Dict[str, pd.DataFrame]:
        """
        Prepares all four tables.

        Returns:
            dict: Prepared tables keyed by 'users', 'sessions', 'flights', 'hotels'.
        """
        logger.info("🧹 Preparing input tables...")
        prepared = {
            "users": self.prepare_table("users", users),
            "sessions": self.prepare_table("sessions", sessions),
            "flights": self._drop_duplicate_legs("flights", self.prepare_table("flights", flights)),
            "hotels": self._drop_duplicate_legs("hotels", self.prepare_table("hotels", hotels)),
        }
        for table, df in prepared.items():
            logger.info(f"   ➡️ {table}: {len(df):,} rows")
        return prepared
