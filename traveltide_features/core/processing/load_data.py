# traveltide_features/core/processing/load_data.py

import os
import logging
from typing import Dict, Optional

import pandas as pd  # type: ignore

from traveltide_features.db import Database
from traveltide_features.utils import raw_data_path

logger = logging.getLogger(__name__)

INPUT_TABLES = ("users", "sessions", "flights", "hotels")

# Stable ordering for paged database reads
TABLE_KEYS = {
    "users": "user_id",
    "sessions": "session_id",
    "flights": "trip_id",
    "hotels": "trip_id",
}


class DataLoader:
    def __init__(self, db: Optional[Database] = None, chunk_size: Optional[int] = None):
        """
        Initializes the DataLoader with an optional Database instance.

        The database connection is only opened when a table is read from the database.
        """
        self._db = db
        self.chunk_size = chunk_size

    @property
    def db(self) -> Database:
        if self._db is None:
            self._db = Database()
        return self._db

    def _get_path(self, table_name: str) -> str:
        """
        Resolves the raw CSV path of a table.
        """
        return os.path.join(raw_data_path, f"{table_name}.csv")

    def load_table(self, table_name: str, source: str = "csv", cache: bool = False) -> pd.DataFrame:
        """
        Loads a table from a CSV file or directly from the database.

        Args:
            table_name (str): Name of the table or file.
            source (str): 'csv' or 'db'.
            cache (bool): When reading from the database, also write the table to its raw CSV path.

        Returns:
            pd.DataFrame: Loaded data.
        """
        file_path = self._get_path(table_name)

        if source == "csv":
            if not os.path.exists(file_path):
                raise FileNotFoundError(f"❌ CSV file not found: {file_path}")
            logger.info(f"📁 Loading table '{table_name}' from CSV: {file_path}")
            df = pd.read_csv(file_path)
            logger.info(f"✅ CSV loaded. Rows: {len(df)}")

        elif source == "db":
            logger.info(f"🌐 Loading table '{table_name}' from the database...")
            df = self.db.read_table(table_name, chunk_size=self.chunk_size, order_by=TABLE_KEYS.get(table_name))
            logger.info(f"✅ Database read succeeded. Rows: {len(df)}")

            if cache:
                os.makedirs(os.path.dirname(file_path), exist_ok=True)
                df.to_csv(file_path, index=False)
                logger.info(f"💾 Cached at: {file_path}")

        else:
            raise ValueError(f"❌ Invalid source: '{source}'. Allowed: 'csv', 'db'.")

        if df.empty:
            logger.warning(f"⚠️ No rows found for table '{table_name}'")
        return df

    def load_inputs(self, source: str = "csv", cache: bool = False) -> Dict[str, pd.DataFrame]:
        """
        Loads the four input tables (users, sessions, flights, hotels).

        Any read failure propagates to the caller.
        """
        return {
            table: self.load_table(table, source=source, cache=cache)
            for table in INPUT_TABLES
        }

    def close(self) -> None:
        if self._db is not None:
            self._db.close()
