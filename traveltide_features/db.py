# traveltide_features/db.py

import os
import logging
from typing import Optional

import pandas as pd  # type: ignore
import sqlalchemy as sa  # type: ignore
from sqlalchemy.exc import SQLAlchemyError  # type: ignore
from sqlalchemy.engine import URL
from dotenv import load_dotenv

load_dotenv()  # Loads DB_* variables from .env

logger = logging.getLogger(__name__)


class Database:
    def __init__(self, url: Optional[str] = None):
        self._url = url
        self._engine = None
        self._connection = None
        self._connect()

    def _connect(self):
        """
        Connects to the PostgreSQL database.
        Credentials are read from environment variables unless an explicit URL is given.
        """
        try:
            db_url = self._url or URL.create(
                drivername="postgresql",
                username=os.getenv("DB_USER"),
                password=os.getenv("DB_PASSWORD"),
                host=os.getenv("DB_HOST"),
                port=int(os.getenv("DB_PORT")) if os.getenv("DB_PORT") else None,
                database=os.getenv("DB_NAME"),
                query={"sslmode": os.getenv("DB_SSLMODE", "require")}
            )
            self._engine = sa.create_engine(db_url, pool_pre_ping=True)
            self._connection = self._engine.connect()
            logger.info("✅ Connected to database.")
        except SQLAlchemyError as e:
            logger.error(f"❌ Connection error: {e}")
            raise ConnectionError(f"Could not connect to database: {e}") from e

    def execute_query(self, query: str) -> pd.DataFrame:
        """
        Runs a SQL query and returns the result as a DataFrame.
        """
        if not self._connection:
            raise ConnectionError("⚠️ No active database connection.")
        try:
            df = pd.read_sql(sa.text(query), self._connection)
        except SQLAlchemyError as e:
            logger.error(f"❌ Query error: {e}")
            raise
        logger.info(f"✅ Query succeeded. {len(df)} rows fetched.")
        return df

    def read_table(self, table_name: str, chunk_size: Optional[int] = None, order_by: Optional[str] = None) -> pd.DataFrame:
        """
        Reads a whole table, optionally page by page with LIMIT/OFFSET.

        Paging exists for hosted databases that cap the number of rows a single
        query may return. Pages are concatenated in order.
        """
        if not chunk_size:
            return self.execute_query(f"SELECT * FROM {table_name};")

        order_clause = f" ORDER BY {order_by}" if order_by else ""
        pages = []
        offset = 0
        while True:
            page = self.execute_query(
                f"SELECT * FROM {table_name}{order_clause} LIMIT {int(chunk_size)} OFFSET {offset};"
            )
            if not page.empty or not pages:
                pages.append(page)
            if len(page) < chunk_size:
                break
            offset += chunk_size

        logger.info(f"📄 Read '{table_name}' in {len(pages)} page(s)")
        return pd.concat(pages, ignore_index=True)

    def close(self):
        """
        Closes the database connection.
        """
        if self._connection:
            self._connection.close()
            self._connection = None
            logger.info("🔒 Connection closed.")
