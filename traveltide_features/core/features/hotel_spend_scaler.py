# traveltide_features/core/features/hotel_spend_scaler.py

import logging
from typing import Optional

import numpy as np  # type: ignore
import pandas as pd  # type: ignore
from sklearn.preprocessing import MinMaxScaler  # type: ignore

logger = logging.getLogger(__name__)


class HotelSpendScaler:
    """
    Min-max scales ads_hotel across the whole active population.

    Two passes: ``fit`` reduces the defined values to a global min/max, then
    ``transform`` maps each user. Undefined values, a degenerate range
    (max == min) and an all-undefined population all scale to 0.
    """

    def __init__(self, column: str = 'ads_hotel', output_column: str = 'scaled_hotel_ads'):
        self.column = column
        self.output_column = output_column
        self.scaler: Optional[MinMaxScaler] = None
        self.min_: float = np.nan
        self.max_: float = np.nan

    def fit(self, df_spend: pd.DataFrame) -> "HotelSpendScaler":
        defined = df_spend[[self.column]].dropna()
        if defined.empty:
            self.scaler = None
            self.min_, self.max_ = np.nan, np.nan
            logger.warning(f"⚠️ No defined '{self.column}' values; every user scales to 0")
            return self

        self.scaler = MinMaxScaler(feature_range=(0, 1), clip=True).fit(defined)
        self.min_ = float(self.scaler.data_min_[0])
        self.max_ = float(self.scaler.data_max_[0])
        logger.info(f"📏 {self.column} range: min={self.min_:.4f}, max={self.max_:.4f}")
        return self

    def transform(self, df_spend: pd.DataFrame) -> pd.DataFrame:
        if self.scaler is None or self.max_ == self.min_:
            scaled = np.zeros(len(df_spend))
        else:
            scaled = self.scaler.transform(df_spend[[self.column]])[:, 0]

        out = df_spend[['user_id', self.column]].copy()
        out[self.output_column] = pd.Series(scaled, index=out.index).fillna(0.0)
        return out

    def run(self, df_spend: pd.DataFrame) -> pd.DataFrame:
        """
        Returns:
            pd.DataFrame: user_id, ads_hotel and scaled_hotel_ads in [0, 1].
        """
        return self.fit(df_spend).transform(df_spend)
