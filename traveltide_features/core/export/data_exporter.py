# traveltide_features/core/export/data_exporter.py

import os
import logging
import pandas as pd  # type: ignore
from typing import Dict, Optional

logger = logging.getLogger(__name__)


class DataExporter:
    """
    Handles all data export operations for the feature pipeline.
    """

    def __init__(
        self,
        output_dir: str,
        features_file: str = "user_features.csv",
        raw_extract_file: str = "user_session_extract.csv",
    ):
        """
        Initialize data exporter.
        """
        self.output_dir = output_dir
        self.features_file = features_file
        self.raw_extract_file = raw_extract_file
        os.makedirs(output_dir, exist_ok=True)

    def export(
        self,
        features: pd.DataFrame,
        raw_extract: Optional[pd.DataFrame] = None,
    ) -> Dict[str, str]:
        """
        Export the feature table and, when given, the raw session extract.

        Returns
        -------
        Dict[str, str]
            Written file paths keyed by 'features' / 'raw_extract'
        """
        logger.info("[EXPORT] Saving pipeline outputs...")

        exported_files = {'features': self._export_frame(features, self.features_file)}
        if raw_extract is not None:
            exported_files['raw_extract'] = self._export_frame(raw_extract, self.raw_extract_file)

        logger.info(f"   ✅ All files saved to: {self.output_dir}")
        return exported_files

    def _export_frame(self, df: pd.DataFrame, filename: str) -> str:
        file_path = os.path.join(self.output_dir, filename)
        df.to_csv(file_path, index=False)

        logger.info(f"   📄 {filename}: {len(df):,} rows, {len(df.columns)} columns")
        return file_path
