# traveltide_features/core/features/active_users.py
"""Selection of the active user cohort."""

import logging
from dataclasses import dataclass
from typing import Any, Dict

import pandas as pd  # type: ignore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineConfig:
    """Cohort definition: users with more than ``min_sessions`` sessions starting on or after ``activity_start``."""

    activity_start: pd.Timestamp = pd.Timestamp("2023-01-04")
    min_sessions: int = 7

    def __post_init__(self):
        try:
            start = pd.Timestamp(self.activity_start)
        except (TypeError, ValueError) as e:
            raise ValueError(f"❌ Invalid activity_start '{self.activity_start}': {e}") from e
        if pd.isna(start):
            raise ValueError("❌ activity_start must be a date")
        object.__setattr__(self, "activity_start", start)

        if int(self.min_sessions) < 0:
            raise ValueError(f"❌ min_sessions must be >= 0, got {self.min_sessions}")
        object.__setattr__(self, "min_sessions", int(self.min_sessions))

    @classmethod
    def from_dict(cls, config: Dict[str, Any]) -> "PipelineConfig":
        """Build from the ``pipeline`` section of config.yaml (or the whole config)."""
        section = config.get("pipeline", config)
        kwargs = {}
        if section.get("activity_start") is not None:
            kwargs["activity_start"] = section["activity_start"]
        if section.get("min_sessions") is not None:
            kwargs["min_sessions"] = section["min_sessions"]
        return cls(**kwargs)


class ActiveUserFilter:
    def __init__(self, config: PipelineConfig = PipelineConfig()):
        self.config = config

    def run(self, df_sessions: pd.DataFrame) -> pd.Series:
        """
        Selects users with strictly more than ``min_sessions`` sessions in the window.

        Args:
            df_sessions (pd.DataFrame): Sessions with a datetime 'session_start'.

        Returns:
            pd.Series: Sorted user ids of the active cohort.
        """
        recent = df_sessions[df_sessions['session_start'] >= self.config.activity_start]
        counts = recent.groupby('user_id')['session_id'].count()
        active = counts[counts > self.config.min_sessions].index

        active_users = pd.Series(sorted(active), name='user_id', dtype=df_sessions['user_id'].dtype)
        logger.info(
            f"👥 Active users: {len(active_users):,} "
            f"(> {self.config.min_sessions} sessions since {self.config.activity_start.date()})"
        )
        return active_users
