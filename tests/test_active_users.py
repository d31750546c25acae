import unittest

import pandas as pd  # type: ignore

from traveltide_features.core.features import ActiveUserFilter, PipelineConfig
from traveltide_features.core.processing import InputPreparer
from tests.fixtures import make_sessions


class TestPipelineConfig(unittest.TestCase):

    def test_defaults(self):
        config = PipelineConfig()
        self.assertEqual(config.activity_start, pd.Timestamp("2023-01-04"))
        self.assertEqual(config.min_sessions, 7)

    def test_from_dict_reads_pipeline_section(self):
        config = PipelineConfig.from_dict({"pipeline": {"activity_start": "2023-02-01", "min_sessions": 3}})
        self.assertEqual(config.activity_start, pd.Timestamp("2023-02-01"))
        self.assertEqual(config.min_sessions, 3)

    def test_from_dict_keeps_defaults_for_missing_keys(self):
        config = PipelineConfig.from_dict({"pipeline": {"min_sessions": None}})
        self.assertEqual(config.min_sessions, 7)

    def test_rejects_negative_threshold(self):
        with self.assertRaises(ValueError):
            PipelineConfig(min_sessions=-1)

    def test_rejects_unparsable_date(self):
        with self.assertRaises(ValueError):
            PipelineConfig(activity_start="not-a-date")


class TestActiveUserFilter(unittest.TestCase):

    def setUp(self):
        self.sessions = InputPreparer().prepare_table("sessions", make_sessions())

    def test_threshold_is_strictly_greater_than(self):
        active = ActiveUserFilter().run(self.sessions)
        # User 3 has exactly 7 recent sessions, user 4 exactly 8
        self.assertEqual(active.tolist(), [1, 2, 4])

    def test_sessions_before_cutoff_do_not_count(self):
        active = ActiveUserFilter().run(self.sessions)
        self.assertNotIn(3, active.tolist())

    def test_session_on_cutoff_day_counts(self):
        # User 4's first session starts on the cutoff day; without it only 7 remain
        config = PipelineConfig(activity_start="2023-01-05")
        active = ActiveUserFilter(config).run(self.sessions)
        self.assertNotIn(4, active.tolist())

    def test_configurable_threshold(self):
        active = ActiveUserFilter(PipelineConfig(min_sessions=6)).run(self.sessions)
        self.assertEqual(active.tolist(), [1, 2, 3, 4])

    def test_empty_input_yields_empty_output(self):
        active = ActiveUserFilter().run(self.sessions.iloc[0:0])
        self.assertTrue(active.empty)


if __name__ == '__main__':
    unittest.main()
