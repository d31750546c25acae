import unittest

import numpy as np  # type: ignore
import pandas as pd  # type: ignore

from traveltide_features.core.features import (
    ActiveUserFilter,
    HotelSpendScaler,
    SessionJoiner,
    SpendAggregator,
)
from traveltide_features.core.processing import InputPreparer
from tests.fixtures import make_tables


def build_session_frame():
    tables = InputPreparer().prepare(**make_tables())
    active = ActiveUserFilter().run(tables['sessions'])
    frame = SessionJoiner().run(active, tables['sessions'], tables['flights'], tables['hotels'])
    return active, frame


class TestSessionJoiner(unittest.TestCase):

    def test_one_row_per_session_of_active_users(self):
        active, frame = build_session_frame()
        self.assertEqual(len(frame), 10 + 8 + 8)
        self.assertEqual(set(frame['user_id']), {1, 2, 4})

    def test_leg_indicators(self):
        _, frame = build_session_frame()
        by_session = frame.set_index('session_id')
        self.assertTrue(by_session.loc['107', 'has_flight_leg'])
        self.assertTrue(by_session.loc['107', 'has_hotel_leg'])
        self.assertTrue(by_session.loc['110', 'has_flight_leg'])
        self.assertFalse(by_session.loc['110', 'has_hotel_leg'])
        self.assertFalse(by_session.loc['101', 'has_flight_leg'])


class TestSpendAggregator(unittest.TestCase):

    def setUp(self):
        active, frame = build_session_frame()
        self.spend = SpendAggregator().run(active, frame).set_index('user_id')

    def test_one_row_per_active_user(self):
        self.assertEqual(self.spend.index.tolist(), [1, 2, 4])

    def test_totals(self):
        # t1 hotel 150x1 + t3 hotel 100x2; flights t1 200 + t2 100 twice (booking and cancellation session)
        self.assertAlmostEqual(self.spend.loc[1, 'total_hotel_usd_spent'], 350.0)
        self.assertAlmostEqual(self.spend.loc[1, 'total_flight_usd_spent'], 400.0)
        self.assertAlmostEqual(self.spend.loc[1, 'total_usd_spent'], 750.0)

    def test_ads_hotel_ignores_sessions_without_a_term(self):
        # (0.2 * 150 + 0.25 * 200) / 2
        self.assertAlmostEqual(self.spend.loc[1, 'ads_hotel'], 40.0)
        self.assertAlmostEqual(self.spend.loc[2, 'ads_hotel'], 100.0)

    def test_user_without_hotel_leg(self):
        self.assertEqual(self.spend.loc[4, 'total_hotel_usd_spent'], 0.0)
        self.assertEqual(self.spend.loc[4, 'total_usd_spent'], 0.0)
        self.assertTrue(np.isnan(self.spend.loc[4, 'ads_hotel']))


class TestHotelSpendScaler(unittest.TestCase):

    def test_min_max_scaling_with_undefined_value(self):
        spend = pd.DataFrame({'user_id': [1, 2, 3], 'ads_hotel': [100.0, 300.0, np.nan]})
        scaler = HotelSpendScaler()
        scaled = scaler.run(spend).set_index('user_id')['scaled_hotel_ads']

        self.assertEqual(scaler.min_, 100.0)
        self.assertEqual(scaler.max_, 300.0)
        self.assertAlmostEqual(scaled[1], 0.0)
        self.assertAlmostEqual(scaled[2], 1.0)
        self.assertEqual(scaled[3], 0.0)

    def test_intermediate_value(self):
        spend = pd.DataFrame({'user_id': [1, 2, 3], 'ads_hotel': [100.0, 300.0, 150.0]})
        scaled = HotelSpendScaler().run(spend).set_index('user_id')['scaled_hotel_ads']
        self.assertAlmostEqual(scaled[3], 0.25)

    def test_degenerate_range_scales_to_zero(self):
        spend = pd.DataFrame({'user_id': [1, 2], 'ads_hotel': [50.0, 50.0]})
        scaled = HotelSpendScaler().run(spend)['scaled_hotel_ads']
        self.assertEqual(scaled.tolist(), [0.0, 0.0])

    def test_all_undefined_scales_to_zero(self):
        spend = pd.DataFrame({'user_id': [1, 2], 'ads_hotel': [np.nan, np.nan]})
        scaled = HotelSpendScaler().run(spend)['scaled_hotel_ads']
        self.assertEqual(scaled.tolist(), [0.0, 0.0])

    def test_empty_population(self):
        spend = pd.DataFrame({'user_id': pd.Series([], dtype='int64'), 'ads_hotel': pd.Series([], dtype='float64')})
        scaled = HotelSpendScaler().run(spend)
        self.assertTrue(scaled.empty)
        self.assertIn('scaled_hotel_ads', scaled.columns)

    def test_scaled_values_within_unit_interval(self):
        spend = pd.DataFrame({'user_id': range(6), 'ads_hotel': [3.0, np.nan, 9.5, 1.2, 7.7, 1.2]})
        scaled = HotelSpendScaler().run(spend)['scaled_hotel_ads']
        self.assertTrue(((scaled >= 0) & (scaled <= 1)).all())


if __name__ == '__main__':
    unittest.main()
