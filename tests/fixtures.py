"""
Small hand-built TravelTide tables.

User 1: 10 recent sessions, 6 browsing + 4 with trips (t1 flight+hotel, t2 flight,
        t3 hotel, t2 again as its cancellation).
User 2: 8 recent sessions, 7 browsing + 1 discounted hotel-only trip (t4).
User 3: 7 recent sessions + 3 before the cutoff -> not active.
User 4: exactly 8 recent browsing sessions, sparse profile -> active, no trips.
User 5: profile only, no sessions -> not active.
"""

import pandas as pd  # type: ignore


def _session(session_id, user_id, day, trip_id=None, page_clicks=10,
             flight_booked=False, hotel_booked=False,
             flight_discount=False, hotel_discount=False,
             flight_discount_amount=None, hotel_discount_amount=None,
             cancellation=False):
    start = pd.Timestamp(day) + pd.Timedelta(hours=10)
    return {
        'session_id': session_id,
        'user_id': user_id,
        'trip_id': trip_id,
        'session_start': start.strftime('%Y-%m-%d %H:%M:%S'),
        'session_end': (start + pd.Timedelta(minutes=30)).strftime('%Y-%m-%d %H:%M:%S'),
        'page_clicks': page_clicks,
        'flight_booked': flight_booked,
        'hotel_booked': hotel_booked,
        'flight_discount': flight_discount,
        'hotel_discount': hotel_discount,
        'flight_discount_amount': flight_discount_amount,
        'hotel_discount_amount': hotel_discount_amount,
        'cancellation': cancellation,
    }


def _browsing(user_id, first_session_id, n, first_day):
    days = pd.date_range(first_day, periods=n, freq='D')
    return [
        _session(f"{first_session_id + i}", user_id, day)
        for i, day in enumerate(days)
    ]


def make_users() -> pd.DataFrame:
    return pd.DataFrame([
        {'user_id': 1, 'birthdate': '1980-05-01', 'gender': 'F', 'married': True, 'has_children': False,
         'home_country': 'usa', 'home_city': 'new york', 'sign_up_date': '2022-01-10',
         'home_airport_lat': 40.64, 'home_airport_lon': -73.78},
        {'user_id': 2, 'birthdate': '1990-07-15', 'gender': 'M', 'married': False, 'has_children': True,
         'home_country': 'canada', 'home_city': 'toronto', 'sign_up_date': '2022-03-02',
         'home_airport_lat': 43.68, 'home_airport_lon': -79.63},
        {'user_id': 3, 'birthdate': '1975-11-30', 'gender': 'F', 'married': True, 'has_children': True,
         'home_country': 'usa', 'home_city': 'boston', 'sign_up_date': '2022-06-20',
         'home_airport_lat': 42.36, 'home_airport_lon': -71.01},
        {'user_id': 4, 'birthdate': '2000-01-01', 'gender': None, 'married': None, 'has_children': None,
         'home_country': None, 'home_city': None, 'sign_up_date': '2022-09-09',
         'home_airport_lat': 34.05, 'home_airport_lon': -118.24},
        {'user_id': 5, 'birthdate': '1985-02-02', 'gender': 'M', 'married': False, 'has_children': False,
         'home_country': 'usa', 'home_city': 'austin', 'sign_up_date': '2022-02-02',
         'home_airport_lat': 30.19, 'home_airport_lon': -97.67},
    ])


def make_sessions() -> pd.DataFrame:
    rows = []

    # User 1
    rows += _browsing(1, 101, 6, '2023-02-01')
    rows += [
        _session('107', 1, '2023-02-07', trip_id='t1', page_clicks=20,
                 flight_booked=True, hotel_booked=True,
                 flight_discount=True, hotel_discount=True,
                 flight_discount_amount=0.1, hotel_discount_amount=0.2),
        _session('108', 1, '2023-02-08', trip_id='t2', page_clicks=30,
                 flight_booked=True, flight_discount=True, flight_discount_amount=0.5),
        _session('109', 1, '2023-02-09', trip_id='t3', page_clicks=40,
                 hotel_booked=True, hotel_discount=True, hotel_discount_amount=0.25),
        _session('110', 1, '2023-02-10', trip_id='t2', page_clicks=5,
                 flight_booked=True, cancellation=True),
    ]

    # User 2
    rows += _browsing(2, 201, 7, '2023-03-01')
    rows += [
        _session('208', 2, '2023-03-08', trip_id='t4', page_clicks=10,
                 hotel_booked=True, hotel_discount=True, hotel_discount_amount=0.5),
    ]

    # User 3: 3 old sessions, 7 recent ones
    rows += _browsing(3, 301, 3, '2022-12-01')
    rows += _browsing(3, 304, 7, '2023-01-04')

    # User 4: exactly 8 recent sessions, the first one exactly on the cutoff day
    rows += [_session(f"{401 + i}", 4, day, page_clicks=0 if i == 0 else 4)
             for i, day in enumerate(pd.date_range('2023-01-04', periods=8, freq='D'))]

    return pd.DataFrame(rows)


def make_flights() -> pd.DataFrame:
    return pd.DataFrame([
        {'trip_id': 't1', 'base_fare_usd': 200.0, 'destination': 'london',
         'destination_airport_lat': 51.47, 'destination_airport_lon': -0.45, 'checked_bags': 1,
         'departure_time': '2023-03-01 08:00:00', 'return_time': '2023-03-05 18:00:00',
         'return_flight_booked': True},
        {'trip_id': 't2', 'base_fare_usd': 100.0, 'destination': 'chicago',
         'destination_airport_lat': 41.97, 'destination_airport_lon': -87.90, 'checked_bags': 2,
         'departure_time': '2023-04-01 09:00:00', 'return_time': None,
         'return_flight_booked': False},
    ])


def make_hotels() -> pd.DataFrame:
    return pd.DataFrame([
        {'trip_id': 't1', 'hotel_name': 'Hilton - london', 'rooms': 1,
         'check_in_time': '2023-03-01 15:00:00', 'check_out_time': '2023-03-05 11:00:00',
         'hotel_per_room_usd': 150.0},
        {'trip_id': 't3', 'hotel_name': 'Marriott - boston', 'rooms': 2,
         'check_in_time': '2023-05-01 15:00:00', 'check_out_time': '2023-05-03 11:00:00',
         'hotel_per_room_usd': 100.0},
        {'trip_id': 't4', 'hotel_name': 'Hyatt - toronto', 'rooms': 1,
         'check_in_time': '2023-06-01 15:00:00', 'check_out_time': '2023-06-02 11:00:00',
         'hotel_per_room_usd': 200.0},
    ])


def make_tables() -> dict:
    return {
        'users': make_users(),
        'sessions': make_sessions(),
        'flights': make_flights(),
        'hotels': make_hotels(),
    }
