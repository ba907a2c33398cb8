import pytest

from station_reports.reports.extremes import (
    ExtremePolicy,
    compute_station_extremes,
    observation_precedes,
)
from station_reports.weather.observations import make_observation as ob


def test_empty_input_yields_no_stations():
    assert compute_station_extremes([]) == []


def test_single_observation_is_both_min_and_max():
    o = ob(2020, 1, 1, 0, 0, 1, 5.0)
    [e] = compute_station_extremes([o])
    assert e.station_id == 1
    assert e.min_observation is o
    assert e.max_observation is o


def test_min_and_max_keep_their_own_timestamps():
    cold = ob(2019, 6, 4, 9, 15, 2, 3.0)
    warm = ob(2019, 6, 4, 14, 30, 2, 7.0)
    for order in ([cold, warm], [warm, cold]):
        [e] = compute_station_extremes(order)
        assert e.min_observation is cold
        assert e.max_observation is warm
        assert e.min_temperature == 3.0
        assert e.max_temperature == 7.0


def test_warmer_reading_with_earlier_timestamp_does_not_become_min():
    cold = ob(2019, 6, 4, 14, 30, 2, 3.0)
    warm_earlier = ob(2019, 6, 4, 9, 15, 2, 7.0)
    [e] = compute_station_extremes([cold, warm_earlier])
    assert e.min_observation is cold
    assert e.max_observation is warm_earlier


@pytest.mark.parametrize("reverse", [False, True])
def test_ties_go_to_the_earliest_observation(reverse):
    later = ob(2020, 1, 2, 10, 0, 3, 4.0)
    earlier = ob(2020, 1, 1, 8, 0, 3, 4.0)
    data = [later, earlier]
    if reverse:
        data.reverse()
    [e] = compute_station_extremes(data)
    assert e.min_observation is earlier
    assert e.max_observation is earlier


def test_tie_break_is_lexicographic_not_field_by_field():
    # Earlier by date, later by hour: still the earlier reading.
    first = ob(2020, 1, 1, 23, 59, 7, -2.5)
    second = ob(2020, 1, 2, 0, 0, 7, -2.5)
    [e] = compute_station_extremes([second, first])
    assert e.min_observation is first
    assert e.max_observation is first


def test_output_sorted_by_station_without_duplicates():
    data = [
        ob(2020, 5, 1, 0, 0, sid, float(sid))
        for sid in (250, 17, 3, 17, 1, 250, 99)
    ]
    ids = [e.station_id for e in compute_station_extremes(data)]
    assert ids == [1, 3, 17, 99, 250]


def test_idempotent_on_same_input():
    data = [
        ob(2016, 2, 3, 4, 5, 10, 1.5),
        ob(2016, 2, 3, 6, 5, 10, -1.5),
        ob(2017, 8, 1, 12, 0, 11, 30.25),
    ]
    assert compute_station_extremes(data) == compute_station_extremes(data)


def test_policy_accepts_config_strings():
    data = [ob(2020, 1, 1, 0, 0, 1, 5.0)]
    assert compute_station_extremes(data, "legacy") == compute_station_extremes(
        data, ExtremePolicy.LEGACY
    )
    with pytest.raises(ValueError):
        compute_station_extremes(data, "coldest")


# ----------------------------------------------------------------------
# Legacy comparison
# ----------------------------------------------------------------------

def test_observation_precedes_checks_each_field_independently():
    a = ob(2020, 2, 20, 12, 0, 1, 9.0)
    b = ob(2020, 3, 10, 12, 0, 1, 5.0)
    # Earlier month wins even though the day is later and it is warmer.
    assert observation_precedes(a, b)
    # b has the earlier day and the lower temperature.
    assert observation_precedes(b, a)


def test_observation_precedes_false_for_identical_readings():
    a = ob(2020, 2, 20, 12, 0, 1, 9.0)
    assert not observation_precedes(a, a)


def test_legacy_policy_reproduces_field_by_field_selection():
    a = ob(2020, 3, 10, 12, 0, 5, 5.0)
    b = ob(2020, 2, 20, 12, 0, 5, 9.0)
    [legacy] = compute_station_extremes([a, b], ExtremePolicy.LEGACY)
    assert legacy.min_observation is b
    assert legacy.max_observation is a

    [default] = compute_station_extremes([a, b])
    assert default.min_observation is a
    assert default.max_observation is b


def test_legacy_policy_replaces_max_with_later_equal_reading():
    first = ob(2020, 1, 1, 8, 0, 4, 4.0)
    second = ob(2020, 1, 1, 9, 0, 4, 4.0)
    [e] = compute_station_extremes([first, second], ExtremePolicy.LEGACY)
    assert e.min_observation is first
    assert e.max_observation is second
