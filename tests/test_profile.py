"""
Tests for svp.profile.Profile.

Covers lazy materialization of the depth/speed columns, metadata accessors,
the degrees:minutes:seconds formatter and the metadata rendering.
"""
import math

import numpy as np
import pytest

from svp import Profile


def make_profile(samples):
    profile = Profile()
    for depth, speed in samples:
        profile.add(depth, speed)
    return profile


def test_new_profile_is_empty_and_unset():
    profile = Profile()
    assert profile.get_size() == 0
    assert len(profile) == 0
    assert math.isnan(profile.get_latitude())
    assert math.isnan(profile.get_longitude())
    assert profile.get_timestamp() == 0
    assert profile.get_draft() == 0.0
    assert not profile.has_position()
    assert profile.get_depths().shape == (0,)
    assert profile.get_speeds().shape == (0,)


def test_add_then_materialize():
    profile = make_profile([(1.0, 1500.0), (2.0, 1501.2), (3.5, 1502.0)])

    assert profile.get_size() == 3
    np.testing.assert_array_equal(profile.get_depths(), [1.0, 2.0, 3.5])
    np.testing.assert_array_equal(profile.get_speeds(), [1500.0, 1501.2, 1502.0])
    assert profile.get_depths().dtype == np.float64


def test_materialization_is_cached():
    profile = make_profile([(1.0, 1500.0), (2.0, 1501.2)])

    first = profile.get_depths()
    second = profile.get_depths()
    assert first is second
    assert profile.get_speeds() is profile.get_speeds()


def test_add_after_read_is_picked_up():
    profile = make_profile([(1.0, 1500.0)])
    before = profile.get_depths()
    profile.get_speeds()

    profile.add(2.0, 1499.5)

    assert profile.get_size() == 2
    np.testing.assert_array_equal(profile.get_depths(), [1.0, 2.0])
    np.testing.assert_array_equal(profile.get_speeds(), [1500.0, 1499.5])
    # earlier snapshot keeps its contents
    np.testing.assert_array_equal(before, [1.0])


def test_size_tracks_adds_regardless_of_reads():
    profile = Profile()
    for i in range(5):
        assert profile.get_size() == i
        if i % 2:
            profile.get_depths()
        else:
            profile.get_speeds()
        profile.add(float(i), 1500.0 + i)
    assert profile.get_size() == 5
    assert len(profile.get_depths()) == 5
    assert len(profile.get_speeds()) == 5


def test_columns_are_independent():
    profile = make_profile([(1.0, 1500.0)])
    profile.get_depths()
    profile.add(2.0, 1501.0)

    # only speeds read after the add
    np.testing.assert_array_equal(profile.get_speeds(), [1500.0, 1501.0])
    np.testing.assert_array_equal(profile.get_depths(), [1.0, 2.0])


def test_columns_are_read_only():
    profile = make_profile([(1.0, 1500.0)])
    with pytest.raises(ValueError):
        profile.get_depths()[0] = 9.0
    with pytest.raises(ValueError):
        profile.get_speeds()[0] = 9.0


def test_add_does_not_validate():
    profile = make_profile([(-5.0, 0.0), (3.0, -1.0), (1.0, 1500.0)])
    np.testing.assert_array_equal(profile.get_depths(), [-5.0, 3.0, 1.0])
    np.testing.assert_array_equal(profile.get_speeds(), [0.0, -1.0, 1500.0])
    assert profile.get_samples() == ((-5.0, 0.0), (3.0, -1.0), (1.0, 1500.0))


def test_metadata_accessors():
    profile = Profile()
    profile.set_latitude(48.45)
    profile.set_longitude(-68.53)
    profile.set_timestamp(1552608000000000)
    profile.set_draft(1.2)

    assert profile.get_latitude() == 48.45
    assert profile.get_longitude() == -68.53
    assert profile.get_timestamp() == 1552608000000000
    assert profile.get_draft() == 1.2
    assert profile.has_position()


def test_latlong_format_keeps_historical_seconds():
    assert Profile.latlong_format(45.5) == " 45:30:930"
    assert Profile().latlong_format(10.0) == " 10:0:600"
    assert Profile.latlong_format(-45.5) == " -45:-30:-930"


def test_str_renders_metadata_only():
    profile = make_profile([(1.0, 1500.0)])
    assert str(profile) == "timestamp: 0\nlatitude: nan\nlongitude: nan\ndraft: 0\n"

    profile.set_timestamp(42)
    profile.set_latitude(34.5)
    profile.set_longitude(139.25)
    assert str(profile) == "timestamp: 42\nlatitude: 34.5\nlongitude: 139.25\ndraft: 0\n"


def test_to_dataframe():
    profile = make_profile([(1.0, 1500.0), (2.0, 1501.2)])
    df = profile.to_dataframe()
    assert list(df.columns) == ["depth", "speed"]
    assert df.depth.tolist() == [1.0, 2.0]
    assert df.speed.tolist() == [1500.0, 1501.2]
    # frame owns its data
    df.loc[0, "depth"] = 7.0
    assert profile.get_depths()[0] == 1.0
