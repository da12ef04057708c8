"""Tests for ZIP resolution and distance-based store selection."""

import random

import pytest

from clearance_scout.data.stores import ACE_HARDWARE, HOME_DEPOT, store_records
from clearance_scout.data.zipcodes import NATIONAL_CENTROID
from clearance_scout.geo.locator import (
    haversine_miles,
    rank_by_distance,
    select_nearest,
    select_within_radius,
)
from clearance_scout.geo.resolver import (
    EXACT_ZIP,
    FALLBACK,
    STATE_CENTER,
    ZIP_PREFIX,
    ZipResolver,
    normalize_zip,
    state_for_zip,
)


def _random_stores(count, seed=7):
    rng = random.Random(seed)
    stores = []
    for i in range(count):
        stores.append(
            {
                "id": f"S-{i:03d}",
                "latitude": rng.uniform(25.0, 49.0),
                "longitude": rng.uniform(-124.0, -67.0),
                "is_active": rng.random() > 0.2,
            }
        )
    stores.append({"id": "S-NOGEO", "latitude": None, "longitude": -100.0, "is_active": True})
    return stores


def test_haversine_symmetry_and_zero():
    rng = random.Random(42)
    for _ in range(50):
        a = (rng.uniform(-80, 80), rng.uniform(-180, 180))
        b = (rng.uniform(-80, 80), rng.uniform(-180, 180))
        assert haversine_miles(*a, *b) == pytest.approx(haversine_miles(*b, *a))
        assert haversine_miles(*a, *a) == 0


def test_haversine_known_distance():
    # Los Angeles to New York is roughly 2445 miles
    distance = haversine_miles(34.0522, -118.2437, 40.7128, -74.0060)
    assert 2400 < distance < 2500


@pytest.mark.parametrize("limit", [0, 1, 3, 10, 500])
def test_select_nearest_count_and_order(limit):
    stores = _random_stores(60)
    origin = (39.0, -95.0)
    eligible = [s for s in stores if s["is_active"] and s["latitude"] is not None and s["longitude"] is not None]

    selected = select_nearest(origin, stores, limit)

    assert len(selected) == min(limit, len(eligible))
    by_id = {s["id"]: s for s in stores}
    distances = [haversine_miles(*origin, by_id[i]["latitude"], by_id[i]["longitude"]) for i in selected]
    assert distances == sorted(distances)
    assert "S-NOGEO" not in selected


def test_select_nearest_skips_inactive():
    stores = [
        {"id": "A", "latitude": 34.0, "longitude": -118.0, "is_active": False},
        {"id": "B", "latitude": 35.0, "longitude": -118.0, "is_active": True},
    ]
    assert select_nearest((34.0, -118.0), stores, 1) == ["B"]


@pytest.mark.parametrize("radius", [0, 25, 250, 1000])
def test_select_within_radius_correct_and_complete(radius):
    stores = _random_stores(80, seed=11)
    origin = (36.0, -100.0)

    selected = select_within_radius(origin, stores, radius)

    by_id = {s["id"]: s for s in stores}
    for store_id in selected:
        store = by_id[store_id]
        assert haversine_miles(*origin, store["latitude"], store["longitude"]) <= radius

    expected = {
        entry.store_id for entry in rank_by_distance(origin, stores) if entry.distance_miles <= radius
    }
    assert set(selected) == expected


def test_select_within_radius_may_be_empty():
    stores = [{"id": "FAR", "latitude": 47.6, "longitude": -122.3, "is_active": True}]
    assert select_within_radius((25.77, -80.19), stores, 50) == []


def test_normalize_zip():
    assert normalize_zip(" 2101 ") == "02101"
    assert normalize_zip("90017") == "90017"
    assert normalize_zip("9001A") is None
    assert normalize_zip("900171") is None
    assert normalize_zip("") is None


def test_state_for_zip_first_range_wins():
    assert state_for_zip("90017") == "CA"
    assert state_for_zip("10001") == "NY"
    # 206-212 falls in both DC and MD ranges
    assert state_for_zip("20601") == "DC"
    assert state_for_zip("00501") is None


def test_resolver_exact_match(resolver):
    location = resolver.resolve("90017")
    assert location.source == EXACT_ZIP
    assert (location.lat, location.lon) == (34.0489, -118.2618)


def test_resolver_prefix_match(resolver):
    location = resolver.resolve("90099")
    assert location.source == ZIP_PREFIX
    assert location.state == "CA"


def test_resolver_state_center_from_builtin_centers():
    resolver = ZipResolver([], state_centers={"OH": (40.3888, -82.7649)})
    location = resolver.resolve("43210")
    assert location.source == STATE_CENTER
    assert (location.lat, location.lon) == (40.3888, -82.7649)


def test_resolver_state_center_averages_dataset_rows():
    resolver = ZipResolver(
        [("97201", 45.0, -122.0, "Portland", "OR"), ("97301", 44.0, -123.0, "Salem", "OR")]
    )
    location = resolver.resolve("97701")
    assert location.source == STATE_CENTER
    assert location.lat == pytest.approx(44.5)
    assert location.lon == pytest.approx(-122.5)


def test_resolver_national_fallback():
    resolver = ZipResolver([])
    location = resolver.resolve("00501")
    assert location.source == FALLBACK
    assert (location.lat, location.lon) == NATIONAL_CENTROID


def test_resolver_total_over_five_digit_inputs(resolver):
    rng = random.Random(3)
    for _ in range(500):
        zip_code = f"{rng.randint(0, 99999):05d}"
        coordinates = resolver.resolve_coordinates(zip_code)
        assert coordinates is not None
        assert -90 <= coordinates.lat <= 90
        assert -180 <= coordinates.lon <= 180


def test_resolve_coordinates_rejects_malformed(resolver):
    assert resolver.resolve_coordinates("abcde") is None


def test_resolver_from_csv(tmp_path):
    path = tmp_path / "zips.csv"
    path.write_text(
        "zip,lat,lng,city,state_id\n"
        "60601,41.8827,-87.6233,Chicago,IL\n"
        "60602,bad,-87.6,Chicago,IL\n"
    )
    resolver = ZipResolver.from_csv(path)
    assert resolver.resolve("60601").source == EXACT_ZIP
    assert resolver.resolve("60602").source == ZIP_PREFIX
    assert resolver.stats()["total_zip_codes"] == 1


def test_resolver_from_settings_missing_file_uses_builtin(tmp_path):
    resolver = ZipResolver.from_settings(str(tmp_path / "missing.csv"), store_records())
    assert resolver.resolve("90017").source == EXACT_ZIP


def test_zip_codes_for_state(resolver):
    zips = dict(resolver.zip_codes_for_state("az"))
    assert "85001" in zips
    assert all(location.state == "AZ" for location in zips.values())


def test_scenario_a_nearest_home_depot_for_free_plan(resolver):
    origin = resolver.resolve("90017").coordinates
    stores = store_records(HOME_DEPOT)
    assert select_nearest(origin, stores, 1) == ["HD-0206"]


def test_scenario_b_ace_within_fifty_miles(resolver):
    origin = resolver.resolve("90017").coordinates
    stores = store_records(ACE_HARDWARE)
    selected = select_within_radius(origin, stores, 50)
    assert sorted(selected) == ["ACE-001", "ACE-002", "ACE-003", "ACE-004"]
    assert selected[0] == "ACE-001"
