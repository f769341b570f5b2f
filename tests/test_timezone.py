from datetime import timezone
from zoneinfo import ZoneInfoNotFoundError

import pytest

from busylight.timezone import WINDOWS_ZONES, load_location


def test_windows_name_is_mapped():
    assert load_location("Tokyo Standard Time").key == "Asia/Tokyo"


def test_windows_name_with_suffix_is_mapped():
    assert load_location("Central Standard Time (Mexico)").key == "America/Mexico_City"


def test_iana_name_passes_through():
    assert load_location("Europe/Berlin").key == "Europe/Berlin"


def test_windows_utc_maps_to_etc_gmt():
    assert load_location("UTC").key == "Etc/GMT"


def test_empty_name_is_utc():
    assert load_location("") is timezone.utc


@pytest.mark.parametrize("name", ["Nowhere/Imaginary", "Made Up Standard Time", "../etc"])
def test_unknown_zone_raises(name):
    with pytest.raises(ZoneInfoNotFoundError):
        load_location(name)


def test_mapping_values_are_iana_style():
    assert all("/" in value for value in WINDOWS_ZONES.values())