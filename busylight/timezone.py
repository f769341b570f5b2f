"""Time zone lookup that understands both IANA and Windows zone names."""

from __future__ import annotations

from datetime import datetime, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

# Windows names of the form "<stem> Standard Time", grouped by IANA region
# and mapping each stem to the city part of the IANA name.
_STANDARD_TIME_BY_REGION: dict[str, dict[str, str]] = {
    "Africa": {
        "E. Africa": "Nairobi", "Egypt": "Cairo", "Libya": "Tripoli",
        "Morocco": "Casablanca", "Namibia": "Windhoek", "Sao Tome": "Sao_Tome",
        "South Africa": "Johannesburg", "Sudan": "Khartoum",
        "W. Central Africa": "Lagos",
    },
    "America": {
        "Alaskan": "Anchorage", "Aleutian": "Adak", "Argentina": "Buenos_Aires",
        "Atlantic": "Halifax", "Bahia": "Bahia", "Canada Central": "Regina",
        "Central America": "Guatemala", "Central Brazilian": "Cuiaba",
        "Central": "Chicago", "Cuba": "Havana", "E. South America": "Sao_Paulo",
        "Eastern": "New_York", "Greenland": "Godthab", "Haiti": "Port-au-Prince",
        "Magallanes": "Punta_Arenas", "Montevideo": "Montevideo",
        "Mountain": "Denver", "Newfoundland": "St_Johns", "Pacific SA": "Santiago",
        "Pacific": "Los_Angeles", "Paraguay": "Asuncion", "SA Eastern": "Cayenne",
        "SA Pacific": "Bogota", "SA Western": "La_Paz", "Saint Pierre": "Miquelon",
        "Tocantins": "Araguaina", "Turks And Caicos": "Grand_Turk",
        "US Eastern": "Indianapolis", "US Mountain": "Phoenix",
        "Venezuela": "Caracas",
    },
    "Asia": {
        "Afghanistan": "Kabul", "Altai": "Barnaul", "Arab": "Riyadh",
        "Arabian": "Dubai", "Arabic": "Baghdad", "Azerbaijan": "Baku",
        "Bangladesh": "Dhaka", "Caucasus": "Yerevan", "Central Asia": "Almaty",
        "China": "Shanghai", "Ekaterinburg": "Yekaterinburg", "Georgian": "Tbilisi",
        "India": "Calcutta", "Iran": "Tehran", "Israel": "Jerusalem",
        "Jordan": "Amman", "Korea": "Seoul", "Magadan": "Magadan",
        "Middle East": "Beirut", "Myanmar": "Rangoon",
        "N. Central Asia": "Novosibirsk", "Nepal": "Katmandu",
        "North Asia East": "Irkutsk", "North Asia": "Krasnoyarsk",
        "North Korea": "Pyongyang", "Omsk": "Omsk", "Pakistan": "Karachi",
        "Qyzylorda": "Qyzylorda", "SE Asia": "Bangkok", "Sakhalin": "Sakhalin",
        "Singapore": "Singapore", "Sri Lanka": "Colombo", "Syria": "Damascus",
        "Taipei": "Taipei", "Tokyo": "Tokyo", "Tomsk": "Tomsk",
        "Transbaikal": "Chita", "Ulaanbaatar": "Ulaanbaatar",
        "Vladivostok": "Vladivostok", "W. Mongolia": "Hovd",
        "West Asia": "Tashkent", "West Bank": "Hebron", "Yakutsk": "Yakutsk",
    },
    "Atlantic": {
        "Azores": "Azores", "Cape Verde": "Cape_Verde", "Greenwich": "Reykjavik",
    },
    "Australia": {
        "AUS Central": "Darwin", "AUS Eastern": "Sydney", "Aus Central W.": "Eucla",
        "Cen. Australia": "Adelaide", "E. Australia": "Brisbane",
        "Lord Howe": "Lord_Howe", "Tasmania": "Hobart", "W. Australia": "Perth",
    },
    "Europe": {
        "Astrakhan": "Astrakhan", "Belarus": "Minsk", "Central Europe": "Budapest",
        "Central European": "Warsaw", "E. Europe": "Chisinau", "FLE": "Kiev",
        "GMT": "London", "GTB": "Bucharest", "Kaliningrad": "Kaliningrad",
        "Romance": "Paris", "Russian": "Moscow", "Saratov": "Saratov",
        "Turkey": "Istanbul", "Volgograd": "Volgograd", "W. Europe": "Berlin",
    },
    "Indian": {"Mauritius": "Mauritius"},
    "Pacific": {
        "Bougainville": "Bougainville", "Central Pacific": "Guadalcanal",
        "Chatham Islands": "Chatham", "Easter Island": "Easter", "Fiji": "Fiji",
        "Hawaiian": "Honolulu", "Line Islands": "Kiritimati",
        "Marquesas": "Marquesas", "New Zealand": "Auckland", "Norfolk": "Norfolk",
        "Samoa": "Apia", "Tonga": "Tongatapu", "West Pacific": "Port_Moresby",
    },
    "Etc": {"Dateline": "GMT+12"},
}

# "<stem> Standard Time (Mexico)" names, all in the America region.
_MEXICO_CITIES = {
    "Central": "Mexico_City", "Eastern": "Cancun",
    "Mountain": "Chihuahua", "Pacific": "Tijuana",
}

# "Russia Time Zone <n>" names.
_RUSSIA_NUMBERED = {
    3: "Europe/Samara", 10: "Asia/Srednekolymsk", 11: "Asia/Kamchatka",
}

# Hour offsets of the "UTC±HH" names; Etc/GMT zones use the opposite sign.
_UTC_OFFSETS = (12, 13, -2, -8, -9, -11)


def _build_windows_zones() -> dict[str, str]:
    zones = {
        f"{stem} Standard Time": f"{region}/{city}"
        for region, cities in _STANDARD_TIME_BY_REGION.items()
        for stem, city in cities.items()
    }
    zones.update(
        (f"{stem} Standard Time (Mexico)", f"America/{city}")
        for stem, city in _MEXICO_CITIES.items()
    )
    zones.update(
        (f"Russia Time Zone {number}", iana)
        for number, iana in _RUSSIA_NUMBERED.items()
    )
    zones["UTC"] = "Etc/GMT"
    zones.update(
        (f"UTC{hours:+03d}", f"Etc/GMT{-hours:+d}") for hours in _UTC_OFFSETS
    )
    return zones


WINDOWS_ZONES: dict[str, str] = _build_windows_zones()


def load_location(name: str) -> tzinfo:
    """Return the time zone called ``name``.

    Windows zone names are mapped to their IANA equivalents first. An empty
    name means UTC and ``"Local"`` means the system's local zone.

    Raises:
        ZoneInfoNotFoundError: if no such zone exists.
    """
    name = WINDOWS_ZONES.get(name, name)
    if name == "":
        return timezone.utc
    if name == "Local":
        local = datetime.now().astimezone().tzinfo
        return local if local is not None else timezone.utc
    try:
        return ZoneInfo(name)
    except ValueError as exc:
        raise ZoneInfoNotFoundError(f"unknown time zone {name}") from exc