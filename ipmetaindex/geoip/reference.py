"""Geoname reference tables joined by the block assembler.

GeoLite2 ships its place data as two location tables keyed by a numeric
``geoname_id``. This module turns them into lookup maps that live for the
duration of one build:

    GeoLite2-Country-Locations-{lang}.csv -> {geoname_id: CountryInfo}
    GeoLite2-City-Locations-{lang}.csv    -> {geoname_id: CityInfo}

Rows whose ``geoname_id`` is not numeric are skipped; the rest of the file is
still processed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict

from ..errors import RowParseError
from ..ingest.canonical import (
    canonical_continent_code,
    canonical_continent_name,
    canonical_country_iso_code,
    canonical_country_name,
)
from ..ingest.reader import iter_columns

logger = logging.getLogger(__name__)

_MAX_GEONAME_ID = (1 << 32) - 1

COUNTRY_COLUMNS = ("geoname_id", "continent_code", "continent_name", "country_iso_code", "country_name")
CITY_COLUMNS = ("geoname_id", "city_name", "country_name")


@dataclass(slots=True, frozen=True)
class CountryInfo:
    """Country attributes of one geoname."""

    continent_code: str = ""
    continent_name: str = ""
    country_iso_code: str = ""
    country_name: str = ""


@dataclass(slots=True, frozen=True)
class CityInfo:
    """City attributes of one geoname; ``city_name`` is empty when city data is disabled."""

    city_name: str = ""
    country_name: str = ""


def parse_geoname_id(value: str) -> int:
    """Parse a vendor geoname id as an unsigned 32-bit integer.

    Raises:
        RowParseError: If the value is empty, non-numeric or out of range
    """
    value = value.strip()
    if not (value.isascii() and value.isdigit()):
        raise RowParseError(f"invalid geoname_id {value!r}")
    geoname_id = int(value)
    if geoname_id > _MAX_GEONAME_ID:
        raise RowParseError(f"geoname_id {value} out of range")
    return geoname_id


def load_country_locations(path: Path, *, progress: bool = False) -> Dict[int, CountryInfo]:
    """Build the geoname id -> country map from the country locations table."""
    geonames: Dict[int, CountryInfo] = {}
    skipped = 0
    for line_number, (raw_id, continent_code, continent_name, iso_code, country_name) in iter_columns(
        path, COUNTRY_COLUMNS, progress=progress
    ):
        try:
            geoname_id = parse_geoname_id(raw_id)
        except RowParseError as e:
            logger.debug(f"{path.name}:{line_number}: skipping row ({e})")
            skipped += 1
            continue
        geonames[geoname_id] = CountryInfo(
            continent_code=canonical_continent_code(continent_code),
            continent_name=canonical_continent_name(continent_name),
            country_iso_code=canonical_country_iso_code(iso_code),
            country_name=canonical_country_name(country_name),
        )

    logger.info(f"{path.name}: loaded {len(geonames)} country geonames ({skipped} rows skipped)")
    return geonames


def load_city_locations(
    path: Path,
    *,
    enable_city: bool = True,
    progress: bool = False,
) -> Dict[int, CityInfo]:
    """Build the geoname id -> city map from the city locations table.

    Args:
        path: City locations CSV
        enable_city: Keep city names; when False only the country column is
            used, so networks still resolve a country through their city geoname
        progress: Show a progress bar while streaming

    Returns:
        Map of geoname id to :class:`CityInfo`
    """
    geonames: Dict[int, CityInfo] = {}
    skipped = 0
    for line_number, (raw_id, city_name, country_name) in iter_columns(path, CITY_COLUMNS, progress=progress):
        try:
            geoname_id = parse_geoname_id(raw_id)
        except RowParseError as e:
            logger.debug(f"{path.name}:{line_number}: skipping row ({e})")
            skipped += 1
            continue
        geonames[geoname_id] = CityInfo(
            city_name=city_name if enable_city else "",
            country_name=canonical_country_name(country_name),
        )

    logger.info(f"{path.name}: loaded {len(geonames)} city geonames ({skipped} rows skipped)")
    return geonames


__all__ = [
    "CountryInfo",
    "CityInfo",
    "parse_geoname_id",
    "load_country_locations",
    "load_city_locations",
]
