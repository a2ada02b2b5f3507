"""Network block assembly for the GeoLite2 CSV editions.

Each address family is built in two passes:

1. City blocks: every row becomes a :class:`GeoMetadata` keyed by its literal
   ``network`` text, with city and country resolved through the reference maps.
2. ASN blocks: rows whose ``network`` text matches a city-block key add the AS
   number and organization. ASN rows without geo data are dropped.

The keys are parsed into :class:`NetworkPrefix` objects only at the end;
unparseable networks (including out-of-range prefix lengths) are discarded.
"""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Dict, Iterator, List, Mapping, Optional

from ..errors import RowParseError
from ..ingest.canonical import canonical_asn_organization
from ..ingest.reader import iter_columns
from ..models import AddressFamily, GeoMetadata, NetworkPrefix, NetworkRecord
from ..telemetry import start_span
from .reference import CityInfo, CountryInfo, load_city_locations, load_country_locations, parse_geoname_id

logger = logging.getLogger(__name__)

CITY_BLOCK_COLUMNS = ("network", "geoname_id", "registered_country_geoname_id", "latitude", "longitude")
ASN_BLOCK_COLUMNS = ("network", "autonomous_system_number", "autonomous_system_organization")

COUNTRY_LOCATIONS_FILE = "GeoLite2-Country-Locations-{language}.csv"
CITY_LOCATIONS_FILE = "GeoLite2-City-Locations-{language}.csv"
CITY_BLOCK_FILES = {
    AddressFamily.V4: "GeoLite2-City-Blocks-IPv4.csv",
    AddressFamily.V6: "GeoLite2-City-Blocks-IPv6.csv",
}
ASN_BLOCK_FILES = {
    AddressFamily.V4: "GeoLite2-ASN-Blocks-IPv4.csv",
    AddressFamily.V6: "GeoLite2-ASN-Blocks-IPv6.csv",
}


def _lookup_id(value: str) -> Optional[int]:
    # Blank or malformed ids in block files resolve to "no match"
    try:
        return parse_geoname_id(value)
    except RowParseError:
        return None


def _parse_coordinate(value: str) -> float:
    try:
        coordinate = float(value)
    except ValueError:
        return 0.0
    return coordinate if math.isfinite(coordinate) else 0.0


def _parse_asn(value: str) -> int:
    value = value.strip()
    if value.isascii() and value.isdigit() and int(value) < (1 << 32):
        return int(value)
    return 0


def assemble_city_blocks(
    path: Path,
    geo_city: Mapping[int, CityInfo],
    geo_country: Mapping[int, CountryInfo],
    *,
    progress: bool = False,
) -> Dict[str, GeoMetadata]:
    """Resolve every city-block row into metadata keyed by its network text.

    Precedence: the city geoname sets the city name and, first, the country
    name; the registered country geoname fills the country name only if it is
    still empty, and the ISO code.

    Args:
        path: ``GeoLite2-City-Blocks-IPv{4,6}.csv``
        geo_city: Map from :func:`load_city_locations`
        geo_country: Map from :func:`load_country_locations`
        progress: Show a progress bar while streaming

    Returns:
        Map of literal ``network`` field -> GeoMetadata
    """
    networks: Dict[str, GeoMetadata] = {}
    skipped = 0
    for line_number, (network, geoname_id, registered_id, latitude, longitude) in iter_columns(
        path, CITY_BLOCK_COLUMNS, progress=progress
    ):
        network = network.strip()
        if not network:
            logger.debug(f"{path.name}:{line_number}: skipping row without network")
            skipped += 1
            continue

        info = GeoMetadata()
        city_id = _lookup_id(geoname_id)
        city = geo_city.get(city_id) if city_id is not None else None
        if city is not None:
            info.city = city.city_name
            if not info.country and city.country_name:
                info.country = city.country_name

        country_id = _lookup_id(registered_id)
        country = geo_country.get(country_id) if country_id is not None else None
        if country is not None:
            if not info.country and country.country_name:
                info.country = country.country_name
            if not info.country_iso and country.country_iso_code:
                info.country_iso = country.country_iso_code

        info.latitude = _parse_coordinate(latitude)
        info.longitude = _parse_coordinate(longitude)
        networks[network] = info

    logger.info(f"{path.name}: assembled {len(networks)} networks ({skipped} rows skipped)")
    return networks


def merge_asn_blocks(path: Path, networks: Dict[str, GeoMetadata], *, progress: bool = False) -> int:
    """Add AS number and organization to networks already present in ``networks``.

    Matching is by exact ``network`` text. Rows with no city-block record are
    dropped; the map never grows.

    Returns:
        Number of records that received ASN data
    """
    merged = 0
    dropped = 0
    for _, (network, asn, organization) in iter_columns(path, ASN_BLOCK_COLUMNS, progress=progress):
        info = networks.get(network.strip())
        if info is None:
            dropped += 1
            continue
        info.asn = _parse_asn(asn)
        info.isp = canonical_asn_organization(organization)
        merged += 1

    logger.info(f"{path.name}: merged ASN data into {merged} networks ({dropped} rows without geo data dropped)")
    return merged


def iter_network_records(networks: Mapping[str, GeoMetadata], family: AddressFamily) -> Iterator[NetworkRecord]:
    """Parse each network key as ``family`` and yield records, discarding failures."""
    parse = NetworkPrefix.parse_v4 if family is AddressFamily.V4 else NetworkPrefix.parse_v6
    rejected = 0
    for network, info in networks.items():
        prefix = parse(network)
        if prefix is None:
            logger.debug(f"Discarding unparseable {family.value} network {network!r}")
            rejected += 1
            continue
        yield NetworkRecord(prefix=prefix, metadata=info)
    if rejected:
        logger.warning(f"Discarded {rejected} unparseable {family.value} networks")


def process_geolite2_csv(
    directory: Path,
    *,
    enable_city: bool = True,
    language: str = "en",
    progress: bool = False,
) -> List[NetworkRecord]:
    """Build the complete geo record set from a merged GeoLite2 CSV directory.

    Reference tables and the network maps are discarded when this returns; the
    caller commits the records with a single full replace.

    Raises:
        IoFailure: A required table is missing, empty or unreadable
    """
    language = language.lower()
    with start_span("ipmeta.geoip.join", {"directory": str(directory), "language": language}):
        geo_country = load_country_locations(
            directory / COUNTRY_LOCATIONS_FILE.format(language=language), progress=progress
        )
        geo_city = load_city_locations(
            directory / CITY_LOCATIONS_FILE.format(language=language),
            enable_city=enable_city,
            progress=progress,
        )

    records: List[NetworkRecord] = []
    for family in AddressFamily:
        with start_span("ipmeta.geoip.assemble", {"family": family.value}):
            networks = assemble_city_blocks(
                directory / CITY_BLOCK_FILES[family], geo_city, geo_country, progress=progress
            )
            merge_asn_blocks(directory / ASN_BLOCK_FILES[family], networks, progress=progress)
            records.extend(iter_network_records(networks, family))

    logger.info(f"GeoLite2 build produced {len(records)} network records")
    return records


__all__ = [
    "assemble_city_blocks",
    "merge_asn_blocks",
    "iter_network_records",
    "process_geolite2_csv",
]
