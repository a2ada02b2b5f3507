"""GeoLite2 CSV fixtures for the geo pipeline tests.

The tables below follow the vendor column layout, trimmed to a handful of rows
that cover the join rules:

- 1.0.0.0/24: city Yunta, Australia, with coordinates and ASN data
- 8.8.8.0/24: city country (United States) wins over the registered country (China)
- 5.0.0.0/24: city without a country, registered country Germany fills it
- 2.0.0.0/24: no city geoname, registered country only, no coordinates
- 10.0.0.0/33: invalid prefix length, discarded
- 9.9.9.0/24 (ASN only): no city-block record, dropped
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict

COUNTRY_LOCATIONS_CSV = """geoname_id,locale_code,continent_code,continent_name,country_iso_code,country_name,is_in_european_union
2077456,en,OC,Oceania,AU,Australia,0
1814991,en,AS,Asia,CN,China,0
6252001,en,NA,"North America",US,"United States",0
2921044,en,EU,Europe,DE,Germany,1
abc,en,EU,Europe,XX,Bogus,0
"""

CITY_LOCATIONS_CSV = (
    "geoname_id,locale_code,continent_code,continent_name,country_iso_code,country_name,"
    "subdivision_1_iso_code,subdivision_1_name,subdivision_2_iso_code,subdivision_2_name,"
    "city_name,metro_code,time_zone,is_in_european_union\n"
    '2057192,en,OC,Oceania,AU,Australia,SA,"South Australia",,,Yunta,,Australia/Adelaide,0\n'
    '5375480,en,NA,"North America",US,"United States",CA,California,,,"Mountain View",807,America/Los_Angeles,0\n'
    '9999001,en,EU,Europe,,,,,,,"Nowhere, Town",,,0\n'
    "not-a-number,en,EU,Europe,,,,,,,Ghost,,,0\n"
)

CITY_BLOCKS_V4_CSV = (
    "network,geoname_id,registered_country_geoname_id,represented_country_geoname_id,"
    "is_anonymous_proxy,is_satellite_provider,postal_code,latitude,longitude,accuracy_radius\n"
    "1.0.0.0/24,2057192,2077456,,0,0,5440,-32.5833,139.5667,500\n"
    "8.8.8.0/24,5375480,1814991,,0,0,94043,37.4223,-122.085,1000\n"
    "5.0.0.0/24,9999001,2921044,,0,0,,51.0,9.0,100\n"
    "2.0.0.0/24,,2921044,,0,0,,,,100\n"
    "10.0.0.0/33,2057192,2077456,,0,0,,1.0,1.0,100\n"
)

ASN_BLOCKS_V4_CSV = """network,autonomous_system_number,autonomous_system_organization
1.0.0.0/24,13335,CLOUDFLARENET
8.8.8.0/24,15169,"Google, LLC"
9.9.9.0/24,19281,QUAD9-AS-1
"""

CITY_BLOCKS_V6_CSV = (
    "network,geoname_id,registered_country_geoname_id,represented_country_geoname_id,"
    "is_anonymous_proxy,is_satellite_provider,postal_code,latitude,longitude,accuracy_radius\n"
    "2001:4860::/32,5375480,6252001,,0,0,,37.751,-97.822,1000\n"
    "2001:db8::/129,5375480,6252001,,0,0,,1.0,1.0,1000\n"
)

ASN_BLOCKS_V6_CSV = """network,autonomous_system_number,autonomous_system_organization
2001:4860::/32,15169,"Google, LLC"
"""


def geolite2_files(language: str = "en") -> Dict[str, Dict[str, str]]:
    """Return the fixture tables grouped by edition, keyed by vendor file name."""
    return {
        "asn": {
            "GeoLite2-ASN-Blocks-IPv4.csv": ASN_BLOCKS_V4_CSV,
            "GeoLite2-ASN-Blocks-IPv6.csv": ASN_BLOCKS_V6_CSV,
        },
        "city": {
            "GeoLite2-City-Blocks-IPv4.csv": CITY_BLOCKS_V4_CSV,
            "GeoLite2-City-Blocks-IPv6.csv": CITY_BLOCKS_V6_CSV,
            f"GeoLite2-City-Locations-{language}.csv": CITY_LOCATIONS_CSV,
        },
        "country": {
            f"GeoLite2-Country-Locations-{language}.csv": COUNTRY_LOCATIONS_CSV,
        },
    }


def write_geolite2_tree(directory: Path, language: str = "en") -> Path:
    """Write every fixture table into one flat directory and return it."""
    directory.mkdir(parents=True, exist_ok=True)
    for files in geolite2_files(language).values():
        for name, content in files.items():
            (directory / name).write_text(content, encoding="utf-8")
    return directory
