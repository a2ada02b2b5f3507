"""GeoLite2 CSV ingestion: reference joins, block assembly and acquisition."""

from .acquisition import GeoLite2Orchestrator, descend_single_subdirectory, extract_archive, join_path_files
from .blocks import assemble_city_blocks, iter_network_records, merge_asn_blocks, process_geolite2_csv
from .reference import CityInfo, CountryInfo, load_city_locations, load_country_locations

__all__ = [
    "CityInfo",
    "CountryInfo",
    "GeoLite2Orchestrator",
    "assemble_city_blocks",
    "descend_single_subdirectory",
    "extract_archive",
    "iter_network_records",
    "join_path_files",
    "load_city_locations",
    "load_country_locations",
    "merge_asn_blocks",
    "process_geolite2_csv",
]
