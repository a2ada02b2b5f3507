"""CLI for rebuilding the IP metadata indexes once (cron-friendly)."""

from __future__ import annotations

import argparse
import dataclasses
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ..models import GeoMetadata
from ..settings import load_index_settings
from ..store import TrieStore
from ..tasks import TaskResult, update_cloud_providers, update_cloud_services, update_geoip
from ..utils.config import load_config_file

logger = logging.getLogger(__name__)

TARGETS = ("geoip", "cloud-providers", "cloud-services", "all")


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(asctime)s [%(levelname)s] %(message)s")
    else:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipmeta-update",
        description="Download vendor datasets and rebuild the IP metadata indexes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Rebuild the geo index (license key from ipmetaindex.toml or IPMETA_MAXMIND_LICENSE_KEY)
  ipmeta-update geoip --progress

  # Refresh cloud ranges and check a few addresses
  ipmeta-update cloud-providers --lookup 52.95.110.1 --lookup 20.38.64.1

  # Everything, country-level only
  ipmeta-update all --no-city --verbose
        """,
    )
    parser.add_argument("target", choices=TARGETS, help="Which index to rebuild")
    parser.add_argument("--config", type=Path, help="Path to ipmetaindex.toml (default: search config/ then .)")
    parser.add_argument("--license-key", help="MaxMind license key")
    parser.add_argument("--language", help="Locale of the GeoLite2 location files (default: en)")
    parser.add_argument("--no-city", action="store_true", help="Skip city names")
    parser.add_argument("--scratch-dir", type=Path, help="Directory for downloads and extraction")
    parser.add_argument("--timeout", type=int, help="Per-task timeout in seconds")
    parser.add_argument(
        "--lookup",
        action="append",
        default=[],
        metavar="IP",
        help="Address to look up after the build (repeatable)",
    )
    parser.add_argument("--progress", action="store_true", help="Show progress bars while parsing CSV files")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose logging")
    return parser


def _lookup_report(
    addresses: Iterable[str],
    geo_store: TrieStore[GeoMetadata],
    provider_store: TrieStore[str],
    service_store: TrieStore[str],
) -> List[Dict[str, Any]]:
    report = []
    for address in addresses:
        geo = geo_store.get(address)
        report.append(
            {
                "ip": address,
                "geo": dataclasses.asdict(geo) if geo is not None else None,
                "cloud_provider": provider_store.get(address),
                "cloud_service": service_store.get(address),
            }
        )
    return report


def main(argv: Iterable[str] | None = None) -> int:
    """Run the requested update tasks and return an exit status."""
    parser = _build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    _configure_logging(args.verbose)

    config = load_config_file(args.config)
    overrides = {
        "maxmind_license_key": args.license_key,
        "maxmind_language": args.language,
        "scratch_dir": args.scratch_dir,
        "task_timeout": args.timeout,
    }
    config.update({key: value for key, value in overrides.items() if value is not None})
    if args.no_city:
        config["enable_city"] = False
    settings = load_index_settings(config)

    geo_store: TrieStore[GeoMetadata] = TrieStore("geoip")
    provider_store: TrieStore[str] = TrieStore("cloud_provider")
    service_store: TrieStore[str] = TrieStore("cloud_service")

    results: List[TaskResult] = []
    if args.target in ("geoip", "all"):
        results.append(update_geoip(geo_store, settings, progress=args.progress))
    if args.target in ("cloud-providers", "all"):
        results.append(update_cloud_providers(provider_store, service_store, settings))
    if args.target in ("cloud-services", "all"):
        results.append(update_cloud_services(service_store, settings))

    for result in results:
        if result.ok:
            logger.info(f"{result.name}: {result.message}")
        else:
            logger.error(f"{result.name}: {result.message}")

    if args.lookup:
        report = _lookup_report(args.lookup, geo_store, provider_store, service_store)
        print(json.dumps(report, indent=2, ensure_ascii=False))

    return 0 if all(result.ok for result in results) else 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
