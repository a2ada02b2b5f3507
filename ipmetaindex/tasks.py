"""Update tasks invoked by an external scheduler.

Each task builds its records inside a worker thread bounded by
``settings.task_timeout`` and only touches the store once the build has
returned. A failed or timed-out build leaves the store exactly as it was and
is reported through :class:`TaskResult`.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from dataclasses import dataclass
from typing import Any, Callable, List, Optional, Sequence, Tuple, TypeVar

import requests

from .cloud import (
    fetch_aws_ranges,
    fetch_azure_ranges,
    fetch_o365_endpoints,
    normalize_aws_ranges,
    normalize_azure_ranges,
    normalize_o365_endpoints,
)
from .errors import IndexBuildError
from .geoip import GeoLite2Orchestrator
from .models import CloudMetadata, GeoMetadata, NetworkRecord
from .settings import IndexSettings
from .store import PrefixStore
from .telemetry import start_span

logger = logging.getLogger(__name__)

T = TypeVar("T")

GEOIP_UPDATED = "Correctly updated GeoIpDatabase"
CLOUD_PROVIDERS_UPDATED = "Correctly updated IpCloudService and IpCloudProvider"
CLOUD_SERVICES_UPDATED = "Correctly updated CloudService"
MISSING_LICENSE_KEY = "Cannot find MAXMIND_API secret"


@dataclass(slots=True, frozen=True)
class TaskResult:
    """Outcome reported to the scheduler."""

    name: str
    ok: bool
    message: str


class TaskTimeout(IndexBuildError):
    """The build did not finish within the task timeout."""


def run_with_timeout(name: str, build: Callable[[], T], timeout: float) -> T:
    """Run ``build`` in a worker thread and wait at most ``timeout`` seconds.

    On timeout the worker is abandoned; it finishes (and cleans up its scratch
    files) in the background while the caller moves on.

    Raises:
        TaskTimeout: The build did not return in time
        Exception: Whatever ``build`` raised
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"ipmeta-{name}")
    future = executor.submit(build)
    try:
        return future.result(timeout=timeout)
    except FutureTimeoutError as e:
        logger.error(f"{name}: build exceeded {timeout}s, abandoning it")
        raise TaskTimeout(f"{name} timed out after {timeout}s") from e
    finally:
        executor.shutdown(wait=False, cancel_futures=True)


def update_geoip(
    store: PrefixStore[GeoMetadata],
    settings: IndexSettings,
    *,
    session: Optional[requests.Session] = None,
    progress: bool = False,
) -> TaskResult:
    """Rebuild the geo dataset and commit it with a single full replace."""
    name = "geoip"
    if not settings.maxmind_license_key:
        logger.error(MISSING_LICENSE_KEY)
        return TaskResult(name, False, MISSING_LICENSE_KEY)

    orchestrator = GeoLite2Orchestrator(settings, session=session)
    try:
        records = run_with_timeout(name, lambda: orchestrator.build(progress=progress), settings.task_timeout)
    except IndexBuildError as e:
        return TaskResult(name, False, e.reason)

    with start_span("ipmeta.geoip.commit", {"records": len(records)}):
        store.full_replace((record.prefix, record.metadata) for record in records)
    logger.info(GEOIP_UPDATED)
    return TaskResult(name, True, GEOIP_UPDATED)


CloudSource = Tuple[str, Callable[..., Any], Callable[[Any], List[NetworkRecord]]]

CLOUD_PROVIDER_SOURCES: Sequence[CloudSource] = (
    ("aws", fetch_aws_ranges, normalize_aws_ranges),
    ("azure", fetch_azure_ranges, normalize_azure_ranges),
)


def _build_cloud_records(
    source: CloudSource,
    settings: IndexSettings,
    session: Optional[requests.Session],
) -> List[NetworkRecord]:
    name, fetch, normalize = source
    with start_span("ipmeta.cloud.normalize", {"source": name}):
        return normalize(fetch(settings, session=session))


def _insert_cloud_records(
    records: List[NetworkRecord],
    provider_store: Optional[PrefixStore[str]],
    service_store: Optional[PrefixStore[str]],
) -> None:
    for record in records:
        metadata: CloudMetadata = record.metadata
        if provider_store is not None and metadata.region:
            provider_store.insert(record.prefix, metadata.region)
        if service_store is not None and metadata.service:
            service_store.insert(record.prefix, metadata.service)


def update_cloud_providers(
    provider_store: PrefixStore[str],
    service_store: PrefixStore[str],
    settings: IndexSettings,
    *,
    session: Optional[requests.Session] = None,
    sources: Sequence[CloudSource] = CLOUD_PROVIDER_SOURCES,
) -> TaskResult:
    """Insert AWS and Azure ranges: regions into ``provider_store``, services into ``service_store``.

    A failing source is logged and skipped; the task fails only when every
    source failed.
    """
    name = "cloud-providers"
    failures: List[str] = []
    for source in sources:
        source_name = source[0]
        try:
            records = run_with_timeout(
                source_name,
                lambda source=source: _build_cloud_records(source, settings, session),
                settings.task_timeout,
            )
        except IndexBuildError as e:
            logger.error(f"{source_name}: skipped ({e.reason})")
            failures.append(e.reason)
            continue
        with start_span("ipmeta.cloud.commit", {"source": source_name, "records": len(records)}):
            _insert_cloud_records(records, provider_store, service_store)

    if len(failures) == len(sources):
        return TaskResult(name, False, "; ".join(failures))
    logger.info(CLOUD_PROVIDERS_UPDATED)
    return TaskResult(name, True, CLOUD_PROVIDERS_UPDATED)


def update_cloud_services(
    service_store: PrefixStore[str],
    settings: IndexSettings,
    *,
    session: Optional[requests.Session] = None,
) -> TaskResult:
    """Insert Microsoft 365 endpoint ranges into ``service_store``."""
    name = "cloud-services"
    source: CloudSource = ("o365", fetch_o365_endpoints, normalize_o365_endpoints)
    try:
        records = run_with_timeout(
            "o365", lambda: _build_cloud_records(source, settings, session), settings.task_timeout
        )
    except IndexBuildError as e:
        return TaskResult(name, False, e.reason)

    with start_span("ipmeta.cloud.commit", {"source": "o365", "records": len(records)}):
        _insert_cloud_records(records, None, service_store)
    logger.info(CLOUD_SERVICES_UPDATED)
    return TaskResult(name, True, CLOUD_SERVICES_UPDATED)


__all__ = [
    "TaskResult",
    "TaskTimeout",
    "run_with_timeout",
    "update_geoip",
    "update_cloud_providers",
    "update_cloud_services",
]
