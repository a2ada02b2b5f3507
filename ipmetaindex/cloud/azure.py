"""Azure service tags (ServiceTags_Public_*.json).

Each entry of ``values`` carries ``properties.addressPrefixes``, a mixed list
of IPv4 and IPv6 networks, with the entry's ``region`` and ``systemService``.
Either label may be empty (global tags have no region).
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from ..ingest.canonical import canonical_azure_region, canonical_azure_service
from ..models import CloudMetadata, NetworkPrefix, NetworkRecord
from ..settings import IndexSettings
from ..telemetry import start_span
from ..transport import fetch_json
from .schema import optional, require

logger = logging.getLogger(__name__)

_REASON = "Unexpected Azure service tags document"


def fetch_azure_ranges(settings: IndexSettings, session: Optional[requests.Session] = None) -> Any:
    """Download the Azure service tags document."""
    with start_span("ipmeta.cloud.fetch", {"source": "azure"}):
        return fetch_json(
            settings.azure_url,
            reason="Cannot download Azure service tags",
            timeout=settings.request_timeout,
            retries=settings.retries,
            session=session,
        )


def normalize_azure_ranges(document: Any) -> List[NetworkRecord]:
    """Convert the service tags document into region/service records.

    Prefixes are tried as IPv4 first, then IPv6; text valid in neither is skipped.

    Raises:
        SerializationFailure: The document does not follow the service tags schema
    """
    records: List[NetworkRecord] = []
    rejected = 0
    for entry in require(document, "values", list, reason=_REASON):
        properties = require(entry, "properties", dict, reason=_REASON)
        region = optional(properties, "region", str, "", reason=_REASON)
        service = optional(properties, "systemService", str, "", reason=_REASON)
        metadata = CloudMetadata(
            region=canonical_azure_region(region) if region else None,
            service=canonical_azure_service(service) if service else None,
        )
        if metadata.region is None and metadata.service is None:
            continue

        for cidr in require(properties, "addressPrefixes", list, reason=_REASON):
            prefix = NetworkPrefix.parse(cidr) if isinstance(cidr, str) else None
            if prefix is None:
                rejected += 1
                continue
            records.append(NetworkRecord(prefix=prefix, metadata=metadata))

    logger.info(f"Azure: normalized {len(records)} ranges ({rejected} unparseable prefixes skipped)")
    return records


__all__ = ["fetch_azure_ranges", "normalize_azure_ranges"]
