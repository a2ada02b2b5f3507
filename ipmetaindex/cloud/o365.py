"""Microsoft 365 endpoint catalog (endpoints.office.com).

The catalog is a JSON array of endpoint sets; each may list ``ips`` as
``address/prefixLength`` strings. A colon in the address marks IPv6.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from ..errors import SerializationFailure
from ..ingest.canonical import canonical_o365_service_area
from ..models import CloudMetadata, NetworkPrefix, NetworkRecord
from ..settings import IndexSettings
from ..telemetry import start_span
from ..transport import fetch_json
from .schema import optional, require

logger = logging.getLogger(__name__)

_REASON = "Unexpected O365 endpoint catalog"


def fetch_o365_endpoints(settings: IndexSettings, session: Optional[requests.Session] = None) -> Any:
    """Download the worldwide endpoint catalog."""
    with start_span("ipmeta.cloud.fetch", {"source": "o365"}):
        return fetch_json(
            settings.o365_url,
            reason="Cannot download O365 endpoints",
            timeout=settings.request_timeout,
            retries=settings.retries,
            session=session,
        )


def parse_o365_network(text: str) -> Optional[NetworkPrefix]:
    """Parse an ``ips`` entry, choosing the family by the presence of a colon."""
    address, sep, _ = text.rpartition("/")
    if not sep:
        return None
    if ":" in address:
        return NetworkPrefix.parse_v6(text)
    return NetworkPrefix.parse_v4(text)


def normalize_o365_endpoints(document: Any) -> List[NetworkRecord]:
    """Convert the endpoint catalog into service-area records.

    Raises:
        SerializationFailure: The document is not an array of endpoint sets
    """
    if not isinstance(document, list):
        raise SerializationFailure(_REASON) from TypeError(f"catalog is {type(document).__name__}")

    records: List[NetworkRecord] = []
    rejected = 0
    for entry in document:
        service_area = require(entry, "serviceArea", str, reason=_REASON)
        ips = optional(entry, "ips", list, [], reason=_REASON)
        if not ips or not service_area:
            continue
        metadata = CloudMetadata(service=canonical_o365_service_area(service_area))
        for text in ips:
            prefix = parse_o365_network(text) if isinstance(text, str) else None
            if prefix is None:
                rejected += 1
                continue
            records.append(NetworkRecord(prefix=prefix, metadata=metadata))

    logger.info(f"O365: normalized {len(records)} ranges ({rejected} unparseable entries skipped)")
    return records


__all__ = ["fetch_o365_endpoints", "parse_o365_network", "normalize_o365_endpoints"]
