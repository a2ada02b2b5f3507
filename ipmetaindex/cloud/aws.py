"""AWS published IP ranges (ip-ranges.json).

Document shape::

    {"syncToken": "...", "createDate": "...",
     "prefixes":      [{"ip_prefix": "3.5.140.0/22", "region": "ap-northeast-2",
                        "service": "AMAZON", "network_border_group": "..."}],
     "ipv6_prefixes": [{"ipv6_prefix": "2600:1f14::/35", "region": "us-west-2",
                        "service": "EC2", "network_border_group": "..."}]}

``service == "AMAZON"`` is the catch-all for the whole address space and is
not recorded as a service.
"""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from ..ingest.canonical import canonical_aws_region, canonical_aws_service
from ..models import AddressFamily, CloudMetadata, NetworkPrefix, NetworkRecord
from ..settings import IndexSettings
from ..telemetry import start_span
from ..transport import fetch_json
from .schema import require

logger = logging.getLogger(__name__)

GENERIC_SERVICE = "AMAZON"
_REASON = "Unexpected AWS IP ranges document"

# family -> (document array, prefix key)
_SECTIONS = {
    AddressFamily.V4: ("prefixes", "ip_prefix"),
    AddressFamily.V6: ("ipv6_prefixes", "ipv6_prefix"),
}


def fetch_aws_ranges(settings: IndexSettings, session: Optional[requests.Session] = None) -> Any:
    """Download the AWS ranges document."""
    with start_span("ipmeta.cloud.fetch", {"source": "aws"}):
        return fetch_json(
            settings.aws_url,
            reason="Cannot download AWS IP ranges",
            timeout=settings.request_timeout,
            retries=settings.retries,
            session=session,
        )


def normalize_aws_ranges(document: Any) -> List[NetworkRecord]:
    """Convert the AWS document into region/service records.

    Raises:
        SerializationFailure: The document does not follow the AWS schema
    """
    records: List[NetworkRecord] = []
    rejected = 0
    for family, (section, prefix_key) in _SECTIONS.items():
        parse = NetworkPrefix.parse_v4 if family is AddressFamily.V4 else NetworkPrefix.parse_v6
        for entry in require(document, section, list, reason=_REASON):
            cidr = require(entry, prefix_key, str, reason=_REASON)
            region = require(entry, "region", str, reason=_REASON)
            service = require(entry, "service", str, reason=_REASON)

            prefix = parse(cidr)
            if prefix is None:
                rejected += 1
                continue

            metadata = CloudMetadata(
                region=canonical_aws_region(region) if region else None,
                service=canonical_aws_service(service) if service and service != GENERIC_SERVICE else None,
            )
            if metadata.region is None and metadata.service is None:
                continue
            records.append(NetworkRecord(prefix=prefix, metadata=metadata))

    logger.info(f"AWS: normalized {len(records)} ranges ({rejected} unparseable prefixes skipped)")
    return records


__all__ = ["fetch_aws_ranges", "normalize_aws_ranges"]
