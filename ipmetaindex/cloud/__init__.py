"""Cloud range catalogs normalized into prefix records.

- AWS ip-ranges.json: region and service labels
- Azure service tags: region and service labels
- Microsoft 365 endpoints: service-area labels
"""

from .aws import fetch_aws_ranges, normalize_aws_ranges
from .azure import fetch_azure_ranges, normalize_azure_ranges
from .o365 import fetch_o365_endpoints, normalize_o365_endpoints, parse_o365_network

__all__ = [
    "fetch_aws_ranges",
    "fetch_azure_ranges",
    "fetch_o365_endpoints",
    "normalize_aws_ranges",
    "normalize_azure_ranges",
    "normalize_o365_endpoints",
    "parse_o365_network",
]
