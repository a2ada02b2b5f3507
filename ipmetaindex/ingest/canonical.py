"""Canonicalization of recurring vendor enumeration values.

Millions of rows repeat a small set of region codes, service names, country
names and ASN organizations. Known values resolve to a process-wide
:class:`SharedString` built once at import; anything else comes back as a
plain ``str`` copy of the input. Both forms are ``str`` and compare equal by
value, so callers never need to know which one they hold.
"""

from __future__ import annotations

from typing import Dict, Mapping

from . import tables


class SharedString(str):
    """A label owned by a canonicalization table and shared by every record."""

    __slots__ = ()


_INTERNED: Dict[str, SharedString] = {}


def _freeze(raw_table: Mapping[str, str]) -> Dict[str, SharedString]:
    # Identical labels across domains (e.g. "SA" continent and country) share one object
    frozen: Dict[str, SharedString] = {}
    for key, label in raw_table.items():
        shared = _INTERNED.get(label)
        if shared is None:
            shared = _INTERNED[label] = SharedString(label)
        frozen[key] = shared
    return frozen


AWS_SERVICES = _freeze(tables.AWS_SERVICES)
AWS_REGIONS = _freeze(tables.AWS_REGIONS)
AZURE_SERVICES = _freeze(tables.AZURE_SERVICES)
AZURE_REGIONS = _freeze(tables.AZURE_REGIONS)
CONTINENT_CODES = _freeze(tables.CONTINENT_CODES)
CONTINENT_NAMES = _freeze(tables.CONTINENT_NAMES)
COUNTRY_ISO_CODES = _freeze(tables.COUNTRY_ISO_CODES)
COUNTRY_NAMES = _freeze(tables.COUNTRY_NAMES)
TOP_ASN_ORGANIZATIONS = _freeze(tables.TOP_ASN_ORGANIZATIONS)
O365_SERVICE_AREAS = _freeze(tables.O365_SERVICE_AREAS)


def canonical(table: Mapping[str, SharedString], raw: str) -> str:
    """Return the shared constant for ``raw`` or an owned copy of it."""
    shared = table.get(raw)
    if shared is not None:
        return shared
    return str(raw)


def is_shared(value: str) -> bool:
    """Whether ``value`` is a table constant rather than an owned copy."""
    return isinstance(value, SharedString)


def canonical_aws_service(raw: str) -> str:
    return canonical(AWS_SERVICES, raw)


def canonical_aws_region(raw: str) -> str:
    return canonical(AWS_REGIONS, raw)


def canonical_azure_service(raw: str) -> str:
    return canonical(AZURE_SERVICES, raw)


def canonical_azure_region(raw: str) -> str:
    return canonical(AZURE_REGIONS, raw)


def canonical_continent_code(raw: str) -> str:
    return canonical(CONTINENT_CODES, raw)


def canonical_continent_name(raw: str) -> str:
    return canonical(CONTINENT_NAMES, raw)


def canonical_country_iso_code(raw: str) -> str:
    return canonical(COUNTRY_ISO_CODES, raw)


def canonical_country_name(raw: str) -> str:
    return canonical(COUNTRY_NAMES, raw)


def canonical_asn_organization(raw: str) -> str:
    return canonical(TOP_ASN_ORGANIZATIONS, raw)


def canonical_o365_service_area(raw: str) -> str:
    return canonical(O365_SERVICE_AREAS, raw)


__all__ = [
    "SharedString",
    "canonical",
    "is_shared",
    "canonical_aws_service",
    "canonical_aws_region",
    "canonical_azure_service",
    "canonical_azure_region",
    "canonical_continent_code",
    "canonical_continent_name",
    "canonical_country_iso_code",
    "canonical_country_name",
    "canonical_asn_organization",
    "canonical_o365_service_area",
]
