"""Data models shared by the ingestion pipeline and the prefix store.

A :class:`NetworkRecord` is the unit handed to a store: a parsed
:class:`NetworkPrefix` joined with either :class:`GeoMetadata` (vendor geo
dataset) or :class:`CloudMetadata` (cloud range catalogs).
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class AddressFamily(str, Enum):
    """IP address family of a prefix.

    Attributes:
        V4: 32-bit IPv4 addresses
        V6: 128-bit IPv6 addresses
    """

    V4 = "v4"
    V6 = "v6"

    @property
    def bits(self) -> int:
        """Bit width of addresses in this family."""
        return 32 if self is AddressFamily.V4 else 128


@dataclass(slots=True, frozen=True)
class NetworkPrefix:
    """An address family, a base address and a prefix length.

    The base address is kept exactly as published (host bits are not masked);
    stores normalise it when they index the prefix.

    Attributes:
        family: Address family tag
        address: Base address as an unsigned integer
        length: Prefix length, 0-32 for v4 and 0-128 for v6

    Raises:
        ValueError: If the length or address does not fit the family

    Example:
        >>> NetworkPrefix.parse("1.9.0.0/16")
        NetworkPrefix(family=<AddressFamily.V4: 'v4'>, address=17367040, length=16)
        >>> NetworkPrefix.parse("1.9.0.0/33") is None
        True
    """

    family: AddressFamily
    address: int
    length: int

    def __post_init__(self) -> None:
        """Reject lengths and addresses outside the family's bit width."""
        bits = self.family.bits
        if not 0 <= self.length <= bits:
            raise ValueError(f"prefix length {self.length} out of range for {self.family.value}")
        if not 0 <= self.address < (1 << bits):
            raise ValueError(f"address {self.address} out of range for {self.family.value}")

    @classmethod
    def parse(cls, text: str) -> Optional["NetworkPrefix"]:
        """Parse ``address/length`` trying IPv4 first, then IPv6.

        Returns:
            The prefix, or None when the text is not a valid network in either family
        """
        return cls.parse_v4(text) or cls.parse_v6(text)

    @classmethod
    def parse_v4(cls, text: str) -> Optional["NetworkPrefix"]:
        """Parse an IPv4 ``address/length``; None on any failure."""
        return cls._parse(text, AddressFamily.V4)

    @classmethod
    def parse_v6(cls, text: str) -> Optional["NetworkPrefix"]:
        """Parse an IPv6 ``address/length``; None on any failure."""
        return cls._parse(text, AddressFamily.V6)

    @classmethod
    def _parse(cls, text: str, family: AddressFamily) -> Optional["NetworkPrefix"]:
        address_text, sep, length_text = text.strip().partition("/")
        if not sep or not length_text.isdigit():
            return None
        try:
            if family is AddressFamily.V4:
                address = int(ipaddress.IPv4Address(address_text))
            else:
                address = int(ipaddress.IPv6Address(address_text))
            return cls(family=family, address=address, length=int(length_text))
        except ValueError:
            return None

    @property
    def network(self) -> Union[ipaddress.IPv4Network, ipaddress.IPv6Network]:
        """The prefix as an :mod:`ipaddress` network with host bits cleared."""
        if self.family is AddressFamily.V4:
            return ipaddress.IPv4Network((self.address, self.length), strict=False)
        return ipaddress.IPv6Network((self.address, self.length), strict=False)

    def __str__(self) -> str:
        if self.family is AddressFamily.V4:
            return f"{ipaddress.IPv4Address(self.address)}/{self.length}"
        return f"{ipaddress.IPv6Address(self.address)}/{self.length}"


@dataclass(slots=True)
class GeoMetadata:
    """Geolocation and autonomous-system attributes of one network.

    Mutable while a build is assembling it; treated as read-only once it has
    been handed to a store.

    Attributes:
        city: City name, empty when unknown or when city data is disabled
        country: Country display name
        country_iso: ISO 3166-1 alpha-2 code
        isp: Autonomous system organization name
        asn: Autonomous system number, 0 when unknown
        latitude: Latitude, 0.0 when unknown
        longitude: Longitude, 0.0 when unknown
    """

    city: str = ""
    country: str = ""
    country_iso: str = ""
    isp: str = ""
    asn: int = 0
    latitude: float = 0.0
    longitude: float = 0.0

    @property
    def has_location(self) -> bool:
        """Whether coordinates are known; (0.0, 0.0) means unknown in this dataset."""
        return self.latitude != 0.0 and self.longitude != 0.0


@dataclass(slots=True, frozen=True)
class CloudMetadata:
    """Cloud region and/or service label for a published range."""

    region: Optional[str] = None
    service: Optional[str] = None


Metadata = Union[GeoMetadata, CloudMetadata]


@dataclass(slots=True, frozen=True)
class NetworkRecord:
    """A network prefix joined with its metadata; the unit inserted into a store."""

    prefix: NetworkPrefix
    metadata: Metadata


__all__ = [
    "AddressFamily",
    "NetworkPrefix",
    "GeoMetadata",
    "CloudMetadata",
    "Metadata",
    "NetworkRecord",
]
