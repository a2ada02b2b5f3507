"""Prefix store contract and the bundled PyTricia implementation.

The geo dataset is committed with :meth:`PrefixStore.full_replace`, which
readers observe as a single swap. Cloud datasets are committed record by
record with :meth:`PrefixStore.insert`, which is safe to call while other
threads perform lookups.
"""

from __future__ import annotations

import ipaddress
import logging
import threading
from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, Iterable, Optional, Tuple, TypeVar, Union

import pytricia

from .models import AddressFamily, NetworkPrefix

logger = logging.getLogger(__name__)

V = TypeVar("V")

Address = Union[str, ipaddress.IPv4Address, ipaddress.IPv6Address]


class PrefixStore(ABC, Generic[V]):
    """Longest-prefix-match index from IP addresses to metadata.

    Subclasses must implement:
        - insert(prefix, value): add or overwrite one prefix
        - full_replace(records): swap the whole content atomically
        - get(address): longest-prefix match, None when nothing covers it
    """

    @abstractmethod
    def insert(self, prefix: NetworkPrefix, value: V) -> None:
        """Insert or overwrite ``prefix``; re-inserting the same pair is a no-op in effect."""

    @abstractmethod
    def full_replace(self, records: Iterable[Tuple[NetworkPrefix, V]]) -> None:
        """Replace the entire content; readers see either old or new data, never a mix."""

    @abstractmethod
    def get(self, address: Address) -> Optional[V]:
        """Return the value of the most specific prefix covering ``address``."""


def _new_tries() -> Tuple[Any, Any]:
    return pytricia.PyTricia(32), pytricia.PyTricia(128)


class TrieStore(PrefixStore[V]):
    """PrefixStore backed by one PyTricia tree per address family.

    Performance:
        O(log n) lookups; PyTricia operations run in C under the GIL so a
        lookup never sees a half-inserted node.

    Thread Safety:
        Writers serialise on an internal lock. Readers take no lock: they read
        the current ``(v4, v6)`` tree pair once, and ``full_replace`` builds a
        fresh pair before swapping that single reference.

    Example:
        >>> store = TrieStore("cloud_provider")
        >>> store.insert(NetworkPrefix.parse("52.0.0.0/16"), "AWS-us-east-1")
        >>> store.get("52.0.1.1")
        'AWS-us-east-1'
    """

    def __init__(self, name: str = "dataset") -> None:
        """Create an empty store; ``name`` is used in log messages only."""
        self.name = name
        self._tries = _new_tries()
        self._write_lock = threading.Lock()

    @staticmethod
    def _slot(prefix: NetworkPrefix) -> int:
        return 0 if prefix.family is AddressFamily.V4 else 1

    def insert(self, prefix: NetworkPrefix, value: V) -> None:
        with self._write_lock:
            self._tries[self._slot(prefix)][str(prefix.network)] = value

    def full_replace(self, records: Iterable[Tuple[NetworkPrefix, V]]) -> None:
        with self._write_lock:
            tries = _new_tries()
            for prefix, value in records:
                tries[self._slot(prefix)][str(prefix.network)] = value
            self._tries = tries
        logger.info(f"{self.name}: replaced content with {len(tries[0])} IPv4 and {len(tries[1])} IPv6 prefixes")

    def get(self, address: Address) -> Optional[V]:
        try:
            ip = ipaddress.ip_address(address)
        except ValueError:
            return None
        v4, v6 = self._tries
        trie = v4 if ip.version == 4 else v6
        return trie.get(str(ip))

    def stats(self) -> Dict[str, int]:
        """Prefix counts per address family."""
        v4, v6 = self._tries
        return {"ipv4_prefixes": len(v4), "ipv6_prefixes": len(v6)}

    def __len__(self) -> int:
        v4, v6 = self._tries
        return len(v4) + len(v6)


__all__ = ["PrefixStore", "TrieStore"]
