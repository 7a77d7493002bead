"""Store interface.

This is the contract a store handle must satisfy for :class:`kvset.RemoteSet`
to operate against it. Names and argument order match the redis-py client, so
a :class:`redis.Redis` instance qualifies without subclassing anything here;
:class:`Store` exists to document the contract and to give in-process
implementations something to derive from.

A conforming store executes every command atomically, deduplicates set
elements by exact wire-value equality, and treats absent keys as empty sets.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Collection, Sequence


class Store(ABC):
    """Named set primitives of a remote key-value store."""

    @abstractmethod
    def sadd(self, key: str, *values: Any) -> int:
        """Add *values* to the set at *key*; return how many were new."""

    @abstractmethod
    def srem(self, key: str, *values: Any) -> int:
        """Remove *values* from the set at *key*; return how many were present."""

    @abstractmethod
    def sismember(self, key: str, value: Any) -> bool:
        """Whether *value* is an element of the set at *key*."""

    @abstractmethod
    def smembers(self, key: str) -> Collection[Any]:
        """All elements of the set at *key*, in no particular order."""

    @abstractmethod
    def scard(self, key: str) -> int:
        """Number of elements in the set at *key*."""

    @abstractmethod
    def delete(self, *keys: str) -> int:
        """Remove *keys* entirely; return how many existed."""

    @abstractmethod
    def sinter(self, keys: Sequence[str]) -> Collection[Any]:
        """Elements present in every set named by *keys*."""

    @abstractmethod
    def sunion(self, keys: Sequence[str]) -> Collection[Any]:
        """Elements present in any set named by *keys*."""

    @abstractmethod
    def sdiff(self, keys: Sequence[str]) -> Collection[Any]:
        """Elements of the first set not present in any of the others."""

    @abstractmethod
    def sinterstore(self, dest: str, keys: Sequence[str]) -> int:
        """Store the intersection of *keys* as *dest*; return its size."""

    @abstractmethod
    def sunionstore(self, dest: str, keys: Sequence[str]) -> int:
        """Store the union of *keys* as *dest*; return its size."""

    @abstractmethod
    def sdiffstore(self, dest: str, keys: Sequence[str]) -> int:
        """Store the difference of *keys* as *dest*; return its size."""
