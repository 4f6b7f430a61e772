"""Deterministic pseudo-random values keyed by address.

The simulated sources derive both their absence decision and every field value
from a single number in ``[0, 1)`` computed from the address text, so the same
address always produces the same data.
"""

from __future__ import annotations

from typing import Protocol

from propbrief.core.types import DataSource


def address_hash(address: str) -> int:
    """Sum of the UTF-16 code units of *address*."""
    encoded = address.encode("utf-16-le")
    return sum(
        int.from_bytes(encoded[i : i + 2], "little")
        for i in range(0, len(encoded), 2)
    )


def address_random(address: str) -> float:
    """Map *address* to a value in ``[0, 1)`` with a resolution of 0.01."""
    return (address_hash(address) % 100) / 100


class RandomSource(Protocol):
    """Supplies the per-address random value each source draws from."""

    def value(self, address: str, source: DataSource) -> float: ...


class AddressHashRandom:
    """Default random source: the same address hash for every source."""

    def value(self, address: str, source: DataSource) -> float:
        return address_random(address)


class FixedRandom:
    """Random source returning preset values per source.

    Sources without an explicit value fall back to *default*.
    """

    def __init__(
        self,
        values: dict[DataSource, float] | None = None,
        default: float = 0.5,
    ) -> None:
        self._values = dict(values or {})
        self._default = default

    def value(self, address: str, source: DataSource) -> float:
        return self._values.get(source, self._default)
