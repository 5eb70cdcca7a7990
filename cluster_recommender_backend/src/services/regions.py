"""Region catalog used to check that a region belongs to a provider.

The catalog is an external capability as far as the request pipeline is
concerned; JsonRegionCatalog is the bundled implementation backed by the
regions.json dataset. Implementations must be safe for concurrent calls.
"""
from __future__ import annotations

from typing import List, Mapping, Protocol

from src.data_readers import json_provider


class RegionLookupError(Exception):
    """The catalog could not answer (missing data, backend failure)."""


class RegionCatalog(Protocol):
    def is_valid_region(self, provider: str, region: str) -> bool:
        """Return True if region exists for provider; raise RegionLookupError if unknown."""
        ...

    def zones(self, provider: str, region: str) -> List[str]:
        """Return the availability zones of a region."""
        ...


class StaticRegionCatalog:
    """Catalog over an in-memory provider -> region -> zones mapping."""

    def __init__(self, regions: Mapping[str, Mapping[str, List[str]]]):
        self._regions = {p: {r: list(z) for r, z in rs.items()} for p, rs in regions.items()}

    def _provider_regions(self, provider: str) -> Mapping[str, List[str]]:
        try:
            return self._regions[provider]
        except KeyError:
            raise RegionLookupError(f"no region information for provider {provider}") from None

    def is_valid_region(self, provider: str, region: str) -> bool:
        return region in self._provider_regions(provider)

    def zones(self, provider: str, region: str) -> List[str]:
        regions = self._provider_regions(provider)
        if region not in regions:
            raise RegionLookupError(f"unknown region {region} for provider {provider}")
        return list(regions[region])


class JsonRegionCatalog(StaticRegionCatalog):
    """Catalog loaded from <data_dir>/regions.json."""

    def __init__(self, data_dir: str):
        try:
            regions = json_provider.get_region_catalog(data_dir)
        except json_provider.DatasetError as exc:
            raise RegionLookupError(str(exc)) from exc
        super().__init__(regions)
