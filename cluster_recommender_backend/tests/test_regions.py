import json

import pytest

from src.core.config import Settings
from src.services.regions import JsonRegionCatalog, RegionLookupError, StaticRegionCatalog


def test_bundled_catalog_knows_default_providers():
    settings = Settings()
    catalog = JsonRegionCatalog(settings.data_dir)
    for provider in settings.known_providers:
        assert catalog.is_valid_region(provider, "no-such-region") is False
    assert catalog.is_valid_region("amazon", "eu-west-1")
    assert not catalog.is_valid_region("amazon", "europe-west1")
    assert "eu-west-1a" in catalog.zones("amazon", "eu-west-1")


def test_catalog_from_custom_data_dir(tmp_path):
    (tmp_path / "regions.json").write_text(json.dumps({"google": {"us-central1": ["us-central1-a"]}}))
    catalog = JsonRegionCatalog(str(tmp_path))
    assert catalog.is_valid_region("google", "us-central1")
    assert catalog.zones("google", "us-central1") == ["us-central1-a"]


def test_missing_dataset_raises_lookup_error(tmp_path):
    with pytest.raises(RegionLookupError):
        JsonRegionCatalog(str(tmp_path / "empty"))


def test_malformed_dataset_raises_lookup_error(tmp_path):
    (tmp_path / "regions.json").write_text('{"amazon": ["eu-west-1"]}')
    with pytest.raises(RegionLookupError):
        JsonRegionCatalog(str(tmp_path))


def test_unknown_provider_and_region_raise():
    catalog = StaticRegionCatalog({"amazon": {"eu-west-1": ["eu-west-1a"]}})
    with pytest.raises(RegionLookupError):
        catalog.is_valid_region("azure", "westeurope")
    with pytest.raises(RegionLookupError):
        catalog.zones("amazon", "us-east-1")
