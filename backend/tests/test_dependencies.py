import pandas as pd
import pytest

from backend.app import dependencies
from backend.app.config import AppConfig

OWNER = "0xowner"


@pytest.fixture()
def fresh_providers():
    dependencies.get_registry.cache_clear()
    dependencies.get_event_bus.cache_clear()
    yield
    dependencies.get_registry.cache_clear()
    dependencies.get_event_bus.cache_clear()


def test_bad_seed_row_does_not_stop_startup(fresh_providers, monkeypatch, tmp_path):
    pd.DataFrame([{"id": "0xaa", "label": "doc1", "uri": ""}]).to_parquet(
        tmp_path / "nodes.parquet"
    )
    pd.DataFrame([{"from_id": "0xaa", "to_id": "0xzz", "relation": "cites"}]).to_parquet(
        tmp_path / "links.parquet"
    )
    config = AppConfig(system_owner=OWNER, seed_dir=str(tmp_path))
    monkeypatch.setattr(dependencies, "get_config", lambda: config)

    registry = dependencies.get_registry()

    assert registry.has_node("0xaa")
    assert registry.link_count() == 0
    assert registry.metadata["seeded"] is False
    assert "0xzz" in registry.metadata["load_error"]


def test_clean_seed_marks_registry_seeded(fresh_providers, monkeypatch, tmp_path):
    pd.DataFrame([{"id": "0xaa", "label": "doc1", "uri": ""}]).to_parquet(
        tmp_path / "nodes.parquet"
    )
    config = AppConfig(system_owner=OWNER, seed_dir=str(tmp_path))
    monkeypatch.setattr(dependencies, "get_config", lambda: config)

    registry = dependencies.get_registry()

    assert registry.metadata == {"seeded": True}
    assert registry.get_nodes_of(OWNER) == ["0xaa"]
