import logging
from pathlib import Path

import pytest

from domain.schemas import Term
from domain.taxonomy.loader import parse_terms_config
from domain.taxonomy.ports import TermLookup
from infrastructure.config.models import SiteConfig, StoreBackend, StoreConfig
from infrastructure.terms import (
    FileTermStore,
    InMemoryTermStore,
    SafeTermLookup,
    make_term_store,
    register_store,
    registry,
)


class _BrokenStore(TermLookup):
    def __init__(self) -> None:
        self.calls = 0

    def find_term_by_id(self, term_id):
        self.calls += 1
        raise ConnectionError("database unavailable")

    def find_term_by_slug(self, slug):
        self.calls += 1
        raise ConnectionError("database unavailable")


def _write_terms(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "terms.yaml"
    path.write_text(text, encoding="utf-8")
    return path


def test_backend_errors_read_as_not_found(caplog: pytest.LogCaptureFixture) -> None:
    lookup = SafeTermLookup(_BrokenStore())
    with caplog.at_level(logging.WARNING):
        assert lookup.find_term_by_id(3) is None
        assert lookup.find_term_by_slug("news") is None
    assert "treating as not found" in caplog.text


def test_invalid_keys_skip_the_backend() -> None:
    inner = _BrokenStore()
    lookup = SafeTermLookup(inner)
    assert lookup.find_term_by_id(0) is None
    assert lookup.find_term_by_id(-4) is None
    assert lookup.find_term_by_slug("") is None
    assert inner.calls == 0


def test_safe_lookup_passes_hits_through() -> None:
    news = Term(id=1, slug="news")
    lookup = SafeTermLookup(InMemoryTermStore([news]))
    assert lookup.find_term_by_id(1) == news
    assert lookup.find_term_by_slug("news") == news
    assert lookup.find_term_by_slug("sports") is None


def test_parse_terms_config() -> None:
    terms = parse_terms_config({"terms": [{"id": 1, "slug": "news"}, {"id": 2, "slug": "politics", "parent": 1}]})
    assert [t.slug for t in terms] == ["news", "politics"]
    assert terms[1].parent == 1
    assert parse_terms_config({}) == []


@pytest.mark.parametrize(
    "data",
    [
        {"terms": {"id": 1}},
        {"terms": ["news"]},
        {"terms": [{"id": 0, "slug": "news"}]},
        {"terms": [{"id": 1, "slug": ""}]},
        {"terms": [{"id": 1, "slug": "a"}, {"id": 1, "slug": "b"}]},
    ],
)
def test_parse_terms_config_rejects_bad_input(data: dict) -> None:
    with pytest.raises(ValueError):
        parse_terms_config(data)


def test_file_store_from_config(tmp_path: Path) -> None:
    path = _write_terms(tmp_path, "terms:\n  - {id: 1, slug: news}\n  - {id: 3, slug: politics, parent: 1}\n")
    cfg = SiteConfig(
        home_url="https://example.com",
        store=StoreConfig(backend=StoreBackend.FILE, terms_file=path),
    )
    store = make_term_store(cfg)
    assert isinstance(store, FileTermStore)
    assert len(store) == 2
    assert store.find_term_by_slug("politics") == Term(id=3, slug="politics", parent=1)


def test_memory_store_from_config_starts_empty() -> None:
    store = make_term_store(SiteConfig(home_url="https://example.com"))
    assert isinstance(store, InMemoryTermStore)
    assert len(store) == 0


def test_file_store_missing_file(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        FileTermStore(tmp_path / "missing.yaml")


class _FixedStore(InMemoryTermStore):
    @classmethod
    def from_cfg(cls, cfg):
        return cls([Term(id=9, slug="fixed")])


def test_registered_override_is_used_by_factory() -> None:
    cfg = SiteConfig(home_url="https://example.com")
    try:
        register_store(StoreBackend.MEMORY, _FixedStore, override=True)
        store = make_term_store(cfg)
        assert isinstance(store, _FixedStore)
        assert store.find_term_by_slug("fixed") == Term(id=9, slug="fixed")
    finally:
        register_store(StoreBackend.MEMORY, InMemoryTermStore, override=True)


def test_duplicate_registration_requires_override() -> None:
    with pytest.raises(RuntimeError, match="already registered"):
        register_store(StoreBackend.MEMORY, _FixedStore)


def test_factory_rejects_unregistered_backend(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(registry, "_STORE_REGISTRY", {})
    with pytest.raises(RuntimeError, match="No term store registered"):
        make_term_store(SiteConfig(home_url="https://example.com"))
