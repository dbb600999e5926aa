from domain.schemas import Term
from domain.taxonomy.hierarchy import HierarchyResolver
from infrastructure.terms import InMemoryTermStore


class _CountingStore(InMemoryTermStore):
    def __init__(self, terms):
        super().__init__(terms)
        self.id_calls: list[int] = []
        self.slug_calls: list[str] = []

    def find_term_by_id(self, term_id):
        self.id_calls.append(term_id)
        return super().find_term_by_id(term_id)

    def find_term_by_slug(self, slug):
        self.slug_calls.append(slug)
        return super().find_term_by_slug(slug)


NEWS = Term(id=1, slug="news")
WORLD = Term(id=2, slug="world")
POLITICS = Term(id=3, slug="politics", parent=1)


def _resolver(*terms: Term) -> HierarchyResolver:
    return HierarchyResolver(InMemoryTermStore(terms or (NEWS, WORLD, POLITICS)))


def test_empty_segments_resolve_to_none() -> None:
    assert _resolver().resolve([]) is None


def test_single_segment_is_slug_lookup() -> None:
    assert _resolver().resolve(["world"]) == WORLD
    assert _resolver().resolve(["missing"]) is None


def test_verified_child_is_returned() -> None:
    store = _CountingStore([NEWS, WORLD, POLITICS])
    assert HierarchyResolver(store).resolve(["news", "politics"]) == POLITICS
    # Parent fetched by id for verification; no fallback slug lookup
    assert store.id_calls == [1]
    assert store.slug_calls == ["politics"]


def test_parent_mismatch_falls_back_to_parent_slug() -> None:
    politics_under_world = Term(id=3, slug="politics", parent=2)
    assert _resolver(NEWS, WORLD, politics_under_world).resolve(["news", "politics"]) == NEWS


def test_root_child_falls_back_to_parent_slug() -> None:
    # "world" has no parent, so "news/world" cannot verify
    assert _resolver().resolve(["news", "world"]) == NEWS


def test_unknown_child_falls_back_to_parent_slug() -> None:
    assert _resolver().resolve(["news", "page-2"]) == NEWS


def test_neither_segment_resolves() -> None:
    assert _resolver().resolve(["nope", "nothing"]) is None


def test_missing_parent_term_falls_back() -> None:
    orphan = Term(id=7, slug="orphan", parent=99)
    assert _resolver(NEWS, orphan).resolve(["news", "orphan"]) == NEWS
    assert _resolver(orphan).resolve(["x", "orphan"]) is None


def test_only_last_two_segments_are_consulted() -> None:
    assert _resolver().resolve(["world", "anything", "news", "politics"]) == POLITICS
    assert _resolver().resolve(["news", "politics", "missing"]) == POLITICS


def test_segments_are_url_decoded() -> None:
    cafe = Term(id=8, slug="café")
    menu = Term(id=9, slug="menü", parent=8)
    resolver = _resolver(cafe, menu)
    assert resolver.resolve(["caf%C3%A9"]) == cafe
    assert resolver.resolve(["caf%C3%A9", "men%C3%BC"]) == menu


def test_empty_decoded_slug_is_not_looked_up() -> None:
    store = _CountingStore([NEWS])
    assert HierarchyResolver(store).lookup_slug("") is None
    assert store.slug_calls == []
