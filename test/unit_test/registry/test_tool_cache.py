from __future__ import annotations

import pytest

from airiscode_mcp.registry.cache import ToolDescriptionCache
from airiscode_mcp.schemas.core import ToolDescription


class FakeClock:
    def __init__(self) -> None:
        self.now_ms = 1_000_000

    def __call__(self) -> float:
        return self.now_ms / 1000

    def advance_ms(self, ms: int) -> None:
        self.now_ms += ms


def _tools(*names: str) -> list[ToolDescription]:
    return [ToolDescription(name=n, description=f"{n} tool") for n in names]


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def cache(clock: FakeClock) -> ToolDescriptionCache:
    return ToolDescriptionCache(ttl_ms=1000, clock=clock)


def test_default_ttl_is_five_minutes() -> None:
    assert ToolDescriptionCache().ttl_ms == 300_000


def test_get_miss_for_unknown_name(cache: ToolDescriptionCache) -> None:
    assert cache.get("playwright") is None


def test_hit_before_ttl(cache: ToolDescriptionCache, clock: FakeClock) -> None:
    cache.set("playwright", _tools("navigate", "click"))
    clock.advance_ms(999)
    got = cache.get("playwright")
    assert got is not None
    assert [t.name for t in got] == ["navigate", "click"]


def test_miss_and_evict_at_ttl(cache: ToolDescriptionCache, clock: FakeClock) -> None:
    cache.set("playwright", _tools("navigate"))
    clock.advance_ms(1000)
    assert cache.get("playwright") is None
    # evicted: going back in time does not resurrect it
    clock.now_ms -= 10_000
    assert cache.get("playwright") is None


def test_set_starts_fresh_window(cache: ToolDescriptionCache, clock: FakeClock) -> None:
    cache.set("playwright", _tools("navigate"))
    clock.advance_ms(900)
    cache.set("playwright", _tools("navigate", "click"))
    clock.advance_ms(900)
    got = cache.get("playwright")
    assert got is not None and len(got) == 2


def test_clear_one_and_all(cache: ToolDescriptionCache) -> None:
    cache.set("playwright", _tools("navigate"))
    cache.set("tavily", _tools("search"))
    cache.clear("playwright")
    assert cache.get("playwright") is None
    assert cache.get("tavily") is not None
    cache.clear("never-set")
    cache.clear()
    assert cache.get("tavily") is None
    assert len(cache) == 0


def test_all_cached_skips_expired(cache: ToolDescriptionCache, clock: FakeClock) -> None:
    cache.set("playwright", _tools("navigate"))
    clock.advance_ms(600)
    cache.set("tavily", _tools("search"))
    clock.advance_ms(600)
    snapshot = cache.all_cached()
    assert list(snapshot) == ["tavily"]
    assert "tavily" in cache and "playwright" not in cache


def test_returned_lists_are_copies(cache: ToolDescriptionCache) -> None:
    tools = _tools("navigate")
    cache.set("playwright", tools)
    tools.append(ToolDescription(name="extra"))
    got = cache.get("playwright")
    assert got is not None and len(got) == 1
    got.clear()
    assert len(cache.get("playwright") or []) == 1


@pytest.mark.parametrize("ttl_ms", [0, -5])
def test_rejects_non_positive_ttl(ttl_ms: int) -> None:
    with pytest.raises(ValueError):
        ToolDescriptionCache(ttl_ms=ttl_ms)
