from __future__ import annotations

from types import MappingProxyType

import pytest

from airiscode_mcp.registry.categories import (
    PROVIDER_CATEGORIES,
    ProviderCategory,
    always_on_servers,
    classify,
    is_always_on,
    is_lazy,
    lazy_servers,
)


@pytest.mark.parametrize(
    "name,expected",
    [
        ("filesystem", ProviderCategory.ALWAYS_ON),
        ("self-management", ProviderCategory.ALWAYS_ON),
        ("playwright", ProviderCategory.LAZY),
        ("sqlite", ProviderCategory.LAZY),
        ("github", ProviderCategory.UNKNOWN),
        ("", ProviderCategory.UNKNOWN),
    ],
)
def test_classify(name: str, expected: ProviderCategory) -> None:
    assert classify(name) is expected


def test_lists_are_disjoint_and_cover_the_table() -> None:
    always_on = set(always_on_servers())
    lazy = set(lazy_servers())
    assert always_on.isdisjoint(lazy)
    assert always_on | lazy == set(PROVIDER_CATEGORIES)
    assert len(always_on) == 6
    assert len(lazy) == 13


def test_derived_lists_keep_table_order() -> None:
    assert always_on_servers()[:2] == ("filesystem", "context7")
    assert lazy_servers()[0] == "playwright"


def test_predicates() -> None:
    assert is_always_on("serena") and not is_lazy("serena")
    assert is_lazy("notion") and not is_always_on("notion")
    assert not is_always_on("unknown-server") and not is_lazy("unknown-server")


def test_custom_table() -> None:
    table = MappingProxyType({"alpha": ProviderCategory.ALWAYS_ON, "beta": ProviderCategory.LAZY})
    assert classify("alpha", table) is ProviderCategory.ALWAYS_ON
    assert classify("filesystem", table) is ProviderCategory.UNKNOWN
    assert always_on_servers(table) == ("alpha",)
    assert lazy_servers(table) == ("beta",)


def test_default_table_is_read_only() -> None:
    with pytest.raises(TypeError):
        PROVIDER_CATEGORIES["filesystem"] = ProviderCategory.LAZY  # type: ignore[index]
