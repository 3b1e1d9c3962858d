# topmark:header:start
#
#   project      : HalKit
#   file         : test_resource_property.py
#   file_relpath : tests/hal/test_resource_property.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Property tests for resource flattening.

For generated properties, link groups and embedded resources, flattening:
1) keeps user properties first and in insertion order,
2) collapses single-member relations and keeps lists otherwise,
3) only emits `_links` / `_embedded` when there is something to put there,
4) is idempotent.
"""

from __future__ import annotations

from typing import Any

import pytest
from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from halkit.hal import LinkObject, Resource
from tests.strategies_halkit import s_links, s_properties, s_relation_name

s_link_groups: st.SearchStrategy[dict[str, list[LinkObject]]] = st.dictionaries(
    s_relation_name, s_links, max_size=4
)


def _build(
    properties: dict[str, Any],
    link_groups: dict[str, list[LinkObject]],
    embedded: dict[str, list[dict[str, Any]]],
) -> Resource:
    res = Resource(properties)
    for rel, links in link_groups.items():
        res.add_link(rel, *links)
    for rel, children in embedded.items():
        res.embed(rel, *(Resource(props) for props in children))
    return res


s_embedded: st.SearchStrategy[dict[str, list[dict[str, Any]]]] = st.dictionaries(
    s_relation_name, st.lists(s_properties, min_size=1, max_size=3), max_size=3
)


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=75)
@given(properties=s_properties, link_groups=s_link_groups, embedded=s_embedded)
def test_flattening_shape(
    properties: dict[str, Any],
    link_groups: dict[str, list[LinkObject]],
    embedded: dict[str, list[dict[str, Any]]],
) -> None:
    out: dict[str, object] = _build(properties, link_groups, embedded).to_map()

    keys: list[str] = list(out)
    assert keys[: len(properties)] == list(properties)
    for name, value in properties.items():
        assert out[name] == value

    if link_groups:
        links: Any = out["_links"]
        assert list(links) == list(link_groups)
        for rel, group in link_groups.items():
            expected: object = (
                group[0].to_dict() if len(group) == 1 else [link.to_dict() for link in group]
            )
            assert links[rel] == expected
    else:
        assert "_links" not in out

    if embedded:
        emb: Any = out["_embedded"]
        assert list(emb) == list(embedded)
        for rel, children in embedded.items():
            if len(children) == 1:
                assert emb[rel] == children[0]
            else:
                assert emb[rel] == children
    else:
        assert "_embedded" not in out

    if link_groups and embedded:
        assert keys.index("_links") < keys.index("_embedded")


@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None)
@given(properties=s_properties, link_groups=s_link_groups, embedded=s_embedded)
def test_flattening_is_idempotent(
    properties: dict[str, Any],
    link_groups: dict[str, list[LinkObject]],
    embedded: dict[str, list[dict[str, Any]]],
) -> None:
    res: Resource = _build(properties, link_groups, embedded)
    assert res.to_map() == res.to_map()


@pytest.mark.hypothesis_slow
@settings(suppress_health_check=[HealthCheck.too_slow], deadline=None, max_examples=500)
@given(properties=s_properties, link_groups=s_link_groups, embedded=s_embedded)
def test_flattening_is_idempotent_exhaustive(
    properties: dict[str, Any],
    link_groups: dict[str, list[LinkObject]],
    embedded: dict[str, list[dict[str, Any]]],
) -> None:
    res: Resource = _build(properties, link_groups, embedded)
    first: dict[str, object] = res.to_map()
    assert list(res.to_map()) == list(first)
    assert res.to_map() == first
