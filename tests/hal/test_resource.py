# topmark:header:start
#
#   project      : HalKit
#   file         : test_resource.py
#   file_relpath : tests/hal/test_resource.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `halkit.hal.resource.Resource` flattening."""

from __future__ import annotations

import logging
from typing import Any

import pytest

from halkit.errors import CyclicEmbeddingError, InvalidArgumentError
from halkit.hal import LinkObject, LinkRelation, Resource
from tests.conftest import make_item

# --- Properties ----------------------------------------------------------------


def test_properties_only_resource_has_no_reserved_keys() -> None:
    res = Resource({"id": 1, "name": "widget"})
    assert res.to_map() == {"id": 1, "name": "widget"}


def test_empty_resource_flattens_to_empty_mapping() -> None:
    assert Resource().to_map() == {}


def test_properties_keep_insertion_order() -> None:
    res = Resource()
    res.set_property("b", 1)
    res.set_property("a", 2)
    res.set_property("c", 3)
    res.set_property("b", 4)
    assert list(res.to_map()) == ["b", "a", "c"]
    assert res.to_map()["b"] == 4


def test_reserved_property_names_are_left_out(caplog: pytest.LogCaptureFixture) -> None:
    res = Resource()
    res.set_property("_links", {"bogus": True})
    res.set_property("_embedded", ["bogus"])
    res.set_property("id", 7)
    assert "reserved" in caplog.text
    assert res.to_map() == {"id": 7}


def test_reserved_property_does_not_collide_with_links() -> None:
    res = Resource({"_links": "user value"})
    res.add_link("self", LinkObject("/x"))
    assert res.to_map() == {"_links": {"self": {"href": "/x"}}}


def test_property_accessors() -> None:
    res = Resource({"id": 1})
    assert res.get_property("id") == 1
    assert res.get_property("missing", "default") == "default"
    res.remove_property("id")
    res.remove_property("missing")
    assert dict(res.properties) == {}


def test_properties_view_is_read_only() -> None:
    res = Resource({"id": 1})
    with pytest.raises(TypeError):
        res.properties["id"] = 2  # type: ignore[index]


# --- Links ---------------------------------------------------------------------


def test_single_link_collapses_to_object() -> None:
    res = Resource()
    res.add_link("self", LinkObject("/items/1"))
    assert res.to_map()["_links"] == {"self": {"href": "/items/1"}}


def test_two_links_stay_a_list_in_registration_order() -> None:
    res = Resource()
    res.add_link("item", LinkObject("/items/1"))
    res.add_link("item", LinkObject("/items/2"))
    links: Any = res.to_map()["_links"]
    assert links["item"] == [{"href": "/items/1"}, {"href": "/items/2"}]


def test_add_link_accepts_several_links_at_once() -> None:
    res = Resource()
    res.add_link("item", LinkObject("/items/1"), LinkObject("/items/2"), LinkObject("/items/3"))
    links: Any = res.to_map()["_links"]
    assert [link["href"] for link in links["item"]] == ["/items/1", "/items/2", "/items/3"]


def test_relations_keep_registration_order() -> None:
    res = Resource()
    res.add_link("self", LinkObject("/orders"))
    res.add_link("next", LinkObject("/orders?page=2"))
    res.add_link("find", LinkObject("/orders{?id}", templated=True))
    links: Any = res.to_map()["_links"]
    assert list(links) == ["self", "next", "find"]


def test_add_link_requires_links() -> None:
    with pytest.raises(InvalidArgumentError):
        Resource().add_link("self")


def test_add_link_rejects_non_links() -> None:
    with pytest.raises(InvalidArgumentError):
        Resource().add_link("self", "/items/1")  # type: ignore[arg-type]


def test_add_link_with_empty_relation_name_fails() -> None:
    with pytest.raises(InvalidArgumentError):
        Resource().add_link("", LinkObject("/x"))


def test_string_relations_resolve_to_one_relation() -> None:
    res = Resource()
    assert res.relation("item") is res.relation("item")
    rel = LinkRelation("item")
    assert res.relation(rel) is rel


def test_add_self_link() -> None:
    res = Resource()
    link = res.add_self_link("/items/1", title="Item 1")
    assert link == LinkObject("/items/1", title="Item 1")
    assert res.links_for("self") == [link]


def test_links_for_matches_full_name() -> None:
    rel = LinkRelation("widgets")
    rel.set_curie_link(LinkObject("/rels/{rel}", templated=True, name="acme"))
    res = Resource()
    res.add_link(rel, LinkObject("/widgets"))
    assert res.links_for("acme:widgets") == [LinkObject("/widgets")]
    assert res.links_for(rel) == [LinkObject("/widgets")]
    assert res.links_for("widgets") == []


# --- CURIEs --------------------------------------------------------------------


def test_curie_relation_is_keyed_by_full_name_and_listed_in_curies() -> None:
    curie = LinkObject("https://docs.acme.com/rels/{rel}", templated=True, name="acme")
    rel = LinkRelation("widgets")
    rel.set_curie_link(curie)
    res = Resource()
    res.add_link("self", LinkObject("/"))
    res.add_link(rel, LinkObject("/widgets"))
    assert res.to_map() == {
        "_links": {
            "self": {"href": "/"},
            "acme:widgets": {"href": "/widgets"},
            "curies": [
                {"href": "https://docs.acme.com/rels/{rel}", "templated": True, "name": "acme"}
            ],
        }
    }


def test_curies_are_deduplicated_by_prefix() -> None:
    curie = LinkObject("/rels/{rel}", templated=True, name="acme")
    widgets = LinkRelation("widgets")
    widgets.set_curie_link(curie)
    gadgets = LinkRelation("gadgets")
    gadgets.set_curie_link(curie)
    res = Resource()
    res.add_curie(curie)
    res.add_link(widgets, LinkObject("/widgets"))
    res.add_link(gadgets, LinkObject("/gadgets"))
    links: Any = res.to_map()["_links"]
    assert links["curies"] == [curie.to_dict()]
    assert list(links) == ["acme:widgets", "acme:gadgets", "curies"]


def test_declared_curie_alone_produces_no_links_section() -> None:
    res = Resource({"id": 1})
    res.add_curie(LinkObject("/rels/{rel}", templated=True, name="acme"))
    assert res.to_map() == {"id": 1}


def test_declared_curie_is_listed_once_a_link_exists() -> None:
    res = Resource()
    res.add_curie(LinkObject("/rels/{rel}", templated=True, name="acme"))
    res.add_link("self", LinkObject("/"))
    assert res.to_map() == {
        "_links": {
            "self": {"href": "/"},
            "curies": [{"href": "/rels/{rel}", "templated": True, "name": "acme"}],
        }
    }


def test_conflicting_curie_prefix_is_rejected() -> None:
    widgets = LinkRelation("widgets")
    widgets.set_curie_link(LinkObject("/a/{rel}", templated=True, name="p"))
    gadgets = LinkRelation("gadgets")
    gadgets.set_curie_link(LinkObject("/b/{rel}", templated=True, name="p"))
    res = Resource()
    res.add_link(widgets, LinkObject("/widgets"))

    with pytest.raises(InvalidArgumentError, match="already bound"):
        res.add_link(gadgets, LinkObject("/gadgets"))
    with pytest.raises(InvalidArgumentError, match="already bound"):
        res.embed(gadgets, Resource())
    with pytest.raises(InvalidArgumentError, match="already bound"):
        res.add_curie(LinkObject("/b/{rel}", templated=True, name="p"))
    with pytest.raises(InvalidArgumentError, match="already bound"):
        res.add_link("curies", LinkObject("/b/{rel}", templated=True, name="p"))

    assert res.to_map() == {
        "_links": {
            "p:widgets": {"href": "/widgets"},
            "curies": [{"href": "/a/{rel}", "templated": True, "name": "p"}],
        }
    }


def test_curie_conflict_appearing_after_registration_is_logged(
    caplog: pytest.LogCaptureFixture,
) -> None:
    widgets = LinkRelation("widgets")
    widgets.set_curie_link(LinkObject("/a/{rel}", templated=True, name="p"))
    gadgets = LinkRelation("gadgets")
    res = Resource()
    res.add_link(widgets, LinkObject("/widgets"))
    res.add_link(gadgets, LinkObject("/gadgets"))
    gadgets.set_curie_link(LinkObject("/b/{rel}", templated=True, name="p"))

    with caplog.at_level(logging.WARNING, logger="halkit.hal.model"):
        links: Any = res.to_map()["_links"]
    assert links["curies"] == [{"href": "/a/{rel}", "templated": True, "name": "p"}]
    assert "bound to both" in caplog.text


def test_links_under_curies_relation_fold_into_curie_list() -> None:
    res = Resource()
    res.add_link("curies", LinkObject("/rels/{rel}", templated=True, name="acme"))
    links: Any = res.to_map()["_links"]
    assert isinstance(links["curies"], list)
    assert len(links["curies"]) == 1


def test_add_curie_requires_name() -> None:
    with pytest.raises(InvalidArgumentError):
        Resource().add_curie(LinkObject("/rels/{rel}", templated=True))


def test_relations_with_same_full_name_are_merged() -> None:
    res = Resource()
    res.add_link(LinkRelation("item"), LinkObject("/items/1"))
    res.add_link(LinkRelation("item"), LinkObject("/items/2"))
    links: Any = res.to_map()["_links"]
    assert links == {"item": [{"href": "/items/1"}, {"href": "/items/2"}]}


# --- Embedded ------------------------------------------------------------------


def test_no_embedded_key_without_embedded_resources() -> None:
    res = Resource({"id": 1})
    res.add_link("self", LinkObject("/x"))
    assert "_embedded" not in res.to_map()


def test_single_embedded_resource_collapses_to_object() -> None:
    order = Resource({"id": 1})
    order.embed("customer", Resource({"name": "Ada"}))
    assert order.to_map()["_embedded"] == {"customer": {"name": "Ada"}}


def test_two_embedded_resources_stay_a_list_and_recurse() -> None:
    page = Resource({"total": 2})
    page.add_link("self", LinkObject("/items"))
    page.embed("items", make_item(1), make_item(2))
    assert page.to_map() == {
        "total": 2,
        "_links": {"self": {"href": "/items"}},
        "_embedded": {
            "items": [
                {"id": 1, "_links": {"self": {"href": "/items/1"}}},
                {"id": 2, "_links": {"self": {"href": "/items/2"}}},
            ]
        },
    }


def test_key_order_is_properties_links_embedded() -> None:
    res = Resource()
    res.embed("child", Resource())
    res.add_link("self", LinkObject("/x"))
    res.set_property("id", 1)
    assert list(res.to_map()) == ["id", "_links", "_embedded"]


def test_nested_embedding_is_flattened_depth_first() -> None:
    leaf = Resource({"level": 3})
    middle = Resource({"level": 2})
    middle.embed("leaf", leaf)
    root = Resource({"level": 1})
    root.embed("middle", middle)
    assert root.to_map() == {
        "level": 1,
        "_embedded": {"middle": {"level": 2, "_embedded": {"leaf": {"level": 3}}}},
    }


def test_same_resource_may_be_embedded_twice() -> None:
    shared = make_item(5)
    res = Resource()
    res.embed("first", shared)
    res.embed("second", shared)
    embedded: Any = res.to_map()["_embedded"]
    assert embedded["first"] == embedded["second"]


def test_embedded_curies_are_listed() -> None:
    rel = LinkRelation("widgets")
    rel.set_curie_link(LinkObject("/rels/{rel}", templated=True, name="acme"))
    res = Resource()
    res.embed(rel, Resource({"id": 1}))
    out: Any = res.to_map()
    assert list(out["_embedded"]) == ["acme:widgets"]
    assert out["_links"]["curies"][0]["name"] == "acme"


def test_embedded_for() -> None:
    item = make_item(1)
    res = Resource()
    res.embed("items", item)
    assert res.embedded_for("items") == [item]
    assert res.embedded_for("other") == []


def test_embed_requires_resources() -> None:
    with pytest.raises(InvalidArgumentError):
        Resource().embed("items")


def test_embed_rejects_non_resources() -> None:
    with pytest.raises(InvalidArgumentError):
        Resource().embed("items", {"id": 1})  # type: ignore[arg-type]


# --- Cycles --------------------------------------------------------------------


def test_embedding_self_is_rejected() -> None:
    res = Resource()
    with pytest.raises(CyclicEmbeddingError):
        res.embed("self", res)
    assert "_embedded" not in res.to_map()


def test_embedding_an_ancestor_is_rejected() -> None:
    root = Resource()
    child = Resource()
    grandchild = Resource()
    root.embed("child", child)
    child.embed("grandchild", grandchild)
    with pytest.raises(CyclicEmbeddingError):
        grandchild.embed("root", root)
    with pytest.raises(InvalidArgumentError):
        grandchild.embed("child", child)


def test_rejected_embed_registers_nothing() -> None:
    root = Resource()
    child = Resource()
    root.embed("child", child)
    with pytest.raises(CyclicEmbeddingError):
        child.embed("pair", Resource(), root)
    assert child.to_map() == {}


def test_contains() -> None:
    root = Resource()
    child = Resource()
    root.embed("child", child)
    assert root.contains(root)
    assert root.contains(child)
    assert not child.contains(root)


# --- Purity --------------------------------------------------------------------


def test_flattening_is_idempotent_and_fresh() -> None:
    page = Resource({"total": 1, "tags": ["a", "b"]})
    page.add_link("self", LinkObject("/items"))
    page.embed("items", make_item(1))
    first = page.to_map()
    second = page.to_map()
    assert first == second
    assert first is not second
    links: Any = first["_links"]
    links["self"]["href"] = "/changed"
    assert page.to_map() == second


def test_flattened_properties_do_not_alias_model_values() -> None:
    res = Resource({"tags": ["a"], "meta": {"owner": {"id": 1}}})
    out: Any = res.to_map()
    out["tags"].append("b")
    out["meta"]["owner"]["id"] = 2
    assert res.to_map() == {"tags": ["a"], "meta": {"owner": {"id": 1}}}
    assert res.get_property("tags") == ["a"]
