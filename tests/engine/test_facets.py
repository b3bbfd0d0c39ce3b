"""Facet availability tests."""

from __future__ import annotations

from catalogbrowser.engine.facets import filter_by_search, has_entry, summarize


def _enabled(options):
    return {option.value: option.enabled for option in options}


def _three_publishers(make_catalog):
    return make_catalog(
        [
            ("A", "One", "a-one", ["tag1"]),
            ("B", "Two", "b-two", ["tag2"]),
            ("C", "Three", "c-three", ["tag1", "tag2"]),
        ]
    )


def test_selected_tag_disables_brands_without_it(make_catalog):
    catalog = _three_publishers(make_catalog)
    summary = summarize(
        catalog.entries(), catalog.publishers, catalog.brands(), ["tag1", "tag2"], "", "", "tag1"
    )
    assert _enabled(summary.brands) == {"A": True, "B": False, "C": True}
    # Tags are checked against the brand filter only, so both stay selectable.
    assert _enabled(summary.tags) == {"tag1": True, "tag2": True}
    assert [option.value for option in summary.tags if option.active] == ["tag1"]


def test_selected_brand_disables_tags_it_lacks(make_catalog):
    catalog = _three_publishers(make_catalog)
    summary = summarize(
        catalog.entries(), catalog.publishers, catalog.brands(), ["tag1", "tag2", "tag3"], "", "B", ""
    )
    assert _enabled(summary.tags) == {"tag1": False, "tag2": True, "tag3": False}
    assert _enabled(summary.brands) == {"A": True, "B": True, "C": True}
    assert summary.item_count == 1
    assert summary.brand_count == 3
    assert summary.tag_count == 1


def test_search_prefilter_applies_to_every_facet(make_catalog):
    catalog = _three_publishers(make_catalog)
    summary = summarize(
        catalog.entries(), catalog.publishers, catalog.brands(), ["tag1", "tag2"], "three", "", ""
    )
    assert _enabled(summary.brands) == {"A": False, "B": False, "C": True}
    assert _enabled(summary.tags) == {"tag1": True, "tag2": True}
    assert summary.publisher_count == 3
    assert summary.item_count == 1


def test_unknown_selection_yields_nothing_but_keeps_lists(make_catalog):
    catalog = _three_publishers(make_catalog)
    summary = summarize(
        catalog.entries(), catalog.publishers, catalog.brands(), ["tag1", "tag2"], "", "Nobody", ""
    )
    assert summary.item_count == 0
    assert _enabled(summary.brands) == {"A": True, "B": True, "C": True}
    assert _enabled(summary.tags) == {"tag1": False, "tag2": False}


def test_helpers(make_catalog):
    catalog = _three_publishers(make_catalog)
    filtered = filter_by_search(catalog.entries(), "two")
    assert [item.slug for _, item in filtered] == ["b-two"]
    assert has_entry(filtered, "B", "tag2")
    assert not has_entry(filtered, "B", "tag1")
    assert has_entry(filtered, "", "")
