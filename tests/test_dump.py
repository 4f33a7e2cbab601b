from __future__ import annotations

import pytest

from domdump.dump import build_tree, dump_markup, verify_fixed_point
from domdump.models import DumpConfig
from domdump.soup_tree import tree_from_html
from domdump.serializer import serialize

PAGE = (
    "<!DOCTYPE html>"
    '<HTML lang="en">'
    "<head>"
    '<META charset="utf-8">'
    "<title>Sample</title>"
    '<link rel="stylesheet" href="a.css">'
    "</head>"
    "<body>"
    '<p CLASS="lead intro" data-note=\'say "hi"\'>Fish &amp; chips &lt;3</p>'
    "<div></div>"
    "<img src=x.png alt=''>"
    "<!-- note -->"
    "<script>if (a < b && c) { run(); }</script>"
    "<hr>"
    "<input type=text value=\"a&amp;b\">"
    "</body>"
    "</HTML>"
)


def test_dump_of_sample_page() -> None:
    assert dump_markup(PAGE) == (
        "<!DOCTYPE html>"
        '<html lang="en">'
        "<head>"
        '<meta charset="utf-8"/>'
        "<title>Sample</title>"
        '<link rel="stylesheet" href="a.css"/>'
        "</head>"
        "<body>"
        '<p class="lead intro" data-note="say &quot;hi&quot;">Fish &amp; chips &lt;3</p>'
        "<div></div>"
        '<img src="x.png" alt=""/>'
        "<!-- note -->"
        "<script>if (a < b && c) { run(); }</script>"
        "<hr/>"
        '<input type="text" value="a&amp;b"/>'
        "</body>"
        "</html>"
    )


def test_second_dump_is_a_fixed_point() -> None:
    first = dump_markup(PAGE)
    second = serialize(tree_from_html(first))
    assert second == first

    ok, diff = verify_fixed_point(PAGE)
    assert ok
    assert diff == ""


def test_fixed_point_failure_reports_unified_diff() -> None:
    # style is not a raw-text element, so its escaped body grows on every pass.
    ok, diff = verify_fixed_point("<style>a > b {}</style>")
    assert not ok
    assert diff.startswith("--- dump/1\n+++ dump/2\n")


def test_bom_is_stripped_by_default() -> None:
    assert dump_markup("\ufeff<p>x</p>") == "<p>x</p>"
    kept = dump_markup("\ufeff<p>x</p>", DumpConfig(strip_bom=False))
    assert kept == "\ufeff<p>x</p>"


def test_xml_parser_config() -> None:
    config = DumpConfig(parser="xml")
    assert dump_markup("<root><empty/><x>1 &lt; 2</x></root>", config) == (
        "<root><empty/><x>1 &lt; 2</x></root>"
    )


def test_build_tree_rejects_unknown_parser() -> None:
    config = DumpConfig.model_construct(parser="lxml")
    with pytest.raises(ValueError):
        build_tree("<p/>", config)


def test_xml_fixed_point_holds_for_plain_documents() -> None:
    config = DumpConfig(parser="xml")
    ok, diff = verify_fixed_point('<root a="1"><x>1 &lt; 2</x><!--c--></root>', config)
    assert ok, diff


def test_xml_fixed_point_reports_unparsable_first_dump() -> None:
    # The XHTML script body is written raw, so the first dump is no longer XML.
    markup = '<html xmlns="http://www.w3.org/1999/xhtml"><script>if (a &lt; b) x();</script></html>'
    ok, message = verify_fixed_point(markup, DumpConfig(parser="xml"))
    assert not ok
    assert message.startswith("dump/1 is not well-formed:")


def test_fixed_point_reuses_given_first_dump() -> None:
    first = dump_markup("<p>x</p>")
    assert verify_fixed_point("ignored <b>", first=first) == (True, "")
