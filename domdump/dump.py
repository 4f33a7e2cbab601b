"""Markup in, serialized DOM out."""

from __future__ import annotations

import difflib
from typing import List, Tuple
from xml.parsers.expat import ExpatError

from .dom_model import Document
from .models import DumpConfig
from .serializer import serialize
from .soup_tree import tree_from_html
from .xml_tree import tree_from_xml

BOM = "\ufeff"


def build_tree(markup: str, config: DumpConfig | None = None) -> Document:
    config = config or DumpConfig()
    if config.strip_bom and markup.startswith(BOM):
        markup = markup[len(BOM):]
    if config.parser == "html.parser":
        return tree_from_html(markup, assume_xhtml=config.assume_xhtml)
    if config.parser == "xml":
        return tree_from_xml(markup)
    raise ValueError(f"unsupported parser: {config.parser}")


def dump_markup(markup: str, config: DumpConfig | None = None) -> str:
    """Parse ``markup`` with the configured provider and serialize the tree."""
    return serialize(build_tree(markup, config))


def _lines(text: str) -> List[str]:
    return text.splitlines(keepends=True)


def verify_fixed_point(
    markup: str, config: DumpConfig | None = None, *, first: str | None = None
) -> Tuple[bool, str]:
    """Check that dumping the dump of ``markup`` changes nothing.

    The first pass normalizes names to lower case and re-escapes text, so only
    the second pass is expected to be stable. Pass ``first`` when the first
    dump is already at hand. Returns ``(ok, unified_diff)``; when the first dump
    cannot be parsed again the message names the parse error instead.
    """
    if first is None:
        first = dump_markup(markup, config)
    try:
        second = dump_markup(first, config)
    except ExpatError as exc:
        return False, f"dump/1 is not well-formed: {exc}\n"
    if first == second:
        return True, ""
    diff = difflib.unified_diff(
        _lines(first),
        _lines(second),
        fromfile="dump/1",
        tofile="dump/2",
    )
    return False, "".join(diff)


__all__ = ["build_tree", "dump_markup", "verify_fixed_point"]
