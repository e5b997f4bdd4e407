"""Helpers shared by the fixture-driven tests.

The parser under test is not part of this package, so the fixture tests
rebuild trees from the expected dumps and replay expected tokens as
tokenizer events.
"""

from __future__ import annotations

import os
from pathlib import Path

from html5tests import CommentNode, DoctypeNode, Document, DocumentFragment, Element, TextNode
from html5tests.constants import FOREIGN_ATTRIBUTE_DISPLAY_NAMES
from html5tests.tokens import CharacterTokens, CommentToken, Doctype, DoctypeToken, EOFToken, Tag

FIXTURE_DIR = Path(os.environ.get("HTML5TESTS_FIXTURE_DIR", Path(__file__).parent / "fixtures"))

_ATTRIBUTE_NAMES = {display: name for name, display in FOREIGN_ATTRIBUTE_DISPLAY_NAMES.items()}
_FOREIGN_PREFIXES = {"svg", "math"}


def get_data_files(suffix):
    """Fixture files with the given suffix, in sorted order (searched recursively)."""
    return sorted(FIXTURE_DIR.rglob(f"*{suffix}"))


def _dump_entries(dump):
    """Split a tree dump into [depth, payload] pairs, joining multi-line text."""
    entries = []
    for line in dump.split("\n"):
        if line.startswith("| "):
            body = line[2:]
            payload = body.lstrip(" ")
            entries.append([(len(body) - len(payload)) // 2, payload])
        elif entries:
            entries[-1][1] += "\n" + line
    return entries


def _doctype_from_dump(payload):
    body = payload[len("<!DOCTYPE ") : -1]
    name, sep, ids = body.partition(' "')
    if not sep:
        return DoctypeNode(name)
    public_id, _, system_id = ids[:-1].partition('" "')
    return DoctypeNode(name, public_id, system_id)


def _element_from_dump(payload):
    name = payload[1:-1]
    prefix, sep, local = name.partition(" ")
    if sep and prefix in _FOREIGN_PREFIXES:
        return Element(local, namespace=prefix)
    return Element(name)


def tree_from_dump(dump, fragment=False):
    """Build a node tree from an html5lib test-format dump."""
    root = DocumentFragment() if fragment else Document()
    containers = {0: root}
    for depth, payload in _dump_entries(dump):
        parent = containers[depth]
        if payload.startswith("<!DOCTYPE "):
            parent.append_child(_doctype_from_dump(payload))
        elif payload.startswith("<!-- ") and payload.endswith(" -->"):
            parent.append_child(CommentNode(payload[5:-4]))
        elif payload.startswith('"'):
            parent.append_child(TextNode(payload[1:-1]))
        elif payload.startswith("<"):
            element = parent.append_child(_element_from_dump(payload))
            containers[depth + 1] = element
        elif payload == "content":
            containers[depth + 1] = parent.template_content
        else:
            name, _, value = payload.partition("=")
            parent.attrs[_ATTRIBUTE_NAMES.get(name, name)] = value[1:-1]
    return root


def events_from_tokens(tokens):
    """Turn expected tokenizer-test tokens back into token events.

    Character data is delivered one character at a time.
    """
    events = []
    for token in tokens:
        kind = token[0]
        if kind == "StartTag":
            self_closing = len(token) > 3 and token[3]
            events.append(Tag(Tag.START, token[1], dict(token[2]), self_closing))
        elif kind == "EndTag":
            events.append(Tag(Tag.END, token[1], {}))
        elif kind == "Comment":
            events.append(CommentToken(token[1]))
        elif kind == "DOCTYPE":
            events.append(DoctypeToken(Doctype(token[1], token[2], token[3], force_quirks=not token[4])))
        elif kind == "Character":
            events.extend(CharacterTokens(ch) for ch in token[1])
    events.append(EOFToken())
    return events
