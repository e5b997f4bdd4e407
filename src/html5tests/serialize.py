"""html5lib test format serialization.

Converts a node tree into the indented dump used by the ``#document``
section of tree-construction fixtures. Every line starts with ``"| "``
followed by two spaces per depth level.
"""

from __future__ import annotations

import logging
from typing import Any

from .constants import FOREIGN_ATTRIBUTE_DISPLAY_NAMES, NAMESPACE_PREFIXES
from .node import CommentNode, DoctypeNode, Document, DocumentFragment, Element, TextNode

logger = logging.getLogger(__name__)


def to_test_format(node: Any) -> str:
    """Convert a document, fragment or single node to html5lib test format."""
    lines: list[str] = []
    _node_to_test_format(node, 0, lines)
    return "\n".join(lines).strip()


def _node_to_test_format(node: Any, depth: int, lines: list[str]) -> None:
    prefix = "| " + "  " * depth

    if isinstance(node, (Document, DocumentFragment)):
        for child in node.children:
            _node_to_test_format(child, depth, lines)
    elif isinstance(node, DoctypeNode):
        lines.append(prefix + _doctype_to_test_format(node))
    elif isinstance(node, Element):
        _element_to_test_format(node, depth, lines)
    elif isinstance(node, TextNode):
        lines.append(f'{prefix}"{node.data}"')
    elif isinstance(node, CommentNode):
        lines.append(f"{prefix}<!-- {node.data} -->")
    else:
        logger.debug("Skipping node of unknown kind %r", type(node).__name__)


def _element_to_test_format(node: Element, depth: int, lines: list[str]) -> None:
    prefix = "| " + "  " * depth
    lines.append(f"{prefix}<{_qualified_name(node)}>")
    lines.extend(_attrs_to_test_format(node, depth + 1))

    if node.name == "template" and node.template_content is not None:
        lines.append(f"{prefix}  content")
        for child in node.template_content.children:
            _node_to_test_format(child, depth + 2, lines)
        return

    for child in node.children:
        _node_to_test_format(child, depth + 1, lines)


def _qualified_name(node: Element) -> str:
    """Get the tag name as shown in test output, with namespace prefix for foreign elements."""
    ns_prefix = NAMESPACE_PREFIXES.get(node.namespace) if node.namespace else None
    if ns_prefix:
        return f"{ns_prefix} {node.name}"
    return node.name


def _attrs_to_test_format(node: Element, depth: int) -> list[str]:
    """Format element attributes, one per line, sorted by display name."""
    if not node.attrs:
        return []

    foreign = bool(node.namespace) and node.namespace in NAMESPACE_PREFIXES
    display_attrs: list[tuple[str, str]] = []
    for attr_name, attr_value in node.attrs.items():
        display_name = FOREIGN_ATTRIBUTE_DISPLAY_NAMES.get(attr_name, attr_name) if foreign else attr_name
        display_attrs.append((display_name, attr_value or ""))

    display_attrs.sort(key=lambda x: x[0])

    prefix = "| " + "  " * depth
    return [f'{prefix}{display_name}="{value}"' for display_name, value in display_attrs]


def _doctype_to_test_format(node: DoctypeNode) -> str:
    """Format a DOCTYPE node's payload (without the line prefix)."""
    parts = ["<!DOCTYPE ", node.doctype_name or ""]
    if node.public_id is not None:
        system_id = node.system_id if node.system_id is not None else ""
        parts.append(f' "{node.public_id}" "{system_id}"')
    elif node.system_id is not None:
        parts.append(f' "" "{node.system_id}"')
    parts.append(">")
    return "".join(parts)
