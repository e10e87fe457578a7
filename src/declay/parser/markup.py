"""XML markup parser producing a Document model.

Layout syntax:
    <Layout>
      <Style selector=".title">font-weight: bold; font-size: 20</Style>
      <VBox>
        <Label class="title">Hello</Label>
        <Button id="submitBtn" onclick="go">Submit</Button>
      </VBox>
    </Layout>
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from declay.errors import MalformedMarkupError
from declay.model.document import Document, Node, Selector, StyleRule
from declay.parser.properties import parse_properties

__all__ = ["parse_markup", "LAYOUT_TAG", "STYLE_TAG"]

logger = logging.getLogger(__name__)

LAYOUT_TAG = "Layout"
STYLE_TAG = "Style"

# Attributes that populate dedicated Node fields instead of ``attributes``.
_NODE_FIELD_ATTRS = {
    "id": "id",
    "class": "class_list",
    "style": "inline_style",
    "text": "text",
}


def _local_name(name: str) -> str:
    """Strip an ElementTree ``{namespace}`` prefix."""
    if name.startswith("{"):
        return name.rpartition("}")[2]
    return name


def _chardata(element: ET.Element) -> str:
    """Concatenate the character data directly inside *element*."""
    parts = [element.text or ""]
    for child in element:
        parts.append(child.tail or "")
    return "".join(parts)


def _build_node(element: ET.Element) -> Node:
    kwargs: dict[str, object] = {"tag": _local_name(element.tag)}
    attributes: dict[str, str] = {}
    for raw_name, value in element.attrib.items():
        name = _local_name(raw_name)
        if name in _NODE_FIELD_ATTRS:
            kwargs[_NODE_FIELD_ATTRS[name]] = value
        else:
            attributes[name] = value
    kwargs["attributes"] = attributes
    kwargs["content"] = _chardata(element)
    kwargs["children"] = tuple(_build_node(child) for child in element)
    return Node(**kwargs)  # type: ignore[arg-type]


def _build_rule(element: ET.Element) -> StyleRule:
    raw = "".join(element.itertext())
    selector = Selector.parse(element.get("selector", ""))
    if not selector.is_supported:
        logger.debug("Style selector %r is not supported and will never match", selector.raw)
    return StyleRule(selector=selector, properties=parse_properties(raw), raw=raw)


def parse_markup(source: bytes | str) -> Document:
    """Parse layout markup into a :class:`Document`.

    Raises :class:`MalformedMarkupError` if the markup is not well-formed,
    the root element is not ``<Layout>``, or the layout does not contain
    exactly one content element.
    """
    try:
        root = ET.fromstring(source)
    except ET.ParseError as exc:
        line, column = getattr(exc, "position", (None, None))
        raise MalformedMarkupError(f"Malformed markup: {exc}", line=line, column=column) from exc
    except (UnicodeDecodeError, ValueError) as exc:
        raise MalformedMarkupError(f"Malformed markup: {exc}") from exc

    root_tag = _local_name(root.tag)
    if root_tag != LAYOUT_TAG:
        raise MalformedMarkupError(
            f"Expected root element <{LAYOUT_TAG}>, found <{root_tag}>"
        )

    rules: list[StyleRule] = []
    content: list[ET.Element] = []
    for child in root:
        if _local_name(child.tag) == STYLE_TAG:
            rules.append(_build_rule(child))
        else:
            content.append(child)

    if not content:
        raise MalformedMarkupError(f"<{LAYOUT_TAG}> has no content element")
    if len(content) > 1:
        extra = ", ".join(f"<{_local_name(e.tag)}>" for e in content)
        raise MalformedMarkupError(
            f"<{LAYOUT_TAG}> must contain exactly one content element, found {extra}"
        )

    return Document(rules=tuple(rules), root=_build_node(content[0]))
