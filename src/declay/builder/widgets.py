"""Construction routines for leaf widget kinds.

Each routine receives the builder, the node, its resolved style and the
build accumulator, and returns the unwrapped widget. Sizing from
``width``/``height`` and id registration happen in the builder afterwards.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from declay.builder.result import BuildResult
from declay.builder.sizing import MinSize
from declay.builder.wiring import TargetRef, change_handler, tap_handler
from declay.errors import InvalidSizeError
from declay.model.document import Node
from declay.toolkit.base import ImageFill, TextAlign
from declay.values.colors import parse_color
from declay.values.sizes import parse_size

if TYPE_CHECKING:
    from declay.builder.builder import Builder

logger = logging.getLogger(__name__)

TRUE = "true"

TEXT_ALIGNMENTS = {
    "left": TextAlign.LEADING,
    "center": TextAlign.CENTER,
    "right": TextAlign.TRAILING,
}

IMAGE_FILLS = {fill.value: fill for fill in ImageFill}


# ---------------------------------------------------------------------------
# Attribute and style helpers
# ---------------------------------------------------------------------------


def text_alignment(style: dict[str, str]) -> TextAlign | None:
    return TEXT_ALIGNMENTS.get(style.get("text-align", ""))


def is_bold(style: dict[str, str]) -> bool:
    return style.get("font-weight") == "bold"


def is_italic(style: dict[str, str]) -> bool:
    return style.get("font-style") == "italic"


def float_attr(node: Node, name: str, default: float) -> float:
    """Return a numeric attribute, keeping *default* when absent or unparseable."""
    raw = node.get_attr(name)
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.debug("Attribute %s=%r on <%s> is not a number", name, raw, node.tag)
        return default


def bool_attr(node: Node, name: str) -> bool:
    return node.get_attr(name) == TRUE


def collect_options(node: Node, option_tag: str) -> tuple[list[str], str]:
    """Read ``<Option>``/``<Radio>`` children into (values, selected value)."""
    options: list[str] = []
    selected = ""
    for child in node.children:
        if child.tag != option_tag:
            continue
        value = child.get_attr("value") or child.content.strip()
        options.append(value)
        if bool_attr(child, "selected"):
            selected = value
    return options, selected


# ---------------------------------------------------------------------------
# Text widgets
# ---------------------------------------------------------------------------


def build_label(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    label = builder.toolkit.label(
        node.display_text,
        alignment=text_alignment(style),
        bold=is_bold(style),
        italic=is_italic(style),
    )
    builder.bind_cell(node, label, node.display_text, result)
    return label


def build_text(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    size: float | None = None
    if style.get("font-size"):
        try:
            size = parse_size(style["font-size"])
        except InvalidSizeError as exc:
            logger.debug("Ignoring font-size on <%s>: %s", node.tag, exc)
    return builder.toolkit.text(
        node.display_text,
        parse_color(style.get("color")),
        size=size,
        alignment=text_alignment(style),
        bold=is_bold(style),
        italic=is_italic(style),
    )


# ---------------------------------------------------------------------------
# Interactive widgets
# ---------------------------------------------------------------------------


def build_button(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    ref = TargetRef()
    ref.widget = builder.toolkit.button(node.display_text, tap_handler(builder, node, ref))
    return ref.widget


def build_entry(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    ref = TargetRef()
    ref.widget = builder.toolkit.entry(
        text=node.get_attr("value"),
        placeholder=node.get_attr("placeholder"),
        password=bool_attr(node, "password"),
        multiline=bool_attr(node, "multiline"),
        on_changed=change_handler(builder, node, ref),
    )
    builder.bind_cell(node, ref.widget, node.get_attr("value"), result)
    return ref.widget


def build_checkbox(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    checked = bool_attr(node, "checked")
    ref = TargetRef()
    ref.widget = builder.toolkit.check(
        node.get_attr("label") or node.content.strip(),
        checked=checked,
        on_changed=change_handler(builder, node, ref),
    )
    builder.bind_cell(node, ref.widget, checked, result)
    return ref.widget


def build_select(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    options, selected = collect_options(node, "Option")
    ref = TargetRef()
    ref.widget = builder.toolkit.select(
        options, selected=selected, on_changed=change_handler(builder, node, ref)
    )
    builder.bind_cell(node, ref.widget, selected, result)
    return ref.widget


def build_radio_group(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    options, selected = collect_options(node, "Radio")
    ref = TargetRef()
    ref.widget = builder.toolkit.radio_group(
        options, selected=selected, on_changed=change_handler(builder, node, ref)
    )
    builder.bind_cell(node, ref.widget, selected, result)
    return ref.widget


def build_progress_bar(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    value = float_attr(node, "value", 0.0)
    progress = builder.toolkit.progress_bar(
        value=value, maximum=float_attr(node, "max", builder.config.progress_max)
    )
    builder.bind_cell(node, progress, value, result)
    return progress


def build_slider(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    config = builder.config
    minimum = float_attr(node, "min", config.slider_min)
    maximum = float_attr(node, "max", config.slider_max)
    value = float_attr(node, "value", minimum)
    ref = TargetRef()
    ref.widget = builder.toolkit.slider(
        minimum,
        maximum,
        value=value,
        step=float_attr(node, "step", config.slider_step),
        on_changed=change_handler(builder, node, ref),
    )
    builder.bind_cell(node, ref.widget, value, result)
    return ref.widget


def build_spacer(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    return builder.toolkit.spacer()


# ---------------------------------------------------------------------------
# Shapes and images
# ---------------------------------------------------------------------------


def build_rectangle(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    return builder.toolkit.rectangle(parse_color(style.get("background-color")))


def build_circle(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    return builder.toolkit.circle(parse_color(style.get("background-color")))


def _placeholder(builder: Builder) -> Any:
    size = builder.config.placeholder_image_size
    return MinSize(builder.toolkit.rectangle(None), size, size)


def build_image(builder: Builder, node: Node, style: dict[str, str], result: BuildResult) -> Any:
    source = node.get_attr("src")
    if not source:
        return _placeholder(builder)
    try:
        data = builder.image_fetcher.fetch(source)
    except (OSError, ValueError) as exc:
        logger.warning("Could not load image %r: %s", source, exc)
        return _placeholder(builder)

    fill_name = node.get_attr("fillMode") or builder.config.default_image_fill
    image = builder.toolkit.image(source, data, fill=IMAGE_FILLS.get(fill_name, ImageFill.CONTAIN))

    if node.get_attr("width") and node.get_attr("height"):
        try:
            width = parse_size(node.get_attr("width"))
            height = parse_size(node.get_attr("height"))
        except InvalidSizeError as exc:
            logger.debug("Ignoring image size attributes: %s", exc)
        else:
            return MinSize(image, width, height, styled=False)
    return image
