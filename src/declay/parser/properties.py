"""Parser for CSS-like property blocks.

Syntax example:
    { font-weight: bold; font-size: 20; background: url(http://host/a.png); }

Braces are optional. Declarations are split on ``;`` and each one on its
first ``:`` only, so values may themselves contain colons.
"""

from __future__ import annotations

from collections.abc import Mapping

__all__ = ["parse_properties", "serialize_properties"]


def parse_properties(block: str) -> dict[str, str]:
    """Parse a property block into an ordered ``{key: value}`` dictionary.

    Declarations without a colon and empty declarations are dropped. A key
    declared twice keeps its last value.
    """
    props: dict[str, str] = {}
    body = block.strip().strip("{}")
    for declaration in body.split(";"):
        declaration = declaration.strip()
        if not declaration:
            continue
        key, sep, value = declaration.partition(":")
        if not sep:
            continue
        props[key.strip()] = value.strip()
    return props


def serialize_properties(props: Mapping[str, str]) -> str:
    """Render a property mapping back into block syntax (without braces)."""
    return " ".join(f"{key}: {value};" for key, value in props.items())
