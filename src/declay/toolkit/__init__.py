"""Host toolkit boundary and the bundled headless toolkit."""

from declay.toolkit.base import ImageFill, SupportsMinSize, TextAlign, Toolkit
from declay.toolkit.headless import HeadlessToolkit

__all__ = [
    "HeadlessToolkit",
    "ImageFill",
    "SupportsMinSize",
    "TextAlign",
    "Toolkit",
]
