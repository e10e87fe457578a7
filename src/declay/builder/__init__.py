from declay.builder.builder import Builder
from declay.builder.images import ImageFetcher, LocalFileFetcher, MemoryFetcher
from declay.builder.kinds import WIDGET_KINDS, WidgetKind
from declay.builder.loader import build_from_file, load_layout
from declay.builder.result import BuildResult

__all__ = [
    "Builder",
    "BuildResult",
    "WIDGET_KINDS",
    "WidgetKind",
    "ImageFetcher",
    "LocalFileFetcher",
    "MemoryFetcher",
    "build_from_file",
    "load_layout",
]
