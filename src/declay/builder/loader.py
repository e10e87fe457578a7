"""Convenience entry points for layouts stored on disk."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from declay.builder.builder import Builder
from declay.builder.images import LocalFileFetcher
from declay.builder.result import BuildResult
from declay.model.document import Document
from declay.parser.markup import parse_markup


def load_layout(path: str | Path) -> Document:
    """Read and parse the layout file at *path*."""
    return parse_markup(Path(path).read_bytes())


def build_from_file(
    path: str | Path, builder: Builder | None = None, **builder_kwargs: Any
) -> tuple[Builder, BuildResult]:
    """Parse and build the layout at *path*.

    Without an explicit *builder* a new one is created from *builder_kwargs*;
    its image sources then resolve relative to the layout's directory.
    """
    path = Path(path)
    if builder is None:
        builder_kwargs.setdefault("image_fetcher", LocalFileFetcher(path.parent))
        builder = Builder(**builder_kwargs)
    document = builder.load(path.read_bytes())
    return builder, builder.build(document)
