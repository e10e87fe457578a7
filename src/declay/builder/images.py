"""Image byte sources injected into the builder."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class ImageFetcher(Protocol):
    """Returns the bytes for an image ``src``; raises ``OSError`` when unavailable."""

    def fetch(self, source: str) -> bytes: ...


class LocalFileFetcher:
    """Reads image sources as paths, relative to *base_dir* when given."""

    def __init__(self, base_dir: str | Path | None = None) -> None:
        self.base_dir = Path(base_dir) if base_dir is not None else None

    def fetch(self, source: str) -> bytes:
        path = Path(source).expanduser()
        if self.base_dir is not None and not path.is_absolute():
            path = self.base_dir / path
        return path.read_bytes()


class MemoryFetcher:
    """Serves image bytes from a dictionary keyed by source."""

    def __init__(self, images: dict[str, bytes] | None = None) -> None:
        self.images: dict[str, bytes] = dict(images) if images else {}

    def fetch(self, source: str) -> bytes:
        try:
            return self.images[source]
        except KeyError:
            raise FileNotFoundError(source) from None
