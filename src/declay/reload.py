"""Hot reload: rebuild a layout from disk when its file changes.

The watcher polls the file's modification time from a daemon thread. Each
reload builds with a fresh :class:`~declay.builder.Builder` and swaps the
(builder, result) pair atomically, so readers of :attr:`LayoutReloader.current`
always see a complete build. A failed reload keeps the previous build.
"""

from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Callable

from declay.builder.builder import Builder
from declay.builder.images import LocalFileFetcher
from declay.builder.result import BuildResult
from declay.config import BuilderConfig
from declay.errors import DeclayError
from declay.events import types as events
from declay.events.bus import EventBus

logger = logging.getLogger(__name__)

BuilderFactory = Callable[[], Builder]
Build = tuple[Builder, BuildResult]


class LayoutReloader:
    """Keeps the latest successful build of the layout at *path*.

    Args:
        path: Layout file to watch.
        builder_factory: Returns a configured builder (toolkit, callbacks,
            bindings) for each reload. Defaults to a headless builder whose
            images resolve relative to the layout's directory.
        config: Supplies the poll interval.
        event_bus: Receives ``LayoutReloaded`` and ``ReloadFailed`` events.
    """

    def __init__(
        self,
        path: str | Path,
        builder_factory: BuilderFactory | None = None,
        *,
        config: BuilderConfig | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.path = Path(path)
        self.config = config or BuilderConfig()
        self.event_bus = event_bus or EventBus()
        self._builder_factory = builder_factory or self._default_builder
        self._lock = threading.Lock()
        self._current: Build | None = None
        self._last_mtime: float | None = None
        self._reload_listeners: list[Callable[[Builder, BuildResult], None]] = []
        self._error_listeners: list[Callable[[Exception], None]] = []
        self._stop_event = threading.Event()
        self._thread: threading.Thread | None = None

    def _default_builder(self) -> Builder:
        return Builder(config=self.config, image_fetcher=LocalFileFetcher(self.path.parent))

    @property
    def current(self) -> Build | None:
        """The latest successful (builder, result) pair, or ``None`` before the first one."""
        with self._lock:
            return self._current

    def on_reload(self, callback: Callable[[Builder, BuildResult], None]) -> None:
        self._reload_listeners.append(callback)

    def on_error(self, callback: Callable[[Exception], None]) -> None:
        self._error_listeners.append(callback)

    def reload(self) -> bool:
        """Rebuild from disk now. Returns ``True`` if the new build was swapped in."""
        try:
            builder = self._builder_factory()
            document = builder.load(self.path.read_bytes())
            result = builder.build(document)
        except (DeclayError, OSError) as exc:
            logger.warning("Reload of %s failed: %s", self.path, exc)
            self.event_bus.emit(events.ReloadFailed(path=str(self.path), error=str(exc)))
            for callback in list(self._error_listeners):
                callback(exc)
            return False

        with self._lock:
            previous, self._current = self._current, (builder, result)
        if previous is not None:
            old_builder, old_result = previous
            old_builder.release(old_result)
        logger.info("Reloaded %s", self.path)
        self.event_bus.emit(events.LayoutReloaded(path=str(self.path)))
        for listener in list(self._reload_listeners):
            listener(builder, result)
        return True

    def _mtime(self) -> float | None:
        try:
            return self.path.stat().st_mtime
        except OSError:
            return None

    def check(self) -> bool:
        """Reload if the file's modification time changed since the last check."""
        mtime = self._mtime()
        if mtime is None or mtime == self._last_mtime:
            return False
        self._last_mtime = mtime
        return self.reload()

    def start(self) -> None:
        """Build once, then watch the file from a daemon thread."""
        self._last_mtime = self._mtime()
        self.reload()
        self._stop_event.clear()
        self._thread = threading.Thread(target=self._watch_loop, daemon=True)
        self._thread.start()

    def stop(self) -> None:
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join(timeout=2)
            self._thread = None

    def _watch_loop(self) -> None:
        while not self._stop_event.wait(self.config.reload_poll_interval):
            try:
                self.check()
            except Exception:
                logger.exception("Layout watcher error for %s", self.path)

    def __enter__(self) -> LayoutReloader:
        self.start()
        return self

    def __exit__(self, *exc: object) -> None:
        self.stop()
