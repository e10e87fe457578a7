"""Tests for the event bus and build lifecycle events."""

import pytest

from declay.builder import Builder
from declay.errors import UnknownElementKindError
from declay.events import (
    BuildCompleted,
    BuildFailed,
    BuildStarted,
    ChildSkipped,
    EventBus,
    WidgetBuilt,
)


class TestEventBus:
    def test_typed_subscription(self):
        bus = EventBus()
        seen = []
        bus.subscribe(BuildStarted, seen.append)
        bus.emit(BuildStarted(root_tag="VBox"))
        bus.emit(BuildFailed(root_tag="VBox", error="x"))
        assert seen == [BuildStarted(root_tag="VBox")]

    def test_global_listeners_run_first(self):
        bus = EventBus()
        order = []
        bus.subscribe(BuildStarted, lambda e: order.append("typed"))
        bus.on_all(lambda e: order.append("global"))
        bus.emit(BuildStarted(root_tag="VBox"))
        assert order == ["global", "typed"]

    def test_unsubscribe(self):
        bus = EventBus()
        seen = []
        unsubscribe = bus.subscribe(BuildStarted, seen.append)
        unsubscribe()
        unsubscribe()
        bus.emit(BuildStarted(root_tag="VBox"))
        assert seen == []

    def test_listener_may_unsubscribe_during_emit(self):
        bus = EventBus()
        seen = []
        holder = {}

        def once(event):
            seen.append(event)
            holder["unsubscribe"]()

        holder["unsubscribe"] = bus.subscribe(BuildStarted, once)
        bus.emit(BuildStarted(root_tag="a"))
        bus.emit(BuildStarted(root_tag="b"))
        assert len(seen) == 1


class TestBuildEvents:
    def _collect(self):
        bus = EventBus()
        events = []
        bus.on_all(events.append)
        return Builder(event_bus=bus), events

    def test_successful_build_sequence(self):
        builder, events = self._collect()
        builder.build(builder.load('<Layout><VBox id="v"><Label id="l" style="width: 5">x</Label></VBox></Layout>'))
        assert events[0] == BuildStarted(root_tag="VBox")
        assert events[1] == WidgetBuilt(tag="Label", node_id="l", wrapped=True)
        assert events[2] == WidgetBuilt(tag="VBox", node_id="v", wrapped=False)
        assert events[3] == BuildCompleted(root_tag="VBox", registered_ids=2)

    def test_skipped_child_event(self):
        builder, events = self._collect()
        builder.build(builder.load("<Layout><HBox><Bogus/></HBox></Layout>"))
        skipped = [e for e in events if isinstance(e, ChildSkipped)]
        assert len(skipped) == 1
        assert skipped[0].parent_tag == "HBox"
        assert skipped[0].child_tag == "Bogus"
        assert "Bogus" in skipped[0].error

    def test_failed_build_event(self):
        builder, events = self._collect()
        with pytest.raises(UnknownElementKindError):
            builder.build(builder.load("<Layout><Bogus/></Layout>"))
        assert isinstance(events[-1], BuildFailed)
        assert not any(isinstance(e, BuildCompleted) for e in events)
