"""Unit tests for EventBus."""

from __future__ import annotations

import pytest

from shooter.comms.event_bus import EventBus

pytestmark = pytest.mark.unit


class TestEventBus:
    def test_publish_to_all(self):
        bus = EventBus()
        a, b = bus.subscribe(), bus.subscribe()
        bus.publish("game_over", {"score": 5})
        assert a.get_nowait() == {"type": "game_over", "data": {"score": 5}}
        assert b.get_nowait()["type"] == "game_over"

    def test_no_data_key_without_payload(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.publish("tick")
        assert q.get_nowait() == {"type": "tick"}

    def test_filtered_subscription(self):
        bus = EventBus()
        q = bus.subscribe("enemy_spawned")
        bus.publish("bullet_fired", {})
        bus.publish("enemy_spawned", {"enemy_type": "chaser"})
        assert q.get_nowait()["data"]["enemy_type"] == "chaser"
        assert q.empty()

    def test_unsubscribe(self):
        bus = EventBus()
        q = bus.subscribe()
        bus.unsubscribe(q)
        assert bus.subscriber_count == 0
        bus.publish("game_over")
        assert q.empty()

    def test_full_queue_drops_oldest(self):
        bus = EventBus(maxsize=2)
        q = bus.subscribe()
        for i in range(3):
            bus.publish("bullet_fired", {"n": i})
        assert [q.get_nowait()["data"]["n"] for _ in range(2)] == [1, 2]
