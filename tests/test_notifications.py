"""
Tests for the single-slot NotificationChannel.
"""

from __future__ import annotations

from src.services.notifications import NotificationChannel


def test_last_write_wins() -> None:
    ch = NotificationChannel()
    ch.emit("first")
    ch.emit("second")
    assert ch.pending.message == "second"
    assert ch.pending.visible is True


def test_consume_clears() -> None:
    ch = NotificationChannel()
    assert ch.consume() is None
    ch.emit("hello")
    note = ch.consume()
    assert note.message == "hello"
    assert ch.pending is None
    assert ch.consume() is None


def test_clear() -> None:
    ch = NotificationChannel()
    ch.emit("x")
    ch.clear()
    assert ch.pending is None
