"""Tests for the Qt session bridge."""

from __future__ import annotations

from PyQt6.QtTest import QSignalSpy

from kingside.core.enums import Color, GameStatus
from kingside.core.position import Position
from kingside.game.qt_bridge import SessionBridge
from kingside.game.session import GameSession


class TestSessionBridge:
    def test_select_emits_destinations(self, qapp: object) -> None:
        bridge = SessionBridge()
        spy = QSignalSpy(bridge.destinations_ready)

        bridge.select(6, 4)

        assert len(spy) == 1
        assert spy[0][0] == 6
        assert spy[0][1] == 4
        assert sorted(spy[0][2]) == [(4, 4), (5, 4)]

    def test_select_off_board_emits_nothing_selectable(self, qapp: object) -> None:
        bridge = SessionBridge()
        spy = QSignalSpy(bridge.destinations_ready)

        bridge.select(9, 9)

        assert len(spy) == 1
        assert spy[0][2] == []

    def test_submit_emits_position_and_status(self, qapp: object) -> None:
        bridge = SessionBridge()
        positions = QSignalSpy(bridge.position_changed)
        statuses = QSignalSpy(bridge.status_changed)

        bridge.submit(6, 4, 4, 4)

        assert len(positions) == 1
        assert positions[0][0] == bridge.session.current_position
        assert statuses[0][0] == int(GameStatus.ACTIVE)
        assert statuses[0][1] == ""

    def test_rejected_move(self, qapp: object) -> None:
        bridge = SessionBridge()
        rejected = QSignalSpy(bridge.move_rejected)
        positions = QSignalSpy(bridge.position_changed)

        bridge.submit(6, 4, 3, 4)
        bridge.submit(6, 4, 8, 4)

        assert len(rejected) == 2
        assert list(rejected[0]) == [6, 4, 3, 4]
        assert len(positions) == 0

    def test_game_over_signal(self, qapp: object) -> None:
        bridge = SessionBridge()
        over = QSignalSpy(bridge.game_over)

        for move in ((6, 5, 5, 5), (1, 4, 3, 4), (6, 6, 4, 6), (0, 3, 4, 7)):
            bridge.submit(*move)

        assert len(over) == 1
        assert over[0][0] == int(GameStatus.CHECKMATE)
        assert over[0][1] == Color.BLACK

    def test_navigation_and_reset(self, qapp: object) -> None:
        session = GameSession()
        bridge = SessionBridge(session)
        bridge.submit(6, 4, 4, 4)
        positions = QSignalSpy(bridge.position_changed)

        bridge.go_back()
        bridge.go_forward()
        bridge.reset()

        assert len(positions) == 3
        assert positions[2][0] == Position.initial()
        assert len(session.history) == 1
