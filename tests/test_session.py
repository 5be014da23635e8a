"""Tests for session.py - the locked action surface"""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import json
import threading

import pytest

from simplejong.core.seat import Seat
from simplejong.engine import session as session_mod
from simplejong.engine.action import Action, ActionType, GamePhase, WinType
from simplejong.engine.config import RoundConfig
from simplejong.engine.errors import ActionError, TurnViolation, RoundOver
from simplejong.engine.session import GameSession, default_session

from wall_builder import build_wall, tile_id, GARBAGE_A, GARBAGE_B, WAITS_ON_RED


def claim_wall():
    return build_wall([GARBAGE_A, GARBAGE_B, WAITS_ON_RED, GARBAGE_B], "中")


class TestSessionActions:
    def test_every_action_returns_snapshot(self):
        session = GameSession(RoundConfig(seed=2))
        snap = session.start_round(claim_wall())
        assert snap.phase == GamePhase.DISCARD

        snap = session.discard(tile_id("中"))
        assert snap.current_seat == Seat.AUTO2
        assert snap.phase == GamePhase.RON

        snap = session.auto_step()
        assert snap.phase == GamePhase.END
        assert snap.winner == Seat.AUTO2
        assert snap.win_type == WinType.RON

    def test_snapshot_is_detached(self):
        session = GameSession(RoundConfig(seed=2))
        first = session.start_round(claim_wall())
        session.discard(tile_id("中"))
        assert first.phase == GamePhase.DISCARD
        assert first.drawn_tile[Seat.HUMAN] is not None
        assert session.snapshot().drawn_tile[Seat.HUMAN] is None

    def test_pass_claim(self):
        wall = build_wall(
            [WAITS_ON_RED, GARBAGE_A, GARBAGE_A, WAITS_ON_RED], "9m", draws="白中")
        session = GameSession(RoundConfig(seed=2))
        session.start_round(wall)
        session.discard(tile_id("9m"))
        # Steer the automated seats so AUTO2 throws 中
        session._engine.draw(Seat.AUTO1)
        session._engine.discard(Seat.AUTO1, tile_id("白"))
        session._engine.draw(Seat.AUTO2)
        session._engine.discard(Seat.AUTO2, tile_id("中"))

        snap = session.pass_claim()
        assert snap.current_seat == Seat.AUTO3
        snap = session.auto_step()
        assert snap.winner == Seat.AUTO3

    def test_declare_tsumo(self):
        wall = build_wall([WAITS_ON_RED, GARBAGE_A, GARBAGE_A, GARBAGE_B], "中")
        session = GameSession()
        session.start_round(wall)
        snap = session.declare_tsumo()
        assert snap.winner == Seat.HUMAN
        assert snap.win_type == WinType.TSUMO

    def test_human_draw_after_rotation(self):
        session = GameSession(RoundConfig(seed=2))
        session.start_round(build_wall([GARBAGE_A] * 4, "中"))
        session.discard(tile_id("中"))
        for _ in range(6):
            session.auto_step()
        snap = session.snapshot()
        assert snap.current_seat == Seat.HUMAN
        assert snap.phase == GamePhase.DRAW

        snap = session.draw()
        assert snap.drawn_tile[Seat.HUMAN] is not None
        assert snap.phase == GamePhase.DISCARD

    def test_to_dict(self):
        session = GameSession(RoundConfig(seed=2))
        data = session.start_round(claim_wall()).to_dict()
        assert data["phase"] == "Discard"
        assert data["current_seat"] == "Human"
        assert data["drawn_tile"] == [tile_id("中"), None, None, None]
        assert len(data["hands"]) == 4
        assert all(len(h) == 13 for h in data["hands"])
        assert data["can_tsumo"] == [False] * 4
        assert data["winner"] is None
        json.dumps(data)

    def test_errors_leave_state(self):
        session = GameSession(RoundConfig(seed=2))
        session.start_round(claim_wall())
        before = session.snapshot()
        with pytest.raises(ActionError):
            session.draw()
        with pytest.raises(ActionError):
            session.claim_win()
        with pytest.raises(TurnViolation):
            session.auto_step()
        assert session.snapshot() == before

    def test_unstarted_session(self):
        session = GameSession()
        with pytest.raises(RoundOver):
            session.discard(0)
        assert session.snapshot().phase == GamePhase.END


class TestApply:
    def test_start(self):
        session = GameSession(RoundConfig(seed=9))
        snap = session.apply(Action(ActionType.START))
        assert snap.phase == GamePhase.DISCARD
        assert snap.tile_total == 136

    def test_human_action(self):
        session = GameSession(RoundConfig(seed=2))
        session.start_round(claim_wall())
        snap = session.apply(Action(ActionType.DISCARD, Seat.HUMAN, tile_id=tile_id("中")))
        assert snap.last_discarder == Seat.HUMAN

    def test_automated_seat_rejected(self):
        session = GameSession(RoundConfig(seed=2))
        session.start_round(claim_wall())
        session.discard(tile_id("中"))
        before = session.snapshot()
        with pytest.raises(ValueError):
            session.apply(Action(ActionType.RON, Seat.AUTO2))
        assert session.snapshot() == before

    def test_auto_step_action(self):
        session = GameSession(RoundConfig(seed=2))
        session.start_round(claim_wall())
        session.discard(tile_id("中"))
        snap = session.apply(Action(ActionType.AUTO_STEP))
        assert snap.winner == Seat.AUTO2


class TestConcurrency:
    def test_racing_discards(self):
        """Two callers race for one discard; exactly one wins the turn."""
        session = GameSession(RoundConfig(seed=4))
        session.start_round()
        snap = session.snapshot()
        tiles = snap.available_tiles(Seat.HUMAN)
        results = []
        barrier = threading.Barrier(2)

        def worker(tid):
            barrier.wait()
            try:
                session.discard(tid)
                results.append("ok")
            except ActionError:
                results.append("rejected")

        threads = [threading.Thread(target=worker, args=(t.id,))
                   for t in (tiles[0], tiles[-1])]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert sorted(results) == ["ok", "rejected"]
        after = session.snapshot()
        assert sum(len(d) for d in after.discards) == 1
        assert after.tile_total == 136


class TestDefaultSession:
    def test_singleton(self, monkeypatch):
        monkeypatch.setattr(session_mod, "_default_session", None)
        first = default_session(RoundConfig(seed=1))
        assert default_session() is first
        assert first.config.seed == 1


class TestSessionLogging:
    def test_round_written_on_end(self, tmp_path):
        config = RoundConfig(seed=2, record_log=True, log_dir=str(tmp_path))
        session = GameSession(config)
        session.start_round(claim_wall())
        session.discard(tile_id("中"))
        assert session.last_log_path is None
        session.auto_step()

        assert session.last_log_path is not None
        with open(session.last_log_path, encoding="utf-8") as f:
            data = json.load(f)
        round_data = data["rounds"][0]
        assert round_data["result"] == {"reason": "ron", "winner": "Auto2", "win_type": "ron"}
        assert [a["action"] for a in round_data["actions"]] == ["discard", "ron"]

    def test_no_log_by_default(self, tmp_path):
        session = GameSession(RoundConfig(seed=2, log_dir=str(tmp_path)))
        session.start_round(claim_wall())
        session.discard(tile_id("中"))
        session.auto_step()
        assert session.last_log_path is None
        assert list(tmp_path.iterdir()) == []
