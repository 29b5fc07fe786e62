"""Tests for domain record models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from debate_gym.db.models import (
    DebateMessage,
    DebateSession,
    FallacyDrillContent,
    GymDrill,
    InvalidTransition,
    RebuttalDrillContent,
    SparringSession,
    VoidMask,
    Wager,
)

NOW = "2026-10-19T12:00:00+00:00"


@pytest.fixture
def debate() -> DebateSession:
    return DebateSession(
        id="d1",
        user_id="u1",
        persona_id="socrates",
        topic="General Debate",
        created_at=NOW,
        updated_at=NOW,
    )


class TestDebateSession:
    def test_defaults(self, debate):
        assert debate.status == "active"
        assert debate.metrics.turns == 0

    def test_negative_turns_rejected(self):
        with pytest.raises(ValidationError):
            DebateSession(
                id="d1",
                user_id="u1",
                persona_id="p",
                topic="t",
                metrics={"turns": -1, "avg_steelman": 0},
                created_at=NOW,
                updated_at=NOW,
            )

    @pytest.mark.parametrize("target", ["completed", "archived"])
    def test_active_can_finish(self, debate, target):
        assert debate.transition(target).status == target
        assert debate.status == "active"

    def test_terminal_states_are_final(self, debate):
        done = debate.transition("completed")
        with pytest.raises(InvalidTransition):
            done.transition("archived")

    def test_cannot_reactivate(self, debate):
        with pytest.raises(InvalidTransition):
            debate.transition("active")


class TestDebateMessage:
    def test_ai_message_without_sender(self):
        msg = DebateMessage(
            id=1,
            session_id="d1",
            sender_id=None,
            sender_role="ai",
            content="What is virtue?",
            created_at=NOW,
        )
        assert msg.sender_id is None

    def test_metadata_known_and_extra_keys(self):
        msg = DebateMessage(
            id=2,
            session_id="d1",
            sender_id="u1",
            sender_role="user",
            content="Virtue is knowledge.",
            metadata={"steelman": 7.5, "factCheck": "verified", "source": "Meno"},
            created_at=NOW,
        )
        assert msg.metadata.steelman == 7.5
        assert msg.metadata.fact_check == "verified"
        assert msg.metadata.model_extra == {"source": "Meno"}

    def test_invalid_role(self):
        with pytest.raises(ValidationError):
            DebateMessage(
                id=3, session_id="d1", sender_role="moderator", content="x", created_at=NOW
            )

    def test_invalid_fact_check(self):
        with pytest.raises(ValidationError):
            DebateMessage(
                id=4,
                session_id="d1",
                sender_role="ai",
                content="x",
                metadata={"factCheck": "maybe"},
                created_at=NOW,
            )


class TestGymDrill:
    def test_fallacy_content(self):
        drill = GymDrill(
            id="g1",
            type="fallacy",
            title="Spot the fallacy",
            difficulty="Beginner",
            content={
                "kind": "fallacy",
                "argument": "Everyone believes it, so it is true.",
                "options": ["Bandwagon", "Strawman"],
                "answer": "Bandwagon",
            },
            xpReward=25,
        )
        assert isinstance(drill.content, FallacyDrillContent)
        assert drill.xp_reward == 25

    def test_rebuttal_content(self):
        drill = GymDrill(
            id="g2",
            type="rebuttal",
            title="Rebut",
            difficulty="Advanced",
            content={"kind": "rebuttal", "prompt": "Taxes are theft."},
            xp_reward=100,
        )
        assert isinstance(drill.content, RebuttalDrillContent)
        assert drill.content.time_limit_seconds == 60

    def test_bad_difficulty(self):
        with pytest.raises(ValidationError):
            GymDrill(
                id="g3",
                type="fallacy",
                title="x",
                difficulty="Impossible",
                content={"kind": "rebuttal", "prompt": "p"},
                xp_reward=1,
            )


class TestSparringSession:
    def _session(self, **kw):
        data = {"id": "s1", "userId": "u1", "topic": "AI", "createdAt": NOW, "updatedAt": NOW}
        data.update(kw)
        return SparringSession(**data)

    def test_append_while_active(self):
        session = self._session().append_turn("user", "Hello").append_turn("assistant", "Hi")
        assert [t.role for t in session.transcript] == ["user", "assistant"]

    def test_append_after_close(self):
        with pytest.raises(InvalidTransition):
            self._session(status="abandoned").append_turn("user", "Anyone?")


class TestWager:
    def _wager(self, **kw):
        data = {
            "id": "w1",
            "userId": "u1",
            "debateId": "d1",
            "amount": 10,
            "predictionSide": "PRO",
            "createdAt": NOW,
        }
        data.update(kw)
        return Wager(**data)

    def test_resolve_once(self):
        won = self._wager().resolve("won", payout=20)
        assert won.status == "won"
        assert won.payout == 20
        with pytest.raises(InvalidTransition):
            won.resolve("refunded")

    def test_cannot_resolve_to_pending(self):
        with pytest.raises(InvalidTransition):
            self._wager().resolve("pending")

    def test_bad_side(self):
        with pytest.raises(ValidationError):
            self._wager(predictionSide="MAYBE")


def test_void_mask_keeps_unknown_columns():
    mask = VoidMask(is_active=True, created_at=NOW, name="Neon Fox", rarity="rare")
    assert mask.model_dump()["rarity"] == "rare"
