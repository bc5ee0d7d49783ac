from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from fitquest.models import Mission, Progress, User
from fitquest.presets import BEGINNER_WEIGHT_LOSS
from fitquest.survey import process_goals, process_survey_responses


def _mission(mission_id="m1", minutes=10.0) -> Mission:
    return Mission(
        mission_id=mission_id,
        title="Walk",
        description="Go for a walk",
        category="cardio",
        difficulty="easy",
        estimated_time=minutes,
        equipment=["bodyweight_only"],
        instructions=["Walk"],
    )


class TestMission:
    def test_negative_time_rejected(self):
        with pytest.raises(ValueError, match="negative estimated_time"):
            _mission(minutes=-1)

    def test_to_dict(self):
        data = _mission().to_dict()
        assert data["id"] == "m1"
        assert data["estimated_time"] == 10.0
        assert data["completed"] is False
        assert data["xp_reward"] == 0


class TestProfiles:
    def test_baseline_is_frozen(self):
        baseline, _ = BEGINNER_WEIGHT_LOSS
        with pytest.raises(FrozenInstanceError):
            baseline.current_strength = 9

    def test_has_equipment(self):
        baseline, _ = BEGINNER_WEIGHT_LOSS
        assert baseline.has_equipment("bodyweight_only")
        assert not baseline.has_equipment("gym_access")


class TestProgress:
    def test_defaults(self):
        progress = Progress()
        assert (progress.level, progress.experience, progress.coins) == (1, 0, 0)
        assert progress.xp_for_next_level == 100

    def test_to_dict(self):
        moment = datetime(2026, 1, 5, tzinfo=timezone.utc)
        progress = Progress(
            level=2,
            experience=120,
            unlocked_achievements={"first_mission": moment},
            created_at=moment,
            last_active=moment,
        )
        data = progress.to_dict()
        assert data["xp_for_next_level"] == 200
        assert data["unlocked_achievements"] == [
            {"id": "first_mission", "unlocked_at": "2026-01-05T00:00:00+00:00"},
        ]
        assert data["created_at"] == "2026-01-05T00:00:00+00:00"


def test_user_find_mission():
    user = User(
        user_id="u1",
        name="Sam",
        baseline=process_survey_responses([]),
        goals=process_goals([]),
        daily_missions=[_mission("a"), _mission("b")],
    )
    assert user.find_mission("b").mission_id == "b"
    assert user.find_mission("c") is None
