"""Tests for mission completion, streaks, levels and achievements."""

from datetime import datetime, timedelta, timezone

from fitquest.achievements import ACHIEVEMENTS, get_achievement
from fitquest.ledger import (
    check_achievements,
    check_level_up,
    complete_mission,
    days_since,
    level_progress_pct,
    update_streak,
)
from fitquest.models import Progress

NOW = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


def _ids(achievements) -> list[str]:
    return [a.id for a in achievements]


class TestLevelUp:
    def test_crossing_threshold(self):
        progress = Progress(experience=90)
        result = complete_mission(progress, "m1", now=NOW, achievements=[])
        assert progress.experience == 110
        assert progress.level == 2
        assert progress.coins == 10 + 20
        assert result["levels_gained"] == [2]

    def test_crossing_threshold_with_first_mission_bonus(self):
        progress = Progress(experience=90)
        result = complete_mission(progress, "m1", now=NOW)
        assert _ids(result["new_achievements"]) == ["first_mission"]
        assert progress.experience == 160
        assert progress.level == 2
        assert progress.coins == 30

    def test_large_reward_grants_several_levels(self):
        progress = Progress()
        result = complete_mission(progress, "m1", xp_reward=350, now=NOW, achievements=[])
        assert progress.level == 4
        assert result["levels_gained"] == [2, 3, 4]
        assert progress.coins == 10 + 20 + 30 + 40

    def test_achievement_xp_can_level_up(self):
        progress = Progress(experience=40)
        result = complete_mission(progress, "m1", now=NOW)
        assert progress.experience == 110
        assert result["levels_gained"] == [2]

    def test_no_level_below_threshold(self):
        progress = Progress(level=3, experience=299)
        assert check_level_up(progress) == []
        assert progress.level == 3

    def test_xp_for_next_level(self):
        assert Progress(level=4).xp_for_next_level == 400


class TestAchievements:
    def test_first_mission_unlocks_once(self):
        progress = Progress()
        first = complete_mission(progress, "m1", now=NOW)
        second = complete_mission(progress, "m2", now=NOW)
        assert _ids(first["new_achievements"]) == ["first_mission"]
        assert second["new_achievements"] == []
        assert progress.experience == 20 + 50 + 20
        assert list(progress.unlocked_achievements) == ["first_mission"]
        assert progress.unlocked_achievements["first_mission"] == NOW

    def test_check_is_idempotent(self):
        progress = Progress(completed_missions=["a"])
        assert _ids(check_achievements(progress, NOW)) == ["first_mission"]
        assert check_achievements(progress, NOW) == []
        assert progress.experience == 50

    def test_sleep_streak_unlocks_on_day_seven(self):
        progress = Progress()
        defs = [get_achievement("sleep_streak_7")]
        for day in range(7):
            result = complete_mission(
                progress, f"sleep_{day}", category="sleep",
                now=NOW + timedelta(days=day), achievements=defs,
            )
            if day < 6:
                assert result["new_achievements"] == []
        assert _ids(result["new_achievements"]) == ["sleep_streak_7"]
        assert progress.streaks["sleep"] == 7

    def test_category_progress(self):
        progress = Progress()
        defs = [get_achievement("strength_builder")]
        for i in range(5):
            result = complete_mission(progress, f"s{i}", category="strength", now=NOW, achievements=defs)
        assert progress.category_progress == {"strength": 5}
        assert _ids(result["new_achievements"]) == ["strength_builder"]

    def test_level_reached(self):
        progress = Progress(level=5)
        assert _ids(check_achievements(progress, NOW, [get_achievement("level_5")])) == ["level_5"]

    def test_catalog_ids_unique(self):
        ids = _ids(ACHIEVEMENTS)
        assert len(ids) == len(set(ids))


class TestStreaks:
    def test_first_completion(self):
        progress = Progress()
        assert update_streak(progress, "cardio", NOW) == 1
        assert progress.last_completed_on["cardio"] == NOW.date()

    def test_consecutive_days_extend(self):
        progress = Progress()
        update_streak(progress, "cardio", NOW)
        assert update_streak(progress, "cardio", NOW + timedelta(days=1)) == 2

    def test_same_day_does_not_extend(self):
        progress = Progress()
        update_streak(progress, "cardio", NOW)
        assert update_streak(progress, "cardio", NOW + timedelta(hours=5)) == 1

    def test_missed_day_resets(self):
        progress = Progress()
        update_streak(progress, "cardio", NOW)
        update_streak(progress, "cardio", NOW + timedelta(days=1))
        assert update_streak(progress, "cardio", NOW + timedelta(days=3)) == 1

    def test_categories_are_independent(self):
        progress = Progress()
        update_streak(progress, "cardio", NOW)
        update_streak(progress, "cardio", NOW + timedelta(days=1))
        update_streak(progress, "sleep", NOW + timedelta(days=1))
        assert progress.streaks == {"cardio": 2, "sleep": 1}

    def test_complete_without_category_skips_streaks(self):
        progress = Progress()
        complete_mission(progress, "m1", now=NOW, achievements=[])
        assert progress.streaks == {}
        assert progress.category_progress == {}
        assert progress.completed_missions == ["m1"]


class TestReportHelpers:
    def test_level_progress_pct(self):
        assert level_progress_pct(Progress(level=2, experience=150)) == 50.0
        assert level_progress_pct(Progress(level=1, experience=0)) == 0.0

    def test_days_since(self):
        assert days_since(NOW - timedelta(days=3, hours=2), NOW) == 3
        assert days_since(NOW + timedelta(hours=1), NOW) == 0
