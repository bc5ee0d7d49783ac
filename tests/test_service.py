"""Tests for the quest service operations."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from fitquest.errors import MissionCompletionError, UserNotFoundError


class TestSubmitSurvey:
    def test_creates_user_with_missions(self, service, store, survey):
        result = service.submit_survey_and_create_user("Sam", survey)
        assert result["success"] is True
        assert result["user_id"] in store
        categories = [m["category"] for m in result["initial_missions"]]
        assert categories == ["cardio", "nutrition", "sleep", "stress", "energy"]
        assert all(m["completed"] is False for m in result["initial_missions"])

    def test_user_record(self, service, store, survey, clock):
        user_id = service.submit_survey_and_create_user("Sam", survey)["user_id"]
        user = store.get(user_id)
        assert user.name == "Sam"
        assert user.baseline.fitness == 4
        assert user.goals.primary_goal == "endurance"
        assert user.survey_responses == survey
        assert user.missions_issued_on == clock.now.date()
        assert user.progress.created_at == clock.now

    def test_empty_survey_still_creates_user(self, service):
        result = service.submit_survey_and_create_user("Quiet", [])
        # defaults leave a gap on every target, and 30 minutes to fit them into
        assert result["success"] is True
        assert sum(m["estimated_time"] for m in result["initial_missions"]) <= 30


class TestDashboard:
    def test_unknown_user(self, service):
        with pytest.raises(UserNotFoundError):
            service.get_user_dashboard("user_missing")

    def test_fresh_user(self, service, survey):
        user_id = service.submit_survey_and_create_user("Sam", survey)["user_id"]
        dashboard = service.get_user_dashboard(user_id)
        assert dashboard["user"]["id"] == user_id
        assert dashboard["user"]["level"] == 1
        assert dashboard["user"]["xp_for_next_level"] == 100
        report = dashboard["progress_report"]
        assert report["total_missions_completed"] == 0
        assert report["missions_remaining_today"] == len(dashboard["todays_missions"])
        assert report["achievements"] == []
        assert report["days_since_joined"] == 0

    def test_same_day_keeps_missions(self, service, survey, clock):
        result = service.submit_survey_and_create_user("Sam", survey)
        clock.advance(hours=6)
        dashboard = service.get_user_dashboard(result["user_id"])
        assert [m["id"] for m in dashboard["todays_missions"]] == [
            m["id"] for m in result["initial_missions"]
        ]

    def test_new_day_reissues_missions(self, service, store, survey, clock):
        result = service.submit_survey_and_create_user("Sam", survey)
        user_id = result["user_id"]
        service.complete_mission(user_id, result["initial_missions"][0]["id"])

        clock.advance(days=1)
        dashboard = service.get_user_dashboard(user_id)
        new_ids = {m["id"] for m in dashboard["todays_missions"]}
        assert new_ids.isdisjoint(m["id"] for m in result["initial_missions"])
        assert not any(m["completed"] for m in dashboard["todays_missions"])
        assert store.get(user_id).missions_issued_on == clock.now.date()
        assert dashboard["progress_report"]["total_missions_completed"] == 1
        assert dashboard["progress_report"]["days_since_joined"] == 1


class TestCompleteMission:
    def test_rewards_and_first_achievement(self, service, survey):
        result = service.submit_survey_and_create_user("Sam", survey)
        mission = result["initial_missions"][0]

        completion = service.complete_mission(result["user_id"], mission["id"])

        assert completion["success"] is True
        assert [a["id"] for a in completion["new_achievements"]] == ["first_mission"]
        progress = completion["new_progress"]
        assert progress["experience"] == mission["xp_reward"] + 50
        assert progress["coins"] == mission["coin_reward"]
        assert progress["level"] == 1
        assert progress["streaks"] == {mission["category"]: 1}
        assert progress["completed_missions"] == [mission["id"]]

    def test_marks_mission_completed(self, service, survey):
        result = service.submit_survey_and_create_user("Sam", survey)
        mission_id = result["initial_missions"][1]["id"]
        service.complete_mission(result["user_id"], mission_id)

        dashboard = service.get_user_dashboard(result["user_id"])
        completed = [m["id"] for m in dashboard["todays_missions"] if m["completed"]]
        assert completed == [mission_id]
        assert dashboard["progress_report"]["missions_completed_today"] == 1

    def test_unknown_user(self, service):
        with pytest.raises(MissionCompletionError) as exc_info:
            service.complete_mission("user_missing", "cardio_x")
        assert exc_info.value.code == "user_not_found"

    def test_unknown_mission(self, service, survey):
        user_id = service.submit_survey_and_create_user("Sam", survey)["user_id"]
        with pytest.raises(MissionCompletionError) as exc_info:
            service.complete_mission(user_id, "not_a_mission")
        assert exc_info.value.code == "mission_not_found"

    def test_double_completion_rejected(self, service, survey):
        result = service.submit_survey_and_create_user("Sam", survey)
        mission_id = result["initial_missions"][0]["id"]
        service.complete_mission(result["user_id"], mission_id)

        with pytest.raises(MissionCompletionError) as exc_info:
            service.complete_mission(result["user_id"], mission_id)
        assert exc_info.value.code == "mission_already_completed"

    def test_yesterdays_mission_rejected_without_dashboard_visit(self, service, store, survey, clock):
        result = service.submit_survey_and_create_user("Sam", survey)
        user_id = result["user_id"]
        clock.advance(days=1)

        with pytest.raises(MissionCompletionError) as exc_info:
            service.complete_mission(user_id, result["initial_missions"][0]["id"])
        assert exc_info.value.code == "mission_not_found"

        user = store.get(user_id)
        assert user.missions_issued_on == clock.now.date()
        assert user.progress.experience == 0
        assert user.progress.streaks == {}

    def test_todays_reissued_mission_can_be_completed(self, service, store, survey, clock):
        user_id = service.submit_survey_and_create_user("Sam", survey)["user_id"]
        clock.advance(days=1)
        with pytest.raises(MissionCompletionError):
            service.complete_mission(user_id, "stale_id")

        todays_id = store.get(user_id).daily_missions[0].mission_id
        assert service.complete_mission(user_id, todays_id)["success"] is True

    def test_concurrent_completions_are_all_counted(self, service, store, survey):
        result = service.submit_survey_and_create_user("Sam", survey)
        user_id = result["user_id"]
        missions = result["initial_missions"]

        with ThreadPoolExecutor(max_workers=len(missions)) as pool:
            list(pool.map(lambda m: service.complete_mission(user_id, m["id"]), missions))

        progress = store.get(user_id).progress
        assert sorted(progress.completed_missions) == sorted(m["id"] for m in missions)
        assert progress.experience == sum(m["xp_reward"] for m in missions) + 50
