"""Quest service — the three request/response operations over a UserStore.

Results are plain dicts ready for JSON encoding. Unknown users raise
UserNotFoundError (dashboard) or MissionCompletionError (completion).
"""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from datetime import date, datetime, timezone

from fitquest.achievements import get_achievement
from fitquest.errors import MissionCompletionError, UserNotFoundError
from fitquest.generators.wellness import DEFAULT_TARGET_COUNT
from fitquest.ledger import complete_mission, days_since, level_progress_pct
from fitquest.models import Mission, SurveyResponse, User
from fitquest.planner import plan_quest_missions
from fitquest.prioritize import total_time
from fitquest.store import UserStore
from fitquest.survey import process_goals, process_survey_responses, unknown_question_ids

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class QuestService:
    def __init__(
        self,
        store: UserStore,
        *,
        rng: random.Random | None = None,
        clock: Callable[[], datetime] = _utcnow,
        mission_target: int = DEFAULT_TARGET_COUNT,
    ):
        self.store = store
        self.rng = rng or random.Random()
        self.clock = clock
        self.mission_target = mission_target

    # --- operations ---

    def submit_survey_and_create_user(
        self,
        name: str,
        responses: Iterable[SurveyResponse],
    ) -> dict:
        responses = list(responses)
        unknown = unknown_question_ids(responses)
        if unknown:
            logger.info("Ignoring unknown survey questions: %s", unknown)

        now = self.clock()
        user = User(
            user_id=self.store.new_id(),
            name=name,
            baseline=process_survey_responses(responses),
            goals=process_goals(responses),
            survey_responses=responses,
        )
        user.progress.created_at = now
        user.progress.last_active = now
        self._issue_missions(user, now.date())
        self.store.add(user)

        logger.info(
            "Created user with %d initial missions", len(user.daily_missions),
            extra={"fitquest_user_id": user.user_id},
        )
        return {
            "success": True,
            "user_id": user.user_id,
            "initial_missions": [m.to_dict() for m in user.daily_missions],
        }

    def get_user_dashboard(self, user_id: str) -> dict:
        """Raises UserNotFoundError for unknown ids."""
        user = self.store.get(user_id)
        now = self.clock()
        with self.store.lock(user_id):
            self._refresh_missions(user, now.date())
            return {
                "user": self._user_summary(user),
                "todays_missions": [m.to_dict() for m in user.daily_missions],
                "progress_report": self._progress_report(user, now),
            }

    def complete_mission(self, user_id: str, mission_id: str) -> dict:
        """Complete one of today's missions and apply its rewards."""
        try:
            user = self.store.get(user_id)
        except UserNotFoundError as exc:
            raise MissionCompletionError(exc.message, code=exc.code) from exc

        now = self.clock()
        with self.store.lock(user_id):
            # a stale batch is replaced first, so yesterday's ids no longer match
            self._refresh_missions(user, now.date())
            mission = user.find_mission(mission_id)
            if mission is None:
                raise MissionCompletionError(
                    f"Mission {mission_id!r} is not in today's missions",
                    code="mission_not_found",
                )
            if mission.completed:
                raise MissionCompletionError(
                    f"Mission {mission_id!r} is already completed",
                    code="mission_already_completed",
                )

            result = complete_mission(
                user.progress,
                mission.mission_id,
                category=mission.category,
                xp_reward=mission.xp_reward,
                coin_reward=mission.coin_reward,
                now=now,
            )
            mission.completed = True

            logger.info(
                "Completed mission %s", mission_id,
                extra={
                    "fitquest_user_id": user_id,
                    "fitquest_xp_reward": mission.xp_reward,
                    "fitquest_levels_gained": result["levels_gained"],
                },
            )
            return {
                "success": True,
                "new_progress": user.progress.to_dict(),
                "levels_gained": result["levels_gained"],
                "new_achievements": [a.summary() for a in result["new_achievements"]],
            }

    # --- helpers ---

    def _issue_missions(self, user: User, day: date) -> None:
        user.daily_missions = plan_quest_missions(
            user.baseline, user.goals, self.rng, target_count=self.mission_target,
        )
        user.missions_issued_on = day

    def _refresh_missions(self, user: User, day: date) -> None:
        if user.missions_issued_on != day:
            self._issue_missions(user, day)

    def _user_summary(self, user: User) -> dict:
        progress = user.progress
        return {
            "id": user.user_id,
            "name": user.name,
            "level": progress.level,
            "experience": progress.experience,
            "coins": progress.coins,
            "xp_for_next_level": progress.xp_for_next_level,
            "primary_goal": user.goals.primary_goal,
        }

    def _progress_report(self, user: User, now: datetime) -> dict:
        progress = user.progress
        missions: list[Mission] = user.daily_missions
        done_today = [m for m in missions if m.completed]
        achievements = []
        for achievement_id, unlocked_at in progress.unlocked_achievements.items():
            achievement = get_achievement(achievement_id)
            achievements.append({
                "id": achievement_id,
                "name": achievement.name if achievement else achievement_id,
                "unlocked_at": unlocked_at.isoformat(),
            })
        return {
            "total_missions_completed": len(progress.completed_missions),
            "missions_completed_today": len(done_today),
            "missions_remaining_today": len(missions) - len(done_today),
            "minutes_planned_today": total_time(missions),
            "level_progress_pct": level_progress_pct(progress),
            "streaks": dict(progress.streaks),
            "category_progress": dict(progress.category_progress),
            "achievements": achievements,
            "days_since_joined": days_since(progress.created_at, now),
        }
