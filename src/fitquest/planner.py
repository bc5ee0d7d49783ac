"""Planning entry points — generate candidates, then fit them to the time budget."""

from __future__ import annotations

import logging
import random

from fitquest.generators.fitness import generate_fitness_missions
from fitquest.generators.wellness import DEFAULT_TARGET_COUNT, generate_wellness_missions
from fitquest.models import FitnessBaseline, FitnessGoals, Mission, WellnessBaseline, WellnessGoals
from fitquest.prioritize import prioritize_missions, total_time

logger = logging.getLogger(__name__)


def plan_daily_missions(baseline: FitnessBaseline, goals: FitnessGoals) -> list[Mission]:
    """Workout plan for the questionnaire flow."""
    candidates = generate_fitness_missions(baseline, goals)
    missions = prioritize_missions(candidates, baseline.time_available, goals.primary_goal)
    _log_plan("workout", candidates, missions, baseline.time_available)
    return missions


def plan_quest_missions(
    baseline: WellnessBaseline,
    goals: WellnessGoals,
    rng: random.Random,
    *,
    target_count: int = DEFAULT_TARGET_COUNT,
) -> list[Mission]:
    """Quest missions for one day, fitted to the user's time budget."""
    candidates = generate_wellness_missions(baseline, goals, rng, target_count=target_count)
    missions = prioritize_missions(candidates, baseline.time_available, goals.primary_goal)
    _log_plan("quest", candidates, missions, baseline.time_available)
    return missions


def _log_plan(kind: str, candidates: list[Mission], kept: list[Mission], budget: float) -> None:
    dropped = len(candidates) - len(kept)
    if dropped:
        logger.info(
            "Dropped %d of %d %s missions to fit %s minutes",
            dropped, len(candidates), kind, f"{budget:g}",
            extra={"fitquest_dropped": dropped, "fitquest_budget_minutes": budget},
        )
    else:
        logger.debug(
            "Planned %d %s missions (%s minutes)",
            len(kept), kind, f"{total_time(kept):g}",
        )
