"""Time-budget prioritization — goal-ordered greedy truncation.

When the candidates do not fit the daily budget they are stable-sorted by a
fixed category order for the primary goal, then kept front to back until the
first one that would overflow the budget. That mission and everything after
it is dropped, even if a later, shorter mission would still fit.
"""

from __future__ import annotations

from fitquest.models import Mission

PRIORITY_ORDER: dict[str, tuple[str, ...]] = {
    "weight_loss": ("cardio", "strength", "recovery", "flexibility"),
    "muscle_gain": ("strength", "recovery", "flexibility", "cardio"),
    "strength": ("strength", "recovery", "flexibility", "cardio"),
    "endurance": ("cardio", "flexibility", "recovery", "strength"),
    "flexibility": ("flexibility", "recovery", "strength", "cardio"),
    "general_fitness": ("strength", "cardio", "flexibility", "recovery"),
}
DEFAULT_GOAL = "general_fitness"


def total_time(missions: list[Mission]) -> float:
    return sum(m.estimated_time for m in missions)


def category_order(primary_goal: str) -> tuple[str, ...]:
    return PRIORITY_ORDER.get(primary_goal, PRIORITY_ORDER[DEFAULT_GOAL])


def sort_by_goal(missions: list[Mission], primary_goal: str) -> list[Mission]:
    """Stable sort by the goal's category order; unlisted categories go last."""
    order = category_order(primary_goal)
    rank = {category: i for i, category in enumerate(order)}
    return sorted(missions, key=lambda m: rank.get(m.category, len(order)))


def prioritize_missions(
    missions: list[Mission],
    time_available: float,
    primary_goal: str,
) -> list[Mission]:
    """Fit ``missions`` into ``time_available`` minutes.

    Returns a new list; the input list is not reordered.
    """
    if total_time(missions) <= time_available:
        return list(missions)

    kept: list[Mission] = []
    running = 0.0
    for mission in sort_by_goal(missions, primary_goal):
        if running + mission.estimated_time > time_available:
            break
        running += mission.estimated_time
        kept.append(mission)
    return kept
