"""Workout plan mission generator — strength, cardio, flexibility, recovery.

Each rule looks at one gap (target − current) and contributes at most one
mission. Rules are evaluated independently, in a fixed order, so the output
order is the generation order the prioritizer falls back to.
"""

from __future__ import annotations

from fitquest.catalog import (
    ACTIVE_RECOVERY,
    BODYWEIGHT_CIRCUIT,
    CARDIO_SESSION,
    FLEXIBILITY_SESSION,
    STRENGTH_SESSION,
    MissionTemplate,
    cardio_instructions,
    strength_instructions,
)
from fitquest.errors import ProfileRangeError
from fitquest.models import SCALE_MAX, SCALE_MIN, FitnessBaseline, FitnessGoals, Mission

STRENGTH_TIME_SHARE = 0.7
STRENGTH_TIME_CAP = 45
CARDIO_TIME_SHARE = 0.6
CARDIO_TIME_CAP = 30
CARDIO_EASY_MAX_ENDURANCE = 5
TIME_AVAILABLE_MAX = 300


def require_in_range(field: str, value: float, low: float, high: float) -> None:
    """Raise ProfileRangeError if a collector let an out-of-range value through."""
    if not low <= value <= high:
        raise ProfileRangeError(field, value, low, high)


def _check_fitness_profile(baseline: FitnessBaseline, goals: FitnessGoals) -> None:
    for name in ("current_strength", "current_endurance", "current_flexibility"):
        require_in_range(name, getattr(baseline, name), SCALE_MIN, SCALE_MAX)
    for name in ("target_strength", "target_endurance", "target_flexibility"):
        require_in_range(name, getattr(goals, name), SCALE_MIN, SCALE_MAX)
    require_in_range("time_available", baseline.time_available, 0, TIME_AVAILABLE_MAX)


def _from_template(template: MissionTemplate, **overrides) -> Mission:
    values = dict(
        mission_id=template.key,
        title=template.title,
        description=template.description,
        category=template.category,
        difficulty=template.difficulty,
        estimated_time=template.estimated_time,
        equipment=list(template.equipment),
        instructions=list(template.instructions),
    )
    values.update(overrides)
    return Mission(**values)


def _scaled_time(time_available: float, share: float, cap: float) -> float:
    return min(time_available * share, cap)


def strength_mission(baseline: FitnessBaseline) -> Mission:
    if baseline.has_equipment("gym_access") or baseline.has_equipment("home_equipment"):
        return _from_template(
            STRENGTH_SESSION,
            difficulty="easy" if baseline.experience == "beginner" else "medium",
            estimated_time=_scaled_time(
                baseline.time_available, STRENGTH_TIME_SHARE, STRENGTH_TIME_CAP,
            ),
            equipment=["gym_access"] if baseline.has_equipment("gym_access") else ["home_equipment"],
            instructions=strength_instructions(baseline.experience, baseline.equipment),
        )
    return _from_template(BODYWEIGHT_CIRCUIT)


def cardio_mission(baseline: FitnessBaseline) -> Mission:
    duration = _scaled_time(baseline.time_available, CARDIO_TIME_SHARE, CARDIO_TIME_CAP)
    return _from_template(
        CARDIO_SESSION,
        difficulty="easy" if baseline.current_endurance < CARDIO_EASY_MAX_ENDURANCE else "medium",
        estimated_time=duration,
        instructions=cardio_instructions(baseline.current_endurance, duration),
    )


def generate_fitness_missions(baseline: FitnessBaseline, goals: FitnessGoals) -> list[Mission]:
    """Build the candidate workout missions for one planning session.

    Raises ProfileRangeError if a scale or the time budget is out of range.
    """
    _check_fitness_profile(baseline, goals)

    strength_gap = goals.target_strength - baseline.current_strength
    endurance_gap = goals.target_endurance - baseline.current_endurance
    flexibility_gap = goals.target_flexibility - baseline.current_flexibility

    missions: list[Mission] = []

    if strength_gap > 0:
        missions.append(strength_mission(baseline))

    if endurance_gap > 0 or goals.primary_goal == "weight_loss":
        missions.append(cardio_mission(baseline))

    if flexibility_gap > 0:
        missions.append(_from_template(FLEXIBILITY_SESSION))

    # Recovery for beginners or whenever there is more than one session to recover from
    if baseline.experience == "beginner" or len(missions) > 1:
        missions.append(_from_template(ACTIVE_RECOVERY))

    return missions
