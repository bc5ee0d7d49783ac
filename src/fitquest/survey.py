"""Survey processing — turns question/answer pairs into quest profiles.

Missing questions take the defaults below, numbers are clamped to their
declared range, unusable values fall back to the default. Nothing here
raises on bad input: the survey is the collector, and the generator trusts
what it produces.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from fitquest.models import (
    ACTIVITY_LEVELS,
    BUDGETS,
    EXPERIENCE_LEVELS,
    PRIMARY_GOALS,
    PRIORITIES,
    SurveyResponse,
    WellnessBaseline,
    WellnessGoals,
)

logger = logging.getLogger(__name__)

# question_id → (field, min, max, default)
BASELINE_NUMERIC: dict[str, tuple[str, float, float, float]] = {
    "age": ("age", 13, 100, 30),
    "weight": ("weight", 50, 500, 160),
    "height": ("height", 36, 96, 68),
    "time_available": ("time_available", 0, 300, 30),
    "energy_level": ("energy", 1, 10, 5),
    "fitness_level": ("fitness", 1, 10, 5),
    "nutrition_level": ("nutrition", 1, 10, 5),
    "sleep_level": ("sleep", 1, 10, 5),
    "stress_level": ("stress", 1, 10, 5),
}

# question_id → (field, choices, default)
BASELINE_CHOICES: dict[str, tuple[str, tuple[str, ...], str]] = {
    "activity_level": ("activity_level", ACTIVITY_LEVELS, "lightly_active"),
    "experience": ("experience", EXPERIENCE_LEVELS, "beginner"),
    "budget": ("budget", BUDGETS, "low"),
}

BASELINE_LISTS: dict[str, tuple[str, tuple[str, ...]]] = {
    "equipment": ("equipment", ("bodyweight_only",)),
    "limitations": ("limitations", ()),
}

GOALS_NUMERIC: dict[str, tuple[str, float, float, float]] = {
    "target_energy": ("target_energy", 1, 10, 7),
    "target_fitness": ("target_fitness", 1, 10, 7),
    "target_nutrition": ("target_nutrition", 1, 10, 7),
    "target_sleep": ("target_sleep", 1, 10, 7),
    "target_stress": ("target_stress", 1, 10, 7),
    "timeframe": ("timeframe", 1, 24, 3),
}

GOALS_CHOICES: dict[str, tuple[str, tuple[str, ...], str]] = {
    "primary_goal": ("primary_goal", PRIMARY_GOALS, "general_fitness"),
    "priority": ("priority", PRIORITIES, "medium"),
}

KNOWN_QUESTIONS = frozenset(
    [*BASELINE_NUMERIC, *BASELINE_CHOICES, *BASELINE_LISTS, *GOALS_NUMERIC, *GOALS_CHOICES]
)


def latest_answers(responses: Iterable[SurveyResponse]) -> dict[str, object]:
    """question_id → value, the last answer for a question wins."""
    answers: dict[str, object] = {}
    for response in responses:
        answers[response.question_id] = response.value
    return answers


def coerce_number(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip().replace(",", "."))
        except ValueError:
            return None
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def normalize_choice(value: object, choices: tuple[str, ...]) -> str | None:
    if not isinstance(value, str):
        return None
    normalized = value.strip().lower().replace(" ", "_").replace("-", "_")
    return normalized if normalized in choices else None


def normalize_list(value: object) -> tuple[str, ...] | None:
    if isinstance(value, str):
        items = value.split(",")
    elif isinstance(value, (list, tuple)):
        items = [item for item in value if isinstance(item, str)]
    else:
        return None
    return tuple(item.strip().lower() for item in items if item.strip())


def _numeric_fields(
    answers: dict[str, object],
    table: dict[str, tuple[str, float, float, float]],
) -> dict[str, float]:
    fields: dict[str, float] = {}
    for question_id, (field, low, high, default) in table.items():
        if question_id not in answers:
            fields[field] = default
            continue
        number = coerce_number(answers[question_id])
        if number is None:
            logger.warning(
                "Unusable answer for %s, using default %s", question_id, default,
                extra={"fitquest_question_id": question_id},
            )
            fields[field] = default
        else:
            fields[field] = clamp(number, low, high)
    return fields


def _choice_fields(
    answers: dict[str, object],
    table: dict[str, tuple[str, tuple[str, ...], str]],
) -> dict[str, str]:
    fields: dict[str, str] = {}
    for question_id, (field, choices, default) in table.items():
        choice = normalize_choice(answers.get(question_id), choices)
        if choice is None:
            if question_id in answers:
                logger.warning(
                    "Unknown choice for %s, using default %s", question_id, default,
                    extra={"fitquest_question_id": question_id},
                )
            choice = default
        fields[field] = choice
    return fields


def process_survey_responses(responses: Iterable[SurveyResponse]) -> WellnessBaseline:
    answers = latest_answers(responses)

    fields: dict[str, object] = {}
    fields.update(_numeric_fields(answers, BASELINE_NUMERIC))
    fields.update(_choice_fields(answers, BASELINE_CHOICES))
    for question_id, (field, default) in BASELINE_LISTS.items():
        items = normalize_list(answers.get(question_id))
        fields[field] = items if items is not None else default
    if not fields["equipment"]:
        fields["equipment"] = ("bodyweight_only",)

    return WellnessBaseline(**fields)


def process_goals(responses: Iterable[SurveyResponse]) -> WellnessGoals:
    answers = latest_answers(responses)

    fields: dict[str, object] = {}
    fields.update(_numeric_fields(answers, GOALS_NUMERIC))
    fields.update(_choice_fields(answers, GOALS_CHOICES))
    return WellnessGoals(**fields)


def unknown_question_ids(responses: Iterable[SurveyResponse]) -> list[str]:
    return sorted({r.question_id for r in responses} - KNOWN_QUESTIONS)
