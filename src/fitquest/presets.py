"""Pre-built baseline/goal pairs for quick, non-interactive plans."""

from __future__ import annotations

from fitquest.models import FitnessBaseline, FitnessGoals

BEGINNER_WEIGHT_LOSS = (
    FitnessBaseline(
        age=34,
        current_weight=210,
        height=68,
        activity_level="sedentary",
        workout_frequency=0,
        workout_duration=0,
        experience="beginner",
        current_strength=2,
        current_endurance=3,
        current_flexibility=5,
        time_available=30,
        budget="low",
        equipment=("bodyweight_only",),
        motivation=7,
    ),
    FitnessGoals(
        primary_goal="weight_loss",
        target_strength=6,
        target_endurance=7,
        target_flexibility=5,
        timeframe=6,
        priority="high",
        target_weight=185,
    ),
)

HOME_MUSCLE_GAIN = (
    FitnessBaseline(
        age=27,
        current_weight=150,
        height=70,
        activity_level="lightly_active",
        workout_frequency=2,
        workout_duration=40,
        experience="intermediate",
        current_strength=4,
        current_endurance=5,
        current_flexibility=4,
        time_available=60,
        budget="moderate",
        equipment=("home_equipment",),
        motivation=8,
    ),
    FitnessGoals(
        primary_goal="muscle_gain",
        target_strength=8,
        target_endurance=5,
        target_flexibility=6,
        timeframe=9,
        priority="medium",
        target_weight=165,
    ),
)

GYM_ENDURANCE = (
    FitnessBaseline(
        age=41,
        current_weight=175,
        height=71,
        activity_level="very_active",
        workout_frequency=4,
        workout_duration=60,
        experience="advanced",
        current_strength=7,
        current_endurance=6,
        current_flexibility=3,
        time_available=45,
        budget="high",
        equipment=("gym_access", "home_equipment"),
        motivation=9,
    ),
    FitnessGoals(
        primary_goal="endurance",
        target_strength=8,
        target_endurance=9,
        target_flexibility=6,
        timeframe=4,
        priority="high",
    ),
)

PRESETS: dict[str, tuple[FitnessBaseline, FitnessGoals]] = {
    "beginner-weight-loss": BEGINNER_WEIGHT_LOSS,
    "home-muscle-gain": HOME_MUSCLE_GAIN,
    "gym-endurance": GYM_ENDURANCE,
}
