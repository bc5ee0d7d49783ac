"""Profile files — Pydantic validation for non-interactive plan input.

A profile file is JSON of the form {"baseline": {...}, "goals": {...}} using
the same field names as FitnessBaseline / FitnessGoals. Validation enforces
the questionnaire's ranges, so a loaded profile is as trustworthy as one
collected interactively.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError, model_validator

from fitquest.errors import ProfileFileError
from fitquest.models import (
    ActivityLevel,
    Budget,
    Experience,
    FitnessBaseline,
    FitnessGoals,
    PrimaryGoal,
    Priority,
)


class BaselineInput(BaseModel):
    age: float = Field(ge=13, le=100)
    current_weight: float = Field(ge=50, le=500)
    height: float = Field(ge=36, le=96)
    activity_level: ActivityLevel
    workout_frequency: float = Field(ge=0, le=14)
    workout_duration: float = Field(default=0, ge=0, le=300)
    experience: Experience
    current_strength: float = Field(ge=1, le=10)
    current_endurance: float = Field(ge=1, le=10)
    current_flexibility: float = Field(ge=1, le=10)
    time_available: float = Field(ge=0, le=300)
    budget: Budget
    equipment: list[str] = Field(default_factory=list)
    motivation: float = Field(ge=1, le=10)
    preferred_activities: list[str] = Field(default_factory=list)
    limitations: list[str] = Field(default_factory=list)

    @model_validator(mode="after")
    def default_equipment(self) -> "BaselineInput":
        if not self.equipment:
            self.equipment = ["bodyweight_only"]
        return self

    def to_baseline(self) -> FitnessBaseline:
        data = self.model_dump()
        for key in ("equipment", "preferred_activities", "limitations"):
            data[key] = tuple(data[key])
        return FitnessBaseline(**data)


class GoalsInput(BaseModel):
    primary_goal: PrimaryGoal
    target_strength: float = Field(ge=1, le=10)
    target_endurance: float = Field(ge=1, le=10)
    target_flexibility: float = Field(ge=1, le=10)
    timeframe: float = Field(ge=1, le=24)
    priority: Priority
    target_weight: float | None = Field(default=None, ge=50, le=500)
    specific_targets: list[str] = Field(default_factory=list)

    def to_goals(self) -> FitnessGoals:
        data = self.model_dump()
        data["specific_targets"] = tuple(data["specific_targets"])
        return FitnessGoals(**data)


class ProfileInput(BaseModel):
    baseline: BaselineInput
    goals: GoalsInput


def parse_profile(data: dict) -> tuple[FitnessBaseline, FitnessGoals]:
    """Validate a profile dict. Raises ProfileFileError on invalid input."""
    try:
        profile = ProfileInput.model_validate(data)
    except ValidationError as exc:
        raise ProfileFileError(f"Invalid profile: {exc}") from exc
    return profile.baseline.to_baseline(), profile.goals.to_goals()


def load_profile(path: str | Path) -> tuple[FitnessBaseline, FitnessGoals]:
    path = Path(path)
    try:
        with path.open() as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as exc:
        raise ProfileFileError(f"Cannot read profile {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ProfileFileError(f"Profile {path} must contain a JSON object")
    return parse_profile(data)
