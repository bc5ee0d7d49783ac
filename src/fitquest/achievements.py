"""Achievement definitions — Pydantic models with a closed requirement set.

Requirements form a discriminated union on ``kind``. ``requirement_met``
matches every kind explicitly and ends in ``assert_never``, so a new kind
added to the union without an evaluation arm fails type checking instead of
silently passing.
"""

from typing import Annotated, Literal, Union, assert_never

from pydantic import BaseModel, Field, TypeAdapter, field_validator

from fitquest.models import Progress


class TotalMissionsRequirement(BaseModel):
    kind: Literal["total_missions"] = "total_missions"
    count: int = Field(ge=1)


class StreakRequirement(BaseModel):
    kind: Literal["streak"] = "streak"
    category: str
    days: int = Field(ge=1)


class CategoryProgressRequirement(BaseModel):
    kind: Literal["category_progress"] = "category_progress"
    category: str
    count: int = Field(ge=1)


class LevelReachedRequirement(BaseModel):
    kind: Literal["level_reached"] = "level_reached"
    level: int = Field(ge=2)


Requirement = Annotated[
    Union[
        TotalMissionsRequirement,
        StreakRequirement,
        CategoryProgressRequirement,
        LevelReachedRequirement,
    ],
    Field(discriminator="kind"),
]


class Achievement(BaseModel):
    id: str
    name: str
    description: str
    xp_reward: int = Field(ge=0)
    requirements: list[Requirement]

    @field_validator("requirements")
    @classmethod
    def requirements_not_empty(cls, v: list) -> list:
        if not v:
            raise ValueError("requirements must not be empty")
        return v

    def summary(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "xp_reward": self.xp_reward,
        }


_ACHIEVEMENT_LIST = TypeAdapter(list[Achievement])

ACHIEVEMENTS: list[Achievement] = _ACHIEVEMENT_LIST.validate_python([
    {
        "id": "first_mission",
        "name": "First Steps",
        "description": "Complete your first mission",
        "xp_reward": 50,
        "requirements": [{"kind": "total_missions", "count": 1}],
    },
    {
        "id": "mission_regular",
        "name": "Regular",
        "description": "Complete 10 missions",
        "xp_reward": 100,
        "requirements": [{"kind": "total_missions", "count": 10}],
    },
    {
        "id": "mission_master",
        "name": "Mission Master",
        "description": "Complete 50 missions",
        "xp_reward": 300,
        "requirements": [{"kind": "total_missions", "count": 50}],
    },
    {
        "id": "sleep_streak_7",
        "name": "Well Rested",
        "description": "Complete a sleep mission 7 days in a row",
        "xp_reward": 150,
        "requirements": [{"kind": "streak", "category": "sleep", "days": 7}],
    },
    {
        "id": "strength_builder",
        "name": "Strength Builder",
        "description": "Complete 5 strength missions",
        "xp_reward": 100,
        "requirements": [{"kind": "category_progress", "category": "strength", "count": 5}],
    },
    {
        "id": "nutrition_ninja",
        "name": "Nutrition Ninja",
        "description": "Complete 5 nutrition missions",
        "xp_reward": 100,
        "requirements": [{"kind": "category_progress", "category": "nutrition", "count": 5}],
    },
    {
        "id": "level_5",
        "name": "Rising Star",
        "description": "Reach level 5",
        "xp_reward": 200,
        "requirements": [{"kind": "level_reached", "level": 5}],
    },
])


def requirement_met(requirement: Requirement, progress: Progress) -> bool:
    match requirement:
        case TotalMissionsRequirement(count=count):
            return len(progress.completed_missions) >= count
        case StreakRequirement(category=category, days=days):
            return progress.streaks.get(category, 0) >= days
        case CategoryProgressRequirement(category=category, count=count):
            return progress.category_progress.get(category, 0) >= count
        case LevelReachedRequirement(level=level):
            return progress.level >= level
        case _:
            assert_never(requirement)


def is_unlockable(achievement: Achievement, progress: Progress) -> bool:
    return all(requirement_met(r, progress) for r in achievement.requirements)


def get_achievement(achievement_id: str) -> Achievement | None:
    for achievement in ACHIEVEMENTS:
        if achievement.id == achievement_id:
            return achievement
    return None
