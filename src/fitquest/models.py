"""Core data models for planning sessions and the quest ledger."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from typing import Literal

ActivityLevel = Literal[
    "sedentary",
    "lightly_active",
    "moderately_active",
    "very_active",
    "extremely_active",
]
Experience = Literal["beginner", "intermediate", "advanced"]
Budget = Literal["none", "low", "moderate", "high"]
PrimaryGoal = Literal[
    "weight_loss",
    "muscle_gain",
    "strength",
    "endurance",
    "flexibility",
    "general_fitness",
]
Priority = Literal["low", "medium", "high"]
Difficulty = Literal["easy", "medium", "hard"]
Category = Literal[
    "strength",
    "cardio",
    "flexibility",
    "recovery",
    "nutrition",
    "energy",
    "sleep",
    "stress",
    "variety",
]

ACTIVITY_LEVELS: tuple[str, ...] = (
    "sedentary",
    "lightly_active",
    "moderately_active",
    "very_active",
    "extremely_active",
)
EXPERIENCE_LEVELS: tuple[str, ...] = ("beginner", "intermediate", "advanced")
BUDGETS: tuple[str, ...] = ("none", "low", "moderate", "high")
PRIMARY_GOALS: tuple[str, ...] = (
    "weight_loss",
    "muscle_gain",
    "strength",
    "endurance",
    "flexibility",
    "general_fitness",
)
PRIORITIES: tuple[str, ...] = ("low", "medium", "high")

# Self-assessment scales are 1-10 everywhere
SCALE_MIN = 1
SCALE_MAX = 10


@dataclass(frozen=True)
class FitnessBaseline:
    """Immutable snapshot of the questionnaire answers about the user today."""

    age: float
    current_weight: float  # lbs
    height: float  # inches
    activity_level: ActivityLevel
    workout_frequency: float  # sessions per week
    workout_duration: float  # minutes per session, 0 when not exercising
    experience: Experience
    current_strength: float
    current_endurance: float
    current_flexibility: float
    time_available: float  # minutes per day
    budget: Budget
    equipment: tuple[str, ...]
    motivation: float
    preferred_activities: tuple[str, ...] = ()
    limitations: tuple[str, ...] = ()

    def has_equipment(self, name: str) -> bool:
        return name in self.equipment


@dataclass(frozen=True)
class FitnessGoals:
    """Immutable target state paired 1:1 with a FitnessBaseline."""

    primary_goal: PrimaryGoal
    target_strength: float
    target_endurance: float
    target_flexibility: float
    timeframe: float  # months
    priority: Priority
    target_weight: float | None = None
    specific_targets: tuple[str, ...] = ()


@dataclass(frozen=True)
class WellnessBaseline:
    """Survey-derived baseline for the quest variant.

    All levels are 1-10 where higher is better. ``stress`` is the self-rated
    ability to manage stress, so a positive gap still means "needs work".
    """

    energy: float
    fitness: float
    nutrition: float
    sleep: float
    stress: float
    weight: float
    height: float
    age: float
    activity_level: ActivityLevel
    experience: Experience
    budget: Budget
    time_available: float
    equipment: tuple[str, ...] = ("bodyweight_only",)
    limitations: tuple[str, ...] = ()


@dataclass(frozen=True)
class WellnessGoals:
    target_energy: float
    target_fitness: float
    target_nutrition: float
    target_sleep: float
    target_stress: float
    primary_goal: PrimaryGoal
    timeframe: float
    priority: Priority


@dataclass
class Mission:
    """One recommended daily activity.

    ``xp_reward``/``coin_reward``/``completed`` are only meaningful for quest
    missions; workout-plan missions leave them at zero.
    """

    mission_id: str
    title: str
    description: str
    category: Category
    difficulty: Difficulty
    estimated_time: float  # minutes
    equipment: list[str]
    instructions: list[str]
    xp_reward: int = 0
    coin_reward: int = 0
    completed: bool = False

    def __post_init__(self) -> None:
        if self.estimated_time < 0:
            raise ValueError(
                f"Mission {self.mission_id!r} has negative estimated_time {self.estimated_time}"
            )

    def to_dict(self) -> dict:
        return {
            "id": self.mission_id,
            "title": self.title,
            "description": self.description,
            "category": self.category,
            "difficulty": self.difficulty,
            "estimated_time": self.estimated_time,
            "equipment": list(self.equipment),
            "instructions": list(self.instructions),
            "xp_reward": self.xp_reward,
            "coin_reward": self.coin_reward,
            "completed": self.completed,
        }


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Progress:
    """Mutable per-user ledger state."""

    level: int = 1
    experience: int = 0
    coins: int = 0
    streaks: dict[str, int] = field(default_factory=dict)  # category → consecutive days
    last_completed_on: dict[str, date] = field(default_factory=dict)  # category → day
    category_progress: dict[str, int] = field(default_factory=dict)  # category → completions
    completed_missions: list[str] = field(default_factory=list)
    unlocked_achievements: dict[str, datetime] = field(default_factory=dict)  # id → unlocked at
    created_at: datetime = field(default_factory=_utcnow)
    last_active: datetime = field(default_factory=_utcnow)

    @property
    def xp_for_next_level(self) -> int:
        return self.level * 100

    def to_dict(self) -> dict:
        return {
            "level": self.level,
            "experience": self.experience,
            "coins": self.coins,
            "xp_for_next_level": self.xp_for_next_level,
            "streaks": dict(self.streaks),
            "category_progress": dict(self.category_progress),
            "completed_missions": list(self.completed_missions),
            "unlocked_achievements": [
                {"id": achievement_id, "unlocked_at": unlocked_at.isoformat()}
                for achievement_id, unlocked_at in self.unlocked_achievements.items()
            ],
            "created_at": self.created_at.isoformat(),
            "last_active": self.last_active.isoformat(),
        }


@dataclass
class SurveyResponse:
    question_id: str
    value: object
    timestamp: datetime | None = None


@dataclass
class User:
    """Quest user — owned by a UserStore for the lifetime of the process."""

    user_id: str
    name: str
    baseline: WellnessBaseline
    goals: WellnessGoals
    progress: Progress = field(default_factory=Progress)
    survey_responses: list[SurveyResponse] = field(default_factory=list)
    daily_missions: list[Mission] = field(default_factory=list)
    missions_issued_on: date | None = None

    def find_mission(self, mission_id: str) -> Mission | None:
        for mission in self.daily_missions:
            if mission.mission_id == mission_id:
                return mission
        return None
