"""Quest mission generator — daily missions with XP and coin rewards.

Every mission is a random pick from the category's flavor pool in
catalog.QUEST_POOLS. The random source is always passed in, so a seeded
``random.Random`` reproduces a batch (ids, flavor and rewards) exactly.
"""

from __future__ import annotations

import random

from fitquest.catalog import CATEGORY_XP_OFFSET, QUEST_POOLS, REWARD_TABLE, MissionTemplate
from fitquest.generators.fitness import require_in_range
from fitquest.models import SCALE_MAX, SCALE_MIN, Mission, WellnessBaseline, WellnessGoals

DEFAULT_TARGET_COUNT = 3

# (baseline attribute, goals attribute, mission category)
DIMENSION_RULES: tuple[tuple[str, str, str], ...] = (
    ("nutrition", "target_nutrition", "nutrition"),
    ("sleep", "target_sleep", "sleep"),
    ("stress", "target_stress", "stress"),
    ("energy", "target_energy", "energy"),
)

MOVEMENT_CATEGORY_BY_GOAL: dict[str, str] = {
    "weight_loss": "cardio",
    "endurance": "cardio",
    "flexibility": "flexibility",
}


def _check_wellness_profile(baseline: WellnessBaseline, goals: WellnessGoals) -> None:
    for name in ("energy", "fitness", "nutrition", "sleep", "stress"):
        require_in_range(name, getattr(baseline, name), SCALE_MIN, SCALE_MAX)
        target = f"target_{name}"
        require_in_range(target, getattr(goals, target), SCALE_MIN, SCALE_MAX)


def roll_rewards(difficulty: str, category: str, rng: random.Random) -> tuple[int, int]:
    """Draw (xp, coins) for a mission from the difficulty table."""
    (xp_min, xp_max), (coin_min, coin_max) = REWARD_TABLE[difficulty]
    xp = rng.randint(xp_min, xp_max) + CATEGORY_XP_OFFSET.get(category, 0)
    coins = rng.randint(coin_min, coin_max)
    return xp, coins


def pick_mission(category: str, rng: random.Random) -> Mission:
    """Pick one flavor variant for ``category`` and roll its id and rewards."""
    template: MissionTemplate = rng.choice(QUEST_POOLS[category])
    xp, coins = roll_rewards(template.difficulty, template.category, rng)
    return Mission(
        mission_id=f"{template.key}_{rng.getrandbits(32):08x}",
        title=template.title,
        description=template.description,
        category=template.category,
        difficulty=template.difficulty,
        estimated_time=template.estimated_time,
        equipment=list(template.equipment),
        instructions=list(template.instructions),
        xp_reward=xp,
        coin_reward=coins,
    )


def movement_category(primary_goal: str) -> str:
    return MOVEMENT_CATEGORY_BY_GOAL.get(primary_goal, "strength")


def triggered_categories(baseline: WellnessBaseline, goals: WellnessGoals) -> list[str]:
    """Categories whose rule fires for this pair, in generation order (no variety)."""
    categories: list[str] = []
    if goals.target_fitness - baseline.fitness > 0 or goals.primary_goal == "weight_loss":
        categories.append(movement_category(goals.primary_goal))
    for current_attr, target_attr, category in DIMENSION_RULES:
        if getattr(goals, target_attr) - getattr(baseline, current_attr) > 0:
            categories.append(category)
    return categories


def generate_wellness_missions(
    baseline: WellnessBaseline,
    goals: WellnessGoals,
    rng: random.Random,
    *,
    target_count: int = DEFAULT_TARGET_COUNT,
) -> list[Mission]:
    """Generate one day's quest missions.

    Gap rules fire first; variety missions then fill up to ``target_count``.
    """
    _check_wellness_profile(baseline, goals)

    missions = [pick_mission(category, rng) for category in triggered_categories(baseline, goals)]
    while len(missions) < target_count:
        missions.append(pick_mission("variety", rng))
    return missions
