"""Progress ledger — mission completion, streaks, levels and achievements.

All functions mutate the Progress record they are given and nothing else.
Callers that share a record across threads must hold the owning user's lock
(see UserStore.lock).
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone

from fitquest.achievements import ACHIEVEMENTS, Achievement, is_unlockable
from fitquest.models import Progress

logger = logging.getLogger(__name__)

# Reward for a completion that carries no rewards of its own
FLAT_XP_REWARD = 20
FLAT_COIN_REWARD = 10

XP_PER_LEVEL = 100
LEVEL_COIN_BONUS = 10


def update_streak(progress: Progress, category: str, now: datetime) -> int:
    """Extend, keep or reset the streak for ``category``. Returns the new value."""
    today = now.date()
    last = progress.last_completed_on.get(category)
    streak = progress.streaks.get(category, 0)

    if last is None:
        streak = 1
    else:
        delta = (today - last).days
        if delta == 1:
            streak += 1
        elif delta == 0:
            # same-day completions don't extend the streak
            streak = max(1, streak)
        else:
            streak = 1

    progress.streaks[category] = streak
    progress.last_completed_on[category] = today
    return streak


def check_level_up(progress: Progress) -> list[int]:
    """Grant every level the current experience pays for.

    Level ``n`` needs ``n * 100`` total experience to advance; each new level
    awards ``new_level * 10`` coins. Returns the levels gained, in order.
    """
    gained: list[int] = []
    while progress.experience >= progress.level * XP_PER_LEVEL:
        progress.level += 1
        progress.coins += progress.level * LEVEL_COIN_BONUS
        gained.append(progress.level)
    if gained:
        logger.info("Level up to %d", progress.level, extra={"fitquest_levels": gained})
    return gained


def check_achievements(
    progress: Progress,
    now: datetime,
    achievements: list[Achievement] | None = None,
) -> list[Achievement]:
    """Unlock every achievement whose requirements all pass.

    Each achievement unlocks at most once; its XP reward is added on unlock.
    """
    unlocked: list[Achievement] = []
    for achievement in ACHIEVEMENTS if achievements is None else achievements:
        if achievement.id in progress.unlocked_achievements:
            continue
        if not is_unlockable(achievement, progress):
            continue
        progress.unlocked_achievements[achievement.id] = now
        progress.experience += achievement.xp_reward
        unlocked.append(achievement)
        logger.info(
            "Unlocked achievement %s", achievement.id,
            extra={"fitquest_achievement": achievement.id},
        )
    return unlocked


def complete_mission(
    progress: Progress,
    mission_id: str,
    *,
    category: str | None = None,
    xp_reward: int = FLAT_XP_REWARD,
    coin_reward: int = FLAT_COIN_REWARD,
    now: datetime | None = None,
    achievements: list[Achievement] | None = None,
) -> dict:
    """Record one completed mission.

    Order: log + rewards, streak/category counters, level-up, achievements,
    then level-up again for XP the achievements just granted.

    Returns {"levels_gained": [...], "new_achievements": [Achievement, ...]}.
    """
    now = now or datetime.now(timezone.utc)

    progress.completed_missions.append(mission_id)
    progress.experience += xp_reward
    progress.coins += coin_reward
    progress.last_active = now

    if category is not None:
        update_streak(progress, category, now)
        progress.category_progress[category] = progress.category_progress.get(category, 0) + 1

    levels = check_level_up(progress)
    new_achievements = check_achievements(progress, now, achievements)
    if new_achievements:
        levels.extend(check_level_up(progress))

    return {"levels_gained": levels, "new_achievements": new_achievements}


def level_progress_pct(progress: Progress) -> float:
    """Share of the way from this level's threshold to the next one, 0-100."""
    floor = (progress.level - 1) * XP_PER_LEVEL
    ceiling = progress.level * XP_PER_LEVEL
    span = ceiling - floor
    return round(max(0.0, min(1.0, (progress.experience - floor) / span)) * 100, 1)


def days_since(moment: datetime, now: datetime) -> int:
    return max(0, (now - moment) // timedelta(days=1))
