"""Plain-text plan report for the questionnaire flow."""

from __future__ import annotations

from fitquest.models import FitnessBaseline, FitnessGoals, Mission
from fitquest.prioritize import total_time
from fitquest.questionnaire import label

RULE_WIDTH = 50


def _num(value: float) -> str:
    return f"{value:g}"


def weight_goal_line(baseline: FitnessBaseline, goals: FitnessGoals) -> str | None:
    if not goals.target_weight or not baseline.current_weight:
        return None
    diff = goals.target_weight - baseline.current_weight
    direction = "Gain" if diff > 0 else "Lose"
    return f"Weight Goal: {direction} {_num(abs(diff))} lbs"


def format_plan_report(
    baseline: FitnessBaseline,
    goals: FitnessGoals,
    missions: list[Mission],
) -> str:
    lines = [
        "",
        "=" * RULE_WIDTH,
        "YOUR PERSONALIZED FITNESS PLAN",
        "=" * RULE_WIDTH,
        "",
        "SUMMARY:",
        f"Primary Goal: {label(goals.primary_goal)}",
        f"Timeframe: {_num(goals.timeframe)} months",
        f"Daily Time Available: {_num(baseline.time_available)} minutes",
    ]

    weight_line = weight_goal_line(baseline, goals)
    if weight_line:
        lines.append(weight_line)

    lines += [
        "",
        "TARGET IMPROVEMENTS:",
        f"Strength: {_num(baseline.current_strength)} -> {_num(goals.target_strength)}",
        f"Endurance: {_num(baseline.current_endurance)} -> {_num(goals.target_endurance)}",
        f"Flexibility: {_num(baseline.current_flexibility)} -> {_num(goals.target_flexibility)}",
        "",
        "YOUR DAILY MISSIONS:",
    ]

    if not missions:
        lines.append("")
        lines.append("No missions fit today. Free up a few minutes and try again.")

    for i, mission in enumerate(missions, start=1):
        lines += [
            "",
            f"{i}. {mission.title} ({_num(mission.estimated_time)} min)",
            f"   Category: {mission.category} | Difficulty: {mission.difficulty}",
            f"   {mission.description}",
            f"   Equipment needed: {', '.join(mission.equipment)}",
            "   Instructions:",
        ]
        lines += [f"     {instruction}" for instruction in mission.instructions]

    lines += [
        "",
        f"Total daily time commitment: {_num(total_time(missions))} minutes",
        "",
        "Pro tip: Start with the easiest mission first to build momentum!",
    ]
    return "\n".join(lines)
