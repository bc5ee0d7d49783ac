"""Interactive questionnaire — collects a FitnessBaseline and FitnessGoals.

Prompts go through click, so range-checked questions re-prompt until the
answer is valid. Choices are shown as a numbered list.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import IO

import click

from fitquest.models import (
    ACTIVITY_LEVELS,
    BUDGETS,
    EXPERIENCE_LEVELS,
    PRIMARY_GOALS,
    PRIORITIES,
    FitnessBaseline,
    FitnessGoals,
)

WEIGHT_GOALS = ("weight_loss", "muscle_gain")


def label(choice: str) -> str:
    return choice.replace("_", " ")


class Questionnaire:
    def __init__(
        self,
        prompt: Callable = click.prompt,
        echo: Callable = click.echo,
        input_stream: IO | None = None,
    ):
        self.prompt = prompt
        self.echo = echo
        self.input_stream = input_stream

    def ask(self, question: str, **kwargs):
        return self.prompt(question, prompt_suffix=" ", **kwargs)

    def ask_number(self, question: str, low: float, high: float) -> float:
        return self.ask(question, type=click.FloatRange(low, high))

    def ask_choice(self, question: str, choices: tuple[str, ...]) -> str:
        self.echo(question)
        for i, choice in enumerate(choices, start=1):
            self.echo(f"{i}. {label(choice)}")
        index = self.ask("Choose a number:", type=click.IntRange(1, len(choices)))
        return choices[index - 1]

    def ask_yes_no(self, question: str) -> bool:
        # Anything other than y/Y counts as no, including an empty answer
        answer = self.ask(question, default="", show_default=False)
        return answer.strip().lower() == "y"

    def collect_baseline(self) -> FitnessBaseline:
        self.echo("\n=== PERSONAL FITNESS BASELINE ASSESSMENT ===\n")

        age = self.ask_number("What is your age?", 13, 100)
        weight = self.ask_number("What is your current weight (in lbs)?", 50, 500)
        height = self.ask_number("What is your height (in inches)?", 36, 96)

        activity_level = self.ask_choice(
            "\nWhat best describes your current activity level?", ACTIVITY_LEVELS,
        )

        frequency = self.ask_number("How many times per week do you currently exercise?", 0, 14)
        if frequency > 0:
            duration = self.ask_number("How long is your average workout session (minutes)?", 5, 300)
        else:
            duration = 0.0

        experience = self.ask_choice("\nWhat is your fitness experience level?", EXPERIENCE_LEVELS)

        strength = self.ask_number(
            "Rate your current strength level (1-10, where 1 is very weak and 10 is very strong):",
            1, 10,
        )
        endurance = self.ask_number(
            "Rate your current endurance level (1-10, where 1 is very poor and 10 is excellent):",
            1, 10,
        )
        flexibility = self.ask_number(
            "Rate your current flexibility level (1-10, where 1 is very stiff and 10 is very flexible):",
            1, 10,
        )

        time_available = self.ask_number(
            "How many minutes per day can you realistically dedicate to fitness?", 0, 300,
        )
        budget = self.ask_choice("\nWhat is your fitness budget?", BUDGETS)

        equipment: list[str] = []
        if self.ask_yes_no("Do you have access to a gym? (y/n):"):
            equipment.append("gym_access")
        if self.ask_yes_no(
            "Do you have basic home equipment (dumbbells, resistance bands, etc.)? (y/n):"
        ):
            equipment.append("home_equipment")
        if not equipment:
            equipment.append("bodyweight_only")

        motivation = self.ask_number(
            "Rate your motivation level for fitness "
            "(1-10, where 1 is very unmotivated and 10 is extremely motivated):",
            1, 10,
        )

        self.echo("\nBaseline assessment complete!\n")
        return FitnessBaseline(
            age=age,
            current_weight=weight,
            height=height,
            activity_level=activity_level,
            workout_frequency=frequency,
            workout_duration=duration,
            experience=experience,
            current_strength=strength,
            current_endurance=endurance,
            current_flexibility=flexibility,
            time_available=time_available,
            budget=budget,
            equipment=tuple(equipment),
            motivation=motivation,
        )

    def collect_goals(self) -> FitnessGoals:
        self.echo("\n=== FITNESS GOALS ASSESSMENT ===\n")

        primary_goal = self.ask_choice("What is your primary fitness goal?", PRIMARY_GOALS)

        target_weight = None
        if primary_goal in WEIGHT_GOALS:
            target_weight = self.ask_number("What is your target weight (in lbs)?", 50, 500)

        target_strength = self.ask_number("What strength level do you want to achieve? (1-10):", 1, 10)
        target_endurance = self.ask_number("What endurance level do you want to achieve? (1-10):", 1, 10)
        target_flexibility = self.ask_number(
            "What flexibility level do you want to achieve? (1-10):", 1, 10,
        )
        timeframe = self.ask_number("In how many months do you want to achieve these goals?", 1, 24)
        priority = self.ask_choice("How high priority is fitness in your life right now?", PRIORITIES)

        self.echo("\nGoals assessment complete!\n")
        return FitnessGoals(
            primary_goal=primary_goal,
            target_strength=target_strength,
            target_endurance=target_endurance,
            target_flexibility=target_flexibility,
            timeframe=timeframe,
            priority=priority,
            target_weight=target_weight,
        )

    def close(self) -> None:
        if self.input_stream is not None:
            self.input_stream.close()
