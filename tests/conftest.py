"""Shared fixtures: an empty store and a quest service on a fixed clock and seed."""

from __future__ import annotations

import random
from datetime import datetime, timedelta, timezone

import pytest

from fitquest.models import SurveyResponse
from fitquest.service import QuestService
from fitquest.store import UserStore

START = datetime(2026, 3, 2, 8, 30, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = START):
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def store() -> UserStore:
    return UserStore()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def service(store, clock) -> QuestService:
    return QuestService(store, rng=random.Random(1234), clock=clock)


@pytest.fixture
def survey() -> list[SurveyResponse]:
    """Survey with a generous time budget so no quest mission is dropped."""
    answers = {
        "age": 29,
        "weight": 170,
        "height": 69,
        "time_available": 300,
        "fitness_level": 4,
        "sleep_level": 3,
        "stress_level": 6,
        "target_fitness": 8,
        "target_sleep": 8,
        "primary_goal": "endurance",
    }
    return [SurveyResponse(question_id=k, value=v) for k, v in answers.items()]
