"""HTTP API for the quest service."""

from __future__ import annotations

import random
from datetime import datetime
from typing import Any

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, field_validator

from fitquest.config import Config
from fitquest.errors import MissionCompletionError, UserNotFoundError
from fitquest.models import SurveyResponse
from fitquest.service import QuestService
from fitquest.store import UserStore


class SurveyAnswer(BaseModel):
    question_id: str
    value: Any = None
    timestamp: datetime | None = None


class SubmitSurveyRequest(BaseModel):
    name: str
    responses: list[SurveyAnswer] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def name_not_empty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be empty")
        return v


def build_service(config: Config) -> QuestService:
    return QuestService(
        UserStore(),
        rng=random.Random(config.seed),
        mission_target=config.mission_target,
    )


def create_app(service: QuestService | None = None, config: Config | None = None) -> FastAPI:
    config = config or Config()
    service = service or build_service(config)

    app = FastAPI(title="FitQuest API", version="1.0")
    app.state.service = service

    @app.exception_handler(UserNotFoundError)
    async def user_not_found(request: Request, exc: UserNotFoundError) -> JSONResponse:
        return JSONResponse(status_code=404, content=exc.to_dict())

    @app.exception_handler(MissionCompletionError)
    async def completion_failed(request: Request, exc: MissionCompletionError) -> JSONResponse:
        status = 404 if exc.code == "user_not_found" else 409
        return JSONResponse(status_code=status, content={"success": False, **exc.to_dict()})

    @app.get("/health")
    async def health_check():
        return {"status": "ok", "users": len(service.store)}

    @app.post("/api/v1/users")
    def submit_survey(payload: SubmitSurveyRequest):
        responses = [
            SurveyResponse(question_id=a.question_id, value=a.value, timestamp=a.timestamp)
            for a in payload.responses
        ]
        return service.submit_survey_and_create_user(payload.name, responses)

    @app.get("/api/v1/users/{user_id}/dashboard")
    def dashboard(user_id: str):
        return service.get_user_dashboard(user_id)

    @app.post("/api/v1/users/{user_id}/missions/{mission_id}/complete")
    def complete(user_id: str, mission_id: str):
        return service.complete_mission(user_id, mission_id)

    return app
