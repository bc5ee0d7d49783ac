"""HTTP client for a running FitQuest API.

Survey files are JSON lists of {"question_id", "value", "timestamp"?}
objects, the same shape POST /api/v1/users accepts.
"""

from __future__ import annotations

import json
import time
from pathlib import Path

import httpx

MAX_ATTEMPTS = 5


class SubmitError(Exception):
    pass


def load_responses(path: str | Path) -> list[dict]:
    with Path(path).open() as f:
        data = json.load(f)
    if not isinstance(data, list):
        raise SubmitError(f"{path} must contain a JSON list of survey responses")
    return data


def submit_survey(
    base_url: str,
    name: str,
    responses: list[dict],
    *,
    transport: httpx.BaseTransport | None = None,
) -> dict:
    """POST a survey and return the created user payload.

    Retries HTTP 429 and transport errors with a linear backoff.
    Raises SubmitError for any other failure.
    """
    payload = {"name": name, "responses": responses}

    with httpx.Client(base_url=base_url, timeout=30.0, transport=transport) as client:
        for attempt in range(MAX_ATTEMPTS):
            try:
                resp = client.post("/api/v1/users", json=payload)
            except httpx.HTTPError as e:
                if attempt == MAX_ATTEMPTS - 1:
                    raise SubmitError(f"Request failed: {e}") from e
                time.sleep(1.0)
                continue
            if resp.status_code == 429:
                if attempt == MAX_ATTEMPTS - 1:
                    break
                time.sleep(1.0 * (attempt + 1))
                continue
            if resp.status_code not in (200, 201):
                raise SubmitError(f"HTTP {resp.status_code}: {resp.text[:200]}")
            return resp.json()

    raise SubmitError(f"Rate limited after {MAX_ATTEMPTS} attempts")
