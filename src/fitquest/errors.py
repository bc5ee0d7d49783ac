"""Error types raised across planning, the ledger and the service layer."""

from __future__ import annotations


class FitQuestError(Exception):
    def __init__(self, *, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message

    def to_dict(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class ProfileRangeError(FitQuestError, ValueError):
    """A baseline or goal scale reached the generator outside its range.

    Collectors clamp or re-prompt before building profiles, so this always
    means a collector let a bad value through.
    """

    def __init__(self, field: str, value: float, low: float, high: float) -> None:
        super().__init__(
            code="profile_out_of_range",
            message=f"{field}={value!r} is outside [{low}, {high}]",
        )
        self.field = field
        self.value = value


class ProfileFileError(FitQuestError):
    def __init__(self, message: str) -> None:
        super().__init__(code="profile_file_invalid", message=message)


class UserNotFoundError(FitQuestError):
    def __init__(self, user_id: str) -> None:
        super().__init__(code="user_not_found", message=f"User {user_id!r} not found")
        self.user_id = user_id


class MissionCompletionError(FitQuestError):
    def __init__(self, message: str, *, code: str = "mission_completion_failed") -> None:
        super().__init__(code=code, message=message)
