from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Any, Dict, Optional


class SubmissionRequest(BaseModel):
    """Body of ``POST /submissions``; ``source_code`` is already base64."""

    model_config = ConfigDict(frozen=True)

    source_code: str
    language_id: int


class SubmissionToken(BaseModel):
    token: Optional[str] = None


class JudgeResponse(BaseModel):
    """One poll result from Judge0 (``base64_encoded=true``, so text fields are encoded)."""

    model_config = ConfigDict(extra="ignore")

    token: Optional[str] = None
    status_id: Optional[int] = None
    status: Optional[Dict[str, Any]] = None
    stdout: Optional[str] = None
    stderr: Optional[str] = None
    compile_output: Optional[str] = None
    message: Optional[str] = None

    @property
    def resolved_status_id(self) -> Optional[int]:
        if self.status_id is not None:
            return self.status_id
        if isinstance(self.status, dict) and self.status.get("id") is not None:
            try:
                return int(self.status["id"])
            except (TypeError, ValueError):
                return None
        return None

    @property
    def status_description(self) -> Optional[str]:
        if isinstance(self.status, dict):
            return self.status.get("description") or None
        return None

    @property
    def is_terminal(self) -> bool:
        status_id = self.resolved_status_id
        return status_id is not None and status_id > 2


class ExecutionResult(BaseModel):
    """Normalised outcome handed to callers; absent keys are dropped on dump."""

    model_config = ConfigDict(frozen=True)

    success: bool
    output: Optional[str] = None
    error: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return self.model_dump(exclude_none=True)


class LanguageInfo(BaseModel):
    key: str
    id: int
    name: str


class RunRequest(BaseModel):
    language: str = Field(..., description="One of the supported language keys, e.g. 'python'.")
    code: str = Field(..., description="Source code to execute remotely.")

    @model_validator(mode="after")
    def ensure_code(self) -> "RunRequest":
        if not self.code or not self.code.strip():
            raise ValueError("code is required for execution")
        return self
