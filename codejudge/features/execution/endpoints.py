from __future__ import annotations

from typing import Any, Dict, List

from fastapi import APIRouter, Depends

from codejudge.core.config import Settings, get_settings
from .languages import supported_languages
from .schemas import ExecutionResult, LanguageInfo, RunRequest
from .service import Judge0Client

router = APIRouter(prefix="/execution", tags=["execution"])


def get_client(settings: Settings = Depends(get_settings)) -> Judge0Client:
    return Judge0Client(settings)


@router.get("/languages", response_model=List[LanguageInfo])
async def get_supported_languages():
    return supported_languages()


@router.post(
    "/run",
    response_model=ExecutionResult,
    response_model_exclude_none=True,
    summary="Submit code to Judge0 and wait for a normalised verdict",
)
async def run_code(payload: RunRequest, client: Judge0Client = Depends(get_client)) -> Dict[str, Any]:
    # Failures are data here: unsupported language, missing key and judge errors all return 200
    result = await client.execute_code(payload.language, payload.code)
    return result.to_dict()
