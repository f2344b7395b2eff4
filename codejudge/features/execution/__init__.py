"""Judge0 execution client: submit, poll with backoff, classify."""

from .schemas import ExecutionResult, JudgeResponse, LanguageInfo
from .service import Judge0Client, execute_code

__all__ = ["ExecutionResult", "JudgeResponse", "LanguageInfo", "Judge0Client", "execute_code"]
