"""Map a terminal Judge0 response onto an ``ExecutionResult``.

Judge0 status ids:
  1 = In Queue, 2 = Processing, 3 = Accepted, 4 = Wrong Answer,
  5 = Time Limit Exceeded, 6 = Compilation Error,
  7-12 = Runtime errors (SIGSEGV, SIGXFSZ, SIGFPE, SIGABRT, NZEC, Other),
  13 = Internal Error, 14 = Exec Format Error
"""

from __future__ import annotations

from .codec import decode
from .schemas import ExecutionResult, JudgeResponse

STATUS_IN_QUEUE = 1
STATUS_PROCESSING = 2
STATUS_ACCEPTED = 3
STATUS_TIME_LIMIT_EXCEEDED = 5
STATUS_COMPILATION_ERROR = 6
RUNTIME_ERROR_STATUSES = range(7, 13)
STATUS_INTERNAL_ERROR = 13

NO_OUTPUT = "No output"
TIME_LIMIT_MESSAGE = "Time Limit Exceeded - Your code took too long to execute."
INTERNAL_ERROR_MESSAGE = "Internal Error - The judge encountered an issue. Please try again."
STILL_PROCESSING_MESSAGE = "Code execution is still processing. Please try again."


def classify(data: JudgeResponse) -> ExecutionResult:
    status_id = data.resolved_status_id
    description = data.status_description
    stdout = decode(data.stdout)
    stderr = decode(data.stderr)
    compile_output = decode(data.compile_output)
    message = decode(data.message)

    if status_id == STATUS_ACCEPTED:
        # stderr warnings are surfaced without failing the run
        return ExecutionResult(success=True, output=stdout or NO_OUTPUT, error=stderr or None)

    if status_id == STATUS_COMPILATION_ERROR:
        return ExecutionResult(success=False, output=stdout, error=compile_output or "Compilation error")

    if status_id == STATUS_TIME_LIMIT_EXCEEDED:
        return ExecutionResult(success=False, output=stdout, error=TIME_LIMIT_MESSAGE)

    if status_id in RUNTIME_ERROR_STATUSES:
        return ExecutionResult(
            success=False,
            output=stdout,
            error=stderr or message or f"Runtime Error ({description or 'Unknown'})",
        )

    if status_id == STATUS_INTERNAL_ERROR:
        return ExecutionResult(success=False, error=INTERNAL_ERROR_MESSAGE)

    if status_id in (STATUS_IN_QUEUE, STATUS_PROCESSING):
        return ExecutionResult(success=False, error=STILL_PROCESSING_MESSAGE)

    return ExecutionResult(
        success=False,
        output=stdout,
        error=stderr or compile_output or message or f"Unexpected status: {description or status_id}",
    )
