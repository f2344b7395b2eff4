import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Optional

import httpx

from codejudge.core.config import MISSING_KEY_MESSAGE, Settings, get_settings
from .backoff import MAX_ATTEMPTS, backoff_delay_ms
from .classifier import classify
from .codec import encode
from .languages import get_language
from .outcome import Outcome
from .schemas import ExecutionResult, JudgeResponse, SubmissionRequest, SubmissionToken

SUBMIT_FAILED = "Failed to execute code"
POLL_FAILED = "Failed to get output"
POLL_EXHAUSTED_MESSAGE = (
    f"Execution timed out - submission still queued after {MAX_ATTEMPTS} attempts."
)

Sleep = Callable[[float], Awaitable[Any]]


def _mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    return {
        k: ("[REDACTED]" if k.lower() == "x-rapidapi-key" else v)
        for k, v in (headers or {}).items()
    }


class Judge0Client:
    """Runs one submit/poll/classify round trip per ``execute_code`` call.

    Holds no per-call state: the token, attempt counter and HTTP client all
    live inside a single ``execute_code`` invocation, so concurrent calls on
    one instance are independent.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        sleep: Optional[Sleep] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.base_url = self.settings.judge0_api_url
        self._transport = transport
        self._sleep: Sleep = sleep or asyncio.sleep
        self._logger = logging.getLogger(__name__)

    @property
    def headers(self) -> Dict[str, str]:
        return {
            "Content-Type": "application/json",
            "x-rapidapi-host": self.settings.judge0_host,
            "x-rapidapi-key": self.settings.rapidapi_key,
        }

    def _client(self) -> httpx.AsyncClient:
        timeout = httpx.Timeout(connect=3.0, read=self.settings.judge0_timeout_s, write=5.0, pool=5.0)
        return httpx.AsyncClient(
            base_url=self.base_url,
            headers=self.headers,
            timeout=timeout,
            transport=self._transport,
        )

    async def _request_json(
        self,
        client: httpx.AsyncClient,
        method: str,
        path: str,
        **kwargs: Any,
    ) -> Any:
        """Perform one request and return the parsed JSON body.

        Raises on transport errors, HTTP status >= 400 and non-JSON bodies;
        callers convert those into failed outcomes.
        """
        self._logger.debug("Judge0 request: %s %s headers=%s", method, path, _mask_headers(self.headers))
        resp = await client.request(method, path, **kwargs)
        if resp.status_code >= 400:
            raise httpx.HTTPStatusError(
                f"HTTP {resp.status_code}: {resp.text[:200]}",
                request=resp.request,
                response=resp,
            )
        return resp.json()

    async def submit(self, client: httpx.AsyncClient, language_id: int, code: str) -> Outcome[str]:
        request = SubmissionRequest(source_code=encode(code), language_id=language_id)
        try:
            payload = await self._request_json(
                client,
                "POST",
                "/submissions?base64_encoded=true&wait=false&fields=*",
                json=request.model_dump(),
            )
            token = SubmissionToken.model_validate(payload if isinstance(payload, dict) else {}).token
        except Exception as exc:
            self._logger.warning("Judge0 submit failed: %s", exc)
            return Outcome.fail(f"{SUBMIT_FAILED}: {exc}")
        if not token:
            self._logger.warning("Judge0 submit returned no token: %s", str(payload)[:200])
            return Outcome.fail(f"{SUBMIT_FAILED}: no submission token returned")
        return Outcome.success(token)

    async def poll(self, client: httpx.AsyncClient, token: str) -> Outcome[JudgeResponse]:
        path = f"/submissions/{token}?base64_encoded=true&fields=*"
        try:
            for attempt in range(MAX_ATTEMPTS):
                payload = await self._request_json(client, "GET", path)
                data = JudgeResponse.model_validate(payload)
                if data.is_terminal:
                    self._logger.info(
                        "Judge0 submission %s finished: status=%s (%s)",
                        token,
                        data.resolved_status_id,
                        data.status_description,
                    )
                    return Outcome.success(data)
                self._logger.debug("Judge0 submission %s pending: %s", token, data.status)
                await self._sleep(backoff_delay_ms(attempt) / 1000)
        except Exception as exc:
            self._logger.warning("Judge0 poll failed for %s: %s", token, exc)
            return Outcome.fail(f"{POLL_FAILED}: {exc}")
        self._logger.warning("Judge0 submission %s not finished after %d attempts", token, MAX_ATTEMPTS)
        return Outcome.fail(POLL_EXHAUSTED_MESSAGE)

    async def execute_code(self, language: str, code: str) -> ExecutionResult:
        """Submit ``code`` in ``language``, wait for a verdict and normalise it.

        Never raises; every failure comes back as ``success=False``.
        """
        try:
            lang = get_language(language)
            if lang is None:
                return ExecutionResult(success=False, error=f"Unsupported language: {language}")
            if not self.settings.has_api_key:
                return ExecutionResult(success=False, error=MISSING_KEY_MESSAGE)

            async with self._client() as client:
                submitted = await self.submit(client, lang.id, code)
                if not submitted.ok:
                    return submitted.failure
                polled = await self.poll(client, submitted.value)
                if not polled.ok:
                    return polled.failure
            return classify(polled.value)
        except Exception as exc:
            self._logger.exception("Unexpected failure executing %s code", language)
            return ExecutionResult(success=False, error=str(exc))


async def execute_code(language: str, code: str) -> ExecutionResult:
    return await Judge0Client().execute_code(language, code)
