"""YTJ (PRH open data) registry client implementation."""

from __future__ import annotations

import time
from collections.abc import Callable, Sequence
from typing import Any, cast

import requests
from tenacity import (
    RetryCallState,
    RetryError,
    Retrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from ..config import DEFAULT_API_URL, Settings
from ..errors import ClientError, NotFoundOrAmbiguousError, ParseError, RetryExhaustedError
from ..identifiers import validate
from ..utils.logging_setup import setup_logger
from .base import CompanyApiResponse, RegistryClient

_BASE_LOGGER = setup_logger()
LOGGER = _BASE_LOGGER.getChild("providers.ytj")

_RATE_LIMIT_STATUS = 429
_DEFAULT_TIMEOUT = (5.0, 30.0)


class _RateLimitedError(RuntimeError):
    """Raised for HTTP 429 so that tenacity schedules another attempt."""

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Rate limited: HTTP {status_code}")
        self.status_code = status_code


def _log_retry(retry_state: RetryCallState) -> None:
    retry_obj = retry_state.retry_object
    max_attempts: object = "?"
    delay: object = "?"
    if isinstance(retry_obj, Retrying):
        stop = getattr(retry_obj, "stop", None)
        max_attempts = getattr(stop, "max_attempt_number", "?")
        wait = getattr(retry_obj, "wait", None)
        delay = getattr(wait, "wait_fixed", "?")
    LOGGER.warning(
        "Retry YTJ API (Versuch %s/%s) nach Status 429, warte %ss",
        retry_state.attempt_number,
        max_attempts,
        delay,
    )


class YtjClient(RegistryClient):
    """Client that looks up companies by business ID in the YTJ open data API."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        max_attempts: int = 5,
        retry_delay: float = 5.0,
        timeout: Sequence[float] | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts muss mindestens 1 sein")
        self.base_url = base_url
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._sleep = sleep
        self._headers = {"Accept": "application/json"}

        if timeout is None:
            self._timeout = _DEFAULT_TIMEOUT
        elif len(timeout) == 1:
            self._timeout = (float(timeout[0]), _DEFAULT_TIMEOUT[1])
        else:
            connect, read = float(timeout[0]), float(timeout[1])
            self._timeout = (connect, read)

    @classmethod
    def from_settings(
        cls, settings: Settings, *, sleep: Callable[[float], None] = time.sleep
    ) -> YtjClient:
        return cls(
            settings.api_url,
            max_attempts=settings.max_attempts,
            retry_delay=settings.retry_delay,
            timeout=settings.timeout,
            sleep=sleep,
        )

    def _perform_request(self, params: dict[str, str]) -> dict[str, Any]:
        retrying = Retrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=wait_fixed(self.retry_delay),
            retry=retry_if_exception_type(_RateLimitedError),
            before_sleep=_log_retry,
            sleep=self._sleep,
        )

        for attempt in retrying:
            with attempt:
                return self._perform_request_once(params)
        return {}

    def _perform_request_once(self, params: dict[str, str]) -> dict[str, Any]:
        try:
            response = requests.get(
                self.base_url,
                params=params,
                headers=self._headers,
                timeout=self._timeout,
            )
        except requests.RequestException as exc:
            raise ClientError(f"Netzwerkfehler: {exc}") from exc

        if response.status_code == _RATE_LIMIT_STATUS:
            raise _RateLimitedError(response.status_code)

        if response.status_code >= 400:
            LOGGER.debug(
                "YTJ API Fehler %s: %s",
                response.status_code,
                response.text,
            )
            raise ClientError(
                f"YTJ API Fehler (HTTP {response.status_code})",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as exc:
            raise ParseError("Ungültige JSON-Antwort") from exc

        if not isinstance(payload, dict):
            raise ParseError(f"JSON-Antwort hat unerwartetes Format: {type(payload).__name__}")
        return cast(dict[str, Any], payload)

    def fetch(self, identifier: str) -> CompanyApiResponse:
        validate(identifier)
        params = {"businessId": identifier}
        LOGGER.debug("Frage YTJ API mit Parametern: %s", params)

        try:
            payload = self._perform_request(params)
        except RetryError as exc:
            raise RetryExhaustedError(exc.last_attempt.attempt_number) from exc

        companies = payload.get("companies")
        if not isinstance(companies, list):
            companies = []
        total = payload.get("totalResults")
        if not isinstance(total, int):
            total = len(companies)

        if not companies:
            raise NotFoundOrAmbiguousError(identifier, 0)
        if total != 1:
            raise NotFoundOrAmbiguousError(identifier, total)
        if not isinstance(companies[0], dict):
            raise ParseError(
                f"Unternehmenseintrag hat unerwartetes Format: {type(companies[0]).__name__}"
            )

        return cast(CompanyApiResponse, payload)


__all__ = ["YtjClient"]
