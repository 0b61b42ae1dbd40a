from __future__ import annotations

import json
import logging
from typing import Any

import pytest

from conftest import make_company, make_response
from ytjfetch.errors import (
    ClientError,
    FormatError,
    NotFoundOrAmbiguousError,
    ParseError,
    RetryExhaustedError,
)
from ytjfetch.pipeline import run_batch
from ytjfetch.providers.ytj import YtjClient
from ytjfetch.records import OutputRecord


class _StubClient:
    def __init__(self, responses: dict[str, Any]) -> None:
        self._responses = responses
        self.calls: list[str] = []

    def fetch(self, identifier: str) -> Any:
        self.calls.append(identifier)
        response = self._responses[identifier]
        if isinstance(response, Exception):
            raise response
        total = response.get("totalResults")
        if total != 1:
            raise NotFoundOrAmbiguousError(identifier, total)
        return response


def _warnings(caplog) -> list[logging.LogRecord]:
    return [record for record in caplog.records if record.levelno == logging.WARNING]


def test_batch_skips_failures_and_keeps_going(ytj_caplog) -> None:
    client = _StubClient(
        {
            "2222222-2": make_response(make_company("2222222-2"), make_company("2222222-2"), total=2),
            "3333333-3": make_response(make_company("3333333-3")),
        }
    )

    result = run_batch(["123-4", "2222222-2", "3333333-3"], client)

    assert [record.business_id for record in result.records] == ["3333333-3"]
    assert [failure.identifier for failure in result.failures] == ["123-4", "2222222-2"]
    assert isinstance(result.failures[0].error, FormatError)
    assert isinstance(result.failures[1].error, NotFoundOrAmbiguousError)
    assert client.calls == ["2222222-2", "3333333-3"]
    assert result.processed == 3

    warnings = _warnings(ytj_caplog)
    assert len(warnings) == 2
    assert "123-4" in warnings[0].getMessage()
    assert "2222222-2" in warnings[1].getMessage()


def test_not_found_is_reported_and_not_normalised(ytj_caplog) -> None:
    client = _StubClient({"1234567-8": make_response(total=0)})

    result = run_batch(["1234567-8"], client)

    assert result.records == []
    assert isinstance(result.failures[0].error, NotFoundOrAmbiguousError)
    assert len(_warnings(ytj_caplog)) == 1


def test_client_error_does_not_abort_batch() -> None:
    client = _StubClient(
        {
            "1111111-1": ClientError("YTJ API Fehler (HTTP 500)", status_code=500),
            "3333333-3": make_response(make_company("3333333-3")),
        }
    )

    result = run_batch(["1111111-1", "3333333-3"], client)

    assert len(result.records) == 1
    assert result.failures[0].error.status_code == 500


def test_records_keep_input_order_and_reach_callback() -> None:
    ids = ["3333333-3", "1111111-1", "2222222-2"]
    client = _StubClient({i: make_response(make_company(i)) for i in ids})
    seen: list[OutputRecord] = []

    result = run_batch(ids, client, on_record=seen.append)

    assert [record.business_id for record in result.records] == ids
    assert seen == result.records


class _JsonResponse:
    def __init__(self, status_code: int, payload: Any = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self.text = "" if payload is None else json.dumps(payload)

    def json(self) -> Any:
        if self._payload is None:
            raise json.JSONDecodeError("Expecting value", self.text, 0)
        return self._payload


def _install_responses(
    monkeypatch: pytest.MonkeyPatch, responses: dict[str, _JsonResponse]
) -> list[str]:
    calls: list[str] = []

    def fake_get(
        url: str,
        params: dict[str, str],
        headers: dict[str, str],
        timeout: tuple[float, float],
    ) -> _JsonResponse:
        calls.append(params["businessId"])
        return responses[params["businessId"]]

    monkeypatch.setattr("ytjfetch.providers.ytj.requests.get", fake_get)
    return calls


def test_batch_with_registry_client_survives_every_lookup_failure(
    monkeypatch: pytest.MonkeyPatch, ytj_caplog
) -> None:
    calls = _install_responses(
        monkeypatch,
        {
            "1111111-1": _JsonResponse(429, {}),
            "2222222-2": _JsonResponse(200, None),
            "3333333-3": _JsonResponse(
                200, make_response(make_company("3333333-3"), make_company("3333333-3"), total=2)
            ),
            "4444444-4": _JsonResponse(200, {"totalResults": 1, "companies": [None]}),
            "5555555-5": _JsonResponse(200, make_response(make_company("5555555-5"))),
        },
    )
    sleeps: list[float] = []
    client = YtjClient("https://example.invalid/companies", sleep=sleeps.append)
    ids = ["1111111-1", "2222222-2", "3333333-3", "4444444-4", "5555555-5"]

    result = run_batch(ids, client)

    assert [record.business_id for record in result.records] == ["5555555-5"]
    errors = {failure.identifier: type(failure.error) for failure in result.failures}
    assert errors == {
        "1111111-1": RetryExhaustedError,
        "2222222-2": ParseError,
        "3333333-3": NotFoundOrAmbiguousError,
        "4444444-4": ParseError,
    }
    assert calls.count("1111111-1") == 5
    assert sleeps == [5.0, 5.0, 5.0, 5.0]

    batch_warnings = [w for w in _warnings(ytj_caplog) if "übersprungen" in w.getMessage()]
    assert len(batch_warnings) == 4
