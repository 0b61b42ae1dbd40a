from __future__ import annotations

import logging
from collections.abc import Generator

import pytest


@pytest.fixture
def ytj_caplog(caplog: pytest.LogCaptureFixture) -> Generator[pytest.LogCaptureFixture, None, None]:
    """``caplog`` wired to the package logger, which does not propagate."""

    logger = logging.getLogger("ytjfetch")
    logger.addHandler(caplog.handler)
    try:
        yield caplog
    finally:
        logger.removeHandler(caplog.handler)


def make_company(
    business_id: str = "1234567-8",
    *,
    names: list[dict[str, object]] | None = None,
    addresses: list[dict[str, object]] | None = None,
) -> dict[str, object]:
    return {
        "businessId": {"value": business_id, "registrationDate": "2001-01-01"},
        "names": names
        if names is not None
        else [{"name": "Esimerkki Oy", "type": "1", "endDate": None}],
        "addresses": addresses if addresses is not None else [],
    }


def make_response(*companies: dict[str, object], total: int | None = None) -> dict[str, object]:
    return {
        "totalResults": len(companies) if total is None else total,
        "companies": list(companies),
    }
