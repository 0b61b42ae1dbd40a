"""Turn a YTJ company lookup response into an :class:`OutputRecord`."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import Any, Optional, TypeVar

from .providers.base import ApiAddress, ApiCompany, ApiName, CompanyApiResponse
from .records import OutputRecord, PostalAddress, VisitingAddress

_T = TypeVar("_T")

CURRENT_NAME_TYPE = 1
VISITING_ADDRESS_TYPE = 1
POSTAL_ADDRESS_TYPE = 2
FINNISH_LANGUAGE_CODE = 1


def _code_matches(value: Any, code: int) -> bool:
    # The registry sends codes either as numbers or as numeric strings.
    if value is None:
        return False
    return str(value).strip() == str(code)


def _first(entries: Iterable[_T] | None, predicate: Callable[[Any], bool]) -> Optional[_T]:
    for entry in entries or ():
        if isinstance(entry, dict) and predicate(entry):
            return entry
    return None


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


def _segment(value: Any) -> str:
    return "" if value is None else str(value)


def _business_id(company: ApiCompany) -> Optional[str]:
    raw = company.get("businessId")
    if isinstance(raw, dict):
        return _optional_text(raw.get("value"))
    return _optional_text(raw)


def _current_name(company: ApiCompany) -> Optional[str]:
    entry: Optional[ApiName] = _first(
        company.get("names"),
        lambda item: _code_matches(item.get("type"), CURRENT_NAME_TYPE)
        and item.get("endDate") is None,
    )
    if entry is None:
        return None
    return _optional_text(entry.get("name"))


def _address(company: ApiCompany, address_type: int) -> Optional[ApiAddress]:
    return _first(
        company.get("addresses"),
        lambda item: _code_matches(item.get("type"), address_type),
    )


def _street_line(address: ApiAddress) -> str:
    # Empty segments stay in place, so missing parts leave doubled spaces.
    return " ".join(
        _segment(address.get(key))
        for key in ("street", "buildingNumber", "entrance", "apartmentNumber")
    )


def _city(address: ApiAddress) -> Optional[str]:
    office = _first(
        address.get("postOffices"),
        lambda item: _code_matches(item.get("languageCode"), FINNISH_LANGUAGE_CODE),
    )
    if office is None:
        return None
    return _optional_text(office.get("city"))


def _visiting(company: ApiCompany) -> VisitingAddress:
    address = _address(company, VISITING_ADDRESS_TYPE)
    if address is None:
        return VisitingAddress()
    return VisitingAddress(
        co=_optional_text(address.get("co")),
        street=_street_line(address),
        post_code=_optional_text(address.get("postCode")),
        city=_city(address),
    )


def _postal(company: ApiCompany) -> PostalAddress:
    address = _address(company, POSTAL_ADDRESS_TYPE)
    if address is None:
        return PostalAddress()
    box = address.get("postOfficeBox")
    return PostalAddress(
        co=_optional_text(address.get("co")),
        postbox=f"PL {box}" if box is not None else None,
        street=_street_line(address),
        post_code=_optional_text(address.get("postCode")),
        city=_city(address),
    )


def normalize(response: CompanyApiResponse) -> OutputRecord:
    """Flatten the single company in *response*.

    Missing names, addresses or post offices yield ``None`` fields; this
    function does not raise for responses that passed the result-count check.
    """

    companies = response.get("companies") or []
    company: ApiCompany = companies[0] if companies else {}
    return OutputRecord(
        business_id=_business_id(company),
        name=_current_name(company),
        visiting=_visiting(company),
        postal=_postal(company),
    )


__all__ = ["normalize"]
