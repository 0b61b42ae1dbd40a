"""Registry client interface and the response shapes it returns."""

from typing import Optional, Protocol, TypedDict, Union


class ApiPostOffice(TypedDict, total=False):
    city: str
    languageCode: Union[int, str]
    municipalityCode: str


class ApiAddress(TypedDict, total=False):
    type: Union[int, str]
    street: Optional[str]
    buildingNumber: Optional[str]
    entrance: Optional[str]
    apartmentNumber: Optional[str]
    postCode: Optional[str]
    co: Optional[str]
    postOfficeBox: Optional[str]
    postOffices: list[ApiPostOffice]


class ApiName(TypedDict, total=False):
    name: str
    type: Union[int, str]
    registrationDate: Optional[str]
    endDate: Optional[str]


class ApiBusinessId(TypedDict, total=False):
    value: str
    registrationDate: Optional[str]


class ApiCompany(TypedDict, total=False):
    businessId: Union[str, ApiBusinessId]
    names: list[ApiName]
    addresses: list[ApiAddress]


class CompanyApiResponse(TypedDict, total=False):
    totalResults: int
    companies: list[ApiCompany]


class RegistryClient(Protocol):
    """Protocol defining a business registry lookup."""

    def fetch(self, identifier: str) -> CompanyApiResponse:
        """Retrieve the single company registered under *identifier*."""

        ...
