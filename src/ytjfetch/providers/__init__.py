"""Registry client implementations for ``ytjfetch``."""

from .base import CompanyApiResponse, RegistryClient
from .ytj import YtjClient

__all__ = ["CompanyApiResponse", "RegistryClient", "YtjClient"]
