"""Sequential batch lookup of business IDs."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from .errors import LookupFailure, YtjError
from .identifiers import validate
from .normalize import normalize
from .providers.base import RegistryClient
from .records import OutputRecord
from .utils.logging_setup import setup_logger

_BASE_LOGGER = setup_logger()
LOGGER = _BASE_LOGGER.getChild("pipeline")


@dataclass(frozen=True)
class Failure:
    identifier: str
    error: YtjError


@dataclass
class BatchResult:
    records: list[OutputRecord] = field(default_factory=list)
    failures: list[Failure] = field(default_factory=list)

    @property
    def processed(self) -> int:
        return len(self.records) + len(self.failures)


def run_batch(
    identifiers: Sequence[str],
    client: RegistryClient,
    *,
    on_record: Callable[[OutputRecord], None] | None = None,
) -> BatchResult:
    """Resolve *identifiers* one after another.

    Lookup failures are logged as warnings and collected in
    :attr:`BatchResult.failures`; the remaining identifiers are still processed.
    """

    result = BatchResult()
    total = len(identifiers)

    for position, identifier in enumerate(identifiers, start=1):
        LOGGER.info("Verarbeite %s (%s/%s)", identifier, position, total)
        try:
            validate(identifier)
            response = client.fetch(identifier)
        except LookupFailure as exc:
            LOGGER.warning("%s übersprungen: %s", identifier, exc)
            result.failures.append(Failure(identifier=identifier, error=exc))
            continue

        record = normalize(response)
        result.records.append(record)
        if on_record is not None:
            on_record(record)

    return result


__all__ = ["BatchResult", "Failure", "run_batch"]
