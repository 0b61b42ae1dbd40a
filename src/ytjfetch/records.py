"""Flat result rows produced for each resolved business ID."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

FIELD_NAMES: tuple[str, ...] = (
    "BusinessId",
    "Name",
    "VisitingCO",
    "VisitingStreet",
    "VisitingPostCode",
    "VisitingCity",
    "PostalCO",
    "PostalPostbox",
    "PostalStreet",
    "PostalPostCode",
    "PostalCity",
)


@dataclass(frozen=True)
class VisitingAddress:
    co: Optional[str] = None
    street: Optional[str] = None
    post_code: Optional[str] = None
    city: Optional[str] = None


@dataclass(frozen=True)
class PostalAddress:
    co: Optional[str] = None
    postbox: Optional[str] = None
    street: Optional[str] = None
    post_code: Optional[str] = None
    city: Optional[str] = None


@dataclass(frozen=True)
class OutputRecord:
    business_id: Optional[str]
    name: Optional[str] = None
    visiting: VisitingAddress = field(default_factory=VisitingAddress)
    postal: PostalAddress = field(default_factory=PostalAddress)

    def as_row(self) -> dict[str, Optional[str]]:
        """Return the record keyed by :data:`FIELD_NAMES`, in that order."""

        return {
            "BusinessId": self.business_id,
            "Name": self.name,
            "VisitingCO": self.visiting.co,
            "VisitingStreet": self.visiting.street,
            "VisitingPostCode": self.visiting.post_code,
            "VisitingCity": self.visiting.city,
            "PostalCO": self.postal.co,
            "PostalPostbox": self.postal.postbox,
            "PostalStreet": self.postal.street,
            "PostalPostCode": self.postal.post_code,
            "PostalCity": self.postal.city,
        }


__all__ = ["FIELD_NAMES", "OutputRecord", "PostalAddress", "VisitingAddress"]
