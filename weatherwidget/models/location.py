"""Geocoding result model."""

from dataclasses import asdict, dataclass
from typing import Any

from weatherwidget.models.errors import ParseError


@dataclass(frozen=True)
class Location:
    id: int  # only unique within one search result set
    name: str
    latitude: float
    longitude: float
    country: str = ""
    admin1: str = ""  # first-level administrative region

    @classmethod
    def from_api(cls, raw: Any, source: str = "geocoding") -> "Location":
        """Build a Location from one element of a geocoding `results` array."""
        if not isinstance(raw, dict):
            raise ParseError(f"Location record is not an object: {raw!r}", source)
        try:
            return cls(
                id=int(raw["id"]),
                name=str(raw["name"]),
                latitude=float(raw["latitude"]),
                longitude=float(raw["longitude"]),
                country=raw.get("country") or "",
                admin1=raw.get("admin1") or "",
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ParseError(f"Invalid location record: {e}", source) from e

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @property
    def label(self) -> str:
        return ", ".join(p for p in (self.name, self.admin1, self.country) if p)
