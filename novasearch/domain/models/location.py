"""Location domain models"""

import re
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator

COUNTRY_CODE_RE = re.compile(r"^[a-z]{2}$")


class LocationMode(str, Enum):
    """How the search location is chosen"""

    MANUAL = "manual"  # caller supplied country/state/city
    NORMAL = "normal"  # detected (IP/GPS) location
    GLOBAL = "global"  # no geographic restriction


class PartialLocation(BaseModel):
    """Raw, possibly incomplete location input"""

    country: str = ""
    country_code: str = ""
    state: str = ""
    city: str = ""
    location: str = ""  # free-text location, e.g. "Dallas, Texas, United States"

    def is_empty(self) -> bool:
        return not any(
            (self.country, self.country_code, self.state, self.city, self.location)
        )


class LocationSignature(BaseModel):
    """Canonical resolved geography used to bias every upstream call.

    An all-empty signature means "no geographic restriction".
    """

    model_config = ConfigDict(frozen=True)

    country: str = ""
    country_code: str = ""  # ISO-3166 alpha-2, lowercase, or empty
    state: str = ""
    city: str = ""
    canonical: str = ""

    @field_validator("country_code")
    @classmethod
    def validate_country_code(cls, value: str) -> str:
        value = (value or "").strip().lower()
        if value and not COUNTRY_CODE_RE.match(value):
            raise ValueError(f"country_code must be two lowercase letters: {value!r}")
        return value

    @property
    def is_global(self) -> bool:
        return not any(
            (self.country, self.country_code, self.state, self.city, self.canonical)
        )

    def display_name(self) -> Optional[str]:
        if self.is_global:
            return None
        return self.canonical.replace(",", ", ")
