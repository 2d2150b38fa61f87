"""Worked answer to the package shipping exercise."""

from __future__ import annotations

from dataclasses import dataclass

MIN_WEIGHT_IN_GRAMS = 10


@dataclass(frozen=True)
class Package:
    """A parcel between two countries; lighter than 10 grams is rejected."""

    sender_country: str
    recipient_country: str
    weight_in_grams: int

    def __post_init__(self) -> None:
        if self.weight_in_grams < MIN_WEIGHT_IN_GRAMS:
            raise ValueError("Can not ship a package with weight below 10 grams.")

    def is_international(self) -> bool:
        """True when sender and recipient countries differ."""
        return self.sender_country != self.recipient_country

    def get_fees(self, cents_per_gram: int) -> int:
        """Transport fee in cents."""
        return self.weight_in_grams * cents_per_gram