"""
Tax Rate Repository - In-memory tax tables by location.

Satisfies the TaxRateService contract used by the order service.
"""

from collections.abc import Iterable

from order_placement.domain.value_objects import TaxEntry


class InMemoryTaxRateService:
    """
    Tax entries keyed by (postal code, country).

    Country matching is case-insensitive ("usa" and "USA" are the same
    location). Unknown locations have no tax entries.
    """

    def __init__(self):
        self._entries: dict[tuple[str, str], list[TaxEntry]] = {}

    @staticmethod
    def _key(postal_code: str, country: str) -> tuple[str, str]:
        return (postal_code.strip(), country.strip().upper())

    def add_entries(
        self,
        postal_code: str,
        country: str,
        entries: Iterable[TaxEntry]
    ) -> None:
        """Append tax entries for a location."""
        self._entries.setdefault(self._key(postal_code, country), []).extend(entries)

    def get_tax_entries(self, postal_code: str, country: str) -> list[TaxEntry]:
        """
        Get tax entries that apply to a location.

        Returns:
            A new list of entries; empty if none apply
        """
        return list(self._entries.get(self._key(postal_code, country), []))

    def location_count(self) -> int:
        """Get number of locations with tax entries."""
        return len(self._entries)
