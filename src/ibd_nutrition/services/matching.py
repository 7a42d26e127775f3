"""Free-text meal description matching."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from ibd_nutrition.domain.catalog import FoodItem
from ibd_nutrition.services.catalog import FoodCatalog

_logger = logging.getLogger(__name__)


@dataclass
class FoodMatcher:
    """Resolve description tokens to catalog foods by substring match."""

    catalog: FoodCatalog
    min_token_length: int = 3
    debug: bool = False

    def tokenize(self, description: str) -> list[str]:
        """Lowercase, split on whitespace and drop short tokens."""
        return [
            token
            for token in description.lower().split()
            if len(token) >= self.min_token_length
        ]

    def match_token(self, token: str) -> FoodItem | None:
        """Return the first catalog food whose name or category contains token."""
        for item in self.catalog.foods:
            if token in item.name.lower() or token in item.category.lower():
                return item
        return None

    def match(self, description: str) -> frozenset[str]:
        """Return the names of catalog foods mentioned in description."""
        matched = set()
        for token in self.tokenize(description or ""):
            item = self.match_token(token)
            if item is not None:
                matched.add(item.name)
        if not matched:
            _logger.debug("No catalog match for description: %r", description)
        elif self.debug:
            _logger.info("Matched foods: description=%r foods=%s", description, matched)
        return frozenset(matched)

    def match_all(self, descriptions: Iterable[str]) -> frozenset[str]:
        """Return the union of matches over several descriptions."""
        matched: set[str] = set()
        for description in descriptions:
            matched |= self.match(description)
        return frozenset(matched)
