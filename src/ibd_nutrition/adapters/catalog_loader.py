"""Load the reference food catalog from a JSON file."""

import json
import logging
from pathlib import Path

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)

from ibd_nutrition.adapters.parsing import coerce_number
from ibd_nutrition.domain.catalog import FoodItem
from ibd_nutrition.domain.nutrients import NutrientVector

BUNDLED_CATALOG_PATH = (
    Path(__file__).resolve().parent.parent / "data" / "food_catalog.json"
)

_NUMERIC_FIELDS = (
    "calories",
    "protein",
    "carbs",
    "fiber",
    "fat",
    "vitamin_c",
    "iron",
    "potassium",
    "vitamin_b12",
    "vitamin_b9",
    "zinc",
    "calcium",
    "vitamin_d",
    "magnesium",
    "omega3",
)

_logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when the catalog file cannot be used."""


class CatalogRow(BaseModel):
    """One catalog entry as stored on disk."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    name: str = Field(min_length=1)
    category: str = ""
    region: str = "Global"
    serving_size: str = Field(default="1 serving", alias="servingSize")
    calories: float = 0.0
    protein: float = 0.0
    carbs: float = 0.0
    fiber: float = 0.0
    fat: float = 0.0
    vitamin_c: float = Field(default=0.0, alias="vitaminC")
    iron: float = 0.0
    potassium: float = 0.0
    vitamin_b12: float = Field(default=0.0, alias="vitaminB12")
    vitamin_b9: float = Field(default=0.0, alias="vitaminB9")
    zinc: float = 0.0
    calcium: float = 0.0
    vitamin_d: float = Field(default=0.0, alias="vitaminD")
    magnesium: float = 0.0
    omega3: float = 0.0

    @field_validator(*_NUMERIC_FIELDS, mode="before")
    @classmethod
    def _number_or_zero(cls, value: object) -> float:
        number = coerce_number(value)
        return 0.0 if number is None else number

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        return value.strip()

    def to_food_item(self) -> FoodItem:
        nutrients = NutrientVector.from_mapping(
            {key: getattr(self, key) for key in _NUMERIC_FIELDS}
        )
        return FoodItem(
            name=self.name,
            category=self.category,
            nutrients=nutrients,
            region=self.region or "Global",
            serving_size=self.serving_size,
        )


_ROWS_ADAPTER = TypeAdapter(list[CatalogRow])


def parse_catalog(payload: object) -> tuple[FoodItem, ...]:
    """Validate decoded catalog rows, keeping file order."""
    try:
        rows = _ROWS_ADAPTER.validate_python(payload)
    except ValidationError as exc:
        raise CatalogError(f"Invalid catalog rows: {exc}") from exc
    seen: set[str] = set()
    items = []
    for row in rows:
        key = row.name.lower()
        if key in seen:
            raise CatalogError(f"Duplicate catalog entry: {row.name}")
        seen.add(key)
        items.append(row.to_food_item())
    return tuple(items)


def load_catalog(path: str | Path | None = None) -> tuple[FoodItem, ...]:
    """Read catalog items from path, or from the bundled file when path is None."""
    catalog_path = Path(path) if path is not None else BUNDLED_CATALOG_PATH
    try:
        text = catalog_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog {catalog_path}: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog {catalog_path} is not valid JSON: {exc}") from exc
    items = parse_catalog(payload)
    _logger.debug("Loaded %s catalog items from %s", len(items), catalog_path)
    return items
