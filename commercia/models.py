"""Data models for products."""

import json
import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional, Tuple, Union

from commercia.logging_config import get_logger

__all__ = [
    "SKU",
    "Property",
    "Review",
    "Product",
    "ProductRecord",
    "NoReviewsError",
    "InvalidReviewScoreError",
]

logger = get_logger("models")


class NoReviewsError(ValueError):
    """Raised when an average score is requested for a product without reviews."""
    pass


class InvalidReviewScoreError(ValueError):
    """Raised when a review score cannot be read as a base-10 integer."""
    pass


def _check_price(value: Optional[float], field_name: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"{field_name} must be a number or None, got {type(value).__name__}")
    if math.isnan(value) or math.isinf(value):
        raise ValueError(f"{field_name} must be finite, got {value}")
    return float(value)


def _parse_score(score: Union[int, str]) -> int:
    """Accept an int score or base-10 integer text, reject everything else."""
    if isinstance(score, bool):
        raise InvalidReviewScoreError(f"Review score must be an integer, got {score!r}")
    if isinstance(score, int):
        return score
    if isinstance(score, str):
        try:
            return int(score.strip(), 10)
        except ValueError as e:
            raise InvalidReviewScoreError(f"Review score is not a base-10 integer: {score!r}") from e
    raise InvalidReviewScoreError(
        f"Review score must be an integer, got {type(score).__name__}"
    )


@dataclass(frozen=True)
class SKU:
    """A purchasable variant of the product.

    Prices are floats, or None when the page shows no such price.
    """

    name: str = ""
    available: bool = False
    current_price: Optional[float] = None
    old_price: Optional[float] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "current_price", _check_price(self.current_price, "current_price"))
        object.__setattr__(self, "old_price", _check_price(self.old_price, "old_price"))


@dataclass(frozen=True)
class Property:
    """A label/value row from one of the product property tables."""

    label: str = ""
    value: str = ""


@dataclass(frozen=True)
class Review:
    """A customer review; score is the number of filled stars."""

    name: str = ""
    date: str = ""
    score: int = 0
    text: str = ""


@dataclass(frozen=True)
class ProductRecord:
    """Immutable snapshot of a Product, including derived fields.

    Field order is the key order of the JSON output.
    """

    url: str
    title: str
    brand: str
    description: str
    skus: Tuple[SKU, ...]
    reviews: Tuple[Review, ...]
    categories: Tuple[str, ...]
    properties: Tuple[Property, ...]
    reviews_average_score: Optional[float]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.url,
            "title": self.title,
            "brand": self.brand,
            "description": self.description,
            "skus": [asdict(s) for s in self.skus],
            "reviews": [asdict(r) for r in self.reviews],
            "categories": list(self.categories),
            "properties": [asdict(p) for p in self.properties],
            "reviews_average_score": self.reviews_average_score,
        }

    def to_json(self, indent: Union[str, int, None] = "\t") -> str:
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)


class Product:
    """Aggregate of everything extracted from one product page.

    Header fields are plain attributes. Collections only grow through the
    add_* builders, which return the product so calls can be chained:

        product.add_category("Home").add_category("Kitchen")
    """

    def __init__(self, url: str) -> None:
        self._url = url

        self.title = ""
        self.brand = ""
        self.description = ""

        self.skus: List[SKU] = []
        self.reviews: List[Review] = []
        self.categories: List[str] = []
        self.properties: List[Property] = []

    def __repr__(self) -> str:
        return (
            f"Product(url={self._url!r}, title={self.title!r}, skus={len(self.skus)}, "
            f"reviews={len(self.reviews)}, categories={len(self.categories)}, "
            f"properties={len(self.properties)})"
        )

    @property
    def url(self) -> str:
        return self._url

    @property
    def reviews_average_score(self) -> float:
        """Mean review score, recomputed on every access.

        Raises:
            NoReviewsError: If the product has no reviews
        """
        if not self.reviews:
            raise NoReviewsError(f"No reviews to average for {self._url}")
        return sum(r.score for r in self.reviews) / len(self.reviews)

    def set_header(
        self,
        title: Optional[str] = None,
        brand: Optional[str] = None,
        description: Optional[str] = None,
    ) -> "Product":
        """Set title, brand and description. Fields left as None are untouched."""
        if title is not None:
            self.title = title
        if brand is not None:
            self.brand = brand
        if description is not None:
            self.description = description
        return self

    def add_category(self, name: str = "") -> "Product":
        self.categories.append(name)
        return self

    def add_sku(
        self,
        name: str = "",
        current_price: Optional[float] = None,
        old_price: Optional[float] = None,
        available: bool = False,
    ) -> "Product":
        self.skus.append(SKU(
            name=name,
            current_price=current_price,
            old_price=old_price,
            available=available,
        ))
        return self

    def add_property(self, label: str = "", value: str = "") -> "Product":
        # Base and additional tables share this list; duplicate labels are kept
        self.properties.append(Property(label=label, value=value))
        return self

    def add_review(
        self,
        name: str = "",
        date: str = "",
        score: Union[int, str] = 0,
        text: str = "",
    ) -> "Product":
        """Append a review.

        Raises:
            InvalidReviewScoreError: If score is not an int or base-10 integer text
        """
        self.reviews.append(Review(name=name, date=date, score=_parse_score(score), text=text))
        return self

    def to_record(self) -> ProductRecord:
        """Freeze the product into a ProductRecord with the average score attached.

        A product without reviews gets reviews_average_score=None.
        """
        try:
            average: Optional[float] = self.reviews_average_score
        except NoReviewsError:
            logger.warning(f"No reviews found for {self._url}, average score set to null")
            average = None

        return ProductRecord(
            url=self._url,
            title=self.title,
            brand=self.brand,
            description=self.description,
            skus=tuple(self.skus),
            reviews=tuple(self.reviews),
            categories=tuple(self.categories),
            properties=tuple(self.properties),
            reviews_average_score=average,
        )

    def to_dict(self) -> Dict[str, Any]:
        return self.to_record().to_dict()

    def serialize(self, indent: Union[str, int, None] = "\t") -> str:
        """Serialize to JSON text (tab-indented by default)."""
        return self.to_record().to_json(indent=indent)
