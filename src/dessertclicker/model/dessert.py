"""
Dessert Catalog
===============
Defines the dessert tiers and the rule that picks which one is on display.

Why is this file needed?
------------------------
1. Data: It holds the ordered list of desserts (image, price, threshold).
2. Validation: The catalog is checked ONCE when it is built, so the lookup
   can rely on the thresholds being sorted and unique.
3. Lookup: ``determine_dessert_to_show`` maps a sales count to a tier.

Classes:
    DessertTier: One entry of the catalog.
    Catalog: Validated, immutable, ordered collection of tiers.
"""
from __future__ import annotations

from dataclasses import dataclass
import bisect
import json
import logging
from typing import Any, Dict, Iterable, Iterator, List, Optional, Sequence, Union, TYPE_CHECKING

import numpy as np

from dessertclicker.model.errors import InvalidCatalog

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

INT64_MAX = int(np.iinfo(np.int64).max)


@dataclass(frozen=True)
class DessertTier:
    """
    A dessert that can be sold.

    ``start_production_amount`` is the number of desserts that must have been
    sold before this dessert is produced.
    """
    image_ref: str
    price: int
    start_production_amount: int
    name: str = ""

    def __post_init__(self) -> None:
        if isinstance(self.price, bool) or not isinstance(self.price, int) or self.price <= 0:
            raise InvalidCatalog(f"Dessert '{self.label}' must have a positive integer price, got {self.price!r}.")
        threshold = self.start_production_amount
        if isinstance(threshold, bool) or not isinstance(threshold, int) or threshold < 0:
            raise InvalidCatalog(
                f"Dessert '{self.label}' must have a non-negative integer threshold, got {threshold!r}."
            )

    @property
    def label(self) -> str:
        return self.name or self.image_ref

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "image": self.image_ref,
            "price": self.price,
            "start_production_amount": self.start_production_amount,
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> DessertTier:
        try:
            return DessertTier(
                image_ref=str(data["image"]),
                price=data["price"],
                start_production_amount=data["start_production_amount"],
                name=str(data.get("name", "")),
            )
        except KeyError as e:
            raise InvalidCatalog(f"Dessert entry {data!r} is missing field {e}.") from e
        except TypeError as e:
            raise InvalidCatalog(f"Dessert entry {data!r} is not a mapping.") from e


class Catalog:
    """
    Ordered list of dessert tiers.

    Invariants (checked on construction):
    1. At least one tier.
    2. The first tier starts at 0 sold, so something is always on display.
    3. Thresholds are strictly ascending. The binary search in
       ``index_for`` depends on this.
    """

    def __init__(self, tiers: Iterable[DessertTier]) -> None:
        self.tiers: tuple[DessertTier, ...] = tuple(tiers)
        self._validate()
        self._threshold_values: tuple[int, ...] = tuple(t.start_production_amount for t in self.tiers)
        # numpy only holds thresholds that fit in int64; larger ones fall back to bisect
        self._thresholds: Optional[npt.NDArray[np.int64]] = None
        if self._threshold_values[-1] <= INT64_MAX:
            self._thresholds = np.array(self._threshold_values, dtype=np.int64)

    def __repr__(self) -> str:
        return f"Catalog({[t.label for t in self.tiers]!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Catalog):
            return NotImplemented
        return self.tiers == other.tiers

    def __hash__(self) -> int:
        return hash(self.tiers)

    def _validate(self) -> None:
        if not self.tiers:
            raise InvalidCatalog("Dessert catalog is empty.")

        for tier in self.tiers:
            if not isinstance(tier, DessertTier):
                raise InvalidCatalog(f"Catalog entry {tier!r} is not a DessertTier.")

        first = self.tiers[0]
        if first.start_production_amount != 0:
            raise InvalidCatalog(
                f"First dessert '{first.label}' must start at 0 sold, "
                f"got {first.start_production_amount}."
            )

        for previous, current in zip(self.tiers, self.tiers[1:]):
            if current.start_production_amount <= previous.start_production_amount:
                raise InvalidCatalog(
                    f"Dessert thresholds must be strictly ascending: '{current.label}' "
                    f"({current.start_production_amount}) follows '{previous.label}' "
                    f"({previous.start_production_amount})."
                )

        logger.debug(f"Catalog validated with {len(self.tiers)} desserts.")

    def __len__(self) -> int:
        return len(self.tiers)

    def __iter__(self) -> Iterator[DessertTier]:
        return iter(self.tiers)

    def __getitem__(self, index: int) -> DessertTier:
        return self.tiers[index]

    @property
    def first(self) -> DessertTier:
        return self.tiers[0]

    def index_for(self, desserts_sold: int) -> int:
        """Index of the tier with the largest threshold <= ``desserts_sold``."""
        if desserts_sold < 0:
            raise ValueError(f"Desserts sold cannot be negative, got {desserts_sold}.")

        # Counts beyond the int64 range cannot be handed to numpy
        if desserts_sold >= self.tiers[-1].start_production_amount:
            return len(self.tiers) - 1

        if self._thresholds is None:
            return bisect.bisect_right(self._threshold_values, desserts_sold) - 1
        return int(np.searchsorted(self._thresholds, desserts_sold, side="right")) - 1

    def to_dict(self) -> Dict[str, Any]:
        return {
            "desserts": [t.to_dict() for t in self.tiers]
        }

    @staticmethod
    def from_dict(data: Dict[str, Any]) -> Catalog:
        if not isinstance(data, dict) or not isinstance(data.get("desserts"), list):
            raise InvalidCatalog("Catalog data must contain a 'desserts' list.")
        return Catalog(DessertTier.from_dict(entry) for entry in data["desserts"])

    @staticmethod
    def from_json(filepath: str) -> Catalog:
        logger.info(f"Loading dessert catalog from: {filepath}")
        try:
            with open(filepath, "r", encoding="utf-8") as f:
                data = json.load(f)
        except OSError as e:
            raise InvalidCatalog(f"Cannot read dessert catalog '{filepath}': {e}") from e
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise InvalidCatalog(f"Dessert catalog '{filepath}' is not valid JSON: {e}") from e

        catalog = Catalog.from_dict(data)
        logger.info(f"Loaded {len(catalog)} desserts.")
        return catalog

    @classmethod
    def default(cls) -> Catalog:
        return cls(DEFAULT_DESSERTS)


def determine_dessert_to_show(
    desserts: Union[Catalog, Sequence[DessertTier]],
    desserts_sold: int
) -> DessertTier:
    """
    Determine which dessert to show.

    A validated ``Catalog`` is searched with a binary search. Any other
    sequence is scanned from the start, and the scan stops at the first
    dessert whose threshold is above ``desserts_sold`` (so it must be sorted).
    Plain sequences are NOT validated: an unsorted list gives an arbitrary match.
    """
    if desserts_sold < 0:
        raise ValueError(f"Desserts sold cannot be negative, got {desserts_sold}.")

    if isinstance(desserts, Catalog):
        return desserts[desserts.index_for(desserts_sold)]

    if not desserts:
        raise InvalidCatalog("Cannot determine a dessert from an empty catalog.")

    dessert_to_show = desserts[0]
    for dessert in desserts:
        if desserts_sold >= dessert.start_production_amount:
            dessert_to_show = dessert
        else:
            break

    return dessert_to_show


DEFAULT_DESSERTS: List[DessertTier] = [
    DessertTier("cupcake.svg", 5, 0, "Cupcake"),
    DessertTier("donut.svg", 10, 5, "Donut"),
    DessertTier("eclair.svg", 15, 20, "Eclair"),
    DessertTier("froyo.svg", 30, 50, "Froyo"),
    DessertTier("gingerbread.svg", 50, 100, "Gingerbread"),
    DessertTier("honeycomb.svg", 100, 200, "Honeycomb"),
    DessertTier("icecreamsandwich.svg", 500, 500, "Ice Cream Sandwich"),
    DessertTier("jellybean.svg", 1000, 1000, "Jelly Bean"),
    DessertTier("kitkat.svg", 2000, 2000, "KitKat"),
    DessertTier("lollipop.svg", 3000, 4000, "Lollipop"),
    DessertTier("marshmallow.svg", 4000, 8000, "Marshmallow"),
    DessertTier("nougat.svg", 5000, 16000, "Nougat"),
    DessertTier("oreo.svg", 6000, 20000, "Oreo"),
]
