# torqueup/reco/catalog.py
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from torqueup.nlp.keywords import (
    CAR_BRANDS,
    BUDGET_LOW, BUDGET_MID, BUDGET_UPPER, BUDGET_HIGH,
    USAGE_CITY, USAGE_FAMILY, USAGE_ADVENTURE, USAGE_BUSINESS,
    SIZE_COMPACT, SIZE_LARGE,
)
from torqueup.nlp.normalize import field_contains, numeric_field
from torqueup.settings import MAX_RECOMMENDATIONS

logger = logging.getLogger("torqueup.reco")

Car = Dict[str, Any]
Predicate = Callable[[Car], bool]

# Empty-result policies for a stage
FIRST_MATCH = "first_match"        # first matching rule applies, even if nothing survives
SKIP_IF_EMPTY = "skip_if_empty"    # a rule that empties the set is ignored; try the next one


# ------------------------------------------------------------------------------------
# Predicates over a vehicle record
# ------------------------------------------------------------------------------------
def make_contains(brand: str) -> Predicate:
    return lambda car: field_contains(car, "make", brand)


def body_style_contains(*needles: str) -> Predicate:
    return lambda car: any(field_contains(car, "body_style", n) for n in needles)


def price_in(low: Optional[float] = None, high: Optional[float] = None) -> Predicate:
    """
    low <= price < high. A missing bound is open; a missing price never matches.
    """
    def _check(car: Car) -> bool:
        price = numeric_field(car, "price")
        if price is None:
            return False
        if low is not None and price < low:
            return False
        if high is not None and price >= high:
            return False
        return True
    return _check


def seats_at_least(n: int) -> Predicate:
    def _check(car: Car) -> bool:
        seats = numeric_field(car, "seating_capacity")
        return seats is not None and seats >= n
    return _check


def either(*predicates: Predicate) -> Predicate:
    return lambda car: any(p(car) for p in predicates)


# ------------------------------------------------------------------------------------
# Rule table
# ------------------------------------------------------------------------------------
@dataclass(frozen=True)
class Rule:
    """Keyword pattern → predicate. `all_of` and `any_of` must both hold when given."""
    name: str
    predicate: Predicate
    any_of: Tuple[str, ...] = ()
    all_of: Tuple[str, ...] = ()

    def matches(self, context: str) -> bool:
        if not (self.any_of or self.all_of):
            return False
        if self.all_of and not all(k in context for k in self.all_of):
            return False
        if self.any_of and not any(k in context for k in self.any_of):
            return False
        return True


@dataclass(frozen=True)
class Stage:
    name: str
    rules: Tuple[Rule, ...]
    on_empty: str = FIRST_MATCH

    def apply(self, cars: Sequence[Car], context: str) -> Tuple[List[Car], Optional[str]]:
        """
        Returns (candidates, applied_rule_name). The rule name is None when the
        stage was a no-op.
        """
        for rule in self.rules:
            if not rule.matches(context):
                continue
            narrowed = [car for car in cars if rule.predicate(car)]
            if narrowed or self.on_empty == FIRST_MATCH:
                return narrowed, rule.name
        return list(cars), None


BRAND_STAGE = Stage(
    "brand",
    tuple(Rule(brand, make_contains(brand), any_of=(brand,)) for brand in CAR_BRANDS),
    on_empty=SKIP_IF_EMPTY,
)

BUDGET_STAGE = Stage("budget", (
    Rule("under_1m", price_in(high=15000), any_of=BUDGET_LOW),
    Rule("1m_2m", price_in(15000, 25000), all_of=BUDGET_MID),
    Rule("2m_3m", price_in(25000, 35000), all_of=BUDGET_UPPER),
    Rule("above_3m", price_in(low=35000), any_of=BUDGET_HIGH),
))

USAGE_STAGE = Stage("usage", (
    Rule("city", either(body_style_contains("sedan", "hatch"),
                        lambda car: field_contains(car, "fuel_consumption", "efficient")),
         any_of=USAGE_CITY),
    Rule("family", either(seats_at_least(5), body_style_contains("suv", "sedan")),
         any_of=USAGE_FAMILY),
    Rule("adventure", either(body_style_contains("suv"),
                             lambda car: field_contains(car, "drivetrain", "awd"),
                             lambda car: field_contains(car, "drivetrain", "4wd")),
         any_of=USAGE_ADVENTURE),
    Rule("business", either(body_style_contains("sedan"),
                            lambda car: field_contains(car, "category", "luxury")),
         any_of=USAGE_BUSINESS),
))

SIZE_STAGE = Stage("size", (
    Rule("compact", body_style_contains("hatch", "compact"), any_of=SIZE_COMPACT),
    Rule("large", either(body_style_contains("suv"), seats_at_least(7)), any_of=SIZE_LARGE),
))

STAGES: Tuple[Stage, ...] = (BRAND_STAGE, BUDGET_STAGE, USAGE_STAGE, SIZE_STAGE)


# ------------------------------------------------------------------------------------
# Recommendation
# ------------------------------------------------------------------------------------
@dataclass(frozen=True)
class CarPick:
    items: List[Car]
    missing_brand: Optional[str] = None   # brand the user asked for that we don't stock


def mentioned_brands(context: str) -> List[str]:
    return [brand for brand in CAR_BRANDS if brand in context]


def _first_unstocked_brand(cars: Sequence[Car], context: str) -> Optional[str]:
    for brand in mentioned_brands(context):
        has_brand = make_contains(brand)
        if not any(has_brand(car) for car in cars):
            return brand
    return None


def recommend_cars(
    cars: Sequence[Car],
    context: str,
    *,
    stages: Sequence[Stage] = STAGES,
    limit: int = MAX_RECOMMENDATIONS,
) -> CarPick:
    """
    Runs the narrowing stages in order over the inventory and keeps the first
    `limit` survivors. If nothing survives, falls back to the first `limit`
    cars of the untouched inventory. The input list is never modified.
    """
    candidates: List[Car] = list(cars)
    applied: Dict[str, Optional[str]] = {}

    for stage in stages:
        candidates, rule = stage.apply(candidates, context)
        applied[stage.name] = rule
        logger.debug("stage=%s rule=%s remaining=%d", stage.name, rule, len(candidates))

    # Brand names are matched as substrings ("seat" in "seating"), so an
    # unstocked brand is only reported when nothing narrowed the inventory
    missing_brand = None
    if not candidates or all(rule is None for rule in applied.values()):
        missing_brand = _first_unstocked_brand(cars, context)

    if not candidates:
        logger.info("No cars left after filtering, using first %d of inventory", limit)
        return CarPick(list(cars[:limit]), missing_brand)

    return CarPick(candidates[:limit], missing_brand)
