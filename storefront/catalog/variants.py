"""
Variant Resolution

Picks the variant matching a color/size selection, the initial selection
shown before any interaction, and clamps the quantity selector.
"""

import math
import re
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence

from ..common.constants import MAX_QUANTITY, MIN_QUANTITY
from ..models.schema import Variant

# Leading integer, parsed the way a browser number input does
_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


@dataclass(frozen=True)
class VariantMatch:
    """Resolved variant plus whether it actually matched the selection."""
    variant: Optional[Variant]
    exact: bool


def find_variant(
    variants: Sequence[Variant],
    selected_color: Optional[str] = None,
    selected_size: Optional[str] = None,
    sizes: Optional[Iterable[str]] = None,
) -> VariantMatch:
    """
    Resolve a color/size selection to a variant.

    A single variant always wins. Otherwise the first variant whose color is
    absent or equals selected_color, and whose size is absent, irrelevant
    (product has no sizes) or equals selected_size. When nothing matches the
    first variant is returned with exact=False.

    Args:
        variants: Normalized variants in product order
        selected_color: Chosen color, if any
        selected_size: Chosen size, if any
        sizes: Product size set; derived from the variants when omitted
    """
    variants = list(variants)
    if not variants:
        return VariantMatch(None, False)
    if len(variants) == 1:
        return VariantMatch(variants[0], True)

    if sizes is None:
        size_set = {v.size for v in variants if v.size is not None}
    else:
        size_set = set(sizes)

    for variant in variants:
        color_ok = variant.color is None or variant.color == selected_color
        size_ok = variant.size is None or not size_set or variant.size == selected_size
        if color_ok and size_ok:
            return VariantMatch(variant, True)

    return VariantMatch(variants[0], False)


def resolve_variant(
    variants: Sequence[Variant],
    selected_color: Optional[str] = None,
    selected_size: Optional[str] = None,
    sizes: Optional[Iterable[str]] = None,
) -> Optional[Variant]:
    """Variant to display for a selection (first variant when nothing matches)."""
    return find_variant(variants, selected_color, selected_size, sizes).variant


def is_variant_available(variant: Optional[Variant]) -> bool:
    return variant is not None and variant.available_for_sale is not False


def initial_variant(variants: Sequence[Variant]) -> Optional[Variant]:
    """First variant not explicitly unavailable, else the first variant."""
    for variant in variants:
        if is_variant_available(variant):
            return variant
    return variants[0] if variants else None


def is_product_available(variants: Sequence[Variant]) -> bool:
    """Product-level availability, decided once from the initial variant."""
    return is_variant_available(initial_variant(variants))


def clamp_quantity(value: Any) -> int:
    """
    Coerce quantity input into [MIN_QUANTITY, MAX_QUANTITY].

    Non-numeric input and zero are treated as MIN_QUANTITY.

    Example:
        >>> [clamp_quantity(v) for v in (-5, 0, "abc", 57, 250)]
        [1, 1, 1, 57, 100]
    """
    number = None
    if isinstance(value, bool):
        number = None
    elif isinstance(value, int):
        number = value
    elif isinstance(value, float):
        number = int(value) if math.isfinite(value) else None
    elif isinstance(value, str):
        match = _LEADING_INT.match(value)
        number = int(match.group(1)) if match else None

    if not number:
        number = MIN_QUANTITY
    return max(MIN_QUANTITY, min(MAX_QUANTITY, number))
