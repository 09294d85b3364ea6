"""
Product and Cart Normalization

Derives the convenience fields the storefront relies on:
  - product/merchandise colors and sizes, from the "color"/"size" option definitions
  - per-variant color and size, from each variant's selected options

Option names are compared case-insensitively ("Color" == "color").
Every normalized record is validated again before it is returned.
"""

import logging
from typing import Any, List, Optional, Sequence, Type

from pydantic import ValidationError

from ..common.constants import COLOR_OPTION, SIZE_OPTION
from ..exceptions import NormalizationError
from ..models.schema import (
    Cart,
    Merchandise,
    ModelT,
    OptionDefinition,
    Product,
    SelectedOption,
    Variant,
    to_record,
    validate_cart,
    validate_merchandise,
    validate_product,
    validation_issues,
)

logger = logging.getLogger(__name__)


def _is_axis(name: str, axis: str) -> bool:
    return name.lower() == axis


def option_values(options: Sequence[OptionDefinition], axis: str) -> List[str]:
    """Values of the first option definition named `axis`, in definition order."""
    for option in options:
        if _is_axis(option.name, axis):
            return list(option.values)
    return []


def selected_value(selected_options: Sequence[SelectedOption], axis: str) -> Optional[str]:
    """Value a variant selected for `axis`, or None if it does not specify one."""
    for option in selected_options:
        if _is_axis(option.name, axis):
            return option.value
    return None


def _derive_variant(variant: Variant) -> Variant:
    return variant.model_copy(update={
        "color": selected_value(variant.selected_options, COLOR_OPTION),
        "size": selected_value(variant.selected_options, SIZE_OPTION),
    })


def _derive_merchandise(merchandise: Merchandise) -> Merchandise:
    options = merchandise.product.options
    return _derive_variant(merchandise).model_copy(update={
        "colors": option_values(options, COLOR_OPTION),
        "sizes": option_values(options, SIZE_OPTION),
    })


def _revalidate(model_cls: Type[ModelT], record: ModelT) -> ModelT:
    try:
        return model_cls.model_validate(to_record(record))
    except ValidationError as e:
        logger.error("Normalized %s %s failed validation", model_cls.__name__,
                     getattr(record, "id", "?"))
        raise NormalizationError(model_cls.__name__, validation_issues(e)) from e


def normalize_product(raw: Any) -> Product:
    """
    Validate a product and derive its colors, sizes and per-variant color/size.

    Args:
        raw: Product payload (dict in API shape) or an existing Product

    Returns:
        Normalized Product

    Raises:
        SchemaValidationError: raw payload is invalid
        NormalizationError: the normalized record is invalid
    """
    product = validate_product(raw)

    normalized = product.model_copy(update={
        "colors": option_values(product.options, COLOR_OPTION),
        "sizes": option_values(product.options, SIZE_OPTION),
        "variants": [_derive_variant(v) for v in product.variants],
    })
    return _revalidate(Product, normalized)


def normalize_merchandise(raw: Any) -> Merchandise:
    """Validate and normalize the variant snapshot embedded in a cart line."""
    merchandise = validate_merchandise(raw)
    return _revalidate(Merchandise, _derive_merchandise(merchandise))


def normalize_cart(raw: Any) -> Optional[Cart]:
    """
    Validate a cart and normalize the merchandise of every line.

    Returns None when there is no cart.
    """
    cart = validate_cart(raw)
    if cart is None:
        return None

    lines = [
        line.model_copy(update={"merchandise": _derive_merchandise(line.merchandise)})
        for line in cart.lines
    ]
    return _revalidate(Cart, cart.model_copy(update={"lines": lines}))
