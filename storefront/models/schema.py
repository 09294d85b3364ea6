"""
Catalog and cart data models.

Pydantic models for every entity exchanged with the Storefront API.
Fields use snake_case attributes with the API's camelCase names as aliases.

Scalars are strict: a string is never coerced into a number or a boolean.
Optional fields may be omitted but must not be null unless listed in the
model's NULLABLE set.
"""

from decimal import Decimal, InvalidOperation
from typing import Any, ClassVar, Dict, FrozenSet, List, Optional, Sequence, Type, TypeVar

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    StrictBool,
    StrictInt,
    StrictStr,
    ValidationError,
    ValidationInfo,
    field_validator,
    model_validator,
)
from pydantic.alias_generators import to_camel

from ..exceptions import SchemaValidationError

# URL-safe product handle
HANDLE_PATTERN = r"^[a-z0-9-]+$"

ModelT = TypeVar("ModelT", bound="StorefrontModel")


def connection_nodes(value: Any) -> Any:
    """
    Unwrap a GraphQL connection into a plain list.

    Accepts {"nodes": [...]}, {"edges": [{"node": ...}]} or an already
    flat list. Anything else is returned unchanged for the validator to
    reject.
    """
    if isinstance(value, dict):
        if "nodes" in value:
            return value["nodes"]
        if "edges" in value:
            edges = value["edges"]
            if isinstance(edges, list):
                return [edge.get("node") if isinstance(edge, dict) else edge for edge in edges]
            return edges
    return value


class StorefrontModel(BaseModel):
    """Base for all catalog/cart snapshots (immutable)."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    NULLABLE: ClassVar[FrozenSet[str]] = frozenset()

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None and info.field_name not in cls.NULLABLE:
            raise ValueError("must not be null")
        return value


class MoneyAmount(StorefrontModel):
    """Amount in a given currency. No conversion is ever performed."""
    amount: StrictStr
    currency_code: StrictStr

    @field_validator("amount")
    @classmethod
    def check_amount(cls, value: str) -> str:
        try:
            number = Decimal(value)
        except InvalidOperation:
            raise ValueError("must be a decimal string") from None
        if not number.is_finite() or number < 0:
            raise ValueError("must be a non-negative decimal string")
        return value

    @property
    def value(self) -> Decimal:
        return Decimal(self.amount)


class Image(StorefrontModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"alt_text"})

    alt_text: Optional[StrictStr] = None
    url: StrictStr
    width: StrictInt = Field(gt=0)
    height: StrictInt = Field(gt=0)


class OptionDefinition(StorefrontModel):
    """Product-level axis of variation, e.g. Color: [Red, Blue]."""
    name: StrictStr
    values: List[StrictStr]


class SelectedOption(StorefrontModel):
    name: StrictStr
    value: StrictStr


class Collection(StorefrontModel):
    id: Optional[StrictStr] = None
    title: StrictStr
    handle: Optional[StrictStr] = None


class Variant(StorefrontModel):
    """
    Purchasable SKU of a product.

    color and size are derived from selected_options by the normalizer and
    are never authoritative.
    """
    id: StrictStr
    title: Optional[StrictStr] = None
    available_for_sale: Optional[StrictBool] = None
    quantity_available: Optional[StrictInt] = None
    selected_options: List[SelectedOption] = Field(default_factory=list)
    price: Optional[MoneyAmount] = None
    color: Optional[StrictStr] = None
    size: Optional[StrictStr] = None


def _duplicate_ids(items: Sequence[Any]) -> List[str]:
    seen = set()
    duplicates = []
    for item in items:
        if item.id in seen and item.id not in duplicates:
            duplicates.append(item.id)
        seen.add(item.id)
    return duplicates


def _axis_violations(variants: Sequence[Variant], colors: List[str], sizes: List[str]) -> List[str]:
    problems = []
    for index, variant in enumerate(variants):
        if colors and variant.color and variant.color not in colors:
            problems.append(f"variants.{index}.color {variant.color!r} is not one of {colors}")
        if sizes and variant.size and variant.size not in sizes:
            problems.append(f"variants.{index}.size {variant.size!r} is not one of {sizes}")
    return problems


class Product(StorefrontModel):
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"featured_image"})

    id: StrictStr
    title: StrictStr
    handle: StrictStr = Field(pattern=HANDLE_PATTERN)
    description: Optional[StrictStr] = None
    description_html: Optional[StrictStr] = None
    options: List[OptionDefinition] = Field(default_factory=list)
    images: List[Optional[Image]] = Field(default_factory=list)
    variants: List[Variant] = Field(default_factory=list)
    featured_image: Optional[Image] = None
    collections: List[Collection] = Field(default_factory=list)
    colors: List[StrictStr] = Field(default_factory=list)
    sizes: List[StrictStr] = Field(default_factory=list)

    @field_validator("images", "variants", "collections", mode="before")
    @classmethod
    def unwrap_connection(cls, value: Any) -> Any:
        return connection_nodes(value)

    @model_validator(mode="after")
    def check_variant_axes(self) -> "Product":
        problems = _axis_violations(self.variants, self.colors, self.sizes)
        problems.extend(f"duplicate variant id {i!r}" for i in _duplicate_ids(self.variants))
        if problems:
            raise ValueError("; ".join(problems))
        return self


class MerchandiseProduct(StorefrontModel):
    """Parent product summary embedded in cart merchandise."""
    id: Optional[StrictStr] = None
    title: StrictStr
    handle: StrictStr = Field(pattern=HANDLE_PATTERN)
    options: List[OptionDefinition] = Field(default_factory=list)


class Merchandise(Variant):
    """Variant snapshot embedded in a cart line, with its parent's axes."""
    NULLABLE: ClassVar[FrozenSet[str]] = frozenset({"image"})

    title: StrictStr
    image: Optional[Image] = None
    product: MerchandiseProduct
    colors: List[StrictStr] = Field(default_factory=list)
    sizes: List[StrictStr] = Field(default_factory=list)

    @model_validator(mode="after")
    def check_axes(self) -> "Merchandise":
        problems = []
        if self.colors and self.color and self.color not in self.colors:
            problems.append(f"color {self.color!r} is not one of {self.colors}")
        if self.sizes and self.size and self.size not in self.sizes:
            problems.append(f"size {self.size!r} is not one of {self.sizes}")
        if problems:
            raise ValueError("; ".join(problems))
        return self


class CartLineCost(StorefrontModel):
    amount_per_quantity: MoneyAmount
    subtotal_amount: MoneyAmount
    total_amount: MoneyAmount


class CartLine(StorefrontModel):
    id: StrictStr
    quantity: StrictInt = Field(gt=0)
    merchandise: Merchandise
    cost: CartLineCost


class CartCost(StorefrontModel):
    subtotal_amount: MoneyAmount


class Cart(StorefrontModel):
    id: StrictStr
    checkout_url: StrictStr
    total_quantity: StrictInt = Field(ge=0)
    cost: CartCost
    lines: List[CartLine]

    @field_validator("lines", mode="before")
    @classmethod
    def unwrap_connection(cls, value: Any) -> Any:
        return connection_nodes(value)

    @model_validator(mode="after")
    def check_unique_lines(self) -> "Cart":
        duplicates = _duplicate_ids(self.lines)
        if duplicates:
            raise ValueError("duplicate line id " + ", ".join(repr(i) for i in duplicates))
        return self


def validation_issues(error: ValidationError) -> List[Dict[str, str]]:
    """Flatten a pydantic ValidationError into field/message/type dicts."""
    issues = []
    for err in error.errors():
        field = ".".join(str(part) for part in err["loc"]) or "<root>"
        issues.append({"field": field, "message": err["msg"], "type": err["type"]})
    return issues


def to_record(model: StorefrontModel) -> Dict[str, Any]:
    """Dump a snapshot back to its API (camelCase) shape."""
    return model.model_dump(by_alias=True, exclude_none=True)


def validate_model(model_cls: Type[ModelT], raw: Any) -> ModelT:
    """
    Validate a payload against a model.

    Raises:
        SchemaValidationError: payload does not satisfy the model
    """
    try:
        return model_cls.model_validate(raw)
    except ValidationError as e:
        raise SchemaValidationError(model_cls.__name__, validation_issues(e)) from e


def validate_product(raw: Any) -> Product:
    return validate_model(Product, raw)


def validate_merchandise(raw: Any) -> Merchandise:
    return validate_model(Merchandise, raw)


def validate_cart(raw: Any) -> Optional[Cart]:
    """Validate a cart payload. A null cart (none created yet) is returned as None."""
    if raw is None:
        return None
    return validate_model(Cart, raw)
