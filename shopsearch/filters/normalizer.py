# shopsearch/filters/normalizer.py

"""Map raw Zenserp JSON onto ProductSummary / ProductDetail.

Every function here is total: whatever shape the upstream document has,
the result is a fully-defaulted value object. Each field is resolved by a
left-to-right preference chain; a candidate is skipped when it is missing,
``None``, of the wrong type, an empty string or zero.
"""

import math
import re
from typing import Any

from shopsearch.config.settings import Settings
from shopsearch.models.product import (
    ProductDetail,
    ProductSummary,
    Specification,
)

_NON_NUMERIC_RE = re.compile(r"[^0-9.]")
_LEADING_NUMBER_RE = re.compile(r"\d+(?:\.\d*)?|\.\d+")


def extract_price(value: Any) -> float:
    """Extract a non-negative price from a string like ``'$1,234.56'``.

    Everything but digits and dots is dropped, then the leading number
    (at most one decimal point) is read. Returns 0.0 when nothing parses.
    """
    if isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        return _finite(float(value))
    if not isinstance(value, str) or not value:
        return 0.0
    cleaned = _NON_NUMERIC_RE.sub("", value)
    match = _LEADING_NUMBER_RE.match(cleaned)
    if not match:
        return 0.0
    return _finite(float(match.group()))


def _finite(number: float) -> float:
    if math.isfinite(number) and number >= 0:
        return number
    return 0.0


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _text(*candidates: Any) -> str | None:
    """Return the first usable string candidate (numbers are stringified)."""
    for candidate in candidates:
        if isinstance(candidate, bool):
            continue
        if isinstance(candidate, str) and candidate:
            return candidate
        if isinstance(candidate, (int, float)) and candidate:
            return str(candidate)
    return None


def _number(*candidates: Any) -> float | None:
    """Return the first candidate that yields a positive price."""
    for candidate in candidates:
        number = extract_price(candidate)
        if number:
            return number
    return None


def _amount(seller: dict[str, Any], key: str) -> Any:
    """Read ``seller[key]["value"]``, the shape Zenserp uses for money."""
    return _mapping(seller.get(key)).get("value")


def _first_seller(raw: dict[str, Any]) -> dict[str, Any]:
    sellers = raw.get("sellers")
    if isinstance(sellers, list) and sellers:
        return _mapping(sellers[0])
    return {}


def _extensions(value: Any) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(
        text for text in (_text(item) for item in value) if text
    )


def _specifications(value: Any) -> tuple[Specification, ...]:
    if not isinstance(value, list):
        return ()
    specs: list[Specification] = []
    for item in value:
        row = _mapping(item)
        key = _text(row.get("key"))
        if key is None:
            continue
        specs.append(
            Specification(key=key, value=_text(row.get("value")) or "")
        )
    return tuple(specs)


def to_summary(raw_item: Any, index: int = 0) -> ProductSummary:
    """Normalise one ``shopping_results`` entry.

    *index* is the item's 0-based position in the result list and only
    matters when the entry carries neither ``product_id`` nor ``position``.
    """
    raw = _mapping(raw_item)
    product_id = _text(raw.get("product_id"))
    return ProductSummary(
        id=product_id or _text(raw.get("position")) or str(index + 1),
        name=_text(raw.get("title")) or Settings.UNKNOWN_LABEL,
        price=extract_price(raw.get("price")),
        seller=_text(raw.get("source")) or Settings.UNKNOWN_LABEL,
        image=(
            _text(raw.get("thumbnail"), raw.get("image"))
            or Settings.PLACEHOLDER_IMAGE_URL
        ),
        product_id=product_id,
    )


def to_detail(raw_item: Any, fallback_id: str) -> ProductDetail:
    """Normalise a single-product lookup, preferring the first seller."""
    raw = _mapping(raw_item)
    seller = _first_seller(raw)
    item_price = _amount(seller, "item_price")
    return ProductDetail(
        id=_text(raw.get("product_id")) or fallback_id,
        name=_text(raw.get("title")) or Settings.UNKNOWN_LABEL,
        price=_number(item_price, raw.get("price")) or 0.0,
        seller=(
            _text(seller.get("merchant"), raw.get("source"))
            or Settings.UNKNOWN_LABEL
        ),
        image=_text(raw.get("image")) or Settings.PLACEHOLDER_IMAGE_URL,
        shipping=_number(_amount(seller, "shipping_price")) or 0.0,
        total_price=(
            _number(_amount(seller, "total_price"), item_price) or 0.0
        ),
        details=_text(seller.get("details")) or "",
        url=_text(seller.get("url"), raw.get("url")) or "",
        description=_text(raw.get("description")) or "",
        extensions=_extensions(raw.get("extensions")),
        specifications=_specifications(raw.get("specifications")),
    )
