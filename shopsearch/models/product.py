# shopsearch/models/product.py

"""Product value objects passed from the endpoints to the views."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Specification:
    """A single ``key: value`` row of a product's specification table."""

    key: str
    value: str


@dataclass(frozen=True)
class ProductSummary:
    """Lightweight search result used for list rendering."""

    id: str
    name: str
    price: float = 0.0
    seller: str = "Unknown"
    image: str = ""
    product_id: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase wire form; ``productId`` only if set."""
        data: dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "seller": self.seller,
            "image": self.image,
        }
        if self.product_id is not None:
            data["productId"] = self.product_id
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductSummary":
        """Rebuild a summary from its wire form."""
        product_id = data.get("productId")
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            price=float(data.get("price", 0.0)),
            seller=str(data.get("seller", "")),
            image=str(data.get("image", "")),
            product_id=str(product_id) if product_id else None,
        )


@dataclass(frozen=True)
class ProductDetail:
    """Enriched single-product view used by the detail overlay."""

    id: str
    name: str
    price: float = 0.0
    seller: str = "Unknown"
    image: str = ""
    shipping: float = 0.0
    total_price: float = 0.0
    details: str = ""
    url: str = ""
    description: str = ""
    extensions: tuple[str, ...] = field(default_factory=tuple)
    specifications: tuple[Specification, ...] = field(
        default_factory=tuple
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialise to the camelCase wire form."""
        return {
            "id": self.id,
            "name": self.name,
            "price": self.price,
            "seller": self.seller,
            "image": self.image,
            "shipping": self.shipping,
            "totalPrice": self.total_price,
            "details": self.details,
            "url": self.url,
            "description": self.description,
            "extensions": list(self.extensions),
            "specifications": [
                {"key": s.key, "value": s.value}
                for s in self.specifications
            ],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ProductDetail":
        """Rebuild a detail from its wire form."""
        return cls(
            id=str(data.get("id", "")),
            name=str(data.get("name", "")),
            price=float(data.get("price", 0.0)),
            seller=str(data.get("seller", "")),
            image=str(data.get("image", "")),
            shipping=float(data.get("shipping", 0.0)),
            total_price=float(data.get("totalPrice", 0.0)),
            details=str(data.get("details", "")),
            url=str(data.get("url", "")),
            description=str(data.get("description", "")),
            extensions=tuple(
                str(e) for e in data.get("extensions", [])
            ),
            specifications=tuple(
                Specification(
                    key=str(s.get("key", "")),
                    value=str(s.get("value", "")),
                )
                for s in data.get("specifications", [])
            ),
        )
