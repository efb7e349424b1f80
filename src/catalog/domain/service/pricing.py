"""Domain service: read-time pricing.

When the discount feature is on, every product is shown at a fixed
fraction of its list price. The stored price is never touched; the
transform runs on the way out.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.domain.model.value_objects import Money

DISCOUNT_FEATURE = "DISCOUNT"
DISCOUNT_RATIO = Decimal("0.8")


def displayed_price(
    price: Money,
    discount_active: bool,
    ratio: Decimal = DISCOUNT_RATIO,
) -> Money:
    """Return the price a customer sees for ``price``."""
    if not discount_active:
        return price
    return price * ratio
