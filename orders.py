"""Order helpers for Kite Connect regular orders."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from schemas import ModifyOrderParams, PlaceOrderParams

VARIETY = "regular"


class OrderResponseError(ValueError):
    pass


def build_payload(request: PlaceOrderParams) -> dict[str, Any]:
    return {
        "exchange": request.exchange,
        "tradingsymbol": request.tradingsymbol,
        "transaction_type": request.transaction_type,
        "quantity": request.quantity,
        "order_type": request.order_type,
        "product": request.product,
        "price": request.price,
        "trigger_price": request.trigger_price,
    }


def extract_order_id(response: Any) -> str:
    """Kite returns either the bare order id or ``{"order_id": ...}``."""
    order_id = response.get("order_id") if isinstance(response, Mapping) else response
    if order_id is None or order_id == "":
        raise OrderResponseError(f"Order response carried no order_id: {response!r}")
    return str(order_id)


def place_order(kite, request: PlaceOrderParams) -> str:
    response = kite.place_order(variety=VARIETY, **build_payload(request))
    return extract_order_id(response)


def modify_order(kite, request: ModifyOrderParams) -> str:
    # The client drops keyword arguments left as None.
    response = kite.modify_order(
        variety=VARIETY,
        order_id=request.order_id,
        quantity=request.quantity,
        price=request.price,
        order_type=request.order_type,
        trigger_price=request.trigger_price,
    )
    return extract_order_id(response)


def cancel_order(kite, order_id: str) -> str:
    response = kite.cancel_order(variety=VARIETY, order_id=order_id)
    return extract_order_id(response)
