"""Routes tool invocations to Kite Connect and wraps every outcome as text."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Callable, Dict, Optional

import orders
from errors import InitializationError, UnknownToolError
from market_calendar import get_market_status, now
from schemas import (
    PARAMS_BY_TOOL,
    HistoricalDataParams,
    InstrumentsParams,
    LTPParams,
    ModifyOrderParams,
    OrderIdParams,
    PlaceOrderParams,
    QuoteParams,
    ToolParams,
)

logger = logging.getLogger(__name__)

# Payload cap for get_instruments; the full dump is tens of thousands of rows.
INSTRUMENTS_LIMIT = 100


@dataclass(frozen=True)
class ToolResult:
    """A single text payload, used for both success and failure."""

    text: str
    is_error: bool = False

    @classmethod
    def ok(cls, text: str) -> "ToolResult":
        return cls(text=text)

    @classmethod
    def failure(cls, message: str) -> "ToolResult":
        return cls(text=f"Error: {message or 'Unknown error occurred'}", is_error=True)

    @property
    def content(self) -> list[dict[str, str]]:
        return [{"type": "text", "text": self.text}]


def _json_default(value: Any) -> Any:
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)


def to_json(payload: Any) -> str:
    return json.dumps(payload, indent=2, default=_json_default, ensure_ascii=False)


def validate_arguments(name: str, arguments: Optional[Mapping[str, Any]]) -> ToolParams:
    return PARAMS_BY_TOOL[name].model_validate(dict(arguments or {}))


class Dispatcher:
    """Dispatches tool calls against a Kite Connect client.

    Handlers raise freely; ``invoke`` is the only place failures are caught.
    """

    def __init__(self, kite, clock: Callable[[], datetime] = now):
        self._kite = kite
        self._clock = clock
        self._handlers: Dict[str, Callable[[Any], ToolResult]] = {
            "place_order": self._place_order,
            "modify_order": self._modify_order,
            "cancel_order": self._cancel_order,
            "get_positions": lambda _: self._json(self._kite.positions()),
            "get_holdings": lambda _: self._json(self._kite.holdings()),
            "get_margins": lambda _: self._json(self._kite.margins()),
            "get_quote": self._get_quote,
            "get_historical_data": self._get_historical_data,
            "get_instruments": self._get_instruments,
            "get_orders": lambda _: self._json(self._kite.orders()),
            "get_trades": lambda _: self._json(self._kite.trades()),
            "get_order_history": self._get_order_history,
            "get_profile": lambda _: self._json(self._kite.profile()),
            "get_ltp": self._get_ltp,
            "get_market_status": self._get_market_status,
        }

    @property
    def initialized(self) -> bool:
        return self._kite is not None

    def invoke(self, name: str, arguments: Optional[Mapping[str, Any]] = None) -> ToolResult:
        try:
            if self._kite is None:
                raise InitializationError("Kite Connect not initialized. Check API credentials.")
            handler = self._handlers.get(name)
            if handler is None:
                raise UnknownToolError(f"Unknown tool: {name}")
            params = validate_arguments(name, arguments)
            return handler(params)
        except Exception as exc:
            logger.error("Error executing tool %s: %s", name, exc)
            return ToolResult.failure(str(exc))

    @staticmethod
    def _json(payload: Any) -> ToolResult:
        return ToolResult.ok(to_json(payload))

    def _place_order(self, params: PlaceOrderParams) -> ToolResult:
        order_id = orders.place_order(self._kite, params)
        return ToolResult.ok(f"Order placed successfully. Order ID: {order_id}")

    def _modify_order(self, params: ModifyOrderParams) -> ToolResult:
        order_id = orders.modify_order(self._kite, params)
        return ToolResult.ok(f"Order modified successfully. Order ID: {order_id}")

    def _cancel_order(self, params: OrderIdParams) -> ToolResult:
        order_id = orders.cancel_order(self._kite, params.order_id)
        return ToolResult.ok(f"Order cancelled successfully. Order ID: {order_id}")

    def _get_quote(self, params: QuoteParams) -> ToolResult:
        return self._json(self._kite.quote(f"{params.exchange}:{params.tradingsymbol}"))

    def _get_historical_data(self, params: HistoricalDataParams) -> ToolResult:
        candles = self._kite.historical_data(
            params.instrument_token,
            params.from_date,
            params.to_date,
            params.interval,
        )
        return self._json(candles)

    def _get_instruments(self, params: InstrumentsParams) -> ToolResult:
        instruments = self._kite.instruments(params.exchange)
        return self._json(list(instruments)[:INSTRUMENTS_LIMIT])

    def _get_order_history(self, params: OrderIdParams) -> ToolResult:
        return self._json(self._kite.order_history(params.order_id))

    def _get_ltp(self, params: LTPParams) -> ToolResult:
        return self._json(self._kite.ltp(*params.instruments))

    def _get_market_status(self, _params: ToolParams) -> ToolResult:
        return self._json(get_market_status(self._clock()))
