"""Parameter models for each Kite MCP tool.

Incoming argument mappings are validated against these models before any
Kite Connect call is made.
"""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

TransactionType = Literal["BUY", "SELL"]
OrderType = Literal["MARKET", "LIMIT", "SL", "SL-M"]
Product = Literal["CNC", "MIS", "NRML"]


class ToolParams(BaseModel):
    model_config = ConfigDict(extra="ignore", coerce_numbers_to_str=True, frozen=True)


class NoParams(ToolParams):
    pass


class PlaceOrderParams(ToolParams):
    exchange: str = Field(description="Trading exchange (NSE, BSE, NFO, CDS, MCX)")
    tradingsymbol: str = Field(description="Trading symbol")
    transaction_type: TransactionType = Field(description="BUY or SELL")
    quantity: int = Field(gt=0, description="Number of shares/lots")
    order_type: OrderType = Field(description="MARKET, LIMIT, SL or SL-M")
    product: Product = Field(description="CNC (delivery), MIS (intraday) or NRML (normal)")
    price: float = Field(default=0, description="Price for LIMIT orders")
    trigger_price: float = Field(default=0, description="Trigger price for SL orders")


class ModifyOrderParams(ToolParams):
    order_id: str = Field(description="ID of the pending order")
    quantity: Optional[int] = Field(default=None, description="New quantity")
    price: Optional[float] = Field(default=None, description="New price")
    order_type: Optional[str] = Field(default=None, description="New order type")
    trigger_price: Optional[float] = Field(default=None, description="New trigger price")


class OrderIdParams(ToolParams):
    order_id: str = Field(description="Order ID")


class QuoteParams(ToolParams):
    exchange: str = Field(description="Exchange of the instrument (e.g. NSE)")
    tradingsymbol: str = Field(description="Trading symbol (e.g. INFY)")


class HistoricalDataParams(ToolParams):
    instrument_token: str = Field(description="Instrument token")
    from_date: datetime = Field(description="Start date/time (YYYY-MM-DD or YYYY-MM-DD HH:MM:SS)")
    to_date: datetime = Field(description="End date/time (YYYY-MM-DD or YYYY-MM-DD HH:MM:SS)")
    interval: str = Field(description="Candle interval (minute, 3minute, 5minute, 15minute, 30minute, 60minute, day)")


class InstrumentsParams(ToolParams):
    exchange: Optional[str] = Field(default=None, description="Restrict to one exchange")


class LTPParams(ToolParams):
    instruments: list[str] = Field(description="Instruments as EXCHANGE:SYMBOL (e.g. NSE:INFY)")


PARAMS_BY_TOOL: dict[str, type[ToolParams]] = {
    "place_order": PlaceOrderParams,
    "modify_order": ModifyOrderParams,
    "cancel_order": OrderIdParams,
    "get_positions": NoParams,
    "get_holdings": NoParams,
    "get_margins": NoParams,
    "get_quote": QuoteParams,
    "get_historical_data": HistoricalDataParams,
    "get_instruments": InstrumentsParams,
    "get_orders": NoParams,
    "get_trades": NoParams,
    "get_order_history": OrderIdParams,
    "get_profile": NoParams,
    "get_ltp": LTPParams,
    "get_market_status": NoParams,
}
