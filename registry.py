"""Static registry of the tools advertised by the Kite MCP server."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from schemas import PARAMS_BY_TOOL, ToolParams


@dataclass(frozen=True)
class ToolDescriptor:
    name: str
    description: str
    params_model: type[ToolParams]

    def input_schema(self) -> Dict[str, Any]:
        """JSON schema of the tool arguments."""
        return self.params_model.model_json_schema()

    def parameters(self) -> Dict[str, Dict[str, Any]]:
        """
        Flattened view of the schema: parameter name to type, allowed
        values (when enumerated) and whether it is required.
        """
        schema = self.input_schema()
        required = set(schema.get("required", []))
        params: Dict[str, Dict[str, Any]] = {}
        for name, prop in schema.get("properties", {}).items():
            # Optional fields render as anyOf [<type>, null].
            variants = [v for v in prop.get("anyOf", [prop]) if v.get("type") != "null"]
            base = variants[0] if variants else prop
            entry: Dict[str, Any] = {"type": base.get("type"), "required": name in required}
            if "enum" in base:
                entry["enum"] = list(base["enum"])
            elif "const" in base:
                entry["enum"] = [base["const"]]
            if base.get("type") == "array":
                entry["items"] = base.get("items", {}).get("type")
            params[name] = entry
        return params


_DESCRIPTIONS = [
    ("place_order", "Place a new order in the market"),
    ("modify_order", "Modify an existing pending order"),
    ("cancel_order", "Cancel a pending order"),
    ("get_positions", "Get all open positions"),
    ("get_holdings", "Get long-term holdings"),
    ("get_margins", "Get account margins and funds"),
    ("get_quote", "Get real-time market quotes"),
    ("get_historical_data", "Get historical candlestick data"),
    ("get_instruments", "Get list of tradeable instruments (first 100 entries)"),
    ("get_orders", "Get all orders for the day"),
    ("get_trades", "Get all executed trades"),
    ("get_order_history", "Get order history"),
    ("get_profile", "Get user profile"),
    ("get_ltp", "Get last traded price"),
    ("get_market_status", "Check market status"),
]

TOOLS: tuple[ToolDescriptor, ...] = tuple(
    ToolDescriptor(name=name, description=description, params_model=PARAMS_BY_TOOL[name])
    for name, description in _DESCRIPTIONS
)

_TOOLS_BY_NAME = {tool.name: tool for tool in TOOLS}


def list_tools() -> List[ToolDescriptor]:
    return list(TOOLS)


def get_tool(name: str) -> Optional[ToolDescriptor]:
    return _TOOLS_BY_NAME.get(name)
