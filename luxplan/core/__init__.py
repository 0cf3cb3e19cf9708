from luxplan.core.units import ParsedLength, display_symbol, from_meters, parse_length, to_meters

__all__ = ["ParsedLength", "display_symbol", "from_meters", "parse_length", "to_meters"]
