"""Weather activity planner: city forecasts scored for outdoor and indoor activities."""

__version__ = "1.0.0"
