"""Invoice Tracker: in-memory invoice CRUD API with a Dash form/table UI."""

__all__ = ["__version__"]

__version__ = "0.1.0"
