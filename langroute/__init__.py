"""Language-routed site with a translation bundle server."""

__version__ = "1.0.0"
