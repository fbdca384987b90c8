"""Design bible toolkit: parse a set design document into card records."""

__version__ = "0.1.0"
