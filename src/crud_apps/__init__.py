"""Five small console applications built on one shared keyed repository."""

__version__ = "0.1.0"
