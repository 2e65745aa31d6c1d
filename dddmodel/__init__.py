"""Domain-driven design model of code: nodes and links, architecture objects, relations and groups."""

__version__ = "0.1.0"