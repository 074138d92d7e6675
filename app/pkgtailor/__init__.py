"""pkgtailor - tailor the oneagent npm module for specific runtime environments."""

__version__ = "0.1.0"
