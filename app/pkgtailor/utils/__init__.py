"""Utility functions for pkgtailor."""
