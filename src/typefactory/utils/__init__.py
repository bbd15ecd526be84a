"""Shared helpers: errors, logging and JSON rendering."""
