"""Shared helpers: errors, logging, ids and common types."""
