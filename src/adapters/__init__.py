"""Adapters package (CLI and UI entry points)."""
