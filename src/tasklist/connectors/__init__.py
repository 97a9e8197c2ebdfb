"""Rendering surfaces (console)."""
