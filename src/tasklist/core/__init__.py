"""Ports, errors and application state shared by all layers."""
