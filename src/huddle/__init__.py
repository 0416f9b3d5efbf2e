"""Huddle: a small authenticated chat room."""

__version__ = "0.1.0"
