"""Outer adapters: pytest plugin."""
