"""Adapters driving the application use cases."""
