"""Runnable applications built on the core package."""
