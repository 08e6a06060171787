"""Shared configuration, protocols, and time helpers."""
