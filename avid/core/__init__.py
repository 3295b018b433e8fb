"""Core constants and helpers."""
