"""Helpers for building domain objects from puzzle text."""
