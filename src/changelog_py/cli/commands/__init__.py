"""Implementations of the changelog-py commands."""
