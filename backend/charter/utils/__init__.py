"""Shared utilities for the charter backend."""
