"""Shared helpers for the explorer tests."""
