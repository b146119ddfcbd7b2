"""Validation helpers for scanner output."""
