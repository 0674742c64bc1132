"""Helpers shared by the image operations."""
