"""Toolshare: JSON-backed user and tool lending API."""
