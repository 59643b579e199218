"""Utility helpers for whspr."""
