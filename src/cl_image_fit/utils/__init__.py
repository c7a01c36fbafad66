"""Utility helpers shared by the plugins."""
