"""Procedural hexagonal island map generation."""
