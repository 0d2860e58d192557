"""Helpers for the site details payload and uploaded-file GeoJSON."""
