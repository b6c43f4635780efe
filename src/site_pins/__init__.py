"""Marker API for pinning websites on a world map."""
