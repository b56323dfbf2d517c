"""Sliding-tile N-puzzle engine with a Rich terminal frontend."""
