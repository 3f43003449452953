"""Windmill process over a finite set of points in the plane."""

__version__ = "0.1.0"
