"""Radial loading-spinner designer: geometry compiler and code exporters."""

__version__ = "0.1.0"
