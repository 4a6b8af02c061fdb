"""Trassen Explorer - terminal explorer for Trassenfinder railway infrastructures."""

__version__ = "0.1.0"
