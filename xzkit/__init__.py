"""Pieces of the xz container format, rolling hashes, flag parsing, logging and build helpers."""

__version__ = "0.5.13"