"""MakeMeACube - user accounts, maker profiles and maker tool inventory."""

__version__ = "0.1.0"
