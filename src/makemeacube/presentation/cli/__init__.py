"""MakeMeACube command-line interface."""
