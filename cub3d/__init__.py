"""Helpers for the tools of a raycasting game, kept in the libft sub-package."""

__version__ = "0.1.0"