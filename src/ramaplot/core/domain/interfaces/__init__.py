"""Domain interfaces."""

from .renderer import Renderer

__all__ = ["Renderer"]
