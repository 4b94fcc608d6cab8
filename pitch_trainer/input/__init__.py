"""Input layer - Recording loading and framing."""

from .loader import AudioLoader

__all__ = ["AudioLoader"]
