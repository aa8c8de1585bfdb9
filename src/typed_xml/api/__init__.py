"""Configured codec entry point."""

from .codec import Codec

__all__ = ["Codec"]
