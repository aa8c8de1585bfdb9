"""Encoders building and serializing tree values."""

from .encoders import Encoder, data, encode_string, tag, value

__all__ = [
    "Encoder",
    "data",
    "encode_string",
    "tag",
    "value",
]
