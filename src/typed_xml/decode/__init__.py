"""Decoder combinators, error model and decoding entry points.

Key Components:
    Decoder: Composable function from a tree value to a Result
    DecodeError: Leaf cause wrapped by context and group frames
    decode_value / decode_string: Apply a decoder to a tree or to markup
"""

from .api import decode_string, decode_value, of_string
from .decoders import (
    SKIP,
    ChildErrorPolicy,
    Decoder,
    DecodeResult,
    and_then,
    any_tag,
    attr,
    attr_opt,
    attrs,
    bind,
    by_tag,
    child,
    children,
    data,
    fail_with,
    fix,
    fmap,
    from_result,
    map2,
    map_error,
    maybe,
    one_of,
    pick_children,
    sequence,
    succeed,
    tag,
)
from .errors import (
    DecodeError,
    ErrorKind,
    ErrorLeaf,
    GroupedError,
    TaggedError,
    render,
)

__all__ = [
    "SKIP",
    "ChildErrorPolicy",
    "DecodeError",
    "DecodeResult",
    "Decoder",
    "ErrorKind",
    "ErrorLeaf",
    "GroupedError",
    "TaggedError",
    "and_then",
    "any_tag",
    "attr",
    "attr_opt",
    "attrs",
    "bind",
    "by_tag",
    "child",
    "children",
    "data",
    "decode_string",
    "decode_value",
    "fail_with",
    "fix",
    "fmap",
    "from_result",
    "map2",
    "map_error",
    "maybe",
    "of_string",
    "one_of",
    "pick_children",
    "render",
    "sequence",
    "succeed",
    "tag",
]
