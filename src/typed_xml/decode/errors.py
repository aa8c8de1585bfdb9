"""Contextual decode errors.

A decode error is a small rose tree: a leaf holding the message and the node
that failed, wrapped by context frames added as the failure propagates
outward. ``TaggedError`` is a single frame (``While decoding child 2``);
``GroupedError`` summarizes a traversal over a children list
(``In tag catalog``) and holds the failures found during that traversal.

Rendering prints the cause first and every enclosing frame below it, each one
indented a step further than the lines it encloses::

    Expected an attribute named "id", but got <item/>
      While decoding child 1
        In tag catalog
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional, Sequence, Tuple, Union

from typed_xml.backend import XmlSerializer
from typed_xml.shared import ErrorRenderConfig
from typed_xml.tree import XmlValue


class ErrorKind(Enum):
    """Classification of a failure or context frame."""

    STRUCTURAL_MISMATCH = auto()   # Wrong node kind, e.g. data on an Element
    TAG_MISMATCH = auto()          # Element with a different tag name
    MISSING_ATTRIBUTE = auto()
    MISSING_CHILD = auto()
    CHILD_DECODE_FAILURE = auto()  # Frame recording which child failed
    PARSE_FAILURE = auto()         # No tree could be produced from text
    CUSTOM = auto()                # Raised by user decoders via fail_with
    CONTEXT = auto()               # Plain context frame added by callers
    GROUP = auto()


@dataclass(frozen=True)
class ErrorLeaf:
    message: str
    value: Optional[XmlValue] = None
    kind: ErrorKind = ErrorKind.CUSTOM

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class TaggedError:
    label: str
    error: "DecodeError"
    kind: ErrorKind = ErrorKind.CONTEXT

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True)
class GroupedError:
    label: str
    errors: Tuple["DecodeError", ...]
    kind: ErrorKind = ErrorKind.GROUP

    def __str__(self) -> str:
        return render(self)


DecodeError = Union[ErrorLeaf, TaggedError, GroupedError]


def make(message: str, kind: ErrorKind = ErrorKind.CUSTOM) -> ErrorLeaf:
    """Create a leaf error with no offending value attached."""
    return ErrorLeaf(message, None, kind)


def fail(message: str, value: XmlValue, kind: ErrorKind = ErrorKind.CUSTOM) -> ErrorLeaf:
    """Create a leaf error bound to the node where decoding failed."""
    return ErrorLeaf(message, value, kind)


def tag(label: str, error: DecodeError, kind: ErrorKind = ErrorKind.CONTEXT) -> TaggedError:
    """Wrap ``error`` in one more context frame."""
    return TaggedError(label, error, kind)


def tag_group(label: str, errors: Union[DecodeError, Sequence[DecodeError]]) -> GroupedError:
    """Wrap the failures of one children traversal in a single group frame."""
    if isinstance(errors, (ErrorLeaf, TaggedError, GroupedError)):
        errors = (errors,)
    return GroupedError(label, tuple(errors))


def root_causes(error: DecodeError) -> List[ErrorLeaf]:
    """Return every leaf under ``error`` in traversal order."""
    if isinstance(error, ErrorLeaf):
        return [error]
    if isinstance(error, TaggedError):
        return root_causes(error.error)
    leaves: List[ErrorLeaf] = []
    for inner in error.errors:
        leaves.extend(root_causes(inner))
    return leaves


def labels(error: DecodeError) -> List[str]:
    """Return context labels from the outermost frame inward, first path only."""
    found: List[str] = []
    while not isinstance(error, ErrorLeaf):
        found.append(error.label)
        if isinstance(error, TaggedError):
            error = error.error
        elif error.errors:
            error = error.errors[0]
        else:
            break
    return found


def _describe_value(
    value: XmlValue, config: ErrorRenderConfig, serializer: Optional[XmlSerializer]
) -> str:
    if serializer is None:
        serializer = XmlSerializer()
    text = serializer.serialize(value)
    limit = config.max_value_length
    if limit is not None and len(text) > limit:
        text = text[:limit] + "..."
    return text


def _render_lines(
    error: DecodeError, config: ErrorRenderConfig, serializer: Optional[XmlSerializer]
) -> Tuple[List[str], int]:
    """Return the rendered lines and the nesting depth of the deepest frame."""
    if isinstance(error, ErrorLeaf):
        if error.value is None:
            return [error.message], 0
        described = _describe_value(error.value, config, serializer)
        return [f"{error.message}, but got {described}"], 0

    if isinstance(error, TaggedError):
        lines, depth = _render_lines(error.error, config, serializer)
    else:
        lines, depth = [], 0
        shown = error.errors[:config.max_errors_shown]
        for inner in shown:
            inner_lines, inner_depth = _render_lines(inner, config, serializer)
            lines.extend(inner_lines)
            depth = max(depth, inner_depth)
        hidden = len(error.errors) - len(shown)
        if hidden > 0:
            lines.append(" " * (depth * config.indent) + f"(...{hidden} errors not shown...)")

    depth += 1
    lines.append(" " * (depth * config.indent) + error.label)
    return lines, depth


def render(
    error: DecodeError,
    config: Optional[ErrorRenderConfig] = None,
    serializer: Optional[XmlSerializer] = None,
) -> str:
    """Render ``error`` as a multi-line trace, innermost cause first.

    Args:
        error: The error to render
        config: Indentation and truncation settings
        serializer: Serializer used to print offending nodes; a default
            ``XmlSerializer`` is created when omitted

    Returns:
        The trace as a single string
    """
    lines, _ = _render_lines(error, config or ErrorRenderConfig(), serializer)
    return "\n".join(lines)
