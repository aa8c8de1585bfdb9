"""Decoder combinators over immutable XML tree values.

A ``Decoder`` wraps a pure function from an ``XmlValue`` to a ``Result``.
Primitives inspect a single node; combinators compose decoders and walk the
children of an element. Failures are returned as ``Err`` values carrying a
``DecodeError`` and are never raised.

Example:
    >>> item = tag("item").bind(lambda _: attr("id"))
    >>> catalog = pick_children(by_tag({"item": item}))
    >>> catalog(Element("catalog", children=[Element("item", [("id", "1")])]))
    Ok(value=['1'])
"""

from enum import Enum, auto
from typing import Any, Callable, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar

from typed_xml.shared import Err, Ok, Result
from typed_xml.tree import Element, Text, XmlValue

from . import errors
from .errors import DecodeError, ErrorKind

T = TypeVar("T")
U = TypeVar("U")
V = TypeVar("V")

DecodeResult = Result[T, DecodeError]


class Decoder(Generic[T]):
    """A composable, stateless function from a tree value to a ``Result``."""

    def __init__(self, run: Callable[[XmlValue], DecodeResult], name: Optional[str] = None) -> None:
        self._run = run
        self.name = name or getattr(run, "__name__", "decoder")

    def __call__(self, value: XmlValue) -> DecodeResult:
        return self._run(value)

    def __repr__(self) -> str:
        return f"Decoder({self.name})"

    def map(self, f: Callable[[T], U]) -> "Decoder[U]":
        return fmap(f, self)

    def bind(self, f: Callable[[T], "Decoder[U]"]) -> "Decoder[U]":
        return bind(f, self)

    and_then = bind

    def map_error(self, f: Callable[[DecodeError], DecodeError]) -> "Decoder[T]":
        return map_error(f, self)

    def tagged(self, label: str) -> "Decoder[T]":
        """Add a context frame to every failure of this decoder."""
        return map_error(lambda error: errors.tag(label, error), self)

    def __or__(self, other: "Decoder[T]") -> "Decoder[T]":
        return one_of(self, other)


class ChildErrorPolicy(Enum):
    """How a children traversal reports failing children."""

    FIRST = auto()   # Stop at the first failing child, left to right
    ALL = auto()     # Decode every child and report each failure


class _Skip:
    """Selector outcome meaning "this child is not applicable"."""

    _instance = None

    def __new__(cls) -> "_Skip":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "SKIP"


SKIP = _Skip()


# Primitives

def succeed(x: T) -> Decoder[T]:
    """Decoder that ignores its input and returns ``x``."""
    return Decoder(lambda value: Ok(x), "succeed")


def fail_with(message: str) -> Decoder[Any]:
    """Decoder that always fails with ``message``, capturing the input node."""
    return Decoder(lambda value: Err(errors.fail(message, value)), "fail_with")


def from_result(result: DecodeResult) -> Decoder[Any]:
    """Decoder that ignores its input and returns ``result``."""
    return Decoder(lambda value: result, "from_result")


def _expected_tag(value: XmlValue) -> Err:
    return Err(errors.fail("Expected a Tag", value, ErrorKind.STRUCTURAL_MISMATCH))


def tag(name: str) -> Decoder[None]:
    """Succeed with None iff the input is an Element named exactly ``name``."""
    def run(value: XmlValue) -> DecodeResult:
        if isinstance(value, Element) and value.tag == name:
            return Ok(None)
        kind = ErrorKind.TAG_MISMATCH if isinstance(value, Element) else ErrorKind.STRUCTURAL_MISMATCH
        return Err(errors.fail(f'Expected a tag with name "{name}"', value, kind))
    return Decoder(run, f"tag({name!r})")


def _any_tag(value: XmlValue) -> DecodeResult:
    if isinstance(value, Element):
        return Ok(value.tag)
    return _expected_tag(value)


any_tag: Decoder[str] = Decoder(_any_tag, "any_tag")


def _data(value: XmlValue) -> DecodeResult:
    if isinstance(value, Text):
        return Ok(value.content)
    return Err(errors.fail("Expected Data", value, ErrorKind.STRUCTURAL_MISMATCH))


data: Decoder[str] = Decoder(_data, "data")


def attr_opt(name: str) -> Decoder[Optional[str]]:
    """Return the attribute value, or None when the element lacks it."""
    def run(value: XmlValue) -> DecodeResult:
        if isinstance(value, Element):
            return Ok(value.get_attribute(name))
        return _expected_tag(value)
    return Decoder(run, f"attr_opt({name!r})")


def attr(name: str) -> Decoder[str]:
    """Return the attribute value, failing when the element lacks it."""
    lookup = attr_opt(name)

    def run(value: XmlValue) -> DecodeResult:
        result = lookup(value)
        if result.success and result.value is None:
            return Err(errors.fail(
                f'Expected an attribute named "{name}"', value, ErrorKind.MISSING_ATTRIBUTE
            ))
        return result
    return Decoder(run, f"attr({name!r})")


def _attrs(value: XmlValue) -> DecodeResult:
    if isinstance(value, Element):
        return Ok(list(value.attributes))
    return _expected_tag(value)


attrs: Decoder[List[Tuple[str, str]]] = Decoder(_attrs, "attrs")


# Composition

def fmap(f: Callable[[T], U], decoder: Decoder[T]) -> Decoder[U]:
    """Apply ``f`` to a successful result."""
    return Decoder(lambda value: decoder(value).map(f), f"map({decoder.name})")


def bind(f: Callable[[T], Decoder[U]], decoder: Decoder[T]) -> Decoder[U]:
    """Run ``decoder``, then the decoder ``f`` builds from its result.

    Both run against the same input. ``f`` is not called when ``decoder``
    fails; the failure is returned unchanged.
    """
    def run(value: XmlValue) -> DecodeResult:
        return decoder(value).bind(lambda x: f(x)(value))
    return Decoder(run, f"bind({decoder.name})")


and_then = bind


def map_error(f: Callable[[DecodeError], DecodeError], decoder: Decoder[T]) -> Decoder[T]:
    return Decoder(lambda value: decoder(value).map_error(f), decoder.name)


def map2(f: Callable[[T, U], V], first: Decoder[T], second: Decoder[U]) -> Decoder[V]:
    """Combine two decoders run against the same input."""
    return bind(lambda x: fmap(lambda y: f(x, y), second), first)


def sequence(decoders: Sequence[Decoder[Any]]) -> Decoder[List[Any]]:
    """Run each decoder against the same input, stopping at the first failure."""
    def run(value: XmlValue) -> DecodeResult:
        decoded = []
        for decoder in decoders:
            result = decoder(value)
            if not result.success:
                return result
            decoded.append(result.value)
        return Ok(decoded)
    return Decoder(run, "sequence")


def one_of(*decoders: Decoder[T]) -> Decoder[T]:
    """Return the first successful result; group every failure otherwise."""
    def run(value: XmlValue) -> DecodeResult:
        failures = []
        for decoder in decoders:
            result = decoder(value)
            if result.success:
                return result
            failures.append(result.error)
        return Err(errors.tag_group(
            "I tried the following decoders but they all failed", failures
        ))
    return Decoder(run, "one_of")


def maybe(decoder: Decoder[T]) -> Decoder[Optional[T]]:
    """Turn a failure into ``Ok(None)``."""
    return Decoder(lambda value: Ok(decoder(value).unwrap_or(None)), f"maybe({decoder.name})")


def fix(f: Callable[[Decoder[T]], Decoder[T]]) -> Decoder[T]:
    """Build a recursive decoder.

    ``f`` receives a decoder standing for the result being defined.

    Example:
        >>> depth = fix(lambda self: pick_children(
        ...     by_tag({"node": self})).map(lambda ds: 1 + max(ds, default=0)))
    """
    def run(value: XmlValue) -> DecodeResult:
        return decoder(value)
    decoder = f(Decoder(run, "fix"))
    return decoder


# Children traversal

def by_tag(mapping: Mapping[str, Decoder[T]]) -> Decoder[Any]:
    """Selector choosing a decoder by the child's tag name.

    Children with a tag missing from ``mapping``, and Text children, select
    ``SKIP``.
    """
    def run(value: XmlValue) -> DecodeResult:
        if isinstance(value, Element) and value.tag in mapping:
            return Ok(mapping[value.tag])
        return Ok(SKIP)
    return Decoder(run, "by_tag")


def pick_children(
    selector: Decoder[Any], policy: ChildErrorPolicy = ChildErrorPolicy.FIRST
) -> Decoder[List[T]]:
    """Decode the children of an element that the selector accepts.

    For each child the selector runs first. A failing selector, or one that
    returns ``SKIP``, leaves the child out. Otherwise the decoder it returns
    runs on the same child. A failure is tagged with the child's position
    (counting every child, skipped or not) and the whole traversal fails
    under one ``In tag <name>`` group frame.

    Args:
        selector: Decoder producing the decoder to use for each child
        policy: Whether to stop at the first failing child or collect all

    Returns:
        Decoder of the decoded children in document order
    """
    def run(value: XmlValue) -> DecodeResult:
        if not isinstance(value, Element):
            return _expected_tag(value)
        decoded = []
        failures = []
        for index, child in enumerate(value.children):
            chosen = selector(child)
            if not chosen.success or chosen.value is SKIP:
                continue
            result = chosen.value(child)
            if result.success:
                decoded.append(result.value)
                continue
            failures.append(errors.tag(
                f"While decoding child {index}", result.error, ErrorKind.CHILD_DECODE_FAILURE
            ))
            if policy is ChildErrorPolicy.FIRST:
                break
        if failures:
            return Err(errors.tag_group(f"In tag {value.tag}", failures))
        return Ok(decoded)
    return Decoder(run, f"pick_children({selector.name})")


def children(
    child_decoder: Decoder[T], policy: ChildErrorPolicy = ChildErrorPolicy.FIRST
) -> Decoder[List[T]]:
    """Decode every child of an element, Text included, in order."""
    return pick_children(succeed(child_decoder), policy)


def child(name: str, decoder: Decoder[T]) -> Decoder[T]:
    """Decode the first child element named ``name``."""
    def run(value: XmlValue) -> DecodeResult:
        if not isinstance(value, Element):
            return _expected_tag(value)
        group_label = f"In tag {value.tag}"
        node = next((n for n in value.iter_elements() if n.tag == name), None)
        if node is not None:
            result = decoder(node)
            if result.success:
                return result
            index = value.children.index(node)
            return Err(errors.tag_group(group_label, errors.tag(
                f"While decoding child {index}", result.error, ErrorKind.CHILD_DECODE_FAILURE
            )))
        return Err(errors.tag_group(group_label, errors.fail(
            f'Expected a child tag named "{name}"', value, ErrorKind.MISSING_CHILD
        )))
    return Decoder(run, f"child({name!r})")
