"""
Element kinds and capability protocols

Defines the discriminator used by the renderer to pick an output shape,
plus the two small capability interfaces every tree node is built from.
"""

from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Tuple, TypeVar, runtime_checkable


class TagKind(Enum):
    """
    Output shape of a tag

    The renderer dispatches on this value; tags never override rendering.
    """
    DIRECTIVE_LEFT = "directive-left"    # \documentclass[opts]{args}
    DIRECTIVE_RIGHT = "directive-right"  # \title{args}
    CONTAINER = "container"              # \begin{name}...\end{name}
    ITEM = "item"                        # \item followed by unwrapped children
    ROOT = "root-passthrough"            # children only, no wrapper


# A single (key, value) option as supplied by callers
Option = Tuple[str, str]

# Insertion-ordered option mapping as stored on a tag
Options = Dict[str, str]


@runtime_checkable
class Renderable(Protocol):
    """Anything that can append its text, plus a trailing newline, to a buffer"""

    def render(self, buffer: List[str]) -> None:
        ...


E = TypeVar("E", bound=Renderable)


@runtime_checkable
class ChildContainer(Protocol):
    """Anything that owns an ordered list of children and can attach new ones"""

    children: List[Renderable]

    def append_text(self, text: str) -> Renderable:
        ...

    def attach(self, child: E, configure: Optional[Callable[[E], None]] = None) -> E:
        ...


def options_collect(options: "tuple[Option, ...] | list[Option]") -> Options:
    """
    Build an insertion-ordered option mapping from (key, value) pairs.

    A repeated key keeps the position of its first occurrence and the
    value of its last one.

    Args:
        options: Sequence of (key, value) pairs

    Returns:
        Dict preserving first-seen key order

    Example:
        >>> options_collect([('a', '1'), ('b', '2'), ('a', '3')])
        {'a': '3', 'b': '2'}
    """
    collected: Options = {}
    for key, value in options:
        collected[key] = value
    return collected
