r"""
Element tree primitives for texdsl

Defines the leaf text element, the tag type shared by every directive and
container, and the single renderer that turns a tag into TeX text.

Every tag carries a TagKind discriminator. Rendering is one dispatch over
that discriminator in tag_render(); subclasses only decide which factory
methods are reachable at each nesting level, never how output looks.

Example:
    itemize = Itemize()
    itemize.item(lambda item: item.append_text("x"))

    buffer = []
    itemize.render(buffer)
    # ''.join(buffer) == "\\begin{itemize}\n\\item\nx\n\\end{itemize}\n"
"""

from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, TYPE_CHECKING

from ..config import appsettings
from ..models.elements import E, TagKind, Renderable, Option, Options, options_collect

if TYPE_CHECKING:
    from .tags import CustomTag


@dataclass(frozen=True)
class TextElement:
    """
    Leaf element holding literal text

    Attributes:
        text: Text emitted verbatim, followed by a newline
    """
    text: str

    def render(self, buffer: List[str]) -> None:
        buffer.append(f"{self.text}\n")


class Tag:
    """
    Named TeX directive with positional arguments and key/value options

    The class attribute `kind` selects the output shape; instances may
    override it through the constructor.

    Attributes:
        name: Directive name without the leading backslash
        arguments: Positional arguments, rendered as {a}{b}
        options: Insertion-ordered options, rendered as [k = v, ...]
        kind: Output shape used by tag_render()
    """

    kind: TagKind = TagKind.DIRECTIVE_RIGHT

    def __init__(
        self,
        name: str,
        arguments: Iterable[str] = (),
        options: Iterable[Option] = (),
        kind: Optional[TagKind] = None,
    ) -> None:
        self.name = name
        self.arguments: List[str] = list(arguments)
        self.options: Options = options_collect(list(options))
        if kind is not None:
            self.kind = kind

    def arguments_render(self) -> str:
        """Render arguments as {a}{b}, or '' when there are none"""
        if not self.arguments:
            return ""
        return "{" + "}{".join(self.arguments) + "}"

    def options_render(self) -> str:
        """Render options as [k = v, ...] in insertion order, or '' when there are none"""
        if not self.options:
            return ""
        entries = [appsettings.option_make(key, value) for key, value in self.options.items()]
        return "[" + appsettings.option_separator.join(entries) + "]"

    def render(self, buffer: List[str]) -> None:
        tag_render(self, buffer)


class ContentTag(Tag):
    """
    Tag owning an ordered list of child elements

    Children are exclusively owned: each is created by a factory call on
    this tag, configured, then appended exactly once.
    """

    kind = TagKind.CONTAINER

    def __init__(
        self,
        name: str,
        arguments: Iterable[str] = (),
        options: Iterable[Option] = (),
        kind: Optional[TagKind] = None,
    ) -> None:
        super().__init__(name, arguments, options, kind)
        self.children: List[Renderable] = []

    def append_text(self, text: str) -> TextElement:
        """Append a literal line of text as the next child"""
        element = TextElement(text)
        self.children.append(element)
        return element

    def __iadd__(self, text: str) -> "ContentTag":
        self.append_text(text)
        return self

    def attach(self, child: E, configure: Optional[Callable[[E], None]] = None) -> E:
        """
        Configure a freshly built child, then append it.

        The child is appended only after `configure` returns, so anything
        `configure` attaches lands inside the child. Calls made from within
        `configure` on this tag append after its current children.

        Args:
            child: Newly constructed element, not yet owned by any tag
            configure: Optional callback run against the child before appending

        Returns:
            The attached child
        """
        if configure is not None:
            configure(child)
        self.children.append(child)
        return child

    def custom_tag(
        self,
        name: str,
        arguments: Iterable[str] = (),
        *options: Option,
        configure: Optional[Callable[["CustomTag"], None]] = None,
    ) -> "CustomTag":
        """
        Attach an arbitrary container for markup the catalog does not model.

        No validation is applied to `name` or to nesting depth.
        """
        from .tags import CustomTag
        return self.attach(CustomTag(name, arguments, *options), configure)


def directive_render(tag: Tag, left: bool) -> str:
    """Render the one-line \\name form of a tag, options first when `left`"""
    if left:
        return f"\\{tag.name}{tag.options_render()}{tag.arguments_render()}\n"
    return f"\\{tag.name}{tag.arguments_render()}{tag.options_render()}\n"


def children_render(tag: Tag, buffer: List[str]) -> None:
    for child in getattr(tag, 'children', ()):
        child.render(buffer)


def tag_render(tag: Tag, buffer: List[str]) -> None:
    """
    Append the TeX text for `tag` and its subtree to `buffer`.

    Depth-first, pre-order; the tree is only read.

    Args:
        tag: Tag to render
        buffer: List of string fragments to extend
    """
    kind = tag.kind
    if kind is TagKind.DIRECTIVE_LEFT:
        buffer.append(directive_render(tag, left=True))
    elif kind is TagKind.DIRECTIVE_RIGHT:
        buffer.append(directive_render(tag, left=False))
    elif kind is TagKind.ITEM:
        buffer.append(directive_render(tag, left=False))
        children_render(tag, buffer)
    elif kind is TagKind.ROOT:
        children_render(tag, buffer)
    elif kind is TagKind.CONTAINER:
        buffer.append(f"\\begin{{{tag.name}}}{tag.arguments_render()}{tag.options_render()}\n")
        children_render(tag, buffer)
        buffer.append(f"\\end{{{tag.name}}}\n")
