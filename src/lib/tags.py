"""
Concrete TeX tag catalog

Thin instantiations of Tag and ContentTag. Each class fixes a name and a
TagKind; the factory methods a class exposes decide what may be nested
inside it (e.g. itemize only produces items).
"""

from typing import Callable, Iterable, Optional

from ..models.elements import TagKind, Option
from .elements import Tag, ContentTag
from .errors import TeXStructureError


class TeXContentTag(ContentTag):
    """
    Container that accepts the full body catalog

    Lists, display math, alignment blocks, frames, custom tags and text.
    """

    def itemize(self, *options: Option, configure: Optional[Callable[["Itemize"], None]] = None) -> "Itemize":
        return self.attach(Itemize(*options), configure)

    def enumerate(self, *options: Option, configure: Optional[Callable[["Enumerate"], None]] = None) -> "Enumerate":
        return self.attach(Enumerate(*options), configure)

    def frame(
        self,
        title: str,
        *options: Option,
        configure: Optional[Callable[["Frame"], None]] = None,
    ) -> "Frame":
        return self.attach(Frame(title, *options), configure)

    def math(self, *options: Option, configure: Optional[Callable[["Math"], None]] = None) -> "Math":
        return self.attach(Math(*options), configure)

    def left(self, configure: Optional[Callable[["LeftAlignment"], None]] = None) -> "LeftAlignment":
        return self.attach(LeftAlignment(), configure)

    def right(self, configure: Optional[Callable[["RightAlignment"], None]] = None) -> "RightAlignment":
        return self.attach(RightAlignment(), configure)

    def center(self, configure: Optional[Callable[["CenterAlignment"], None]] = None) -> "CenterAlignment":
        return self.attach(CenterAlignment(), configure)


class CustomTag(TeXContentTag):
    """Escape hatch for environments the catalog does not model"""

    def __init__(self, name: str, arguments: Iterable[str] = (), *options: Option) -> None:
        super().__init__(name, arguments, options)


class Document(TeXContentTag):
    """The \\begin{document} ... \\end{document} body"""

    def __init__(self) -> None:
        super().__init__("document")


# Preamble directives


class DocumentClass(Tag):
    kind = TagKind.DIRECTIVE_LEFT

    def __init__(self, clazz: str, *options: Option) -> None:
        super().__init__("documentclass", [clazz], options)


class UsePackage(Tag):
    """
    \\usepackage[options]{a, b, c}; several packages share one argument

    Raises:
        TeXStructureError: No package names were given
    """

    kind = TagKind.DIRECTIVE_LEFT

    def __init__(self, packages: Iterable[str], *options: Option) -> None:
        names = list(packages)
        if not names:
            raise TeXStructureError("usepackage needs at least one package name")
        super().__init__("usepackage", [", ".join(names)], options)


class Title(Tag):
    def __init__(self, title: str) -> None:
        super().__init__("title", [title])


class Author(Tag):
    def __init__(self, author: str) -> None:
        super().__init__("author", [author])


class Date(Tag):
    def __init__(self, date: str) -> None:
        super().__init__("date", [date])


class FrameTitle(Tag):
    def __init__(self, title: str) -> None:
        super().__init__("frametitle", [title])


# Lists


class Item(TeXContentTag):
    """
    List entry

    Renders as a bare \\item line followed by its children, with no
    begin/end wrapper, so items may hold nested lists or math.
    """

    kind = TagKind.ITEM

    def __init__(self) -> None:
        super().__init__("item")


class ListTag(ContentTag):
    """Base for itemize/enumerate: the only child factory is item()"""

    def item(self, configure: Optional[Callable[[Item], None]] = None) -> Item:
        return self.attach(Item(), configure)


class Itemize(ListTag):
    def __init__(self, *options: Option) -> None:
        super().__init__("itemize", (), options)


class Enumerate(ListTag):
    def __init__(self, *options: Option) -> None:
        super().__init__("enumerate", (), options)


# Blocks


class Math(ContentTag):
    def __init__(self, *options: Option) -> None:
        super().__init__("displaymath", (), options)


class LeftAlignment(TeXContentTag):
    def __init__(self) -> None:
        super().__init__("left")


class RightAlignment(TeXContentTag):
    def __init__(self) -> None:
        super().__init__("right")


class CenterAlignment(TeXContentTag):
    def __init__(self) -> None:
        super().__init__("center")


class Frame(TeXContentTag):
    """
    Beamer frame

    The frame title is attached on construction, so it always renders
    first no matter what the configure callback attaches.
    """

    def __init__(self, title: str, *options: Option) -> None:
        super().__init__("frame", (), options)
        self.attach(FrameTitle(title))
