"""
Root aggregator for texdsl documents

TeXDocument owns the preamble directives and the document body, and turns
the finished tree into text or into bytes on a caller-supplied sink.

Example:
    def body(document):
        document.frame("Intro", configure=lambda frame: frame.append_text("Hello"))

    doc = tex(lambda root: (
        root.document_class("beamer"),
        root.usepackage("amsmath", "amssymb"),
        root.document(body),
    ))
    print(doc.serialize())
"""

from typing import Any, Callable, List, Optional, Sequence

from loguru import logger

from ..config import appsettings
from ..models.elements import TagKind, Option
from .elements import ContentTag
from .errors import TeXError, TeXStructureError, TeXWriteError
from .log import LOG, state_connected
from .tags import Author, Date, Document, DocumentClass, Title, UsePackage

__all__ = ["TeXDocument", "TeXError", "TeXStructureError", "TeXWriteError", "tex"]


class TeXDocument(ContentTag):
    """
    Root of a TeX tree

    Renders its children in insertion order with no wrapper of its own.

    Attributes:
        verbosity: LOG() verbosity while this document is connected
        encoding: Encoding used by write_to()
        strict: Reject a second document() body instead of warning
        body: The document body, once attached
    """

    kind = TagKind.ROOT

    def __init__(
        self,
        verbosity: Optional[int] = None,
        encoding: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> None:
        super().__init__("")
        self.verbosity = appsettings.verbosity if verbosity is None else verbosity
        self.encoding = encoding or appsettings.output_encoding
        self.strict = appsettings.strict_mode if strict is None else strict
        self.body: Optional[Document] = None

    def document_class(self, clazz: str, *options: Option) -> DocumentClass:
        return self.attach(DocumentClass(clazz, *options))

    def usepackage(self, *packages: str, options: Sequence[Option] = ()) -> UsePackage:
        """
        Attach a \\usepackage line.

        Args:
            *packages: One or more package names, joined into one argument
            options: (key, value) pairs rendered before the argument

        Raises:
            TeXStructureError: No package names were given
        """
        return self.attach(UsePackage(packages, *options))

    def title(self, title: str) -> Title:
        return self.attach(Title(title))

    def author(self, author: str) -> Author:
        return self.attach(Author(author))

    def date(self, date: str) -> Date:
        return self.attach(Date(date))

    def document(self, configure: Optional[Callable[[Document], None]] = None) -> Document:
        """
        Attach the document body.

        Raises:
            TeXStructureError: A body already exists and strict mode is on
        """
        if self.body is not None:
            if self.strict:
                raise TeXStructureError("Document already has a body; only one document() is allowed")
            logger.warning("Attaching a second document body; output will contain two document environments")
        body = self.attach(Document(), configure)
        if self.body is None:
            self.body = body
        return body

    def serialize(self) -> str:
        """
        Render the whole tree to TeX text.

        Returns:
            Every owned element's rendering, in insertion order
        """
        with state_connected(self):
            buffer: List[str] = []
            self.render(buffer)
            text = ''.join(buffer)
            LOG(f"Serialized {len(self.children)} top-level elements into {len(text)} characters", level=2)
        return text

    def write_to(self, sink: Any) -> int:
        """
        Write the encoded document to a byte sink.

        Short writes are retried with the remainder. A sink whose write()
        returns None is taken to have consumed everything it was given.

        Args:
            sink: Object with a write(bytes) method

        Returns:
            Number of bytes written

        Raises:
            TeXWriteError: The text cannot be encoded, or the sink raised
                OSError or accepted zero bytes
        """
        text = self.serialize()
        try:
            payload = text.encode(self.encoding)
        except (UnicodeEncodeError, LookupError) as e:
            raise TeXWriteError(f"Cannot encode document as {self.encoding!r}: {e}") from e

        with state_connected(self):
            total = len(payload)
            offset = 0
            while offset < total:
                try:
                    written = sink.write(payload[offset:])
                except OSError as e:
                    raise TeXWriteError(f"Sink write failed after {offset} of {total} bytes: {e}") from e
                if written is None:
                    written = total - offset
                if written <= 0:
                    raise TeXWriteError(f"Sink accepted no bytes after {offset} of {total} bytes")
                offset += written
                LOG(f"Wrote {written} bytes ({offset}/{total})", level=3)
            LOG(f"Wrote {total} bytes as {self.encoding}", level=2)
        return total

    def __str__(self) -> str:
        return self.serialize()


def tex(configure: Optional[Callable[[TeXDocument], Any]] = None, **kwargs: Any) -> TeXDocument:
    """
    Build a TeXDocument and run `configure` against it.

    Args:
        configure: Callback that attaches the preamble and body
        **kwargs: Forwarded to TeXDocument (verbosity, encoding, strict)

    Returns:
        The configured document
    """
    document = TeXDocument(**kwargs)
    if configure is not None:
        configure(document)
    return document
