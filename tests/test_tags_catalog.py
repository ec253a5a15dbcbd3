"""
Tag catalog tests - exact output of every concrete tag

Includes the frame-title ordering rule and item nesting.
"""

import pytest

from texdsl.lib.errors import TeXStructureError
from texdsl.lib.tags import (
    Author,
    CenterAlignment,
    Date,
    Document,
    DocumentClass,
    Enumerate,
    Frame,
    FrameTitle,
    Item,
    Itemize,
    LeftAlignment,
    Math,
    RightAlignment,
    Title,
    UsePackage,
)


def rendered(element) -> str:
    buffer = []
    element.render(buffer)
    return ''.join(buffer)


class TestPreambleTags:
    """Test one-line preamble directives"""

    def test_document_class(self):
        assert rendered(DocumentClass("article")) == "\\documentclass{article}\n"

    def test_document_class_options_before_argument(self):
        tag = DocumentClass("book", ("a4paper", ""), ("fontsize", "12pt"))
        assert rendered(tag) == "\\documentclass[a4paper = , fontsize = 12pt]{book}\n"

    def test_usepackage_single(self):
        assert rendered(UsePackage(["amsmath"])) == "\\usepackage{amsmath}\n"

    def test_usepackage_joins_packages(self):
        """Several packages share one comma-separated argument"""
        assert rendered(UsePackage(["amsmath", "amssymb", "graphicx"])) == "\\usepackage{amsmath, amssymb, graphicx}\n"

    def test_usepackage_with_options(self):
        assert rendered(UsePackage(["inputenc"], ("utf8", ""))) == "\\usepackage[utf8 = ]{inputenc}\n"

    def test_title_author_date(self):
        assert rendered(Title("On Trees")) == "\\title{On Trees}\n"
        assert rendered(Author("A. Author")) == "\\author{A. Author}\n"
        assert rendered(Date("\\today")) == "\\date{\\today}\n"

    def test_frame_title(self):
        assert rendered(FrameTitle("T")) == "\\frametitle{T}\n"


class TestFrame:
    """Test beamer frames"""

    def test_frame_with_title_only(self):
        assert rendered(Frame("T")) == "\\begin{frame}\n\\frametitle{T}\n\\end{frame}\n"

    def test_frame_title_always_first(self):
        """Caller attachments follow the title whatever configure does"""
        body = Document()
        body.frame("T", configure=lambda frame: (frame.append_text("a"), frame.center()))

        assert rendered(body) == (
            "\\begin{document}\n"
            "\\begin{frame}\n"
            "\\frametitle{T}\n"
            "a\n"
            "\\begin{center}\n"
            "\\end{center}\n"
            "\\end{frame}\n"
            "\\end{document}\n"
        )

    def test_frame_options(self):
        frame = Frame("T", ("fragile", ""))
        assert rendered(frame) == "\\begin{frame}[fragile = ]\n\\frametitle{T}\n\\end{frame}\n"


class TestLists:
    """Test itemize/enumerate and items"""

    def test_itemize_single_item(self):
        itemize = Itemize()
        itemize.item(lambda item: item.append_text("x"))
        assert rendered(itemize) == "\\begin{itemize}\n\\item\nx\n\\end{itemize}\n"

    def test_empty_item(self):
        assert rendered(Item()) == "\\item\n"

    def test_enumerate_with_options(self):
        enumerate_ = Enumerate(("label", "(\\alph*)"))
        enumerate_.item(lambda item: item.append_text("first"))
        enumerate_.item(lambda item: item.append_text("second"))

        assert rendered(enumerate_) == (
            "\\begin{enumerate}[label = (\\alph*)]\n"
            "\\item\n"
            "first\n"
            "\\item\n"
            "second\n"
            "\\end{enumerate}\n"
        )

    def test_nested_list_inside_item(self):
        """Items are full containers internally"""
        def outer(item):
            item.append_text("outer")
            item.enumerate(configure=lambda inner: inner.item(lambda i: i.append_text("inner")))

        itemize = Itemize()
        itemize.item(outer)

        assert rendered(itemize) == (
            "\\begin{itemize}\n"
            "\\item\n"
            "outer\n"
            "\\begin{enumerate}\n"
            "\\item\n"
            "inner\n"
            "\\end{enumerate}\n"
            "\\end{itemize}\n"
        )

    def test_lists_only_produce_items(self):
        """Lists expose item() and custom_tag(), not the body catalog"""
        for list_tag in (Itemize(), Enumerate()):
            assert hasattr(list_tag, "item")
            assert not hasattr(list_tag, "frame")
            assert not hasattr(list_tag, "itemize")


class TestBlocks:
    """Test math and alignment containers"""

    def test_display_math(self):
        math = Math()
        math.append_text("e^{i\\pi} + 1 = 0")
        assert rendered(math) == "\\begin{displaymath}\ne^{i\\pi} + 1 = 0\n\\end{displaymath}\n"

    def test_math_has_no_body_factories(self):
        assert not hasattr(Math(), "itemize")

    def test_alignment_names(self):
        assert rendered(LeftAlignment()) == "\\begin{left}\n\\end{left}\n"
        assert rendered(RightAlignment()) == "\\begin{right}\n\\end{right}\n"
        assert rendered(CenterAlignment()) == "\\begin{center}\n\\end{center}\n"

    def test_math_inside_alignment(self):
        center = CenterAlignment()
        center.math(configure=lambda math: math.append_text("x"))
        assert rendered(center) == (
            "\\begin{center}\n\\begin{displaymath}\nx\n\\end{displaymath}\n\\end{center}\n"
        )


class TestCustomTag:
    """Test the escape hatch for unmodelled environments"""

    def test_custom_tag_arguments_and_options(self):
        body = Document()
        body.custom_tag("tabular", ["ll"], ("pos", "t"), configure=lambda t: t.append_text("a & b \\\\"))

        assert rendered(body) == (
            "\\begin{document}\n"
            "\\begin{tabular}{ll}[pos = t]\n"
            "a & b \\\\\n"
            "\\end{tabular}\n"
            "\\end{document}\n"
        )

    def test_custom_tag_is_permissive(self):
        """Any name, repeated names and arbitrary depth are accepted"""
        body = Document()
        body.custom_tag("x", configure=lambda a: a.custom_tag("x", configure=lambda b: b.custom_tag("document")))

        assert rendered(body) == (
            "\\begin{document}\n"
            "\\begin{x}\n"
            "\\begin{x}\n"
            "\\begin{document}\n"
            "\\end{document}\n"
            "\\end{x}\n"
            "\\end{x}\n"
            "\\end{document}\n"
        )

    def test_custom_tag_on_list(self):
        """Lists still accept custom tags"""
        itemize = Itemize()
        itemize.custom_tag("minipage", ["0.5\\textwidth"])
        assert rendered(itemize) == (
            "\\begin{itemize}\n\\begin{minipage}{0.5\\textwidth}\n\\end{minipage}\n\\end{itemize}\n"
        )


class TestUsePackageValidation:
    """Test that usepackage never renders an empty argument"""

    def test_empty_package_list_rejected(self):
        with pytest.raises(TeXStructureError):
            UsePackage([])

    def test_empty_generator_rejected(self):
        with pytest.raises(TeXStructureError):
            UsePackage(name for name in ())

    def test_generator_of_names_accepted(self):
        assert rendered(UsePackage(name for name in ("a", "b"))) == "\\usepackage{a, b}\n"
