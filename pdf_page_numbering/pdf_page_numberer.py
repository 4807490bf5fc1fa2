# pdf_page_numbering/pdf_page_numberer.py
import fitz  # PyMuPDF
from dataclasses import dataclass
from pathlib import Path
import logging
from typing import Optional, Tuple

from .exceptions import (
    EncryptedPDFError,
    InvalidPDFError,
    PageNumberingError,
    ProcessingError,
)
from .options import Alignment, PageNumberOptions, Position

logger = logging.getLogger(__name__)

OUTPUT_PREFIX = "numbered_"
HORIZONTAL_MARGIN = 50
VERTICAL_OFFSET = 30
FONT_NAME = "helv"  # Helvetica, one of the PDF base-14 fonts
FONT_COLOR = (0, 0, 0)


@dataclass
class NumberedPdf:
    """Result of one numbering run."""
    filename: str
    data: bytes
    page_count: int
    labelled_pages: int


def output_filename(original_name: str) -> str:
    return f"{OUTPUT_PREFIX}{original_name}"


def display_total(page_count: int, options: PageNumberOptions) -> int:
    """Total shown after the slash, optionally leaving out skipped covers."""
    if options.skip_cover_pages and not options.include_cover_in_total:
        return page_count - options.cover_pages_to_skip
    return page_count


def is_page_skipped(index: int, options: PageNumberOptions) -> bool:
    return options.skip_cover_pages and index < options.cover_pages_to_skip


def page_label(index: int, options: PageNumberOptions) -> int:
    """Number printed on the page at 0-based ``index``."""
    if options.skip_cover_pages:
        return index - options.cover_pages_to_skip + options.start_page
    return index + options.start_page


def format_label(number: int, total: int, options: PageNumberOptions) -> str:
    if options.include_total_pages:
        return f"{number} / {total}"
    return f"{number}"


def compute_position(page_width: float,
                     page_height: float,
                     text_width: float,
                     options: PageNumberOptions) -> Tuple[float, float]:
    """
    Compute where the label starts, in PDF user space.

    Args:
        page_width: Page width in points
        page_height: Page height in points
        text_width: Rendered width of the label at the configured size
        options: Formatting options

    Returns:
        (x, y) of the label's baseline origin, origin at the bottom-left corner
    """
    if options.alignment == Alignment.LEFT:
        x = HORIZONTAL_MARGIN
    elif options.alignment == Alignment.RIGHT:
        x = page_width - text_width - HORIZONTAL_MARGIN
    else:
        x = (page_width - text_width) / 2

    if options.position == Position.HEADER:
        y = page_height - VERTICAL_OFFSET
    else:
        y = VERTICAL_OFFSET

    return x, y


class PDFPageNumberer:
    def __init__(self, font_name: str = FONT_NAME):
        """
        Initialize PDF page numberer.

        Args:
            font_name: PyMuPDF name of the font used for measuring and drawing
        """
        self.font_name = font_name
        self.font_color = FONT_COLOR

    def load_document(self, pdf_bytes: bytes, filename: str = "") -> fitz.Document:
        """Open PDF bytes, rejecting anything PyMuPDF cannot parse."""
        try:
            doc = fitz.open(stream=pdf_bytes, filetype="pdf")
        except Exception as e:
            raise InvalidPDFError(
                f"Could not read PDF: {e}",
                context={"filename": filename, "error_type": type(e).__name__},
            ) from e

        if doc.needs_pass:
            doc.close()
            raise EncryptedPDFError(context={"filename": filename})

        return doc

    def embed_font(self) -> fitz.Font:
        try:
            return fitz.Font(self.font_name)
        except Exception as e:
            raise ProcessingError(
                f"Could not load font '{self.font_name}': {e}",
                context={"font_name": self.font_name},
            ) from e

    def number_pages(self, doc: fitz.Document, font: fitz.Font, options: PageNumberOptions) -> int:
        """
        Draw labels on every numbered page of ``doc``.

        Returns:
            Number of pages that received a label
        """
        total_pages = len(doc)
        total = display_total(total_pages, options)
        labelled = 0

        for index, page in enumerate(doc):
            if is_page_skipped(index, options):
                continue

            # page.rect is the page as displayed, after /Rotate
            rect = page.rect
            text = format_label(page_label(index, options), total, options)
            text_width = font.text_length(text, fontsize=options.font_size)
            x, y = compute_position(rect.width, rect.height, text_width, options)

            # PyMuPDF measures y downwards from the top edge; insert_text
            # expects unrotated coordinates
            point = fitz.Point(x, rect.height - y) * page.derotation_matrix
            page.insert_text(
                point,
                text,
                fontsize=options.font_size,
                fontname=self.font_name,
                color=self.font_color,
                rotate=page.rotation,
            )
            labelled += 1

        return labelled

    def save_document(self, doc: fitz.Document) -> bytes:
        return doc.tobytes(garbage=3, deflate=True)

    def add_page_numbers(self,
                         pdf_bytes: bytes,
                         options: Optional[PageNumberOptions] = None,
                         filename: str = "document.pdf") -> NumberedPdf:
        """
        Add page numbers to a PDF held in memory.

        Args:
            pdf_bytes: Content of the input PDF
            options: Formatting options (defaults if None)
            filename: Original file name, used for the output name and logs

        Returns:
            NumberedPdf with the serialized output

        Raises:
            PageNumberingError: loading, font embedding, drawing or saving failed
        """
        options = options or PageNumberOptions()
        context = {"filename": filename, **options.to_dict()}
        logger.info("Numbering %s", filename)

        doc = self.load_document(pdf_bytes, filename)
        try:
            font = self.embed_font()
            labelled = self.number_pages(doc, font, options)
            data = self.save_document(doc)
            page_count = len(doc)
        except PageNumberingError:
            raise
        except Exception as e:
            logger.exception("Unexpected error while numbering %s", filename)
            raise ProcessingError(
                f"Unexpected error: {e}",
                context={**context, "error_type": type(e).__name__},
            ) from e
        finally:
            doc.close()

        logger.info("Numbered %d of %d pages in %s", labelled, page_count, filename)
        return NumberedPdf(
            filename=output_filename(filename),
            data=data,
            page_count=page_count,
            labelled_pages=labelled,
        )

    def add_page_numbers_to_file(self,
                                 input_path: str,
                                 output_path: Optional[str] = None,
                                 options: Optional[PageNumberOptions] = None) -> str:
        """
        Add page numbers to a PDF file on disk.

        Args:
            input_path: Path to input PDF
            output_path: Path for output PDF (if None, numbered_<name> next to the input)
            options: Formatting options (defaults if None)

        Returns:
            Path to the numbered PDF
        """
        input_file = Path(input_path)
        if not output_path:
            output_path = str(input_file.parent / output_filename(input_file.name))

        result = self.add_page_numbers(input_file.read_bytes(), options, input_file.name)
        Path(output_path).write_bytes(result.data)

        logger.info("Page numbers added: %s", output_path)
        return output_path

    def render_preview(self, pdf_bytes: bytes, page_index: int = 0, dpi: int = 72) -> bytes:
        """Render one page of a PDF as PNG bytes."""
        doc = self.load_document(pdf_bytes)
        try:
            page_index = min(max(page_index, 0), len(doc) - 1)
            pixmap = doc[page_index].get_pixmap(dpi=dpi)
            return pixmap.tobytes("png")
        finally:
            doc.close()
