# pdf_page_numbering/pdf_inspector.py
import io
import logging
from dataclasses import dataclass, field
from typing import List, Tuple

import pdfplumber

from .exceptions import InvalidPDFError

logger = logging.getLogger(__name__)


@dataclass
class DocumentInfo:
    page_count: int
    page_sizes: List[Tuple[float, float]] = field(default_factory=list)

    @property
    def has_uniform_size(self) -> bool:
        return len(set(self.page_sizes)) <= 1


class PDFInspector:
    def inspect(self, pdf_bytes: bytes) -> DocumentInfo:
        """
        Read page count and page sizes of a PDF.

        Args:
            pdf_bytes: Content of the PDF

        Returns:
            DocumentInfo with one (width, height) entry per page
        """
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                sizes = [(float(page.width), float(page.height)) for page in pdf.pages]
        except Exception as e:
            raise InvalidPDFError(
                f"Could not read PDF: {e}",
                context={"error_type": type(e).__name__},
            ) from e

        logger.debug("Inspected PDF with %d pages", len(sizes))
        return DocumentInfo(page_count=len(sizes), page_sizes=sizes)

    def describe(self, info: DocumentInfo) -> str:
        """Short human-readable summary for the form."""
        if not info.page_count:
            return "0 pages"

        pages = "1 page" if info.page_count == 1 else f"{info.page_count} pages"
        width, height = info.page_sizes[0]
        size = f"{width:.0f} x {height:.0f} pt"
        if not info.has_uniform_size:
            size += " (mixed sizes)"
        return f"{pages}, {size}"
