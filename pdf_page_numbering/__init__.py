"""Initialize the pdf_page_numbering package with all modules."""

from .options import Alignment, PageNumberOptions, Position
from .pdf_page_numberer import NumberedPdf, PDFPageNumberer, output_filename
from .pdf_inspector import DocumentInfo, PDFInspector
from .numbering_form import NumberingForm
from .exceptions import (
    EncryptedPDFError,
    InvalidFileTypeError,
    InvalidPDFError,
    MissingFileError,
    PageNumberingError,
    ProcessingError,
)

__all__ = [
    'Alignment',
    'PageNumberOptions',
    'Position',
    'NumberedPdf',
    'PDFPageNumberer',
    'output_filename',
    'DocumentInfo',
    'PDFInspector',
    'NumberingForm',
    'PageNumberingError',
    'InvalidFileTypeError',
    'MissingFileError',
    'InvalidPDFError',
    'EncryptedPDFError',
    'ProcessingError',
]

__version__ = '1.0.0'
