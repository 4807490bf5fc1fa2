# pdf_page_numbering/numbering_form.py
"""State behind the page numbering form: selected file, options, status."""
import logging
from typing import Optional

from .exceptions import InvalidFileTypeError, MissingFileError, PageNumberingError
from .options import PageNumberOptions
from .pdf_inspector import DocumentInfo, PDFInspector
from .pdf_page_numberer import NumberedPdf, PDFPageNumberer

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"

STATUS_PROCESSING = "Processing..."
STATUS_DONE = "Done! Your download is ready."
STATUS_ERROR_PREFIX = "An error occurred: "


class NumberingForm:
    def __init__(self,
                 numberer: Optional[PDFPageNumberer] = None,
                 inspector: Optional[PDFInspector] = None):
        self.numberer = numberer or PDFPageNumberer()
        self.inspector = inspector or PDFInspector()
        self.options = PageNumberOptions()
        self.file_name: Optional[str] = None
        self.file_bytes: Optional[bytes] = None
        self.document_info: Optional[DocumentInfo] = None
        self.processing = False
        self.status = ""
        self.result: Optional[NumberedPdf] = None

    @property
    def has_file(self) -> bool:
        return self.file_bytes is not None

    @property
    def can_submit(self) -> bool:
        return self.has_file and not self.processing

    def select_file(self, name: str, media_type: str, data: bytes) -> bool:
        """
        Take a file chosen with the file picker or dropped onto the uploader.

        Returns:
            True if the file was accepted
        """
        if media_type != PDF_MEDIA_TYPE:
            logger.info("Rejected %s (%s)", name, media_type)
            self.status = InvalidFileTypeError.default_message
            return False

        if name == self.file_name and data == self.file_bytes:
            if self.status == InvalidFileTypeError.default_message:
                self.status = ""
            return True

        self.file_name = name
        self.file_bytes = data
        self.result = None
        self.status = ""
        try:
            self.document_info = self.inspector.inspect(data)
        except PageNumberingError as e:
            # Loading during submit reports the error
            logger.warning("Could not inspect %s: %s", name, e)
            self.document_info = None
        return True

    def clear_file(self):
        self.file_name = None
        self.file_bytes = None
        self.document_info = None
        self.result = None

    def update_options(self, **changes) -> PageNumberOptions:
        options = self.options.with_changes(**changes)
        if options != self.options:
            # The last result was built with the old options
            self.result = None
            if self.status == STATUS_DONE:
                self.status = ""
        self.options = options
        return self.options

    def cover_skip_warning(self) -> Optional[str]:
        """Warn when cover skipping would leave no page numbered."""
        if not (self.options.skip_cover_pages and self.document_info):
            return None
        if self.options.cover_pages_to_skip >= self.document_info.page_count:
            return (f"Skipping {self.options.cover_pages_to_skip} page(s) leaves no page "
                    f"to number in a {self.document_info.page_count}-page document.")
        return None

    def submit(self) -> Optional[NumberedPdf]:
        """
        Run page numbering on the selected file.

        Returns:
            The numbered PDF, or None if nothing ran or the run failed
        """
        if not self.has_file:
            self.status = MissingFileError.default_message
            return None

        if self.processing:
            logger.warning("Ignoring submit while %s is being processed", self.file_name)
            return None

        self.processing = True
        self.status = STATUS_PROCESSING
        self.result = None

        try:
            self.result = self.numberer.add_page_numbers(
                self.file_bytes, self.options, self.file_name
            )
            self.status = STATUS_DONE
        except Exception as e:
            if isinstance(e, PageNumberingError):
                logger.error("Error processing %s: %s", self.file_name, e.to_dict())
            else:
                logger.exception("Error processing %s: %s", self.file_name, e)
            self.status = STATUS_ERROR_PREFIX + (str(e) or PageNumberingError.default_message)
        finally:
            self.processing = False

        return self.result
