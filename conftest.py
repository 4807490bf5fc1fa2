# conftest.py
import fitz  # PyMuPDF
import pytest

A4 = (595, 842)
LETTER = (612, 792)


def build_pdf(page_count: int = 10, size=A4, sizes=None, rotation: int = 0) -> bytes:
    """Create a blank PDF in memory."""
    doc = fitz.open()
    for width, height in sizes or [size] * page_count:
        page = doc.new_page(width=width, height=height)
        if rotation:
            page.set_rotation(rotation)
    data = doc.tobytes()
    doc.close()
    return data


def read_labels(pdf_bytes: bytes) -> list:
    """Text found on each page, stripped."""
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        return [page.get_text().strip() for page in doc]


def first_span(pdf_bytes: bytes, page_index: int = 0) -> dict:
    """First text span of a page, with its baseline origin in PyMuPDF coordinates."""
    with fitz.open(stream=pdf_bytes, filetype="pdf") as doc:
        text = doc[page_index].get_text("dict")
    for block in text["blocks"]:
        for line in block.get("lines", []):
            for span in line["spans"]:
                return span
    return {}


@pytest.fixture
def ten_page_pdf() -> bytes:
    return build_pdf(10)


@pytest.fixture
def encrypted_pdf() -> bytes:
    doc = fitz.open()
    doc.new_page()
    data = doc.tobytes(
        encryption=fitz.PDF_ENCRYPT_AES_256,
        owner_pw="owner",
        user_pw="user",
    )
    doc.close()
    return data
