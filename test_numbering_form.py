# test_numbering_form.py
import logging

import pytest

from conftest import build_pdf, read_labels
from pdf_page_numbering import NumberingForm, PDFPageNumberer, Position
from pdf_page_numbering.numbering_form import (
    STATUS_DONE,
    STATUS_ERROR_PREFIX,
)


class CountingNumberer(PDFPageNumberer):
    """Numberer that records each run and the form's processing flag during it."""

    def __init__(self):
        super().__init__()
        self.calls = 0
        self.form = None
        self.processing_seen = []

    def add_page_numbers(self, *args, **kwargs):
        self.calls += 1
        if self.form is not None:
            self.processing_seen.append(self.form.processing)
        return super().add_page_numbers(*args, **kwargs)


@pytest.fixture
def numberer():
    return CountingNumberer()


@pytest.fixture
def form(numberer):
    form = NumberingForm(numberer=numberer)
    numberer.form = form
    return form


def test_non_pdf_selection_is_rejected(form, numberer):
    accepted = form.select_file("notes.txt", "text/plain", b"hello")

    assert not accepted
    assert form.status == "Please select a PDF file."
    assert not form.has_file
    assert not form.can_submit
    assert numberer.calls == 0


def test_rejection_keeps_previous_selection(form):
    form.select_file("report.pdf", "application/pdf", build_pdf(2))
    form.select_file("notes.txt", "text/plain", b"hello")

    assert form.file_name == "report.pdf"
    assert form.status == "Please select a PDF file."


def test_reselecting_after_rejection_clears_status(form):
    pdf = build_pdf(2)
    form.select_file("report.pdf", "application/pdf", pdf)
    form.select_file("notes.txt", "text/plain", b"hello")

    assert form.select_file("report.pdf", "application/pdf", pdf)
    assert form.status == ""
    assert form.file_name == "report.pdf"


def test_submit_without_file(form, numberer):
    assert form.submit() is None
    assert form.status == "Please select a file."
    assert numberer.calls == 0
    assert not form.processing


def test_pdf_selection_is_inspected(form):
    assert form.select_file("report.pdf", "application/pdf", build_pdf(3))

    assert form.status == ""
    assert form.can_submit
    assert form.document_info.page_count == 3


def test_submit_default_options(form, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)

    result = form.submit()

    assert result is form.result
    assert result.filename == "numbered_report.pdf"
    assert form.status == STATUS_DONE
    assert not form.processing
    labels = read_labels(result.data)
    assert labels[0] == "1 / 10"
    assert labels[9] == "10 / 10"


def test_submit_uses_updated_options(form, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)
    form.update_options(skip_cover_pages=True, cover_pages_to_skip=1, include_cover_in_total=False)

    labels = read_labels(form.submit().data)

    assert labels[0] == ""
    assert labels[1] == "1 / 9"
    assert labels[9] == "9 / 9"


def test_update_options_validates(form):
    form.update_options(position="header")
    assert form.options.position == Position.HEADER

    with pytest.raises(ValueError):
        form.update_options(font_size=0)
    assert form.options.font_size == 12


def test_submit_while_processing_is_ignored(form, numberer, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)
    form.processing = True

    assert form.submit() is None
    assert numberer.calls == 0
    assert not form.can_submit


def test_failed_run_reports_and_resets(form):
    form.select_file("broken.pdf", "application/pdf", b"%PDF-garbage")

    assert form.submit() is None
    assert form.status.startswith(STATUS_ERROR_PREFIX)
    assert form.result is None
    assert not form.processing
    assert form.can_submit


def test_unexpected_error_without_message_uses_fallback(form, numberer, monkeypatch, ten_page_pdf):
    def explode(*args, **kwargs):
        raise RuntimeError()

    monkeypatch.setattr(numberer, "add_page_numbers", explode)
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)

    assert form.submit() is None
    assert form.status == STATUS_ERROR_PREFIX + "unknown error"
    assert not form.processing


def test_failure_after_success_drops_old_result(form, numberer, monkeypatch, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)
    form.submit()

    def explode(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(numberer, "add_page_numbers", explode)

    assert form.submit() is None
    assert form.result is None
    assert form.status == STATUS_ERROR_PREFIX + "boom"


def test_reselecting_same_file_keeps_result(form, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)
    result = form.submit()

    form.select_file("report.pdf", "application/pdf", ten_page_pdf)

    assert form.result is result
    assert form.status == STATUS_DONE


def test_new_file_clears_result(form, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)
    form.submit()

    form.select_file("other.pdf", "application/pdf", build_pdf(2))

    assert form.result is None
    assert form.status == ""


def test_clear_file(form, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)
    form.clear_file()

    assert not form.has_file
    assert form.document_info is None


def test_cover_skip_warning(form):
    form.select_file("report.pdf", "application/pdf", build_pdf(2))
    assert form.cover_skip_warning() is None

    form.update_options(skip_cover_pages=True, cover_pages_to_skip=1)
    assert form.cover_skip_warning() is None

    form.update_options(cover_pages_to_skip=2)
    assert "leaves no page" in form.cover_skip_warning()


def test_processing_flag_set_during_run(form, numberer, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)

    form.submit()

    assert numberer.processing_seen == [True]
    assert not form.processing


def test_processing_flag_cleared_after_failure(form, numberer):
    form.select_file("broken.pdf", "application/pdf", b"this is not a pdf")

    form.submit()

    assert numberer.processing_seen == [True]
    assert not form.processing


def test_failure_logs_error_context(form, caplog):
    form.select_file("broken.pdf", "application/pdf", b"this is not a pdf")

    with caplog.at_level(logging.ERROR, logger="pdf_page_numbering.numbering_form"):
        form.submit()

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert "'error': 'InvalidPDFError'" in record.getMessage()
    assert "'filename': 'broken.pdf'" in record.getMessage()


def test_changing_options_drops_stale_result(form, ten_page_pdf):
    form.select_file("report.pdf", "application/pdf", ten_page_pdf)
    form.submit()

    form.update_options(alignment="center")
    assert form.result is not None
    assert form.status == STATUS_DONE

    form.update_options(alignment="right")
    assert form.result is None
    assert form.status == ""
