"""Streamlit application for adding page numbers to a PDF."""
import streamlit as st
import os
import sys
import logging

# Add the project root to Python path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import config
from pdf_page_numbering import Alignment, NumberingForm, PageNumberOptions, Position
from pdf_page_numbering.logger import setup_logging
from pdf_page_numbering.numbering_form import STATUS_DONE, STATUS_ERROR_PREFIX


setup_logging(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title=config.PAGE_TITLE,
    page_icon=config.PAGE_ICON,
    layout="centered"
)

POSITION_LABELS = {
    Position.HEADER.value: "Header",
    Position.FOOTER.value: "Footer",
}

ALIGNMENT_LABELS = {
    Alignment.LEFT.value: "Left",
    Alignment.CENTER.value: "Center",
    Alignment.RIGHT.value: "Right",
}

# Initialize session state
if 'form' not in st.session_state:
    st.session_state.form = NumberingForm()


def sync_uploaded_file(form: NumberingForm, uploaded_file):
    """Push the uploader's current file into the form."""
    if uploaded_file is None:
        if form.has_file:
            form.clear_file()
        return

    # st.file_uploader handles both the picker and drag-and-drop
    form.select_file(uploaded_file.name, uploaded_file.type, uploaded_file.getvalue())


def render_options(form: NumberingForm):
    """Render the option widgets and store the choices in the form."""
    disabled = form.processing
    defaults = PageNumberOptions()

    position = st.selectbox(
        "Position",
        options=list(POSITION_LABELS),
        index=list(POSITION_LABELS).index(defaults.position.value),
        format_func=POSITION_LABELS.get,
        key="position",
        disabled=disabled,
    )

    alignment = st.selectbox(
        "Alignment",
        options=list(ALIGNMENT_LABELS),
        index=list(ALIGNMENT_LABELS).index(defaults.alignment.value),
        format_func=ALIGNMENT_LABELS.get,
        key="alignment",
        disabled=disabled,
    )

    include_total_pages = st.toggle(
        "Include total pages (e.g. 1 / 10)",
        value=defaults.include_total_pages,
        key="include_total_pages",
        disabled=disabled,
    )

    start_page = st.number_input(
        "Start numbering at",
        value=defaults.start_page,
        step=1,
        key="start_page",
        disabled=disabled,
    )

    skip_cover_pages = st.toggle(
        "Skip numbering on cover pages",
        value=defaults.skip_cover_pages,
        key="skip_cover_pages",
        disabled=disabled,
    )

    cover_pages_to_skip = form.options.cover_pages_to_skip
    include_cover_in_total = form.options.include_cover_in_total
    if skip_cover_pages:
        cover_pages_to_skip = st.number_input(
            "Pages to skip",
            min_value=1,
            value=defaults.cover_pages_to_skip,
            step=1,
            key="cover_pages_to_skip",
            disabled=disabled,
        )
        include_cover_in_total = st.toggle(
            "Count skipped pages in the total",
            value=defaults.include_cover_in_total,
            key="include_cover_in_total",
            disabled=disabled,
        )

    font_size = st.selectbox(
        "Font size",
        options=config.FONT_SIZE_CHOICES,
        index=config.FONT_SIZE_CHOICES.index(defaults.font_size),
        key="font_size",
        disabled=disabled,
    )

    form.update_options(
        position=position,
        alignment=alignment,
        include_total_pages=include_total_pages,
        start_page=int(start_page),
        font_size=font_size,
        skip_cover_pages=skip_cover_pages,
        cover_pages_to_skip=int(cover_pages_to_skip),
        include_cover_in_total=include_cover_in_total,
    )


def render_result(form: NumberingForm):
    """Show the download button and an optional preview."""
    result = form.result
    st.download_button(
        label="📥 Download numbered PDF",
        data=result.data,
        file_name=result.filename,
        mime="application/pdf",
        type="primary",
    )
    st.caption(f"{result.labelled_pages} of {result.page_count} pages numbered")

    if config.SHOW_PREVIEW and result.labelled_pages:
        first_labelled = form.options.skipped_page_count
        try:
            png = form.numberer.render_preview(result.data, first_labelled, dpi=config.PREVIEW_DPI)
        except Exception as e:
            logger.warning("Preview failed for %s: %s", result.filename, e)
        else:
            with st.expander("👁️ Preview", expanded=False):
                st.image(png, caption=f"Page {first_labelled + 1}")


def main():
    form = st.session_state.form

    st.title(f"{config.PAGE_ICON} {config.PAGE_TITLE}")
    st.write("Add page numbers to a PDF file. Nothing is stored once you close the page.")

    uploaded_file = st.file_uploader(
        "Choose a PDF file or drop it here",
        type="pdf",
        accept_multiple_files=False,
        disabled=form.processing,
        key="pdf_file",
    )
    sync_uploaded_file(form, uploaded_file)

    if form.has_file:
        summary = f"📎 Selected: {form.file_name}"
        if form.document_info:
            summary += f" ({form.inspector.describe(form.document_info)})"
        st.info(summary)

    st.markdown("---")
    render_options(form)

    warning = form.cover_skip_warning()
    if warning:
        st.warning(f"⚠️ {warning}")

    st.markdown("---")

    if st.button(
        "⏳ Processing..." if form.processing else "🔢 Add page numbers",
        type="primary",
        disabled=not form.can_submit,
        key="submit",
    ):
        with st.spinner("Processing..."):
            form.submit()

    if form.status:
        if form.status == STATUS_DONE:
            st.success(form.status)
        elif form.status.startswith(STATUS_ERROR_PREFIX):
            st.error(form.status)
        else:
            st.info(form.status)

    if form.result is not None:
        render_result(form)


if __name__ == "__main__":
    main()
