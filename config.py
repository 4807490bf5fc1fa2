"""Configuration file for the PDF page numbering app."""
import os
from dotenv import load_dotenv
import streamlit as st


# Load environment variables
load_dotenv()


def _get_setting(name: str, default: str) -> str:
    """Read a setting from Streamlit secrets, then the environment."""
    try:
        if name in st.secrets:
            return str(st.secrets[name])
    except Exception:
        # No secrets.toml available
        pass
    return os.getenv(name, default)


def _get_bool(name: str, default: bool) -> bool:
    return _get_setting(name, str(default)).strip().lower() in ("1", "true", "yes", "on")


# Logging
LOG_LEVEL = _get_setting("LOG_LEVEL", "INFO")

# Preview of the numbered output
SHOW_PREVIEW = _get_bool("SHOW_PREVIEW", True)
PREVIEW_DPI = int(_get_setting("PREVIEW_DPI", "72"))

# Form choices
FONT_SIZE_CHOICES = [10, 12, 14, 16, 18]

# Page Configuration
PAGE_TITLE = "PDF Page Numbering"
PAGE_ICON = "🔢"
