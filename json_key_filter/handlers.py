from __future__ import annotations

import logging
from typing import Optional

import gradio as gr

from .errors import JsonKeyFilterError
from .session import FilterSession

logger = logging.getLogger(__name__)


def _session(session: Optional[FilterSession]) -> FilterSession:
    return session if isinstance(session, FilterSession) else FilterSession()


def _unloaded(message: str):
    return FilterSession(), message, None, None, None, gr.update(interactive=False)


def load_json_handler(file_obj):
    """Upload handler.

    Returns session, status, original preview, filtered preview, download file
    and an update for the download button. A failed load resets everything.
    """
    if file_obj is None:
        return _unloaded("No file uploaded.")

    try:
        session = FilterSession.load_file(file_obj)
    except JsonKeyFilterError as e:
        logger.warning("Load failed: %s", e)
        return _unloaded(f"Error: {e}")

    message = f"Successfully loaded {session.file_name or 'document'}. Found {len(session.entries)} unique keys."
    return (
        session,
        message,
        session.document,
        session.current_filtered(),
        None,
        gr.update(interactive=True),
    )


def toggle_key_handler(path: str, session):
    session = _session(session).toggle(path)
    return session, session.current_filtered(), session.summary()


def select_all_handler(session):
    session = _session(session).select_all()
    return session, session.current_filtered(), session.summary()


def deselect_all_handler(session):
    session = _session(session).deselect_all()
    return session, session.current_filtered(), session.summary()


def search_handler(term: str, session):
    return _session(session).with_search(term)


def expand_handler(path: str, is_open: bool, session):
    return _session(session).set_expanded(path, is_open)


def download_handler(session):
    try:
        path = _session(session).export()
    except JsonKeyFilterError as e:
        return None, f"Error: {e}"
    except OSError as e:
        return None, f"Error during export: {str(e)}"
    return path, f"Export successful! Saved to {path}"
