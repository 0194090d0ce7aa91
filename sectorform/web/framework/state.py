from __future__ import annotations

from typing import Any, Dict

import streamlit as st

from sectorform.adapters.session_store import QueryParamSessionStore
from sectorform.app import FormController, create_form_controller, create_session_store
from sectorform.config import Settings, get_settings
from sectorform.ports.session_store import SessionIdStore
from sectorform.web.utils import run_async

CONTROLLER_KEY = "form_controller"
SYNC_FLAG_KEY = "form_needs_sync"


def ensure_defaults(defaults: Dict[str, Any]) -> None:
    """Ensure session_state has default values for keys."""
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def browser_session_store(settings: Settings) -> SessionIdStore:
    """Session id storage for the current browser (URL query params unless configured as file)."""
    if settings.session_backend == "file":
        return create_session_store(settings)
    return QueryParamSessionStore(st.query_params)


def get_controller() -> FormController:
    """One FormController per browser session, initialized on first access."""
    controller = st.session_state.get(CONTROLLER_KEY)
    if controller is None:
        settings = get_settings()
        controller = create_form_controller(settings, session_store=browser_session_store(settings))
        run_async(controller.initialize())
        st.session_state[CONTROLLER_KEY] = controller
        request_sync()
    return controller


def request_sync() -> None:
    """Ask the next render to copy controller state into the form widgets."""
    st.session_state[SYNC_FLAG_KEY] = True


def pop_sync_request() -> bool:
    return bool(st.session_state.pop(SYNC_FLAG_KEY, False))
