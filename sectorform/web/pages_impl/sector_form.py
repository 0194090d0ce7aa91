from __future__ import annotations

from typing import Dict, List

import streamlit as st

from sectorform.app import FormController
from sectorform.web.framework.state import (
    ensure_defaults,
    get_controller,
    pop_sync_request,
    request_sync,
)
from sectorform.web.utils import run_async

KEY_USERNAME = "form_username"
KEY_SECTORS = "form_sectors"
KEY_AGREE = "form_agree_of_terms"

WIDGET_DEFAULTS = {KEY_USERNAME: "", KEY_SECTORS: [], KEY_AGREE: False}


def _sync_widgets(controller: FormController) -> None:
    """Copy FormState into widget keys. Must run before the widgets are created."""
    state = controller.state
    option_ids = {s.id for s in controller.sectors}
    st.session_state[KEY_USERNAME] = state.username
    # multiselect rejects values that are not among its options
    st.session_state[KEY_SECTORS] = sorted(i for i in state.selected_sector_ids if i in option_ids)
    st.session_state[KEY_AGREE] = state.agree_of_terms


def _on_destroy_session() -> None:
    controller = get_controller()
    controller.destroy_session()
    request_sync()


def _render_feedback(controller: FormController) -> None:
    state = controller.state
    if state.errors:
        st.error("Please correct the following error(s):\n" + "\n".join(f"- {m}" for m in state.errors))
    if state.submitted_at is not None:
        st.success(f"Saved at {controller.clock.format_display(state.submitted_at)}")


def render() -> None:
    controller = get_controller()
    ensure_defaults(WIDGET_DEFAULTS)
    if pop_sync_request():
        _sync_widgets(controller)

    st.title("Sectors")
    st.caption("Please enter your name and pick the Sectors you are currently involved in.")

    sectors = controller.sectors
    labels: Dict[int, str] = {s.id: s.name for s in sectors}
    if not sectors:
        st.info("Sector list is not available right now.")

    with st.form("sector_form"):
        st.text_input("Name", key=KEY_USERNAME)
        st.multiselect(
            "Sectors",
            options=[s.id for s in sectors],
            format_func=lambda sid: labels.get(sid, str(sid)),
            key=KEY_SECTORS,
        )
        st.checkbox("Agree to terms", key=KEY_AGREE)
        submitted = st.form_submit_button("Save", use_container_width=True)

    if submitted:
        selected: List[int] = list(st.session_state.get(KEY_SECTORS) or [])
        controller.update(
            username=st.session_state.get(KEY_USERNAME) or "",
            agree_of_terms=bool(st.session_state.get(KEY_AGREE)),
            selected_sector_ids=selected,
        )
        ok = run_async(controller.submit())
        if ok:
            # values may have been reloaded from the new session
            request_sync()
            st.rerun()

    _render_feedback(controller)

    session_id = controller.active_session_id
    if session_id is not None:
        st.markdown("---")
        st.caption(f"Active session: `{session_id}`")
        st.button("Start new session", on_click=_on_destroy_session, use_container_width=True)
