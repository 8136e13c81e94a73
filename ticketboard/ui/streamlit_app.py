from __future__ import annotations

import atexit
import logging

import streamlit as st

from ticketboard.core.config import get_settings
from ticketboard.core.logging import configure_logging, init_tracer, shutdown_tracer
from ticketboard.counter import Counter
from ticketboard.tickets import MAX_RATING, TicketFormController, TicketStatus, TicketStore, status_label
from ticketboard.tickets.session import SessionMode
from ticketboard.ui.view import TicketRow, build_rows

logger = logging.getLogger(__name__)

_STATUS_OPTIONS: list[TicketStatus] = list(TicketStatus)
_ALL_STATUSES = "all"


@st.cache_resource
def _get_store() -> TicketStore:
    """Board shared by every browser session for the lifetime of the process."""

    settings = get_settings()
    configure_logging(settings)
    provider = init_tracer(settings)
    if provider is not None:
        atexit.register(shutdown_tracer)

    store = TicketStore.with_examples() if settings.seed_examples else TicketStore()
    logger.info("Ticket board started with %d tickets", len(store))
    return store


def _get_controller(store: TicketStore) -> TicketFormController:
    controller = st.session_state.get("ticket_form")
    if isinstance(controller, TicketFormController):
        return controller
    controller = TicketFormController(store)
    st.session_state["ticket_form"] = controller
    return controller


def _get_counter() -> Counter:
    counter = st.session_state.get("counter")
    if isinstance(counter, Counter):
        return counter
    counter = Counter()
    st.session_state["counter"] = counter
    return counter


def _render_status_badge(row: TicketRow) -> None:
    st.markdown(
        f"<span style='background-color:{row.status_color};color:white;"
        f"padding:2px 8px;border-radius:8px'>{row.status_label}</span>",
        unsafe_allow_html=True,
    )


def _render_rating(store: TicketStore, row: TicketRow) -> None:
    star_cols = st.columns(MAX_RATING)
    for position, (col, star) in enumerate(zip(star_cols, row.stars), start=1):
        col.button(
            star,
            key=f"rate-{row.id}-{position}",
            on_click=store.rate,
            args=(row.id, position),
        )


def _render_ticket_row(store: TicketStore, controller: TicketFormController, row: TicketRow) -> None:
    with st.container(border=True):
        text_col, edit_col, delete_col = st.columns([6, 1, 1])
        text_col.markdown(f"**{row.title}**")
        text_col.write(row.description)
        with text_col:
            _render_status_badge(row)

        ticket = store.get(row.id)
        edit_col.button(
            "Edit",
            key=f"edit-{row.id}",
            on_click=controller.open_for_edit,
            args=(ticket,),
            disabled=controller.is_open or ticket is None,
        )
        delete_col.button(
            "Delete",
            key=f"delete-{row.id}",
            on_click=store.delete,
            args=(row.id,),
            disabled=controller.is_open,
        )

        if row.show_rating:
            _render_rating(store, row)


def _render_ticket_form(controller: TicketFormController) -> None:
    session = controller.session
    if session is None:
        return

    heading = "New Ticket" if session.mode is SessionMode.CREATE else "Edit Ticket"
    with st.container(border=True):
        st.markdown(f"### {heading}")
        with st.form("ticket_form"):
            title = st.text_input("Title", value=session.title)
            description = st.text_area("Description", value=session.description)
            status = st.radio(
                "Status",
                options=_STATUS_OPTIONS,
                index=_STATUS_OPTIONS.index(session.status),
                format_func=status_label,
                horizontal=True,
            )
            save_col, cancel_col = st.columns(2)
            saved = save_col.form_submit_button("Save")
            cancelled = cancel_col.form_submit_button("Cancel")

    if saved:
        controller.set_field("title", title)
        controller.set_field("description", description)
        controller.set_field("status", status)
        controller.save()
        st.rerun()
    elif cancelled:
        controller.cancel()
        st.rerun()


def _render_ticket_tab(store: TicketStore) -> None:
    controller = _get_controller(store)

    header_col, add_col = st.columns([6, 1])
    header_col.subheader("Tickets")
    add_col.button("Add", on_click=controller.open_for_create, disabled=controller.is_open)

    _render_ticket_form(controller)

    filter_options: list[str] = [_ALL_STATUSES] + [status.value for status in _STATUS_OPTIONS]
    selected = st.selectbox(
        "Show",
        options=filter_options,
        format_func=lambda value: "All" if value == _ALL_STATUSES else status_label(TicketStatus(value)),
    )
    status_filter = None if selected == _ALL_STATUSES else TicketStatus(selected)

    rows = build_rows(store.list_tickets(status=status_filter))
    if not rows:
        st.caption("No tickets yet")
    for row in rows:
        _render_ticket_row(store, controller, row)


def _render_counter_tab() -> None:
    counter = _get_counter()

    st.subheader("Counter App")
    st.metric("Count", counter.count)

    decrement_col, reset_col, increment_col = st.columns(3)
    decrement_col.button("-", on_click=counter.decrement, width="stretch")
    reset_col.button("Reset", on_click=counter.reset, width="stretch")
    increment_col.button("+", on_click=counter.increment, width="stretch")


def main() -> None:
    settings = get_settings()
    st.set_page_config(page_title=settings.app_name, layout="centered")
    store = _get_store()

    tickets_tab, counter_tab = st.tabs(["Tickets", "Counter"])
    with tickets_tab:
        _render_ticket_tab(store)
    with counter_tab:
        _render_counter_tab()


if __name__ == "__main__":
    main()
