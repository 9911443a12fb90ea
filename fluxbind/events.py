from dataclasses import dataclass, field
from typing import Any

import flet as ft
from loguru import logger


@dataclass
class Event:
    """Structured event published on a page's pub/sub under its name."""

    target: Any
    name: str
    detail: dict = field(default_factory=dict)


def _page_of(control: ft.Control) -> ft.Page | None:
    try:
        return control.page
    except (AttributeError, RuntimeError):
        # flet raises when the control has not been added to a page yet
        return None


def _publish(page: ft.Page, event: Event) -> bool:
    logger.debug(f"emit {event.name} on {event.target.__class__.__name__}: {event.detail}")
    page.pubsub.send_all_on_topic(event.name, event)
    return True


def emit(control: ft.Control, event_name: str, detail: dict | None = None) -> bool:
    """Publish ``event_name`` with ``detail`` on the page ``control`` belongs to.

    Subscribers receive ``(topic, Event)`` through ``page.pubsub.subscribe_topic``.
    Returns False when the control is not attached to a page.
    """
    page = _page_of(control)
    if page is None:
        logger.warning(f"{control.__class__.__name__} is not attached to a page")
        return False

    return _publish(page, Event(control, event_name, detail or {}))


def emit_global(page: ft.Page, event_name: str, detail: dict | None = None) -> bool:
    """Publish ``event_name`` with the page itself as the target."""
    return _publish(page, Event(page, event_name, detail or {}))
