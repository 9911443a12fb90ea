from collections.abc import Callable, Mapping
from typing import Any

from loguru import logger


def normalize_class_list(classes: Any) -> list[str]:
    """Return class names from a space separated string or a list."""
    if isinstance(classes, str):
        return classes.split()
    if isinstance(classes, (list, tuple)):
        return list(classes)

    logger.warning(f"Invalid class list: {classes!r}")
    return []


def make_class_object(classes: Any, defaults: Any = None) -> dict[str, bool]:
    """Normalize classes into a ``{class_name: enabled}`` mapping.

    ``classes`` may be a string, a list, a mapping, or a callable returning one
    of those. Entries of ``defaults`` take precedence.
    """
    class_obj: dict[str, bool] = {}

    if isinstance(classes, (str, list, tuple)):
        class_obj = {name: True for name in normalize_class_list(classes)}
    elif isinstance(classes, Mapping):
        class_obj = dict(classes)
    elif isinstance(classes, Callable):
        class_obj = make_class_object(classes())
    elif classes:
        logger.warning(f"Unknown classes value: {classes!r}")

    if defaults:
        class_obj.update(make_class_object(defaults))

    return class_obj


def append_classes(current: str | None, adding: Any) -> str:
    classes = normalize_class_list(current or "")
    for name in normalize_class_list(adding):
        if name not in classes:
            classes.append(name)
    return " ".join(classes)


def remove_classes(current: str | None, removing: Any) -> str:
    removed = set(normalize_class_list(removing))
    return " ".join(c for c in normalize_class_list(current or "") if c not in removed)
