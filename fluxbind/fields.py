from collections.abc import Mapping
from enum import StrEnum
from typing import Any, Self

from loguru import logger
from pydantic import ValidationError
from pydantic.dataclasses import dataclass


class FieldSpecKind(StrEnum):
    ORDERED_KEYS = "ordered_keys"
    KEYED_SET = "keyed_set"


@dataclass(frozen=True)
class FieldSpec:
    """Field names to bind, tagged with the shape they were given in.

    ``ORDERED_KEYS`` comes from a list or tuple of names, ``KEYED_SET`` from a
    mapping whose keys are the names (the values are ignored).
    """

    kind: FieldSpecKind
    names: tuple[str, ...] = ()

    @classmethod
    def empty(cls) -> Self:
        return cls(FieldSpecKind.ORDERED_KEYS, ())

    @classmethod
    def from_input(cls, fields: Any) -> Self:
        if isinstance(fields, FieldSpec):
            return fields

        try:
            if isinstance(fields, (list, tuple)):
                return cls(FieldSpecKind.ORDERED_KEYS, tuple(fields))
            if isinstance(fields, Mapping):
                return cls(FieldSpecKind.KEYED_SET, tuple(fields.keys()))
        except ValidationError as e:
            logger.warning(f"Invalid field names {fields!r}: {e.error_count()} error(s)")
            return cls.empty()

        logger.warning(f"Invalid field spec: {fields!r}")
        return cls.empty()

    def __iter__(self):
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)
