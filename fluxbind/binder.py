from dataclasses import dataclass
from typing import Any

from loguru import logger

from .fields import FieldSpec
from .store import StoreLike


@dataclass(frozen=True, eq=False)
class Accessor:
    """Read/write pair bound to one store key.

    Borrows the store; nothing is cached, every ``read`` goes through the
    store's getters and every ``write`` commits the mutation of the same name.
    """

    store: StoreLike
    key: str

    def read(self) -> Any:
        return self.store.getters[self.key]

    def write(self, value: Any):
        self.store.commit(self.key, value)


def bind(fields, store: StoreLike) -> dict[str, Accessor]:
    spec = FieldSpec.from_input(fields)
    return {name: Accessor(store, name) for name in spec}


def _field_property(name: str, store_attr: str) -> property:
    def fget(self):
        return getattr(self, store_attr).getters[name]

    def fset(self, value):
        getattr(self, store_attr).commit(name, value)

    return property(fget, fset, doc=f"Store-backed field '{name}'")


def map_fields(fields, store_attr: str = "store") -> dict[str, property]:
    """Map store fields to properties reading ``getattr(self, store_attr)``."""
    spec = FieldSpec.from_input(fields)
    return {name: _field_property(name, store_attr) for name in spec}


def bind_fields(fields, store_attr: str = "store"):
    """Class decorator installing :func:`map_fields` properties."""
    properties = map_fields(fields, store_attr)

    def decorator(cls):
        for name, prop in properties.items():
            if name in cls.__dict__:
                logger.warning(f"{cls.__name__}.{name} is overwritten by a store field")
            setattr(cls, name, prop)
        return cls

    return decorator
