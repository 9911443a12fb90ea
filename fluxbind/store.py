from collections.abc import Callable, Iterator, Mapping
from dataclasses import dataclass
from typing import Any, Protocol, Self

from loguru import logger

from .vocabulary import Getter, Mutation, make_vocabulary


class StoreLike(Protocol):
    @property
    def getters(self) -> Mapping[str, Any]: ...

    def commit(self, name: str, payload: Any = None): ...


@dataclass(frozen=True)
class MutationRecord:
    name: str
    payload: Any


class GetterView(Mapping):
    """Read-only view that evaluates each getter against the current state."""

    def __init__(self, store: "Store"):
        self._store = store

    def __getitem__(self, key: str) -> Any:
        getter = self._store._getters.get(key)
        if getter is None:
            raise KeyError(f"Getter '{key}' not found in Store.")
        return getter(self._store.state)

    def __iter__(self) -> Iterator[str]:
        return iter(self._store._getters)

    def __len__(self) -> int:
        return len(self._store._getters)


class Store:
    """Shared state that only changes through named mutations."""

    def __init__(
        self,
        state: dict[str, Any],
        getters: dict[str, Getter] | None = None,
        mutations: dict[str, Mutation] | None = None,
    ):
        self.state = state
        self._getters = {} if getters is None else dict(getters)
        self._mutations = {} if mutations is None else dict(mutations)
        self._subscribers: list[Callable[[MutationRecord, dict], None]] = []
        self._getter_view = GetterView(self)

    @classmethod
    def from_state(cls, state_shape: Mapping[str, Any]) -> Self:
        vocabulary = make_vocabulary(state_shape)
        return cls(vocabulary.state, vocabulary.getters, vocabulary.mutations)

    @property
    def getters(self) -> GetterView:
        return self._getter_view

    @property
    def mutations(self) -> tuple[str, ...]:
        return tuple(self._mutations)

    def commit(self, name: str, payload: Any = None):
        """Apply the mutation ``name`` and notify subscribers afterwards."""
        mutation = self._mutations.get(name)
        if mutation is None:
            raise KeyError(f"Mutation '{name}' not found in Store.")

        mutation(self.state, payload)
        logger.debug(f"{self.__class__.__name__} committed mutation: {name}")

        record = MutationRecord(name, payload)
        for subscriber in list(self._subscribers):
            subscriber(record, self.state)

    def subscribe(
        self, callback: Callable[[MutationRecord, dict], None]
    ) -> Callable[[], None]:
        """Bind a callback to every committed mutation.

        Returns a function that removes the callback again.
        """
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe
