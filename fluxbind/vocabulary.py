"""Getter and mutation tables generated from an initial state shape.

Every key gets a getter and a plain setter mutation. Keys whose initial value
is a list additionally get ``<key>ArrClear`` and ``<key>ArrPush``, which change
the list in place so anything holding a reference to it (an observed list in
particular) stays attached.
"""

from collections.abc import Callable, Mapping, MutableSequence
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from . import config

Getter = Callable[[Mapping[str, Any]], Any]
Mutation = Callable[[dict[str, Any], Any], None]


@dataclass
class Vocabulary:
    state: dict[str, Any]
    getters: dict[str, Getter] = field(default_factory=dict)
    mutations: dict[str, Mutation] = field(default_factory=dict)


def is_ordered_sequence(value: Any) -> bool:
    return isinstance(value, MutableSequence)


def _make_getter(key: str) -> Getter:
    def getter(state):
        return state[key]

    getter.__name__ = key
    return getter


def _make_setter(key: str) -> Mutation:
    def setter(state, payload):
        state[key] = payload

    setter.__name__ = key
    return setter


def _make_clear(key: str) -> Mutation:
    def clear(state, payload=None):
        seq = state[key]
        # observed lists report a splice, other sequences are cleared directly
        splice = getattr(seq, "splice", None)
        if splice is not None:
            splice(0)
        else:
            seq.clear()

    clear.__name__ = f"{key}{config.ARR_CLEAR_SUFFIX}"
    return clear


def _make_push(key: str) -> Mutation:
    def push(state, payload):
        state[key].append(payload)

    push.__name__ = f"{key}{config.ARR_PUSH_SUFFIX}"
    return push


def make_getters(state_shape: Mapping[str, Any]) -> dict[str, Getter]:
    """Create one ``state -> state[key]`` getter per key."""
    return {key: _make_getter(key) for key in state_shape}


def make_mutations(state_shape: Mapping[str, Any]) -> dict[str, Mutation]:
    """Create the setter and, for list values, the collection mutators."""
    mutations: dict[str, Mutation] = {}
    for key, value in state_shape.items():
        mutations[key] = _make_setter(key)
        if is_ordered_sequence(value):
            mutations[f"{key}{config.ARR_CLEAR_SUFFIX}"] = _make_clear(key)
            mutations[f"{key}{config.ARR_PUSH_SUFFIX}"] = _make_push(key)

    logger.debug(f"Generated {len(mutations)} mutations for {len(state_shape)} keys")
    return mutations


def _own_copy(value: Any) -> Any:
    # plain lists are copied so stores built from one shape do not share them
    if isinstance(value, list):
        return list(value)
    return value


def make_vocabulary(state_shape: Mapping[str, Any]) -> Vocabulary:
    return Vocabulary(
        state={key: _own_copy(value) for key, value in state_shape.items()},
        getters=make_getters(state_shape),
        mutations=make_mutations(state_shape),
    )
