from collections.abc import Callable, Iterable, MutableSequence
from functools import wraps
from typing import Any

from loguru import logger

from . import config

ObserveCallback = Callable[["ObservedList", str, tuple], None]


def _resolve_operations(operations: Iterable[str] | None) -> frozenset[str]:
    if operations is None:
        return frozenset(config.DEFAULT_OBSERVED_OPERATIONS)
    if not isinstance(operations, (list, tuple, set, frozenset)):
        logger.warning(f"Invalid operation list: {operations!r}. Using defaults")
        return frozenset(config.DEFAULT_OBSERVED_OPERATIONS)

    resolved = set()
    for op in operations:
        if op in config.SUPPORTED_OPERATIONS:
            resolved.add(op)
        else:
            logger.warning(f"Unsupported operation skipped: {op!r}")
    return frozenset(resolved)


def _instrumented(method):
    """Run the list operation, then report it if it is being observed."""
    op = method.__name__

    @wraps(method)
    def wrapper(self, *args, **kwargs):
        result = method(self, *args, **kwargs)
        if op in self._operations:
            arguments = args + (kwargs,) if kwargs else args
            self._callback(self, op, arguments)
        return result

    return wrapper


class ObservedList(MutableSequence):
    """Proxy over a list whose selected in-place operations fire a callback.

    The callback is called as ``callback(observed, operation, args)`` after the
    underlying list has been changed, and the operation's own return value is
    passed back to the caller untouched. When the operation raises, the callback
    is skipped.
    """

    def __init__(
        self,
        target: list,
        callback: ObserveCallback,
        operations: Iterable[str] | None = None,
    ):
        self._target = target
        self._callback = callback
        self._operations = _resolve_operations(operations)

    @property
    def target(self) -> list:
        return self._target

    @property
    def operations(self) -> frozenset[str]:
        return self._operations

    def rebind(
        self, callback: ObserveCallback, operations: Iterable[str] | None = None
    ):
        self._callback = callback
        self._operations = _resolve_operations(operations)

    # read-only access is forwarded as-is

    def __getitem__(self, index):
        return self._target[index]

    def __len__(self) -> int:
        return len(self._target)

    def __iter__(self):
        return iter(self._target)

    def __contains__(self, value) -> bool:
        return value in self._target

    def __eq__(self, other) -> bool:
        if isinstance(other, ObservedList):
            return self._target == other._target
        if isinstance(other, list):
            return self._target == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self._target!r})"

    def index(self, value, *args) -> int:
        return self._target.index(value, *args)

    def count(self, value) -> int:
        return self._target.count(value)

    # mutating operations

    @_instrumented
    def pop(self, index: int = -1) -> Any:
        return self._target.pop(index)

    @_instrumented
    def append(self, value: Any):
        self._target.append(value)

    @_instrumented
    def reverse(self):
        self._target.reverse()

    @_instrumented
    def popleft(self) -> Any:
        return self._target.pop(0)

    @_instrumented
    def appendleft(self, value: Any):
        self._target.insert(0, value)

    @_instrumented
    def splice(self, start: int, delete_count: int | None = None, *items) -> list:
        """Remove ``delete_count`` items at ``start`` and insert ``items`` there.

        ``delete_count=None`` removes everything from ``start`` to the end.
        Returns the removed items.
        """
        size = len(self._target)
        if start < 0:
            start = max(size + start, 0)
        else:
            start = min(start, size)
        if delete_count is None:
            end = size
        else:
            end = start + max(delete_count, 0)

        removed = self._target[start:end]
        self._target[start:end] = items
        return removed

    @_instrumented
    def sort(self, *, key=None, reverse: bool = False):
        self._target.sort(key=key, reverse=reverse)

    @_instrumented
    def insert(self, index: int, value: Any):
        self._target.insert(index, value)

    @_instrumented
    def extend(self, values: Iterable):
        self._target.extend(values)

    @_instrumented
    def remove(self, value: Any):
        self._target.remove(value)

    @_instrumented
    def clear(self):
        self._target.clear()

    @_instrumented
    def __setitem__(self, index, value):
        self._target[index] = value

    @_instrumented
    def __delitem__(self, index):
        del self._target[index]

    def __iadd__(self, values):
        self.extend(values)
        return self


def observe(
    collection: list | ObservedList,
    callback: ObserveCallback,
    operations: Iterable[str] | None = None,
) -> ObservedList:
    """Make in-place changes of ``collection`` observable.

    Observing an already observed list replaces its callback and operation set
    and returns the same proxy.
    """
    if isinstance(collection, ObservedList):
        collection.rebind(callback, operations)
        logger.debug(f"Rebound observer for operations: {sorted(collection.operations)}")
        return collection

    observed = ObservedList(collection, callback, operations)
    logger.debug(f"Observing list for operations: {sorted(observed.operations)}")
    return observed
