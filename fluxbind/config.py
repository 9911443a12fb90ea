# Suffixes of the collection mutators generated for list-valued state keys
ARR_CLEAR_SUFFIX = "ArrClear"
ARR_PUSH_SUFFIX = "ArrPush"

# remove-last, append-last, reverse, remove-first, insert-first, splice, sort
DEFAULT_OBSERVED_OPERATIONS = (
    "pop",
    "append",
    "reverse",
    "popleft",
    "appendleft",
    "splice",
    "sort",
)

SUPPORTED_OPERATIONS = DEFAULT_OBSERVED_OPERATIONS + (
    "insert",
    "extend",
    "remove",
    "clear",
    "__setitem__",
    "__delitem__",
)

DATA_ATTRIBUTE_PREFIX = "data-"
