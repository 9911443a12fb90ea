import pytest

from fluxbind import config
from fluxbind.observer import ObservedList, observe


class Recorder:
    def __init__(self):
        self.calls = []

    def __call__(self, collection, op, args):
        self.calls.append((list(collection), op, args))


def test_callback_sees_post_mutation_state() -> None:
    recorder = Recorder()
    observed = observe([1, 2, 3], recorder, ["append"])

    result = observed.append(9)

    assert result is None
    assert observed == [1, 2, 3, 9]
    assert recorder.calls == [([1, 2, 3, 9], "append", (9,))]


def test_callback_receives_the_observed_collection() -> None:
    received = []
    observed = observe([1], lambda c, op, args: received.append(c))

    observed.append(2)

    assert received[0] is observed


def test_default_operations_fire_once_each_in_order() -> None:
    recorder = Recorder()
    observed = observe([3, 1, 2], recorder)

    assert observed.pop() == 2
    observed.append(5)
    observed.reverse()
    assert observed.popleft() == 5
    observed.appendleft(0)
    assert observed.splice(1, 1, 7, 8) == [1]
    observed.sort()
    assert len(observed) == 4
    assert 7 in observed
    assert observed[0] == 0
    assert list(observed) == [0, 3, 7, 8]

    assert [op for _, op, _ in recorder.calls] == list(config.DEFAULT_OBSERVED_OPERATIONS)


def test_unlisted_operations_do_not_fire() -> None:
    recorder = Recorder()
    observed = observe([1, 2], recorder, ["append"])

    observed.pop()
    observed.insert(0, 4)
    observed[0] = 5

    assert recorder.calls == []
    assert observed.target == [5, 1]


def test_extra_operations_can_be_observed() -> None:
    recorder = Recorder()
    observed = observe([1, 2], recorder, ["__setitem__", "extend", "clear"])

    observed[0] = 9
    observed += [3]
    observed.clear()

    assert [(op, args) for _, op, args in recorder.calls] == [
        ("__setitem__", (0, 9)),
        ("extend", ([3],)),
        ("clear", ()),
    ]


def test_keyword_arguments_are_reported() -> None:
    recorder = Recorder()
    observed = observe([1, 3, 2], recorder, ["sort"])

    observed.sort(reverse=True)

    assert recorder.calls == [([3, 2, 1], "sort", ({"reverse": True},))]


def test_failing_operation_skips_callback() -> None:
    recorder = Recorder()
    observed = observe([], recorder)

    with pytest.raises(IndexError):
        observed.pop()
    assert recorder.calls == []


def test_observe_wraps_without_copying() -> None:
    items = [1]
    observed = observe(items, lambda *a: None)

    observed.append(2)

    assert isinstance(observed, ObservedList)
    assert observed.target is items
    assert items == [1, 2]


def test_reobserve_replaces_callback() -> None:
    first, second = Recorder(), Recorder()
    observed = observe([1], first)

    again = observe(observed, second, ["append"])
    again.append(2)

    assert again is observed
    assert first.calls == []
    assert second.calls == [([1, 2], "append", (2,))]


def test_splice_edge_cases() -> None:
    observed = observe([1, 2, 3, 4], lambda *a: None)

    assert observed.splice(-2) == [3, 4]
    assert observed == [1, 2]
    assert observed.splice(10, 1, 5) == []
    assert observed == [1, 2, 5]
    assert observed.splice(0) == [1, 2, 5]
    assert observed == []


def test_reentrant_callback_recurses_synchronously() -> None:
    seen = []

    def callback(collection, op, args):
        seen.append(args)
        if len(collection) < 3:
            collection.append(len(collection))

    observed = observe([], callback, ["append"])
    observed.append(0)

    assert observed == [0, 1, 2]
    assert seen == [(0,), (1,), (2,)]


def test_unknown_operations_are_skipped(warnings_logged) -> None:
    observed = observe([], lambda *a: None, ["append", "shuffle"])

    assert observed.operations == frozenset({"append"})
    assert len(warnings_logged) == 1


def test_non_list_operations_fall_back_to_defaults(warnings_logged) -> None:
    observed = observe([], lambda *a: None, "append")

    assert observed.operations == frozenset(config.DEFAULT_OBSERVED_OPERATIONS)
    assert len(warnings_logged) == 1
