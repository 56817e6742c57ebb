import threading

import pytest

from scheep.errors import ArityMismatch, InvalidEnvironment, UnboundVariable
from scheep.types.environment import (
    THE_EMPTY_ENVIRONMENT,
    Environment,
    Frame,
    extend_environment,
    make_environment,
)
from scheep.types.symbol import Symbol

x, y, z = Symbol("x"), Symbol("y"), Symbol("z")


@pytest.fixture
def outer():
    return make_environment([(x, 1), (y, 2)])


def test_extend_pairs_names_positionally(outer):
    inner = extend_environment(outer, [x, z], [10, 30])
    assert inner.lookup(x) == 10
    assert inner.lookup(z) == 30
    assert inner.lookup(y) == 2


def test_extend_does_not_touch_parent(outer):
    outer.extend([x], [99])
    assert outer.lookup(x) == 1
    assert len(outer.frame) == 2


@pytest.mark.parametrize("names,values", [([x, y], [1]), ([x], [1, 2]), ([], [1])])
def test_extend_with_mismatched_lengths_raises(outer, names, values):
    with pytest.raises(ArityMismatch) as info:
        outer.extend(names, values)
    assert info.value.expected == len(names)
    assert info.value.got == len(values)


def test_lookup_unbound_reports_name(outer):
    with pytest.raises(UnboundVariable) as info:
        outer.lookup(z)
    assert info.value.name == z


def test_lookup_in_empty_environment_fails():
    with pytest.raises(UnboundVariable):
        THE_EMPTY_ENVIRONMENT.lookup(x)


def test_define_shadows_without_mutating_outer(outer):
    inner = outer.extend([], [])
    inner.define(x, 100)
    assert inner.lookup(x) == 100
    assert outer.lookup(x) == 1


def test_define_overwrites_in_place(outer):
    outer.define(x, 5)
    outer.define(x, 6)
    assert outer.lookup(x) == 6
    assert len(outer.frame) == 2


def test_define_into_empty_environment_is_rejected():
    with pytest.raises(InvalidEnvironment):
        THE_EMPTY_ENVIRONMENT.define(x, 1)


def test_assign_mutates_nearest_binding(outer):
    middle = outer.extend([x], [10])
    inner = middle.extend([], [])
    inner.assign(x, 11)
    assert middle.lookup(x) == 11
    assert outer.lookup(x) == 1
    inner.assign(y, 22)
    assert outer.lookup(y) == 22


def test_assign_unbound_fails_and_binds_nothing(outer):
    with pytest.raises(UnboundVariable):
        outer.assign(z, 3)
    assert z not in outer.frame


def test_shared_parent_mutation_visible_to_all_children(outer):
    first = outer.extend([z], [1])
    second = outer.extend([z], [2])
    first.assign(y, 42)
    assert second.lookup(y) == 42
    assert outer.lookup(y) == 42


def test_frames_are_innermost_first(outer):
    inner = outer.extend([z], [3])
    frames = list(inner.frames())
    assert frames[0] is inner.frame
    assert frames[1] is outer.frame
    assert list(THE_EMPTY_ENVIRONMENT.frames()) == []


def test_find_frame(outer):
    inner = outer.extend([z], [3])
    assert inner.find_frame(y) is outer.frame
    assert inner.find_frame(Symbol("nope")) is None


def test_frame_replace_only_existing():
    frame = Frame({x: 1})
    assert frame.replace(x, 2)
    assert not frame.replace(y, 3)
    assert frame.items() == [(x, 2)]


def test_concurrent_defines_are_all_visible():
    env = Environment(Frame(), THE_EMPTY_ENVIRONMENT)
    names = [Symbol(f"v{i}") for i in range(200)]

    def worker(chunk):
        for name in chunk:
            env.define(name, str(name))

    threads = [threading.Thread(target=worker, args=(names[i::4],)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert len(env.frame) == 200
    assert all(env.lookup(n) == str(n) for n in names)
