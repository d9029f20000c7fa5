import pytest
from pydantic import ValidationError

from funseq.core import (
    IndexedIterator,
    InvalidIndexError,
    IteratorExhaustedError,
    OrderedSet,
    Pair,
    Sequence,
    SList,
    Tuple,
)


@pytest.fixture(params=[SList, OrderedSet, Tuple])
def container_cls(request):
    return request.param


def test_size_matches_emptiness(container_cls):
    empty = container_cls()
    assert empty.is_empty()
    assert empty.size() == 0
    assert len(empty) == 0

    filled = container_cls(3, 1, 2)
    assert not filled.is_empty()
    assert filled.size() == 3
    assert isinstance(filled, Sequence)


def test_create_returns_same_type(container_cls):
    seq = container_cls(1, 2)
    created = seq.create(5, 6, 7)
    assert type(created) is container_cls
    assert created.size() == 3
    assert seq.size() == 2


def test_iterator_contract(container_cls):
    seq = container_cls(1, 2, 3)
    it = seq.create_iterator()

    seen = []
    while it.has_curr():
        seen.append(it.get_curr())
        it.next()
    assert seen == [1, 2, 3]

    with pytest.raises(IteratorExhaustedError):
        it.get_curr()
    with pytest.raises(IteratorExhaustedError):
        it.next()

    it.reset_first()
    assert it.has_curr()
    assert it.get_curr() == 1


def test_iterator_on_empty_container(container_cls):
    it = container_cls().create_iterator()
    assert isinstance(it, IndexedIterator)
    assert not it.has_curr()


def test_traversal_is_stable(container_cls):
    seq = container_cls(4, 5, 6)
    assert list(seq) == list(seq)


def test_slist_append_and_first():
    lst = SList()
    assert lst.first() is None

    assert lst.append(1, 2, 3) is lst
    lst.append(4)
    assert list(lst) == [1, 2, 3, 4]
    assert lst.first() == 1
    assert lst.nth(3) == 4
    assert lst[0] == 1


def test_slist_nth_out_of_range():
    with pytest.raises(InvalidIndexError):
        SList(1, 2).nth(2)
    with pytest.raises(InvalidIndexError):
        SList(1, 2)[-1]


def test_slist_swap():
    l1 = SList(1, 2)
    l2 = SList(3)
    l1.swap(l2)
    assert l1 == SList(3)
    assert l2 == SList(1, 2)

    with pytest.raises(TypeError):
        l1.swap(Tuple(1))


def test_ordered_set_sorts_and_deduplicates():
    s = OrderedSet(5, 1, 3, 1, 5)
    assert list(s) == [1, 3, 5]

    s.append(2, 3, 0)
    assert list(s) == [0, 1, 2, 3, 5]
    assert s.contains(2)
    assert 4 not in s


def test_ordered_set_with_key():
    words = OrderedSet("pear", "fig", "banana", key=len)
    assert list(words) == ["fig", "pear", "banana"]

    # "kiwi" has the same key as "pear"
    words.append("kiwi")
    assert words.size() == 3

    created = words.create("apple", "yam")
    assert list(created) == ["yam", "apple"]


def test_ordered_set_swap():
    s1 = OrderedSet(1, 2, 3)
    s2 = OrderedSet("b", "a")
    s1.swap(s2)
    assert list(s1) == ["a", "b"]
    assert list(s2) == [1, 2, 3]

    with pytest.raises(TypeError):
        s1.swap(SList())


def test_pair_is_frozen_and_ordered():
    pair = Pair(item1=1, item2="a")
    assert pair.item1 == 1
    assert pair.item2 == "a"
    assert pair == Pair(item1=1, item2="a")
    assert pair != Pair(item1="a", item2=1)

    with pytest.raises(ValidationError):
        pair.item1 = 2


def test_pair_keeps_references():
    t = Tuple(1)
    pair = Pair(item1=t, item2=[1, 2])
    assert pair.item1 is t


class Countdown:
    """Minimal container exposing only ``size()`` and ``[pos]``."""

    def __init__(self, n):
        self._n = n

    def size(self):
        return self._n

    def __getitem__(self, pos):
        return self._n - pos


def test_indexed_iterator_accepts_any_indexable():
    it = IndexedIterator(Countdown(3))
    seen = []
    while it.has_curr():
        seen.append(it.get_curr())
        it.next()
    assert seen == [3, 2, 1]
