"""
Lazy merge engine: a tree of pull-based index producers.

Every node answers one question, `pull()`: "what is the next index in sorted
order, or None if you are done?". There are three kinds of node:

- EmptyProducer      yields nothing.
- SingletonProducer  yields its one index, then is exhausted.
- MergeProducer      owns two child producers and yields whichever child's
                     head element is smaller, keeping one peeked index per
                     side between pulls.

`index_producer(seq, left, right)` builds the tree for the range
[left, right) with the same midpoint split as the eager engine, so draining
the root produces exactly the eager engine's order.

Public API (stable):
    IndexProducer, EmptyProducer, SingletonProducer, MergeProducer
    index_producer(seq, left, right) -> IndexProducer
    drain(producer) -> list[int]
"""

from __future__ import annotations

from typing import Any, Iterator, List, Optional, Sequence

__all__ = [
    "IndexProducer",
    "EmptyProducer",
    "SingletonProducer",
    "MergeProducer",
    "index_producer",
    "drain",
]


class IndexProducer:
    """Base class for the producer variants."""

    __slots__ = ()

    def pull(self) -> Optional[int]:
        raise NotImplementedError

    def __iter__(self) -> Iterator[int]:
        while True:
            i = self.pull()
            if i is None:
                return
            yield i


class EmptyProducer(IndexProducer):
    __slots__ = ()

    def pull(self) -> Optional[int]:
        return None


class SingletonProducer(IndexProducer):
    __slots__ = ("_index",)

    def __init__(self, index: int) -> None:
        self._index: Optional[int] = index

    def pull(self) -> Optional[int]:
        i, self._index = self._index, None
        return i


class MergeProducer(IndexProducer):
    """Merge two producers over the same element sequence."""

    __slots__ = ("_seq", "_left", "_right", "_left_head", "_right_head")

    def __init__(self, seq: Sequence[Any], left: IndexProducer, right: IndexProducer) -> None:
        self._seq = seq
        self._left = left
        self._right = right
        self._left_head: Optional[int] = None
        self._right_head: Optional[int] = None

    def pull(self) -> Optional[int]:
        if self._left_head is None:
            self._left_head = self._left.pull()
        if self._right_head is None:
            self._right_head = self._right.pull()

        l, r = self._left_head, self._right_head
        if l is None and r is None:
            return None
        # Left wins ties; right only when strictly smaller.
        if l is None or (r is not None and self._seq[r] < self._seq[l]):
            self._right_head = None
            return r
        self._left_head = None
        return l


def index_producer(seq: Sequence[Any], left: int, right: int) -> IndexProducer:
    """Build the producer tree for positions [left, right) of `seq`."""
    n = right - left
    if n <= 0:
        return EmptyProducer()
    if n == 1:
        return SingletonProducer(left)
    mid = left + n // 2
    return MergeProducer(
        seq,
        index_producer(seq, left, mid),
        index_producer(seq, mid, right),
    )


def drain(producer: IndexProducer) -> List[int]:
    """Pull every remaining index out of `producer`."""
    return list(producer)
