"""
Term Scheduler
==============

Packs Hamiltonian terms that are *local* in the current Jordan-Wigner
ordering, i.e. whose orbitals occupy a contiguous run of positions, into one
operator layer.

GREEDY INTERVAL PACKING
-----------------------

A sweep walks a cursor from left to right. At each cursor position the
intervals ``[cursor, end)`` are tried shortest first; the first interval whose
set of orbitals matches a pending term claims that term and the cursor jumps
to ``end``. If nothing matches, the cursor moves on by one position. Sweeps
repeat until one of them emits nothing, so terms sharing a support, or hidden
behind an interval that was just claimed, surface in later sweeps.

Each emitted term is re-indexed with the position map of the whole prefix
``ordering[0:end]`` and its coefficient scaled by the evolution time and the
re-indexing sign.
"""

from collections import OrderedDict, deque
from typing import Deque, Dict, Iterable, Iterator, List, Sequence, Tuple

from ..ordering import positions_of
from ..terms import ReindexableTerm

SupportKey = Tuple[int, ...]
ScheduledTerm = Tuple[ReindexableTerm, float]
ScheduleLayer = List[ScheduledTerm]
OperatorNetwork = List[ScheduleLayer]


def support_key(orbitals: Iterable[int]) -> SupportKey:
    """Sorted, de-duplicated tuple of orbital indices."""
    return tuple(sorted(set(int(o) for o in orbitals)))


class TermPool:
    """
    Pending ``(term, coefficient)`` pairs bucketed by support key.

    Each bucket is a FIFO queue; a bucket is dropped as soon as it empties.
    A pool belongs to a single Trotter-step planning run and is consumed by
    successive `schedule_layer` calls.
    """

    def __init__(self):
        self._queues: Dict[SupportKey, Deque[ScheduledTerm]] = OrderedDict()

    @classmethod
    def from_terms(cls, terms: Iterable[ScheduledTerm]) -> "TermPool":
        pool = cls()
        for term, coefficient in terms:
            pool.add(term, coefficient)
        return pool

    def add(self, term: ReindexableTerm, coefficient: float) -> None:
        key = support_key(term.support())
        self._queues.setdefault(key, deque()).append((term, coefficient))

    def pop(self, key: SupportKey) -> ScheduledTerm:
        """Remove and return the oldest pair with support ``key``."""
        queue = self._queues[key]
        entry = queue.popleft()
        if not queue:
            del self._queues[key]
        return entry

    def keys(self) -> List[SupportKey]:
        return list(self._queues)

    def remaining(self) -> List[ScheduledTerm]:
        """Every pending pair, bucket by bucket."""
        return [entry for queue in self._queues.values() for entry in queue]

    def __contains__(self, key) -> bool:
        return key in self._queues

    def __len__(self) -> int:
        return sum(len(queue) for queue in self._queues.values())

    def __iter__(self) -> Iterator[ScheduledTerm]:
        return iter(self.remaining())

    def __repr__(self):
        return f"TermPool({len(self)} pending across {len(self._queues)} supports)"


def _sweep(pool: TermPool, ordering: Sequence[int], time: float) -> ScheduleLayer:
    emitted = []
    n = len(ordering)
    cursor = 0
    while cursor < n:
        for end in range(cursor + 1, n + 1):
            key = support_key(ordering[cursor:end])
            if key in pool:
                term, coefficient = pool.pop(key)
                new_term, sign = term.reindexed(positions_of(ordering[:end]))
                emitted.append((new_term, sign * time * coefficient))
                cursor = end
                break
        else:
            cursor += 1
    return emitted


def schedule_layer(pool: TermPool, ordering: Sequence[int], time: float = 1.0) -> ScheduleLayer:
    """
    Return a layer of operators local in ``ordering``, removing them from ``pool``.

    Parameters
    ----------
    pool : TermPool
        Pending terms. Emitted terms are removed.
    ordering : sequence of int
        Position-indexed orbital indices giving the current Jordan-Wigner ordering.
    time : float
        Evolution time multiplying every coefficient.

    Returns
    -------
    list of (term, float)
        Re-indexed terms with scaled coefficients, in emission order. Terms
        come out in an order a greedy circuit packer turns into a shallow
        circuit.
    """
    ordering = [int(o) for o in ordering]
    result = []
    while True:
        emitted = _sweep(pool, ordering, time)
        if not emitted:
            return result
        result.extend(emitted)
