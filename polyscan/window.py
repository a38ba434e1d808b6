from typing import Iterator, NamedTuple
from polyscan.alphabet import Nucleotide
from polyscan.errors import ConfigurationError
from polyscan.sequence import SequenceView


class WindowCounts(NamedTuple):
    start: int
    target: int
    complement: int


class CompositionWindow:
    """Counts of a target base and its complement over a sliding window.

    The counts for ``bases[start:start + width]`` are kept up to date in O(1)
    per slide: the base leaving on the left is subtracted and the base
    entering on the right is added. A window is only ever positioned where it
    fits entirely inside the sequence.
    """

    __slots__ = ("view", "target", "complement", "width", "start", "target_count", "complement_count")

    def __init__(self, view: SequenceView, target: Nucleotide, width: int) -> None:
        if width <= 0:
            raise ConfigurationError(f"Window size must be positive; got {width}.")
        self.view = view
        self.target = target.value
        self.complement = target.complement.value
        self.width = width
        self.reset()

    def reset(self) -> None:
        self.start = 0
        self.target_count = 0
        self.complement_count = 0
        if not self.is_valid:
            return
        window = self.view.bases[:self.width]
        self.target_count = window.count(self.target)
        self.complement_count = window.count(self.complement)

    @property
    def end(self) -> int:
        return self.start + self.width

    @property
    def is_valid(self) -> bool:
        return self.end <= len(self.view)

    def _update(self, base: str, delta: int) -> None:
        # N is its own complement, so both counters can move together
        if base == self.target:
            self.target_count += delta
        if base == self.complement:
            self.complement_count += delta

    def slide(self) -> bool:
        if self.end >= len(self.view):
            return False
        bases = self.view.bases
        self._update(bases[self.start], -1)
        self._update(bases[self.end], 1)
        self.start += 1
        return True

    def counts(self) -> WindowCounts:
        return WindowCounts(self.start, self.target_count, self.complement_count)

    def __iter__(self) -> Iterator[WindowCounts]:
        self.reset()
        if not self.is_valid:
            return
        yield self.counts()
        while self.slide():
            yield self.counts()
