from dataclasses import dataclass
from typing import ClassVar, Iterable, Iterator
from polyscan.alphabet import Nucleotide
from polyscan.config import ScanConfig
from polyscan.strand import StrandCall
from polyscan.window import WindowCounts


@dataclass(frozen=True)
class IntervalRecord:
    contig: str
    start: int
    end: int
    nucleotide: Nucleotide
    score: float
    strand: str

    FIELDS: ClassVar[list[str]] = ["seqID", "start", "end", "nucleotide", "score", "strand"]

    @property
    def length(self) -> int:
        return self.end - self.start

    def sort_key(self) -> tuple[int, int]:
        return self.start, 0 if self.strand == "+" else 1

    def to_dict(self) -> dict:
        return {
                "seqID": self.contig,
                "start": self.start,
                "end": self.end,
                "nucleotide": self.nucleotide.value,
                "score": self.score,
                "strand": self.strand,
                }


class TractEmitter:
    """Turns passing strand calls into interval records, one per window.

    Overlapping windows are never merged here; every qualifying window
    position becomes its own record. See :func:`polyscan.bed.merge_tracts`
    for the opt-in merge.
    """

    def __init__(self, contig: str, config: ScanConfig) -> None:
        self.contig = contig
        self.nucleotide = config.nucleotide
        self.width = config.window_size

    def emit(self, window: WindowCounts, call: StrandCall) -> IntervalRecord:
        return IntervalRecord(contig=self.contig,
                              start=window.start,
                              end=window.start + self.width,
                              nucleotide=self.nucleotide,
                              score=call.score,
                              strand=call.strand)

    def emit_all(self, window: WindowCounts, calls: Iterable[StrandCall]) -> Iterator[IntervalRecord]:
        for call in calls:
            yield self.emit(window, call)
