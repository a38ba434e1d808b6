import math
from typing import NamedTuple
from polyscan.config import ScanConfig
from polyscan.window import WindowCounts

PLUS = "+"
MINUS = "-"


class StrandCall(NamedTuple):
    strand: str
    count: int
    score: float


class StrandEvaluator:

    def __init__(self, config: ScanConfig) -> None:
        self.config = config
        self.width = config.window_size
        self.threshold = config.threshold
        # a self-complementary target has no separate reverse-strand signal
        self.single_strand = config.nucleotide.is_self_complementary

    def passes(self, count: int) -> bool:
        # same as 100 * count / width >= threshold, without dividing
        return count * 100 >= self.threshold * self.width

    def percent(self, count: int) -> float:
        score = count * 100 / self.width
        if self.config.integer_scores:
            return float(math.ceil(score))
        return score

    def evaluate(self, counts: WindowCounts) -> list[StrandCall]:
        calls = []
        if self.passes(counts.target):
            calls.append(StrandCall(PLUS, counts.target, self.percent(counts.target)))
        if not self.single_strand and self.passes(counts.complement):
            calls.append(StrandCall(MINUS, counts.complement, self.percent(counts.complement)))
        return calls
