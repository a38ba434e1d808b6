from polyscan.alphabet import Nucleotide
from polyscan.config import ScanConfig
from polyscan.strand import StrandCall
from polyscan.tracts import IntervalRecord, TractEmitter
from polyscan.window import WindowCounts


class TestTractEmitter:
    """Mapping of strand calls to interval records."""

    def test_emit_record(self):
        emitter = TractEmitter("chr1", ScanConfig(nucleotide="A", window_size=10))
        record = emitter.emit(WindowCounts(5, 0, 9), StrandCall("-", 9, 90.0))
        assert record == IntervalRecord("chr1", 5, 15, Nucleotide.A, 90.0, "-")
        assert record.length == 10

    def test_minus_record_keeps_configured_nucleotide(self):
        emitter = TractEmitter("chr1", ScanConfig(nucleotide="C", window_size=2))
        record = emitter.emit(WindowCounts(0, 0, 2), StrandCall("-", 2, 100.0))
        assert record.nucleotide is Nucleotide.C

    def test_emit_all_preserves_call_order(self):
        emitter = TractEmitter("chr1", ScanConfig(window_size=2, threshold=50))
        calls = [StrandCall("+", 1, 50.0), StrandCall("-", 1, 50.0)]
        assert [r.strand for r in emitter.emit_all(WindowCounts(0, 1, 1), calls)] == ["+", "-"]


class TestIntervalRecord:
    """Record ordering and serialization helpers."""

    def test_sort_key_orders_plus_before_minus(self):
        plus = IntervalRecord("c", 3, 6, Nucleotide.A, 100.0, "+")
        minus = IntervalRecord("c", 3, 6, Nucleotide.A, 100.0, "-")
        earlier = IntervalRecord("c", 2, 5, Nucleotide.A, 100.0, "-")
        assert sorted([minus, plus, earlier], key=IntervalRecord.sort_key) == [earlier, plus, minus]

    def test_to_dict(self):
        record = IntervalRecord("c", 0, 3, Nucleotide.T, 100.0, "+")
        assert record.to_dict() == {"seqID": "c", "start": 0, "end": 3, "nucleotide": "T", "score": 100.0, "strand": "+"}
        assert list(record.to_dict()) == IntervalRecord.FIELDS
