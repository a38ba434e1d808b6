import pickle
import pytest
from polyscan.errors import InvalidSequenceError, PolyscanError
from polyscan.sequence import SequenceView


class TestSequenceView:
    """Ingestion, case folding and validation."""

    def test_case_folded_at_ingestion(self):
        view = SequenceView("chr1", "acgtn")
        assert view.bases == "ACGTN"
        assert len(view) == view.length == 5

    def test_bytes_input(self):
        view = SequenceView("chr1", b"aCgT")
        assert view.bases == "ACGT"
        assert view[1] == "C"

    def test_non_ascii_bytes_keep_offsets(self):
        view = SequenceView("chr1", b"AC\xdfGT")
        assert len(view) == 5
        with pytest.raises(InvalidSequenceError) as excinfo:
            view.validate()
        assert excinfo.value.offset == 2

    def test_validate_returns_view(self):
        view = SequenceView("chr1", "ACGTN")
        assert view.validate() is view

    def test_validate_reports_first_offending_offset(self):
        with pytest.raises(InvalidSequenceError) as excinfo:
            SequenceView("contig_7", "AAAAXAAYA").validate()
        error = excinfo.value
        assert (error.seq_id, error.offset, error.character) == ("contig_7", 4, "X")
        assert "contig_7" in str(error) and "4" in str(error)
        assert isinstance(error, PolyscanError)

    def test_error_survives_pickling(self):
        error = pickle.loads(pickle.dumps(InvalidSequenceError("s", 3, "-")))
        assert (error.seq_id, error.offset, error.character) == ("s", 3, "-")

    def test_reverse_complement(self):
        view = SequenceView("s", "AACGN").reverse_complement()
        assert view.seq_id == "s"
        assert view.bases == "NCGTT"

    def test_immutable(self):
        view = SequenceView("s", "ACGT")
        with pytest.raises(AttributeError):
            view.bases = "TTTT"
