"""Shared fixtures for the polyscan test suite."""

import gzip
import shutil
import pytest
from polyscan.config import ScanConfig


@pytest.fixture
def default_config():
    """Scan configuration with the documented defaults (A, w=10, 80%)."""
    return ScanConfig()


@pytest.fixture
def write_fasta(tmp_path):
    """Factory writing {id: sequence} to a FASTA file, gzipped when the name ends with .gz."""
    def _write(records, name="sample.fa"):
        path = tmp_path / name
        text = "".join(f">{seq_id} description\n{sequence}\n" for seq_id, sequence in records.items())
        if name.endswith(".gz"):
            with gzip.open(path, "wt") as handle:
                handle.write(text)
        else:
            path.write_text(text)
        return path
    return _write


@pytest.fixture
def clean_env(monkeypatch):
    """Remove polyscan overrides and keep load_dotenv from reading a stray .env."""
    for name in ("POLYSCAN_WINDOW_SIZE", "POLYSCAN_THRESHOLD", "POLYSCAN_NUCLEOTIDE"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("polyscan.config.load_dotenv", lambda *args, **kwargs: False)
    return monkeypatch


requires_bedtools = pytest.mark.skipif(shutil.which("bedtools") is None,
                                       reason="bedtools executable not available")
