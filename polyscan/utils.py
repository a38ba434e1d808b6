from Bio.SeqIO.FastaIO import SimpleFastaParser
import bz2
import gzip
import lzma
import os
from pathlib import Path
from typing import IO, Iterator

COMPRESSION_SUFFIXES = (".gz", ".bz2", ".xz")
# leading bytes of each supported compression format
MAGIC_NUMBERS = {
                 b"\x1f\x8b": gzip.open,
                 b"BZh": bz2.open,
                 b"\xfd7zXZ\x00": lzma.open,
                }


def extract_name(accession: str | os.PathLike[str]) -> str:
    name = Path(accession).name
    for suffix in COMPRESSION_SUFFIXES:
        if name.endswith(suffix):
            name = name[:-len(suffix)]
            break
    return name.rsplit(".", 1)[0] if "." in name else name


def open_fasta(accession: str | os.PathLike[str]) -> IO[str]:
    """Open a plain, gzip, bzip2 or xz FASTA file as text.

    The compression is detected from the file content, not the name. Text is
    decoded as latin-1 so every byte maps to one character and sequence
    offsets stay byte offsets.
    """
    with open(accession, mode="rb") as handler:
        head = handler.read(6)
    for magic, opener in MAGIC_NUMBERS.items():
        if head.startswith(magic):
            return opener(accession, mode="rt", encoding="latin-1")
    return open(accession, mode="r", encoding="latin-1")


def parse_fasta(accession: str | os.PathLike[str]) -> Iterator[tuple[str, str]]:
    accession = Path(accession).resolve()
    if not accession.is_file():
        raise FileNotFoundError(f"Unable to detect accession {accession}.")

    with open_fasta(accession) as file:
        for title, sequence in SimpleFastaParser(file):
            yield title.split(None, 1)[0] if title.strip() else title, sequence
