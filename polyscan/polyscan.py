# Polyscan: sliding-window homopolymer tract finder
__version__ = "0.1.0"

import os
import csv
import shutil
import logging
import tempfile
import concurrent.futures
from itertools import chain, repeat
from pathlib import Path
from typing import ClassVar, Iterable, Iterator, Optional
import numpy as np
import pandas as pd
from termcolor import colored
from tqdm import tqdm
from polyscan.bed import format_score
from polyscan.config import ScanConfig
from polyscan.errors import InvalidSequenceError
from polyscan.sequence import SequenceView
from polyscan.strand import StrandEvaluator
from polyscan.tracts import IntervalRecord, TractEmitter
from polyscan.utils import extract_name, parse_fasta
from polyscan.window import CompositionWindow


class ScanOrchestrator:
    """Drives the composition window over one sequence at a time.

    ``scan`` validates the whole sequence before returning, so an invalid
    base raises :class:`InvalidSequenceError` up front and no record of that
    sequence is ever produced. The returned iterator is lazy, yields records
    by ascending start with ``+`` before ``-``, and can be requested again for
    the same view with identical results.
    """

    def __init__(self, config: ScanConfig) -> None:
        self.config = config
        self.evaluator = StrandEvaluator(config)

    def scan(self, view: SequenceView) -> Iterator[IntervalRecord]:
        view.validate()
        return self._scan(view)

    def _scan(self, view: SequenceView) -> Iterator[IntervalRecord]:
        window = CompositionWindow(view, self.config.nucleotide, self.config.window_size)
        emitter = TractEmitter(view.seq_id, self.config)
        for counts in window:
            calls = self.evaluator.evaluate(counts)
            if calls:
                yield from emitter.emit_all(counts, calls)


def scan_sequence(seq_id: str, bases: str | bytes, config: ScanConfig) -> Iterator[IntervalRecord]:
    return ScanOrchestrator(config).scan(SequenceView(seq_id, bases))


def scan_accession(accession: str | os.PathLike[str],
                   config: ScanConfig,
                   skip_invalid: bool = False,
                   progress: bool = False) -> Iterator[IntervalRecord]:
    orchestrator = ScanOrchestrator(config)
    total = 0
    sequences = tqdm(parse_fasta(accession),
                     desc=extract_name(accession),
                     unit="seq",
                     leave=False,
                     disable=not progress)
    for seqID, sequence in sequences:
        view = SequenceView(seqID, sequence)
        try:
            records = orchestrator.scan(view)
        except InvalidSequenceError as e:
            if not skip_invalid:
                raise
            logging.warning(f"Skipping sequence {e.seq_id}: invalid nucleotide {e.character!r} at offset {e.offset}.")
            continue
        if len(view) < config.window_size:
            logging.info(f"Skipping {seqID}: length {len(view)} is shorter than the window ({config.window_size}).")
            continue
        for record in records:
            total += 1
            yield record
    logging.info(f"Accession {accession}: {total} tracts reported.")


def _scan_bucket(bucket: list[str], config: ScanConfig, skip_invalid: bool) -> list[IntervalRecord]:
    return [record for accession in bucket
                   for record in scan_accession(accession, config, skip_invalid=skip_invalid)]


def scan_accessions(accessions: Iterable[str | os.PathLike[str]],
                    config: ScanConfig,
                    max_workers: int = 1,
                    skip_invalid: bool = False,
                    progress: bool = False) -> Iterator[IntervalRecord]:
    accessions = [str(accession) for accession in accessions]
    if max_workers <= 1 or len(accessions) <= 1:
        return chain.from_iterable(
                    scan_accession(accession, config, skip_invalid=skip_invalid, progress=progress)
                    for accession in accessions
                )
    return _scan_parallel(accessions, config, max_workers, skip_invalid)


def _scan_parallel(accessions: list[str],
                   config: ScanConfig,
                   max_workers: int,
                   skip_invalid: bool) -> Iterator[IntervalRecord]:
    # contiguous buckets keep the concatenated output in input order
    jobs = [job.tolist() for job in np.array_split(accessions, max_workers) if len(job) > 0]
    logging.info(f"Redirecting {len(accessions)} accessions to {len(jobs)} buckets.")
    with concurrent.futures.ProcessPoolExecutor(max_workers=len(jobs)) as executor:
        results = executor.map(_scan_bucket, jobs, repeat(config), repeat(skip_invalid))
        for result in results:
            yield from result


class PolyScanTool:

    TRACT_FIELDS: ClassVar[list[str]] = IntervalRecord.FIELDS

    def __init__(self, tempdir: Optional[str | os.PathLike[str]] = None,
                       config: Optional[ScanConfig] = None) -> None:
        if tempdir is None:
            self.tempdir = Path().cwd()
        else:
            self.set_tempdir(tempdir)
        if config is None:
            config = ScanConfig.from_env()
        self.config = config
        self.fn = None

    def set_tempdir(self, tempdir: str | os.PathLike[str]) -> None:
        self.tempdir = Path(tempdir).resolve()
        self.tempdir.mkdir(exist_ok=True, parents=True)

    def reset(self) -> None:
        self.fn = None

    def extract_tracts(self, accession: str | os.PathLike[str], skip_invalid: bool = False) -> "PolyScanTool":
        self.reset()
        accession_name = extract_name(accession)
        with tempfile.NamedTemporaryFile(dir=self.tempdir,
                                         prefix=accession_name + ".",
                                         delete=False,
                                         suffix=".tracts.tsv",
                                         mode="w",
                                         newline="") as file:
            dict_writer = csv.DictWriter(file, delimiter="\t", fieldnames=PolyScanTool.TRACT_FIELDS, lineterminator="\n")
            dict_writer.writeheader()
            try:
                for record in scan_accession(accession, self.config, skip_invalid=skip_invalid):
                    row = record.to_dict()
                    row["score"] = format_score(record.score)
                    dict_writer.writerow(row)
            except Exception:
                file.close()
                os.remove(file.name)
                raise
            self.fn = file.name
        return self

    def _require_extraction(self) -> Path:
        if self.fn is None:
            raise ValueError("No extraction available; call `extract_tracts` first.")
        return Path(self.fn)

    def to_dataframe(self) -> pd.DataFrame:
        return pd.read_table(self._require_extraction(), dtype={"seqID": str})

    def moveto(self, dest: str | os.PathLike[str]) -> Path:
        destination = Path(shutil.move(self._require_extraction(), dest))
        self.fn = destination
        return destination

    def cleanup(self) -> None:
        if self.fn and Path(self.fn).is_file():
            os.remove(self.fn)
            self.fn = None
        else:
            print(colored(f"WARNING! Extraction file {self.fn} does not exist.", "red"))
