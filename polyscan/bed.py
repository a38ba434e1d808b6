import csv
from typing import IO, Iterable
import pandas as pd
from pybedtools import BedTool
from polyscan.tracts import IntervalRecord

BED_FIELDS = IntervalRecord.FIELDS


def format_score(score: float) -> str:
    score = float(score)
    if score.is_integer():
        return str(int(score))
    return repr(score)


def bed_row(record: IntervalRecord) -> list[str]:
    return [record.contig,
            str(record.start),
            str(record.end),
            record.nucleotide.value,
            format_score(record.score),
            record.strand]


def format_bed_line(record: IntervalRecord) -> str:
    return "\t".join(bed_row(record))


def write_bed(records: Iterable[IntervalRecord], handle: IO[str]) -> int:
    writer = csv.writer(handle, delimiter="\t", lineterminator="\n", quoting=csv.QUOTE_NONE)
    total = 0
    for record in records:
        writer.writerow(bed_row(record))
        total += 1
    return total


def to_dataframe(records: Iterable[IntervalRecord]) -> pd.DataFrame:
    return pd.DataFrame([record.to_dict() for record in records], columns=BED_FIELDS)


def merge_tracts(records: Iterable[IntervalRecord]) -> pd.DataFrame:
    """Strand-aware merge of overlapping or book-ended tracts.

    Keeps the highest score of every merged group. Needs the ``bedtools``
    executable on PATH. Output is sorted the way ``bedtools sort`` sorts.
    """
    tracts_df = to_dataframe(records)
    if tracts_df.shape[0] == 0:
        return tracts_df
    merged_bed = BedTool.from_dataframe(tracts_df)\
                        .sort()\
                        .merge(s=True, c="4,5,6", o="distinct,max,distinct")
    return pd.read_table(merged_bed.fn,
                         header=None,
                         names=BED_FIELDS,
                         dtype={"seqID": str, "nucleotide": str, "strand": str})
