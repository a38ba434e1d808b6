import sys
import argparse
import logging
from pathlib import Path
from typing import Optional
from termcolor import colored
from polyscan.bed import format_score, merge_tracts, write_bed
from polyscan.config import ScanConfig
from polyscan.errors import ConfigurationError, InvalidSequenceError
from polyscan.polyscan import __version__, scan_accessions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
                prog="polyscan",
                description="Find windows in DNA sequences that have >= threshold% of a nucleotide. Outputs 6-column BED."
            )
    parser.add_argument("-f", "--fasta", type=str, action="append", required=True,
                        help="input FASTA file, optionally gzipped; may be given more than once")
    parser.add_argument("-w", "--window-size", type=int, default=None,
                        help="length of the sliding window (default: 10)")
    parser.add_argument("-p", "--percentage", type=float, default=None,
                        help="percentage of the target nucleotide required in the window (default: 80)")
    parser.add_argument("-n", "--nucleotide", type=str, default=None,
                        help="nucleotide to search for (A, C, G, T or N); its complement is reported on the minus strand")
    parser.add_argument("-o", "--output", type=str, default="-",
                        help="output BED file (default: stdout)")
    parser.add_argument("--integer-scores", action="store_true",
                        help="round scores up to whole percentages")
    parser.add_argument("--merge", action="store_true",
                        help="merge overlapping tracts per strand (requires bedtools)")
    parser.add_argument("--skip-invalid", action="store_true",
                        help="skip sequences with bases outside ACGTN instead of aborting")
    parser.add_argument("--workers", type=int, default=1,
                        help="worker processes when several FASTA files are given")
    parser.add_argument("--progress", action="store_true")
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def run(args: argparse.Namespace) -> int:
    try:
        config = ScanConfig.from_env(nucleotide=args.nucleotide,
                                     window_size=args.window_size,
                                     threshold=args.percentage,
                                     integer_scores=args.integer_scores)
    except ConfigurationError as e:
        print(colored(f"Error: {e}", "red"), file=sys.stderr)
        return 2

    for accession in args.fasta:
        if not Path(accession).is_file():
            print(colored(f"Error: unable to detect FASTA file {accession}.", "red"), file=sys.stderr)
            return 1

    records = scan_accessions(args.fasta,
                              config,
                              max_workers=args.workers,
                              skip_invalid=args.skip_invalid,
                              progress=args.progress)
    out = sys.stdout if args.output == "-" else open(args.output, mode="w", encoding="UTF-8", newline="")
    try:
        if args.merge:
            merged = merge_tracts(records)
            merged["score"] = merged["score"].map(format_score)
            merged.to_csv(out, sep="\t", header=False, index=False, lineterminator="\n")
            total = merged.shape[0]
        else:
            total = write_bed(records, out)
    except InvalidSequenceError as e:
        print(colored(f"Error: {e}", "red"), file=sys.stderr)
        return 1
    finally:
        if out is not sys.stdout:
            out.close()
    if args.verbose:
        print(colored(f"Reported {total} tracts.", "green"), file=sys.stderr)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING,
                        format="%(levelname)s:%(message)s")
    return run(args)


if __name__ == "__main__":
    sys.exit(main())
