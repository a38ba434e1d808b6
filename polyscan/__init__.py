__author__ = "Maximillian Marin"
__email__ = "maximilliangmarin@gmail.com"

from polyscan.alphabet import Nucleotide
from polyscan.config import DEFAULTS, Defaults, ScanConfig
from polyscan.errors import ConfigurationError, InvalidSequenceError, PolyscanError
from polyscan.sequence import SequenceView
from polyscan.tracts import IntervalRecord
from polyscan.polyscan import (
    __version__,
    PolyScanTool,
    ScanOrchestrator,
    scan_accession,
    scan_accessions,
    scan_sequence,
)
