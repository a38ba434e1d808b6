import re
import string
from dataclasses import dataclass
from polyscan.alphabet import reverse
from polyscan.errors import InvalidSequenceError

INVALID_BASE = re.compile(r"[^ACGTN]")
# ascii only; str.upper() can change the length of non-ascii text
FOLD_CASE = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)


@dataclass(frozen=True)
class SequenceView:
    """Read-only view over the bases of one named sequence.

    Bases are folded to uppercase once, when the view is built. ``bytes`` are
    decoded one byte per character so offsets stay byte offsets. Validation is
    left to :meth:`validate`, which the scanner calls before producing output.
    """

    seq_id: str
    bases: str

    def __post_init__(self) -> None:
        bases = self.bases
        if isinstance(bases, (bytes, bytearray, memoryview)):
            bases = bytes(bases).decode("latin-1")
        object.__setattr__(self, "bases", bases.translate(FOLD_CASE))

    def __len__(self) -> int:
        return len(self.bases)

    def __getitem__(self, index):
        return self.bases[index]

    @property
    def length(self) -> int:
        return len(self.bases)

    def validate(self) -> "SequenceView":
        invalid = INVALID_BASE.search(self.bases)
        if invalid is not None:
            raise InvalidSequenceError(self.seq_id, invalid.start(), invalid.group())
        return self

    def reverse_complement(self) -> "SequenceView":
        return SequenceView(self.seq_id, reverse(self.validate().bases))
