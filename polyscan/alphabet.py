from enum import Enum


class Nucleotide(str, Enum):
    A = "A"
    C = "C"
    G = "G"
    T = "T"
    N = "N"

    @property
    def complement(self) -> "Nucleotide":
        match self:
            case Nucleotide.A:
                return Nucleotide.T
            case Nucleotide.T:
                return Nucleotide.A
            case Nucleotide.G:
                return Nucleotide.C
            case Nucleotide.C:
                return Nucleotide.G
            case Nucleotide.N:
                return Nucleotide.N

    @property
    def is_self_complementary(self) -> bool:
        return self.complement is self

    @classmethod
    def parse(cls, symbol: str) -> "Nucleotide":
        """Case-insensitive lookup; raises ValueError on anything outside ACGTN."""
        if isinstance(symbol, cls):
            return symbol
        if not isinstance(symbol, str) or len(symbol) != 1:
            raise ValueError(f"Unknown nucleotide {symbol!r}.")
        try:
            return cls(symbol.upper())
        except ValueError:
            raise ValueError(f"Unknown nucleotide {symbol!r}.") from None

    def __str__(self) -> str:
        return self.value


NUCLEOTIDES = frozenset(n.value for n in Nucleotide)


def complement(nucleotide: str) -> str:
    return Nucleotide.parse(nucleotide).complement.value


def reverse(kmer: str) -> str:
    """Reverse complement of an uppercase ACGTN string."""
    return ''.join(complement(c) for c in kmer)[::-1]
