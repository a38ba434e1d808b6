class PolyscanError(Exception):
    """Base class for every error raised by polyscan."""


class ConfigurationError(PolyscanError, ValueError):
    """Invalid scan parameters; raised before any sequence is read."""


class InvalidSequenceError(PolyscanError, ValueError):

    def __init__(self, seq_id: str, offset: int, character: str) -> None:
        self.seq_id = seq_id
        self.offset = offset
        self.character = character
        super().__init__(f"Invalid nucleotide {character!r} in sequence {seq_id} at offset {offset}.")

    def __reduce__(self):
        return (InvalidSequenceError, (self.seq_id, self.offset, self.character))
