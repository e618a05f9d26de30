"""Error kinds raised while building Ramachandran data."""

from enum import Enum
from typing import Optional, Sequence, Tuple


class ErrorKind(Enum):
    """Enumerates the failure modes of the dihedral pipeline."""

    NIL_INPUT = "nil_input"
    LENGTH_MISMATCH = "length_mismatch"
    BACKBONE_INCONSISTENCY = "backbone_inconsistency"
    INDEX_OUT_OF_RANGE = "index_out_of_range"
    TOO_MANY_TAGS = "too_many_tags"


class RamachandranError(Exception):
    """
    Base class for pipeline errors.

    Attributes:
        kind: The ErrorKind of the failure
        function: Name of the operation that raised it
        critical: False only for failures the caller may recover from
    """

    kind: ErrorKind

    def __init__(self, message: str, function: str = "", critical: bool = True):
        super().__init__(message)
        self.message = message
        self.function = function
        self.critical = critical

    def __str__(self) -> str:
        if self.function:
            return f"{self.function}: {self.message}"
        return self.message


class NilInputError(RamachandranError):
    """A required sequence or collection was not given."""

    kind = ErrorKind.NIL_INPUT

    def __init__(self, what: str, function: str = ""):
        super().__init__(f"Nil data given: {what}", function)
        self.what = what


class LengthMismatchError(RamachandranError, ValueError):
    """Parallel collections have inconsistent lengths."""

    kind = ErrorKind.LENGTH_MISMATCH

    def __init__(self, expected: int, actual: int, function: str = "", detail: str = ""):
        message = f"Inconsistent data length: expected at least {expected}, got {actual}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message, function)
        self.expected = expected
        self.actual = actual


class BackboneInconsistencyError(RamachandranError):
    """
    Residue ids of a resolved backbone window do not line up.

    The four compared values are reported the same way: each should equal
    the residue id of N.
    """

    kind = ErrorKind.BACKBONE_INCONSISTENCY

    def __init__(
        self,
        prev_c_id: int,
        n_minus_one: int,
        ca_id: int,
        c_id: int,
        next_n_minus_one: int,
        indices: Optional[Sequence[int]] = None,
        function: str = "",
    ):
        message = (
            f"Incorrect backbone Cprev: {prev_c_id} N-1: {n_minus_one} "
            f"CA: {ca_id} C: {c_id} Npost-1: {next_n_minus_one}"
        )
        super().__init__(message, function)
        self.prev_c_id = prev_c_id
        self.n_minus_one = n_minus_one
        self.ca_id = ca_id
        self.c_id = c_id
        self.next_n_minus_one = next_n_minus_one
        self.indices: Tuple[int, ...] = tuple(indices or ())

    @property
    def residue_id(self) -> int:
        return self.n_minus_one + 1


class IndexOutOfRangeError(RamachandranError, IndexError):
    """A site references an atom beyond the current frame's coordinates."""

    kind = ErrorKind.INDEX_OUT_OF_RANGE

    def __init__(self, index: int, size: int, function: str = ""):
        super().__init__(
            f"Index requested out of range: {index} (frame has {size} atoms)",
            function,
        )
        self.index = index
        self.size = size


class TooManyTagsError(RamachandranError):
    """More than four points were tagged in one series. Recoverable."""

    kind = ErrorKind.TOO_MANY_TAGS

    def __init__(self, rank: int, function: str = ""):
        super().__init__(
            f"Maximum number of taggable residues is 4, requested rank {rank}",
            function,
            critical=False,
        )
        self.rank = rank
