class PreconditionError(ValueError):
    """
    Raised when a boundary matrix (or complex) violates an algorithmic precondition.
    > column `j` references an index `>= j` (triangularity)
    > a column lists the same index twice
    > a face is missing from, or appears after its coface in, a filtration
    Never recoverable; the offending input is not repaired.
    """


class FormatError(ValueError):
    """
    Raised by readers when external input is malformed.
    Always raised before any core object is built from the input.
    """

    def __init__(self, message: str, line: int = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
