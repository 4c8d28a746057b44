class Ai2fsError(Exception):
    """Base class for every error ai2fs raises on purpose."""
    pass


class UsageError(Ai2fsError):
    """Wrong command-line arguments. Fatal."""
    pass


class InputOpenError(Ai2fsError):
    """The transcript could not be opened. Fatal, nothing is written."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error opening input file {path}: {reason}")


class OutputCreateError(Ai2fsError):
    """
    One output file could not be created.
    Non-fatal: the segmenter reports it, drops that file's content and moves on.
    """

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error creating file {path}: {reason}")


class InputReadError(Ai2fsError):
    """The transcript opened but failed partway through reading. Fatal."""

    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Error reading input file {path}: {reason}")
