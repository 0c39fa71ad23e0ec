"""Error types raised while building filters and walking a tree."""


class FindrrError(Exception):
    """Base class for all findrr errors."""


class ConstructionError(FindrrError):
    """Raised before traversal starts; always fatal."""


class ParseError(ConstructionError):
    """A modifier value could not be parsed."""

    def __init__(self, flag: str, value: str, message: str | None = None):
        self.flag = flag
        self.value = value
        super().__init__(message or f"invalid value for {flag}: {value}")


class UnknownModifier(ParseError):
    """A modifier flag that the filter does not understand."""

    def __init__(self, flag: str, value: str):
        super().__init__(flag, value, f"Invalid argument: {flag}")


class ExecutableNotFound(ConstructionError):
    """The -exec target does not exist."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"invalid path to executable: {path}")


class DirectoryUnreadable(FindrrError):
    """A directory could not be opened; its subtree is skipped."""

    def __init__(self, path: str, reason: str | None = None):
        self.path = path
        self.reason = reason
        super().__init__(f"Can't access directory {path}")


class InvocationError(FindrrError):
    """Running the -exec target against a match went wrong."""

    def __init__(self, message: str, executable: str, file_path: str):
        self.executable = executable
        self.file_path = file_path
        super().__init__(message)


class SpawnFailure(InvocationError):
    """The child process could not be started."""

    def __init__(self, executable: str, file_path: str, reason: str):
        self.reason = reason
        super().__init__(
            f"Execution failed: {executable}: {reason}", executable, file_path
        )


class ChildSignaled(InvocationError):
    """The child process was terminated by a signal."""

    def __init__(
        self,
        executable: str,
        file_path: str,
        signal_number: int,
        signal_name: str | None = None,
    ):
        self.signal_number = signal_number
        self.signal_name = signal_name
        label = f"{signal_number} ({signal_name})" if signal_name else str(signal_number)
        super().__init__(
            f"Execution is stopped with signal: {label}", executable, file_path
        )
