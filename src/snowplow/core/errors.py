"""Error taxonomy for snow-plow operations.

Every fatal condition a command can hit is a SnowPlowError subclass. The CLI
error boundary turns them into `snow-plow: error: ...` lines and an exit code;
anything else is a bug and propagates with its traceback.
"""

from pathlib import Path

from snowplow.core.diagnostics import ErrorRecord


class SnowPlowError(Exception):
    """Base class for errors reported to the user without a traceback."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    @property
    def exit_code(self) -> int:
        return 1

    def messages(self) -> list[str]:
        """Messages to print, one `error:` line each."""
        return [self.message]


class IoFailure(SnowPlowError):
    """Filesystem or subprocess-spawn failure.

    Attributes:
        target: The file, directory or stream the failure occurred on
        cause: The underlying OSError
    """

    def __init__(self, target: str, cause: OSError) -> None:
        super().__init__(f"{target}: {cause.strerror or cause}")
        self.target = target
        self.cause = cause

    @property
    def exit_code(self) -> int:
        return self.cause.errno or 1


class ExternalToolFailure(SnowPlowError):
    """One or more error records classified from a failed nix invocation."""

    def __init__(self, records: list[ErrorRecord]) -> None:
        super().__init__("\n".join(record.message for record in records))
        self.records = records

    def messages(self) -> list[str]:
        return [record.message for record in self.records]


class NoStorageLocation(SnowPlowError):
    def __init__(self) -> None:
        super().__init__(
            "no user provided configuration and unable to find the system default location"
        )


class DuplicateName(SnowPlowError):
    def __init__(self, name: str) -> None:
        super().__init__(f"flake `{name}` is already tracked")
        self.name = name


class InvalidName(SnowPlowError):
    """Raised when adding a flake under a name the registry cannot store."""

    def __init__(self, name: str) -> None:
        super().__init__(f"invalid flake name {name!r}: a name must not be empty")
        self.name = name


class UnknownName(SnowPlowError):
    def __init__(self, name: str) -> None:
        super().__init__(f"flake `{name}` is not tracked")
        self.name = name


class UnknownEntry(UnknownName):
    """Raised when updating a single flake that is not tracked."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.message = f"no flake named `{name}`"
        self.args = (self.message,)


class MalformedStorage(SnowPlowError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class InternalInconsistency(SnowPlowError):
    """A programming defect, such as exiting without persisting the registry."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"internal: {reason}")
