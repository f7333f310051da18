"""Classification of the diagnostic stream nix writes on stderr.

nix interleaves fatal errors, their trailing context lines and unrelated
warnings in one line-oriented stream:

    error: getting status of '/tmp/x/flake.nix': No such file or directory
           … while fetching the input 'path:/tmp/x'
    warning: Git tree '/home/me/dots' is dirty
    error: cannot find flake 'flake:foo' in the flake registries

StderrClassifier is a two-state machine over that stream. While idle, plain
lines are standalone warnings; once an `error:` line opens a record, plain
lines are appended to it as details until the next marker line closes it.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

ERROR_MARKER = "error:"
WARNING_MARKER = "warning:"


@dataclass(frozen=True)
class ErrorRecord:
    """One error extracted from the diagnostic stream.

    Attributes:
        title: The trimmed `error:` line that opened the record
        details: Trimmed continuation lines, in stream order
    """

    title: str
    details: tuple[str, ...] = ()

    @property
    def message(self) -> str:
        return "\n".join((self.title, *self.details))


@dataclass
class Diagnostics:
    """Error records and standalone warnings of one stream, in stream order."""

    errors: list[ErrorRecord] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)


@dataclass
class _Accumulating:
    title: str
    details: list[str]


class StderrClassifier:
    """Consumes stderr lines one at a time and sorts them into records and warnings."""

    def __init__(self) -> None:
        self._open: _Accumulating | None = None
        self._diagnostics = Diagnostics()

    def feed(self, line: str) -> None:
        trimmed = line.strip()
        if line.startswith(ERROR_MARKER):
            self._flush()
            self._open = _Accumulating(title=trimmed, details=[])
        elif line.startswith(WARNING_MARKER):
            self._flush()
            self._diagnostics.warnings.append(trimmed)
        elif self._open is not None:
            self._open.details.append(trimmed)
        elif trimmed:
            self._diagnostics.warnings.append(trimmed)

    def finish(self) -> Diagnostics:
        """Flush the open record, if any, and return everything classified so far."""
        self._flush()
        return self._diagnostics

    def _flush(self) -> None:
        if self._open is None:
            return
        record = ErrorRecord(title=self._open.title, details=tuple(self._open.details))
        self._diagnostics.errors.append(record)
        self._open = None


def classify_stderr(lines: Iterable[str]) -> Diagnostics:
    """Classify a whole stderr stream.

    Example:
        >>> diagnostics = classify_stderr("error: A\\ncontext1\\nwarning: B\\nerror: C\\n".splitlines())
        >>> [record.title for record in diagnostics.errors]
        ['error: A', 'error: C']
        >>> diagnostics.warnings
        ['warning: B']
    """
    classifier = StderrClassifier()
    for line in lines:
        classifier.feed(line)
    return classifier.finish()
