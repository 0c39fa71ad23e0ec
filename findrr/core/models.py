"""Core data models for file search."""

from dataclasses import dataclass, field
from enum import Enum


class Comparator(Enum):
    """Size comparison modes, keyed by their command-line prefix."""

    LESS = "-"
    EQUAL = "="
    GREATER = "+"

    def compare(self, actual: int, expected: int) -> bool:
        if self is Comparator.LESS:
            return actual < expected
        if self is Comparator.GREATER:
            return actual > expected
        return actual == expected


@dataclass(frozen=True)
class FileCandidate:
    """A regular file seen during the walk, with the metadata filters need."""

    name: str
    path: str
    inode: int
    size: int
    nlinks: int


@dataclass(frozen=True)
class InodeCriterion:
    """Match on inode number."""

    inode: int

    def matches(self, candidate: FileCandidate) -> bool:
        return candidate.inode == self.inode


@dataclass(frozen=True)
class NameCriterion:
    """Match on exact entry name."""

    name: str

    def matches(self, candidate: FileCandidate) -> bool:
        return candidate.name == self.name


@dataclass(frozen=True)
class SizeCriterion:
    """Match on file size in bytes."""

    comparator: Comparator
    size: int

    def matches(self, candidate: FileCandidate) -> bool:
        return self.comparator.compare(candidate.size, self.size)


@dataclass(frozen=True)
class HardLinkCriterion:
    """Match on hard-link count."""

    count: int

    def matches(self, candidate: FileCandidate) -> bool:
        return candidate.nlinks == self.count


FilterCriterion = InodeCriterion | NameCriterion | SizeCriterion | HardLinkCriterion


@dataclass(frozen=True)
class Invocation:
    """One external program run against one matched file."""

    executable: str
    file_path: str

    @property
    def argv(self) -> list[str]:
        return [self.executable, self.file_path]


@dataclass
class InvocationResult:
    """Outcome of an invocation whose child exited normally."""

    invocation: Invocation
    returncode: int

    @property
    def succeeded(self) -> bool:
        return self.returncode == 0


@dataclass
class WalkReport:
    """What a single walk saw and did."""

    root: str
    directories_visited: int = 0
    files_examined: int = 0
    match_count: int = 0
    invocation_count: int = 0
    failed_invocation_count: int = 0
    unreadable: list = field(default_factory=list)  # DirectoryUnreadable
    # Filled only when the walker is asked to keep results
    matches: list[str] = field(default_factory=list)
    invocations: list[InvocationResult] = field(default_factory=list)
    failed_invocations: list = field(default_factory=list)  # InvocationError
