"""Recursive directory walk that reports and acts on matching files."""

import logging
import os
from collections.abc import Callable, Iterator
from pathlib import Path

import click

from .errors import DirectoryUnreadable, InvocationError
from .invoker import CommandInvoker
from .models import FileCandidate, WalkReport
from .predicates import PredicateSet

logger = logging.getLogger(__name__)

EXEC_ERROR_POLICIES = ("abort", "continue")


class TreeWalker:
    """Depth-first walker over a directory tree.

    Entries are visited in the order the operating system lists them.
    Directories are descended into, regular files are checked against the
    predicates, and everything else (symlinks, devices, sockets) is ignored.
    """

    def __init__(
        self,
        predicates: PredicateSet,
        invoker: CommandInvoker | None = None,
        echo: Callable[..., None] = click.echo,
        on_exec_error: str = "abort",
        report_unreadable: bool = True,
        keep_results: bool = False,
    ):
        if on_exec_error not in EXEC_ERROR_POLICIES:
            raise ValueError(f"Unknown exec error policy: {on_exec_error}")
        self.predicates = predicates
        self.invoker = invoker or CommandInvoker()
        self.echo = echo
        self.on_exec_error = on_exec_error
        self.report_unreadable = report_unreadable
        self.keep_results = keep_results

    def walk(self, path: str | Path) -> WalkReport:
        """Walk the tree rooted at ``path`` and return what happened.

        Directories are handled from an explicit stack rather than by
        recursion, so tree depth is not bounded by the interpreter's
        recursion limit. Each directory is listed in full and closed before
        its subdirectories are entered, so open handles do not grow with
        depth either. Visiting order is still pre-order in listing order.
        """
        root = str(path)
        report = WalkReport(root=root)
        stack: list[tuple[str, Iterator[os.DirEntry]]] = []
        self._enter(root, stack, report)

        while stack:
            parent, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue
            if entry.name in (".", ".."):
                continue
            full_path = parent + os.sep + entry.name

            if self._is_dir(entry):
                self._enter(full_path, stack, report)
            elif self._is_file(entry):
                self._visit_file(entry, full_path, report)

        logger.info(
            f"Walked {report.directories_visited} directories, "
            f"examined {report.files_examined} files, "
            f"found {report.match_count} matches"
        )
        return report

    def _enter(
        self,
        path: str,
        stack: list[tuple[str, Iterator[os.DirEntry]]],
        report: WalkReport,
    ) -> None:
        try:
            with os.scandir(path) as scanner:
                entries = list(scanner)
        except OSError as e:
            self._unreadable(path, e, report)
            return

        report.directories_visited += 1
        logger.debug(f"Scanning {path}")
        stack.append((path, iter(entries)))

    def _visit_file(self, entry: os.DirEntry, full_path: str, report: WalkReport) -> None:
        report.files_examined += 1
        candidate = self._candidate(entry, full_path)
        if candidate is None or not self.predicates.matches(candidate):
            return

        self.echo(full_path)
        report.match_count += 1
        if self.keep_results:
            report.matches.append(full_path)
        if self.predicates.executable:
            self._invoke(full_path, report)

    def _invoke(self, full_path: str, report: WalkReport) -> None:
        try:
            result = self.invoker.invoke(self.predicates.exec_target, full_path)
        except InvocationError as e:
            if self.on_exec_error == "abort":
                raise
            logger.warning(f"Skipping failed invocation: {e}")
            report.failed_invocation_count += 1
            if self.keep_results:
                report.failed_invocations.append(e)
            return
        report.invocation_count += 1
        if self.keep_results:
            report.invocations.append(result)

    def _unreadable(self, path: str, error: OSError, report: WalkReport) -> None:
        condition = DirectoryUnreadable(path, error.strerror)
        logger.info(f"{condition}: {error.strerror}")
        report.unreadable.append(condition)
        if self.report_unreadable:
            self.echo(str(condition), err=True)

    @staticmethod
    def _candidate(entry: os.DirEntry, full_path: str) -> FileCandidate | None:
        try:
            st = entry.stat(follow_symlinks=False)
        except OSError as e:
            logger.debug(f"Cannot stat {full_path}: {e}")
            return None
        return FileCandidate(
            name=entry.name,
            path=full_path,
            inode=entry.inode(),
            size=st.st_size,
            nlinks=st.st_nlink,
        )

    @staticmethod
    def _is_dir(entry: os.DirEntry) -> bool:
        try:
            return entry.is_dir(follow_symlinks=False)
        except OSError:
            return False

    @staticmethod
    def _is_file(entry: os.DirEntry) -> bool:
        try:
            return entry.is_file(follow_symlinks=False)
        except OSError:
            return False


def walk(path: str | Path, predicates: PredicateSet, **kwargs) -> WalkReport:
    """Walk ``path`` with a default walker."""
    return TreeWalker(predicates, **kwargs).walk(path)
