"""Filter predicates built from command-line modifiers."""

import logging
import os
import re
from collections.abc import Iterable
from dataclasses import dataclass

from .errors import ExecutableNotFound, ParseError, UnknownModifier
from .models import (
    Comparator,
    FileCandidate,
    FilterCriterion,
    HardLinkCriterion,
    InodeCriterion,
    NameCriterion,
    SizeCriterion,
)

logger = logging.getLogger(__name__)

_UNSIGNED = re.compile(r"[0-9]+")


def parse_unsigned(flag: str, value: str, message: str) -> int:
    """Parse a non-negative decimal integer or raise ParseError."""
    if not _UNSIGNED.fullmatch(value):
        raise ParseError(flag, value, message)
    return int(value)


def parse_size(value: str) -> SizeCriterion:
    """Parse a ``[-|=|+]N`` size expression."""
    message = f"invalid size: {value}"
    if not value:
        raise ParseError("-size", value, message)
    try:
        comparator = Comparator(value[0])
    except ValueError:
        raise ParseError("-size", value, message) from None
    return SizeCriterion(comparator, parse_unsigned("-size", value[1:], message))


@dataclass(frozen=True)
class PredicateSet:
    """All criteria for one run, grouped by kind.

    Criteria of the same kind are alternatives: a candidate satisfies a kind
    when it matches any of them, and an empty kind never excludes anything.
    A candidate matches the set when every kind is satisfied.
    """

    inodes: tuple[InodeCriterion, ...] = ()
    names: tuple[NameCriterion, ...] = ()
    sizes: tuple[SizeCriterion, ...] = ()
    hardlinks: tuple[HardLinkCriterion, ...] = ()
    exec_target: str | None = None

    @classmethod
    def from_modifiers(cls, modifiers: Iterable[tuple[str, str]]) -> "PredicateSet":
        """Build a predicate set from ordered ``(flag, value)`` pairs."""
        inodes: list[InodeCriterion] = []
        names: list[NameCriterion] = []
        sizes: list[SizeCriterion] = []
        hardlinks: list[HardLinkCriterion] = []
        exec_target: str | None = None

        for flag, value in modifiers:
            if flag == "-inum":
                inodes.append(
                    InodeCriterion(
                        parse_unsigned(flag, value, f"invalid inode number: {value}")
                    )
                )
            elif flag == "-name":
                names.append(NameCriterion(value))
            elif flag == "-size":
                sizes.append(parse_size(value))
            elif flag == "-nlinks":
                hardlinks.append(
                    HardLinkCriterion(
                        parse_unsigned(flag, value, f"invalid hardlinks number: {value}")
                    )
                )
            elif flag == "-exec":
                if not value or not os.path.exists(value):
                    raise ExecutableNotFound(value)
                exec_target = value
            else:
                raise UnknownModifier(flag, value)

        predicates = cls(
            inodes=tuple(inodes),
            names=tuple(names),
            sizes=tuple(sizes),
            hardlinks=tuple(hardlinks),
            exec_target=exec_target,
        )
        logger.debug(f"Built predicates: {predicates}")
        return predicates

    @property
    def executable(self) -> bool:
        """Whether matches should be handed to an external program."""
        return self.exec_target is not None

    def is_empty(self) -> bool:
        """True when no criteria were given, so every regular file matches."""
        return not (self.inodes or self.names or self.sizes or self.hardlinks)

    def matches(self, candidate: FileCandidate) -> bool:
        """Evaluate the candidate: any-of within a kind, all-of across kinds."""
        return all(
            _any_match(criteria, candidate)
            for criteria in (self.inodes, self.names, self.hardlinks, self.sizes)
        )


def _any_match(criteria: tuple[FilterCriterion, ...], candidate: FileCandidate) -> bool:
    if not criteria:
        return True
    return any(criterion.matches(candidate) for criterion in criteria)
