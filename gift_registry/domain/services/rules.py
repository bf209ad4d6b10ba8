"""
Ordered rule tables and the generic evaluators shared by the classifiers and
the query parser.

A rule table is an ordered sequence of rules. ``first_match`` returns the
label of the earliest rule that holds and evaluates nothing after it;
``all_matches`` collects the label of every rule that holds, in table order.
Rule order is part of the contract: the Categorizer and the query parser
rely on it for priority.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple


def bidirectional_match(keyword: str, term: str) -> bool:
    """True when either string contains the other.

    Known weakness kept for classification parity: short keywords match
    unrelated longer terms (``"art"`` matches ``"cart"``).
    """
    return term in keyword or keyword in term


class Rule(ABC):
    """One row of a rule table."""

    @abstractmethod
    def evaluate(self, subject: Any) -> Optional[str]:
        """Return the label this rule assigns to subject, or None when it does not hold."""


@dataclass(frozen=True)
class KeywordRule(Rule):
    """Holds when any keyword bidirectionally matches any evidence term."""

    label: str
    terms: Tuple[str, ...]

    def evaluate(self, subject: Sequence[str]) -> Optional[str]:
        for keyword in subject:
            for term in self.terms:
                if bidirectional_match(keyword, term):
                    return self.label
        return None


@dataclass(frozen=True)
class PhraseRule(Rule):
    """Holds when the (lowercased) text contains any of the phrases literally."""

    label: str
    phrases: Tuple[str, ...]

    def evaluate(self, subject: str) -> Optional[str]:
        for phrase in self.phrases:
            if phrase in subject:
                return self.label
        return None


@dataclass(frozen=True)
class PatternRule(Rule):
    """Holds when the regex matches; the label may be derived from the match."""

    pattern: "re.Pattern[str]"
    label: Optional[str] = None
    resolve: Optional[Callable[["re.Match[str]"], str]] = None

    def evaluate(self, subject: str) -> Optional[str]:
        match = self.pattern.search(subject)
        if match is None:
            return None
        if self.resolve is not None:
            return self.resolve(match)
        return self.label


def first_match(rules: Iterable[Rule], subject: Any) -> Optional[str]:
    """Label of the first rule that holds, in table order."""
    for rule in rules:
        label = rule.evaluate(subject)
        if label is not None:
            return label
    return None


def all_matches(rules: Iterable[Rule], subject: Any) -> List[str]:
    """Labels of every rule that holds, in table order, without duplicates."""
    labels: List[str] = []
    for rule in rules:
        label = rule.evaluate(subject)
        if label is not None and label not in labels:
            labels.append(label)
    return labels


def keyword_rules(table: Sequence[Tuple[str, Sequence[str]]]) -> Tuple[KeywordRule, ...]:
    """Build KeywordRules from an ordered (label, terms) table."""
    return tuple(KeywordRule(label, tuple(terms)) for label, terms in table)


class KeywordSet:
    """
    Ordered, deduplicated keyword collection with case-insensitive equality.

    Keywords are stored lowercased in order of first occurrence. Scores
    recorded for an existing keyword overwrite the earlier score.
    """

    def __init__(self) -> None:
        self._keywords: List[str] = []
        self._scores: Dict[str, float] = {}

    def add(self, keyword: str, score: Optional[float] = None) -> bool:
        """Add keyword; returns True when it was not present yet."""
        normalized = (keyword or "").strip().lower()
        if not normalized:
            return False

        added = normalized not in self._keywords
        if added:
            self._keywords.append(normalized)
        if score is not None:
            self._scores[normalized] = score
        return added

    def __contains__(self, keyword: object) -> bool:
        return isinstance(keyword, str) and keyword.strip().lower() in self._keywords

    def __iter__(self) -> Iterator[str]:
        return iter(self._keywords)

    def __len__(self) -> int:
        return len(self._keywords)

    def as_tuple(self) -> Tuple[str, ...]:
        return tuple(self._keywords)

    def scores(self) -> Dict[str, float]:
        return dict(self._scores)
