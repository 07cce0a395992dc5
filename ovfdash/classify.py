# ovfdash/classify.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Tuple

from .models import PatientRecord

UNKNOWN_LABEL = "Unknown"

# newFractures / mriImage: "L1, L2", "L1、L2", "L1 L2"
_MULTI_SPLIT_RE = re.compile(r"[,、\s]+")
_LEVEL_NUMBER_RE = re.compile(r"\d+")


@dataclass(frozen=True)
class KeywordSet:
    """
    Literal terms that put a record into one outcome category.

    outcome_terms are matched as substrings of `outcome` (case-sensitive,
    so Japanese and English terms can sit side by side).
    remarks_terms are matched against `remarks` case-insensitively.
    """
    label: str
    outcome_terms: Tuple[str, ...]
    remarks_terms: Tuple[str, ...] = ()

    def matches_outcome(self, outcome: str) -> bool:
        return any(t in outcome for t in self.outcome_terms)

    def matches_remarks(self, remarks: str) -> bool:
        lowered = remarks.lower()
        return any(t.lower() in lowered for t in self.remarks_terms)


# Add locales or terms here; the predicates below only read these sets.
OUTCOME_KEYWORDS: Dict[str, KeywordSet] = {
    "surgery": KeywordSet(
        label="Surgery",
        outcome_terms=("Surgery", "手術"),
        remarks_terms=("surgery",),
    ),
    "conservative": KeywordSet(
        label="Conservative",
        outcome_terms=("Observation", "Conservative", "保存", "経過観察"),
    ),
}


def is_surgery_candidate(
    record: PatientRecord,
    keywords: Dict[str, KeywordSet] = OUTCOME_KEYWORDS,
) -> bool:
    """
    Headline "surgery candidate": surgery term in the outcome,
    or a surgery mention anywhere in the remarks.
    """
    ks = keywords["surgery"]
    return ks.matches_outcome(record.outcome) or ks.matches_remarks(record.remarks)


def is_surgical_path(
    record: PatientRecord,
    keywords: Dict[str, KeywordSet] = OUTCOME_KEYWORDS,
) -> bool:
    """
    Surgical side of the surgical / non-surgical partition used for
    duration averages. Outcome only; remarks are not consulted here.
    """
    return keywords["surgery"].matches_outcome(record.outcome)


def is_conservative(
    record: PatientRecord,
    keywords: Dict[str, KeywordSet] = OUTCOME_KEYWORDS,
) -> bool:
    return keywords["conservative"].matches_outcome(record.outcome)


def split_multi(value: str) -> List[str]:
    return [t for t in _MULTI_SPLIT_RE.split(value or "") if t]


def _tally(names: Iterable[str]) -> List[Dict[str, Any]]:
    # dicts keep first-occurrence order
    counts: Dict[str, int] = {}
    for name in names:
        counts[name] = counts.get(name, 0) + 1
    return [{"name": k, "value": v} for k, v in counts.items()]


def outcome_distribution(records: Iterable[PatientRecord]) -> List[Dict[str, Any]]:
    """
    Count of records per verbatim outcome string, in order of first
    appearance. Empty outcomes are counted under UNKNOWN_LABEL.
    """
    return _tally(r.outcome or UNKNOWN_LABEL for r in records)


def fracture_level_sort_key(name: str) -> Tuple[int, int, str]:
    """
    Thoracic (T..) first, then lumbar (L..), then Unknown, then the rest;
    numeric suffix ascending within each group.
    """
    if name == UNKNOWN_LABEL:
        group = 2
    elif name[:1].upper() == "T":
        group = 0
    elif name[:1].upper() == "L":
        group = 1
    else:
        group = 3

    m = _LEVEL_NUMBER_RE.search(name)
    number = int(m.group(0)) if m else 0
    return group, number, name


def fracture_level_distribution(records: Iterable[PatientRecord]) -> List[Dict[str, Any]]:
    """
    Count of records per fracture level. A record listing several levels
    counts once towards each of them.
    """
    def levels() -> Iterable[str]:
        for r in records:
            tokens = split_multi(r.new_fractures)
            if not tokens:
                tokens = [UNKNOWN_LABEL]
            for t in tokens:
                yield t

    buckets = _tally(levels())
    return sorted(buckets, key=lambda b: fracture_level_sort_key(b["name"]))
