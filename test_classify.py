from ovfdash.classify import (
    OUTCOME_KEYWORDS,
    KeywordSet,
    fracture_level_distribution,
    is_conservative,
    is_surgery_candidate,
    is_surgical_path,
    outcome_distribution,
    split_multi,
)
from ovfdash.models import PatientRecord


def _rec(**kw):
    kw.setdefault("id", "X")
    kw.setdefault("timestamp", "2023/10/01 10:00:00")
    return PatientRecord(**kw)


def test_outcome_partition_across_languages():
    records = [_rec(id=str(i), outcome=o) for i, o in enumerate(["Surgery", "手術", "Conservative", "経過観察", ""])]

    surgical = [r.outcome for r in records if is_surgery_candidate(r)]
    conservative = [r.outcome for r in records if is_conservative(r)]

    assert surgical == ["Surgery", "手術"]
    assert conservative == ["Conservative", "経過観察"]
    empty = records[-1]
    assert not is_surgery_candidate(empty) and not is_conservative(empty)


def test_remarks_only_surgery_counts_as_candidate_but_not_surgical_path():
    r = _rec(outcome="", remarks="Plan SURGERY next week")
    assert is_surgery_candidate(r)
    assert not is_surgical_path(r)


def test_keyword_sets_are_configurable():
    keywords = dict(OUTCOME_KEYWORDS)
    keywords["surgery"] = KeywordSet(label="Surgery", outcome_terms=("Surgery", "手術", "Operation"))
    r = _rec(outcome="Operation (BKP)")
    assert not is_surgical_path(r)
    assert is_surgical_path(r, keywords)


def test_outcome_distribution_keeps_first_occurrence_order():
    records = [_rec(outcome=o) for o in ["Surgery", "", "Conservative", "Surgery"]]
    assert outcome_distribution(records) == [
        {"name": "Surgery", "value": 2},
        {"name": "Unknown", "value": 1},
        {"name": "Conservative", "value": 1},
    ]


def test_fracture_levels_split_multi_values():
    dist = fracture_level_distribution([_rec(new_fractures="L1, L2")])
    assert dist == [{"name": "L1", "value": 1}, {"name": "L2", "value": 1}]


def test_fracture_levels_sort_thoracic_before_lumbar():
    dist = fracture_level_distribution([_rec(new_fractures="L1"), _rec(new_fractures="T5")])
    assert [b["name"] for b in dist] == ["T5", "L1"]


def test_fracture_levels_full_order():
    records = [
        _rec(new_fractures="L2"),
        _rec(new_fractures=""),
        _rec(new_fractures="T12、L1"),
        _rec(new_fractures="T5 S1"),
        _rec(new_fractures="L1"),
    ]
    dist = fracture_level_distribution(records)
    assert dist == [
        {"name": "T5", "value": 1},
        {"name": "T12", "value": 1},
        {"name": "L1", "value": 2},
        {"name": "L2", "value": 1},
        {"name": "Unknown", "value": 1},
        {"name": "S1", "value": 1},
    ]


def test_split_multi():
    assert split_multi("a,、 b  c") == ["a", "b", "c"]
    assert split_multi("") == []
