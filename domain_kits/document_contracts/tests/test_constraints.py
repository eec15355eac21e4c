import re

import pytest

from domain_kits.document_contracts import (
    AllOf,
    Constraint,
    Document,
    Found,
    NotFound,
    Part,
    PartRequirement,
    RequiredPattern,
    SizeLimit,
    ViolationKind,
    ViolationTaxonomy,
    find_part,
    word_count,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", 0),
        ("   \t\n ", 0),
        ("one", 1),
        ("  leading and trailing  ", 3),
        ("runs\t\tof   mixed\n\nwhitespace", 4),
    ],
)
def test_word_count_ignores_whitespace_runs(text, expected):
    assert word_count(text) == expected


def test_size_limit_is_exclusive_upper_bound():
    """Test 1: exactly ``max`` words is already too many."""
    limit = SizeLimit(3)

    assert limit.is_satisfied(Part("Intro", "two words"))
    assert not limit.is_satisfied(Part("Intro", "now three words"))


def test_size_limit_evaluate_mirrors_is_satisfied():
    """Test 2: empty list iff satisfied, one violation otherwise."""
    limit = SizeLimit(2)
    ok = Part("Intro", "  fine  ")
    bad = Part("Intro", "far too long")

    assert limit.evaluate(ok) == []
    violations = limit.evaluate(bad)
    assert len(violations) == 1
    assert violations[0].kind is ViolationKind.CONSTRAINT_VIOLATION
    assert "'Intro'" in violations[0].message
    assert "3 words" in violations[0].message
    assert "max=2" in violations[0].message


def test_blank_content_satisfies_any_size_limit():
    assert SizeLimit(1).is_satisfied(Part("Empty", ""))
    assert SizeLimit(1).is_satisfied(Part("Blank", " \n\t "))


@pytest.mark.parametrize("bad_max, error", [(0, ValueError), (-5, ValueError), (2.5, TypeError), (True, TypeError)])
def test_size_limit_rejects_invalid_max(bad_max, error):
    with pytest.raises(error):
        SizeLimit(bad_max)


def test_required_pattern():
    """Test 3: pattern found anywhere in content."""
    constraint = RequiredPattern(r"\bconclude\b")

    assert constraint.evaluate(Part("Conclusion", "We conclude here.")) == []
    violations = constraint.evaluate(Part("Conclusion", "The end."))
    assert [v.kind for v in violations] == [ViolationKind.CONSTRAINT_VIOLATION]


def test_required_pattern_rejects_invalid_regex():
    with pytest.raises(re.error):
        RequiredPattern("(unclosed")


def test_required_pattern_is_hashable_value():
    assert RequiredPattern("a+") == RequiredPattern("a+")
    assert len({RequiredPattern("a+"), RequiredPattern("a+")}) == 1


def test_all_of_evaluates_every_member():
    """Test 4: composite keeps evaluate consistent with is_satisfied."""
    composite = AllOf([SizeLimit(2), RequiredPattern("^Dear"), RequiredPattern("regards$")])
    part = Part("Letter", "Hello there friend")

    assert not composite.is_satisfied(part)
    assert len(composite.evaluate(part)) == 3
    assert isinstance(composite.constraints, tuple)


def test_empty_all_of_is_always_satisfied():
    assert AllOf().is_satisfied(Part("Any", "whatever text"))
    assert AllOf().evaluate(Part("Any", "whatever text")) == []


def test_constraint_variants_satisfy_protocol():
    for constraint in (SizeLimit(1), RequiredPattern("x"), AllOf()):
        assert isinstance(constraint, Constraint)


def test_find_part_returns_found_or_not_found():
    """Test 5: lookup outcome is a value, not an exception."""
    body = Part("Body", "text")
    document = Document.of(body)

    assert find_part(document, PartRequirement("Body", SizeLimit(5))) == Found(body)
    assert find_part(document, PartRequirement("Missing", SizeLimit(5))) == NotFound("Missing")


def test_find_part_with_duplicate_names_picks_one_of_them():
    first, second = Part("Body", "one"), Part("Body", "two")

    result = find_part(Document.of(first, second), PartRequirement("Body", SizeLimit(5)))

    assert isinstance(result, Found)
    assert result.part in (first, second)


def test_document_accepts_any_iterable_of_parts():
    parts = [Part("A", "x"), Part("B", "y")]

    document = Document(parts)

    assert isinstance(document.parts, frozenset)
    assert document == Document.of(*reversed(parts))
    assert document.part_names() == frozenset({"A", "B"})


def test_taxonomy_covers_both_kinds():
    assert ViolationTaxonomy.all_kinds() == ["PART_MISSING", "CONSTRAINT_VIOLATION"]
    assert ViolationTaxonomy.severity_level(ViolationKind.PART_MISSING) == "critical"
    assert ViolationTaxonomy.severity_level("CONSTRAINT_VIOLATION") == "high"
    assert ViolationTaxonomy.classify("SOMETHING_ELSE")["severity"] == "unknown"
