import random
from collections import Counter

import pytest

from tourneyboard.exceptions import (
    DrawValidationException,
    DuplicateParticipantException,
    GroupIndexException,
    GroupSizeMismatchException,
    MissingParticipantException,
    UnknownParticipantException,
    ValidationException,
)
from tourneyboard.tournament.draw import (
    assign_groups,
    build_groups,
    draw_groups,
    shuffle_participants,
    validate_group_sizes,
    validate_manual_assignment,
)


def _roster(count):
    return [f"p{i}" for i in range(1, count + 1)]


@pytest.mark.parametrize(
    "count, sizes",
    [(4, [2, 2]), (11, [6, 5]), (7, [3, 2, 2]), (5, [5]), (12, [4, 4, 4])],
)
def test_draw_fills_every_group_to_its_size(count, sizes):
    roster = _roster(count)
    for seed in range(20):
        assignment = draw_groups(roster, sizes, rng=random.Random(seed))

        assert sorted(assignment) == sorted(roster)
        populations = Counter(assignment.values())
        assert [populations[i] for i in range(len(sizes))] == sizes


def test_draw_is_reproducible_with_seeded_rng():
    roster = _roster(10)
    first = draw_groups(roster, [5, 5], rng=random.Random(42))
    second = draw_groups(roster, [5, 5], rng=random.Random(42))
    assert first == second


def test_draw_does_not_mutate_input():
    roster = _roster(6)
    original = list(roster)
    draw_groups(roster, [3, 3], rng=random.Random(1))
    assert roster == original


def test_draw_without_rng_uses_module_random():
    assignment = draw_groups(_roster(6), [3, 3])
    assert Counter(assignment.values()) == {0: 3, 1: 3}


def test_shuffle_is_a_permutation():
    roster = _roster(9)
    shuffled = shuffle_participants(roster, random.Random(3))
    assert sorted(shuffled) == sorted(roster)


def test_shuffle_reaches_every_ordering():
    # Three items have six orderings; an unbiased shuffle should hit them all
    seen = set()
    rng = random.Random(0)
    for _ in range(600):
        seen.add(tuple(shuffle_participants(["a", "b", "c"], rng)))
    assert len(seen) == 6


def test_draw_rejects_mismatched_totals():
    with pytest.raises(DrawValidationException) as excinfo:
        draw_groups(_roster(5), [3, 3])

    assert excinfo.value.expected == 6
    assert excinfo.value.actual == 5
    assert "(5)" in str(excinfo.value) and "(6)" in str(excinfo.value)


def test_draw_rejects_empty_inputs():
    with pytest.raises(ValidationException, match="No participants"):
        draw_groups([], [2])
    with pytest.raises(ValidationException, match="No group sizes"):
        draw_groups(_roster(2), [])


def test_validate_group_sizes():
    assert validate_group_sizes(11, [6, 5])
    assert not validate_group_sizes(10, [6, 5])
    assert not validate_group_sizes(0, [])


def test_manual_assignment_accepts_valid_mapping():
    roster = _roster(4)
    manual = {"p1": 1, "p2": 0, "p3": 0, "p4": 1}

    assert validate_manual_assignment(roster, [2, 2], manual) == manual


def test_manual_assignment_rejects_unknown_participant():
    manual = {"p1": 0, "p2": 0, "ghost": 1, "p4": 1}
    with pytest.raises(UnknownParticipantException) as excinfo:
        validate_manual_assignment(_roster(4), [2, 2], manual)
    assert excinfo.value.participant_id == "ghost"


@pytest.mark.parametrize("bad_index", [2, -1, "0", None, True])
def test_manual_assignment_rejects_out_of_range_group(bad_index):
    manual = {"p1": 0, "p2": 0, "p3": 1, "p4": bad_index}
    with pytest.raises(GroupIndexException):
        validate_manual_assignment(_roster(4), [2, 2], manual)


def test_manual_assignment_rejects_size_mismatch():
    manual = {"p1": 0, "p2": 0, "p3": 0, "p4": 1}
    with pytest.raises(GroupSizeMismatchException) as excinfo:
        validate_manual_assignment(_roster(4), [2, 2], manual)

    assert excinfo.value.group_index == 0
    assert excinfo.value.expected == 2
    assert excinfo.value.actual == 3
    assert "Group A" in str(excinfo.value)


def test_manual_assignment_rejects_mismatched_totals():
    with pytest.raises(DrawValidationException):
        validate_manual_assignment(_roster(4), [2, 3], {"p1": 0})


def test_manual_assignment_rejects_missing_participant():
    manual = {"p1": 0, "p2": 0, "p3": 1}
    with pytest.raises(MissingParticipantException) as excinfo:
        validate_manual_assignment(_roster(4), [2, 2], manual)
    assert excinfo.value.missing_ids == ["p4"]


def test_missing_participant_exception_lists_ids():
    exc = MissingParticipantException({"b", "a"})
    assert exc.missing_ids == ["a", "b"]
    assert "a, b" in str(exc)


def test_assign_groups_dispatches_on_manual_assignment():
    roster = _roster(4)
    manual = {"p1": 0, "p2": 1, "p3": 0, "p4": 1}

    assert assign_groups(roster, [2, 2], manual) == manual

    drawn = assign_groups(roster, [2, 2], rng=random.Random(5))
    assert Counter(drawn.values()) == {0: 2, 1: 2}


def test_build_groups_names_and_orders_groups():
    roster = _roster(5)
    assignment = {"p1": 1, "p2": 0, "p3": 1, "p4": 0, "p5": 1}

    groups = build_groups(assignment, [2, 3], roster)

    assert [g.name for g in groups] == ["Group A", "Group B"]
    assert [g.order for g in groups] == [0, 1]
    assert groups[0].participant_ids == ["p2", "p4"]
    assert groups[1].participant_ids == ["p1", "p3", "p5"]


def test_build_groups_uses_given_ids():
    groups = build_groups({"a": 0, "b": 1}, [1, 1], ["a", "b"], group_ids=["x", "y"])
    assert [g.id for g in groups] == ["x", "y"]

    with pytest.raises(ValueError):
        build_groups({"a": 0, "b": 1}, [1, 1], ["a", "b"], group_ids=["x"])


@pytest.mark.parametrize("sizes", [[3, -1], [2, 0], [1.5, 0.5], ["1", "1"], [True, True]])
def test_draw_rejects_malformed_group_sizes(sizes):
    with pytest.raises(DrawValidationException, match="Group size at position"):
        draw_groups(["a", "b"], sizes, rng=random.Random(1))


def test_manual_assignment_rejects_malformed_group_sizes():
    with pytest.raises(DrawValidationException, match="at least 1"):
        validate_manual_assignment(["a", "b"], [3, -1], {"a": 0, "b": 0})


def test_draw_rejects_duplicate_roster_ids():
    with pytest.raises(DuplicateParticipantException) as excinfo:
        draw_groups(["a", "a", "b", "c"], [2, 2], rng=random.Random(1))
    assert excinfo.value.duplicate_ids == ["a"]
    assert "a" in str(excinfo.value)


def test_manual_assignment_rejects_duplicate_roster_ids():
    with pytest.raises(DuplicateParticipantException):
        validate_manual_assignment(
            ["a", "b", "a", "c"], [2, 2], {"a": 0, "b": 0, "c": 1}
        )
