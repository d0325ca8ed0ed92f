"""Group draw for tournaments.

This module partitions a roster into fixed-size groups, either by a uniform
random shuffle or by validating a manual assignment.
"""

# Tourney Board
# Copyright (C) 2025  Tourney Board developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from collections import Counter
from typing import Dict, List, Mapping, Optional, Sequence

from tourneyboard.exceptions import (
    DuplicateParticipantException,
    GroupIndexException,
    GroupSizeMismatchException,
    MissingParticipantException,
    UnknownParticipantException,
)
from tourneyboard.models import Group, group_name
from tourneyboard.type_hints import GroupAssignment
from tourneyboard.utils import setup_logger
from tourneyboard.utils.validation import (
    validate_group_sizes as _check_group_sizes,
    validate_group_sizes_strict,
)

logger = setup_logger(__name__)


def validate_group_sizes(participant_count: int, group_sizes: Sequence[int]) -> bool:
    """Check that the sum of group sizes equals the participant count."""
    return bool(_check_group_sizes(participant_count, group_sizes))


def _reject_duplicates(participant_ids: Sequence[str]) -> None:
    counts = Counter(participant_ids)
    duplicates = [pid for pid, count in counts.items() if count > 1]
    if duplicates:
        raise DuplicateParticipantException(duplicates)


def shuffle_participants(
    participant_ids: Sequence[str], rng: Optional[random.Random] = None
) -> List[str]:
    """Return a uniformly shuffled copy of ``participant_ids`` (Fisher-Yates).

    Args:
        participant_ids: Ids to shuffle; the input is left untouched
        rng: Random source; the module-level generator when None

    Returns:
        A new list holding a random permutation of the ids
    """
    rng = rng or random
    shuffled = list(participant_ids)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randint(0, i)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def draw_groups(
    participant_ids: Sequence[str],
    group_sizes: Sequence[int],
    rng: Optional[random.Random] = None,
) -> GroupAssignment:
    """Randomly draw participants into groups.

    The roster is shuffled, then sliced into contiguous runs whose lengths
    are ``group_sizes`` in order: run 0 goes to group 0, run 1 to group 1...

    Args:
        participant_ids: Roster to draw
        group_sizes: Size of each group, e.g. ``[6, 5]`` for two groups
        rng: Random source, inject a seeded ``random.Random`` for reproducible draws

    Returns:
        Mapping of participant id to 0-based group index

    Raises:
        DrawValidationException: If the roster or size list is empty, a size
            is not a positive integer, or the sizes do not sum to the roster size
        DuplicateParticipantException: If the roster repeats an id
    """
    validate_group_sizes_strict(len(participant_ids), group_sizes)
    _reject_duplicates(participant_ids)

    shuffled = shuffle_participants(participant_ids, rng)

    assignment: GroupAssignment = {}
    position = 0
    for group_index, size in enumerate(group_sizes):
        for participant_id in shuffled[position : position + size]:
            assignment[participant_id] = group_index
        position += size

    logger.info(
        f"Drew {len(participant_ids)} participants into {len(group_sizes)} groups"
    )
    return assignment


def validate_manual_assignment(
    participant_ids: Sequence[str],
    group_sizes: Sequence[int],
    assignment: Mapping[str, int],
) -> GroupAssignment:
    """Validate a caller-supplied participant to group assignment.

    Rules are checked in this order and the first broken one is raised:
    known participant, group index in range, complete roster, group sizes.

    Args:
        participant_ids: Tournament roster
        group_sizes: Configured size of each group
        assignment: Mapping of participant id to 0-based group index

    Returns:
        A copy of the assignment, as a plain dict

    Raises:
        DrawValidationException: If a size is malformed or the totals do not match
        DuplicateParticipantException: If the roster repeats an id
        UnknownParticipantException: If an id is not on the roster
        GroupIndexException: If a group index is out of range
        MissingParticipantException: If a roster participant is unassigned
        GroupSizeMismatchException: If a group does not get its configured size
    """
    validate_group_sizes_strict(len(participant_ids), group_sizes)
    _reject_duplicates(participant_ids)

    roster = set(participant_ids)
    group_count = len(group_sizes)
    counts: Counter = Counter()

    for participant_id, group_index in assignment.items():
        if participant_id not in roster:
            raise UnknownParticipantException(participant_id)
        if (
            isinstance(group_index, bool)
            or not isinstance(group_index, int)
            or not 0 <= group_index < group_count
        ):
            raise GroupIndexException(participant_id, group_index, group_count)
        counts[group_index] += 1

    missing = roster - set(assignment)
    if missing:
        raise MissingParticipantException(missing)

    for group_index, expected in enumerate(group_sizes):
        actual = counts[group_index]
        if actual != expected:
            raise GroupSizeMismatchException(
                group_index, group_name(group_index), expected, actual
            )

    return dict(assignment)


def assign_groups(
    participant_ids: Sequence[str],
    group_sizes: Sequence[int],
    assignment: Optional[Mapping[str, int]] = None,
    rng: Optional[random.Random] = None,
) -> GroupAssignment:
    """Produce a group assignment, manual when one is supplied, random otherwise."""
    if assignment is not None:
        logger.info("Validating manual group assignment")
        return validate_manual_assignment(participant_ids, group_sizes, assignment)
    return draw_groups(participant_ids, group_sizes, rng)


def build_groups(
    assignment: Mapping[str, int],
    group_sizes: Sequence[int],
    participant_ids: Sequence[str],
    group_ids: Optional[Sequence[str]] = None,
) -> List[Group]:
    """Materialize :class:`Group` values from an assignment.

    Args:
        assignment: Validated participant id to group index mapping
        group_sizes: Configured size of each group
        participant_ids: Roster; members are listed in roster order
        group_ids: Optional ids for the groups, defaults to ``"group-<n>"``

    Returns:
        One group per configured size, in group order
    """
    if group_ids is not None and len(group_ids) != len(group_sizes):
        raise ValueError(
            f"Expected {len(group_sizes)} group ids, got {len(group_ids)}"
        )

    groups = [
        Group(
            id=group_ids[index] if group_ids is not None else f"group-{index + 1}",
            name=group_name(index),
            order=index,
        )
        for index in range(len(group_sizes))
    ]
    members: Dict[int, List[str]] = {index: [] for index in range(len(group_sizes))}
    for participant_id in participant_ids:
        if participant_id in assignment:
            members[assignment[participant_id]].append(participant_id)
    for group in groups:
        group.participant_ids = members[group.order]
    return groups
