"""Round-robin schedule generation for group play."""

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

from typing import Iterable, List, Sequence

from tourneyboard.models import Group, GroupSchedule, Match, MatchRound, MatchStatus, Pairing
from tourneyboard.utils import setup_logger

logger = setup_logger(__name__)


def generate_round_robin(participant_ids: Sequence[str]) -> List[Pairing]:
    """Generate every pairing of a group exactly once.

    Pairs are enumerated by nested iteration over the input order: for each
    index i, every j > i. Fewer than two participants yield no pairings.

    Args:
        participant_ids: Participants of the group

    Returns:
        ``n * (n - 1) / 2`` pairings
    """
    participants = list(participant_ids)
    if len(participants) < 2:
        return []

    return [
        Pairing(participants[i], participants[j])
        for i in range(len(participants))
        for j in range(i + 1, len(participants))
    ]


def generate_group_schedules(groups: Iterable[Group]) -> List[GroupSchedule]:
    """Generate a round-robin schedule for each group independently."""
    schedules = []
    for group in groups:
        pairings = generate_round_robin(group.participant_ids)
        logger.debug(f"{group.name}: {len(pairings)} matches scheduled")
        schedules.append(GroupSchedule(group_id=group.id, pairings=pairings))
    return schedules


def build_group_matches(schedule: GroupSchedule) -> List[Match]:
    """Turn a group schedule into pending match records numbered from 1."""
    return [
        Match(
            player1_id=pairing.player1_id,
            player2_id=pairing.player2_id,
            status=MatchStatus.PENDING,
            group_id=schedule.group_id,
            round=MatchRound.GROUP,
            match_number=number,
        )
        for number, pairing in enumerate(schedule.pairings, start=1)
    ]
