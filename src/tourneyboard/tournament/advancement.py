"""Knockout-stage advancement.

Semifinals are cross-seeded from two groups (A1 vs B2, B1 vs A2) so that
participants from the same group can only meet again in the final. The final
pairs the two semifinal winners.
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

from typing import List, Optional, Sequence

from tourneyboard.constants import KNOCKOUT_GROUP_COUNT, SEMIFINAL_COUNT
from tourneyboard.exceptions import InvalidStateException
from tourneyboard.models import (
    FinalResolution,
    GroupStanding,
    GroupStandings,
    Match,
    MatchRound,
    MatchStatus,
    NotReady,
    Pairing,
    SemifinalPairings,
)
from tourneyboard.utils import setup_logger

logger = setup_logger(__name__)


def _standing_at(group: GroupStandings, rank: int) -> Optional[GroupStanding]:
    holders = group.at_rank(rank)
    return holders[0] if holders else None


def semifinals_from_groups(groups: Sequence[GroupStandings]) -> SemifinalPairings:
    """Determine semifinal pairings from two ranked groups.

    Semifinal 1 is Group A 1st vs Group B 2nd, semifinal 2 is Group B 1st vs
    Group A 2nd.

    Args:
        groups: Exactly two groups with ranked standings, Group A first

    Returns:
        The two semifinal pairings

    Raises:
        InvalidStateException: If there are not exactly two groups, or a
            group has no rank-1 or no rank-2 standing
    """
    if len(groups) != KNOCKOUT_GROUP_COUNT:
        raise InvalidStateException(
            f"Semifinals require exactly {KNOCKOUT_GROUP_COUNT} groups, got {len(groups)}"
        )

    group_a, group_b = groups
    a_first = _standing_at(group_a, 1)
    a_second = _standing_at(group_a, 2)
    b_first = _standing_at(group_b, 1)
    b_second = _standing_at(group_b, 2)

    if not (a_first and a_second and b_first and b_second):
        raise InvalidStateException(
            "Not enough participants in groups to advance to semifinals "
            "(insufficient participants at rank 1 and 2)"
        )

    pairings = SemifinalPairings(
        semifinal1=Pairing(a_first.participant_id, b_second.participant_id),
        semifinal2=Pairing(b_first.participant_id, a_second.participant_id),
    )
    logger.info(
        f"Semifinals: {a_first.participant_name} vs {b_second.participant_name}, "
        f"{b_first.participant_name} vs {a_second.participant_name}"
    )
    return pairings


def final_from_semifinals(results: Sequence[Match]) -> FinalResolution:
    """Determine the final pairing from the two semifinal results.

    Being not ready is a normal state while semifinals are still being
    played, so it is returned as :class:`NotReady` rather than raised.

    Args:
        results: Semifinal matches in semifinal order

    Returns:
        ``Pairing(semifinal1 winner, semifinal2 winner)``, or :class:`NotReady`
    """
    if len(results) != SEMIFINAL_COUNT:
        return NotReady(
            f"Expected {SEMIFINAL_COUNT} semifinal results, got {len(results)}"
        )

    for number, result in enumerate(results, start=1):
        if result.status is not MatchStatus.COMPLETED:
            return NotReady(f"Semifinal {number} is not completed")

    winners: List[str] = []
    for number, result in enumerate(results, start=1):
        if not result.winner_id:
            # A knockout match should always be decided upstream
            logger.warning(f"Semifinal {number} is completed without a winner")
            return NotReady(f"Semifinal {number} has no winner")
        winners.append(result.winner_id)

    return Pairing(winners[0], winners[1])


def build_semifinal_matches(pairings: SemifinalPairings) -> List[Match]:
    """Build the two pending semifinal matches, numbered 1 and 2."""
    return [
        Match(
            player1_id=pairing.player1_id,
            player2_id=pairing.player2_id,
            status=MatchStatus.PENDING,
            round=MatchRound.SEMIFINAL,
            match_number=number,
        )
        for number, pairing in enumerate(pairings.as_list(), start=1)
    ]


def resolve_final_match(knockout_matches: Sequence[Match]) -> Optional[Match]:
    """Build the final once both semifinals are decided and no final exists.

    Semifinals are taken in ``match_number`` order. The caller still has to
    make sure the returned match is stored only once.

    Returns:
        A new pending final match, or None when there is nothing to create
    """
    semifinals = sorted(
        (m for m in knockout_matches if m.round is MatchRound.SEMIFINAL),
        key=lambda m: m.match_number,
    )
    finals = [m for m in knockout_matches if m.round is MatchRound.FINAL]

    if len(semifinals) != SEMIFINAL_COUNT or finals:
        return None

    resolution = final_from_semifinals(semifinals)
    if isinstance(resolution, NotReady):
        logger.debug(f"Final not ready: {resolution.reason}")
        return None

    logger.info(f"Final: {resolution.player1_id} vs {resolution.player2_id}")
    return Match(
        player1_id=resolution.player1_id,
        player2_id=resolution.player2_id,
        status=MatchStatus.PENDING,
        round=MatchRound.FINAL,
        match_number=1,
    )
