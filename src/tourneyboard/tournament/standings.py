"""Group standings and ranking.

This module turns the completed matches of a group into ranked standings.

Ranking criteria, in priority order:
- Points
- Goal difference
- Goals for
- Head-to-head wins between the two tied participants

Rank numbers follow competition ranking ("1, 1, 3") and only the first three
criteria decide whether two participants share a rank. Head-to-head orders
participants but never splits a rank.
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

import functools
from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from tourneyboard.constants import (
    DEFAULT_DRAW_POINTS,
    DEFAULT_LOSS_POINTS,
    DEFAULT_WIN_POINTS,
)
from tourneyboard.models import (
    Group,
    GroupStanding,
    GroupStandings,
    Match,
    MatchRound,
    Participant,
    TournamentConfig,
)
from tourneyboard.type_hints import Side
from tourneyboard.utils import setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class MatchPoints:
    """Points and outcome counters awarded to each side of one match."""

    player1_points: int
    player2_points: int
    player1_wins: int
    player2_wins: int
    player1_losses: int
    player2_losses: int
    winner: Optional[Side]

    @property
    def is_draw(self) -> bool:
        return self.winner is None


def calculate_match_points(
    player1_score: int,
    player2_score: int,
    win_points: int = DEFAULT_WIN_POINTS,
    loss_points: int = DEFAULT_LOSS_POINTS,
    draw_points: int = DEFAULT_DRAW_POINTS,
) -> MatchPoints:
    """Classify a match by its scores and award points to both sides."""
    if player1_score > player2_score:
        return MatchPoints(win_points, loss_points, 1, 0, 0, 1, "player1")
    if player1_score < player2_score:
        return MatchPoints(loss_points, win_points, 0, 1, 1, 0, "player2")
    return MatchPoints(draw_points, draw_points, 0, 0, 0, 0, None)


def calculate_head_to_head(
    participant1_id: str, participant2_id: str, matches: Iterable[Match]
) -> Tuple[int, int]:
    """Count direct wins between two participants.

    Only completed matches played directly between them count. Draws are
    not counted for either side.

    Returns:
        Tuple of (participant1_wins, participant2_wins)
    """
    participant1_wins = 0
    participant2_wins = 0

    for match in matches:
        if not match.is_completed or not match.involves(participant1_id, participant2_id):
            continue

        winner_id = match.decide_winner()
        if winner_id == participant1_id:
            participant1_wins += 1
        elif winner_id == participant2_id:
            participant2_wins += 1

    return participant1_wins, participant2_wins


def compare_standings(
    a: GroupStanding, b: GroupStanding, matches: Sequence[Match] = ()
) -> int:
    """Compare two standings for ranking order.

    Returns:
        1 if ``a`` ranks higher, -1 if ``b`` ranks higher, 0 if unresolved
    """
    for value_a, value_b in zip(a.ranking_key(), b.ranking_key()):
        if value_a != value_b:
            return 1 if value_a > value_b else -1

    if matches:
        a_wins, b_wins = calculate_head_to_head(
            a.participant_id, b.participant_id, matches
        )
        if a_wins != b_wins:
            return 1 if a_wins > b_wins else -1

    # Unresolved: the stable sort keeps roster order
    return 0


def assign_ranks(standings: List[GroupStanding]) -> None:
    """Assign competition ranks to standings that are already sorted.

    A standing shares the previous rank only when points, goal difference
    and goals for are all identical; otherwise it takes its 1-based position.
    """
    current_rank = 1
    for position, standing in enumerate(standings):
        if position > 0:
            previous = standings[position - 1]
            if previous.ranking_key() != standing.ranking_key():
                current_rank = position + 1
        standing.rank = current_rank


class StandingsCalculator:
    """Computes ranked group standings from match results.

    This class is responsible for:
    - Accumulating wins, losses, draws, goals and points per participant
    - Sorting by points, goal difference, goals for and head-to-head
    - Assigning competition ranks
    """

    def __init__(
        self,
        win_points: int = DEFAULT_WIN_POINTS,
        loss_points: int = DEFAULT_LOSS_POINTS,
        draw_points: int = DEFAULT_DRAW_POINTS,
    ):
        self.win_points = win_points
        self.loss_points = loss_points
        self.draw_points = draw_points

    @classmethod
    def from_config(cls, config: TournamentConfig) -> "StandingsCalculator":
        return cls(config.win_points, config.loss_points, config.draw_points)

    def calculate(
        self,
        group_id: str,
        matches: Iterable[Match],
        participants: Iterable[Participant],
    ) -> List[GroupStanding]:
        """Calculate ranked standings for one group.

        Args:
            group_id: Group to rank
            matches: Match set; only completed matches of ``group_id`` count
            participants: Group roster; each gets a standing even without matches

        Returns:
            Standings sorted by rank, best first
        """
        group_matches = [
            match
            for match in matches
            if match.group_id == group_id and match.is_completed
        ]

        standings: Dict[str, GroupStanding] = {}
        for participant in participants:
            standings[participant.id] = GroupStanding(
                participant_id=participant.id,
                participant_name=participant.name,
            )

        for match in group_matches:
            player1 = standings.get(match.player1_id)
            player2 = standings.get(match.player2_id)
            if player1 is None or player2 is None:
                logger.debug(
                    f"Skipping match {match.id or match.match_number} in group "
                    f"{group_id}: participant not on the roster"
                )
                continue

            self._apply_match(match, player1, player2)

        for standing in standings.values():
            standing.refresh_goal_difference()

        ranked = sorted(
            standings.values(),
            key=functools.cmp_to_key(
                lambda a, b: compare_standings(a, b, group_matches)
            ),
            reverse=True,
        )
        assign_ranks(ranked)
        return ranked

    def _apply_match(
        self, match: Match, player1: GroupStanding, player2: GroupStanding
    ) -> None:
        """Add one completed match to both participants' standings."""
        points = calculate_match_points(
            match.player1_score,
            match.player2_score,
            self.win_points,
            self.loss_points,
            self.draw_points,
        )

        player1.goals_for += match.player1_score
        player1.goals_against += match.player2_score
        player1.points += points.player1_points
        player1.wins += points.player1_wins
        player1.losses += points.player1_losses

        player2.goals_for += match.player2_score
        player2.goals_against += match.player1_score
        player2.points += points.player2_points
        player2.wins += points.player2_wins
        player2.losses += points.player2_losses

        if points.is_draw:
            player1.draws += 1
            player2.draws += 1

    def calculate_all(
        self,
        groups: Iterable[Group],
        matches: Sequence[Match],
        participants: Iterable[Participant],
    ) -> List[GroupStandings]:
        """Calculate standings for every group, in group order."""
        by_id = {participant.id: participant for participant in participants}
        results = []
        for group in sorted(groups, key=lambda g: g.order):
            roster = [
                by_id.get(pid) or Participant(id=pid, name=pid)
                for pid in group.participant_ids
            ]
            results.append(
                GroupStandings(
                    group_id=group.id,
                    name=group.name,
                    standings=self.calculate(group.id, matches, roster),
                )
            )
        return results


def compute_standings(
    group_id: str,
    matches: Iterable[Match],
    participants: Iterable[Participant],
    win_points: int = DEFAULT_WIN_POINTS,
    loss_points: int = DEFAULT_LOSS_POINTS,
    draw_points: int = DEFAULT_DRAW_POINTS,
) -> List[GroupStanding]:
    """Compute ranked standings of one group. See :class:`StandingsCalculator`."""
    calculator = StandingsCalculator(win_points, loss_points, draw_points)
    return calculator.calculate(group_id, matches, participants)


def compute_all_standings(
    groups: Iterable[Group],
    matches: Sequence[Match],
    participants: Iterable[Participant],
    config: Optional[TournamentConfig] = None,
) -> List[GroupStandings]:
    """Compute standings for every group using the configured point values."""
    calculator = (
        StandingsCalculator.from_config(config) if config else StandingsCalculator()
    )
    return calculator.calculate_all(groups, matches, participants)


def group_stage_complete(
    matches: Iterable[Match], group_ids: Optional[Iterable[str]] = None
) -> bool:
    """Check that every group match (optionally of ``group_ids``) is completed."""
    wanted = set(group_ids) if group_ids is not None else None
    for match in matches:
        if match.round is not MatchRound.GROUP:
            continue
        if wanted is not None and match.group_id not in wanted:
            continue
        if not match.is_completed:
            return False
    return True
