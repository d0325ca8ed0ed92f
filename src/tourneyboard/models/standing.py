"""GroupStanding data class."""

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

from dataclasses import asdict, dataclass


@dataclass
class GroupStanding:
    """A participant's accumulated group-stage statistics.

    Standings are derived values: they are recomputed from the match set on
    every read and never stored as the source of truth.

    Attributes
    ----------
    participant_id : str
        Participant the standing belongs to.
    participant_name : str
        Display name of the participant.
    wins, losses, draws : int
        Match outcome counters.
    goals_for, goals_against : int
        Accumulated scores for and against.
    goal_difference : int
        Always ``goals_for - goals_against`` once computed.
    points : int
        Points from the configured win/loss/draw values.
    rank : int
        1-based competition rank, 0 until ranked.
    """

    participant_id: str
    participant_name: str
    wins: int = 0
    losses: int = 0
    draws: int = 0
    goals_for: int = 0
    goals_against: int = 0
    goal_difference: int = 0
    points: int = 0
    rank: int = 0

    @property
    def played(self) -> int:
        return self.wins + self.losses + self.draws

    def refresh_goal_difference(self) -> None:
        self.goal_difference = self.goals_for - self.goals_against

    def ranking_key(self):
        """The criteria that decide whether two standings share a rank."""
        return (self.points, self.goal_difference, self.goals_for)

    def to_dict(self):
        """Serialize standing to dictionary."""
        return asdict(self)
