"""Pairing and resolution data classes produced by the tournament core."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List, Union

from tourneyboard.models.standing import GroupStanding


@dataclass(frozen=True)
class Pairing:
    """Two participants due to meet, in player1/player2 order."""

    player1_id: str
    player2_id: str

    def to_dict(self) -> Dict[str, Any]:
        return {"player1_id": self.player1_id, "player2_id": self.player2_id}


@dataclass(frozen=True)
class NotReady:
    """The next knockout round cannot be determined yet.

    Attributes
    ----------
    reason : str
        Human-readable explanation, e.g. which semifinal is still open.
    """

    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return {"ready": False, "reason": self.reason}


# Outcome of resolving the final: a pairing, or not ready yet
FinalResolution = Union[Pairing, NotReady]


@dataclass(frozen=True)
class SemifinalPairings:
    """Cross-seeded semifinal pairings drawn from two groups."""

    semifinal1: Pairing
    semifinal2: Pairing

    def as_list(self) -> List[Pairing]:
        return [self.semifinal1, self.semifinal2]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "semifinal1": self.semifinal1.to_dict(),
            "semifinal2": self.semifinal2.to_dict(),
        }


@dataclass
class GroupSchedule:
    """Round-robin pairings generated for one group."""

    group_id: str
    pairings: List[Pairing] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group_id": self.group_id,
            "matches": [p.to_dict() for p in self.pairings],
        }


@dataclass
class GroupStandings:
    """Ranked standings of one group, as consumed by the advancement resolver."""

    group_id: str
    name: str
    standings: List[GroupStanding] = field(default_factory=list)

    def at_rank(self, rank: int) -> List[GroupStanding]:
        """All standings holding ``rank``. More than one when tied."""
        return [s for s in self.standings if s.rank == rank]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "group_id": self.group_id,
            "name": self.name,
            "standings": [s.to_dict() for s in self.standings],
        }
