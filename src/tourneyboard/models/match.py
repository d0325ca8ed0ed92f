"""Match data class."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from tourneyboard.models.enums import MatchRound, MatchStatus


def _read(data: Dict[str, Any], key: str, camel_key: str, default: Any = None) -> Any:
    """Read ``key`` from a snapshot, falling back to the camelCase spelling."""
    if key in data:
        return data[key]
    return data.get(camel_key, default)


@dataclass
class Match:
    """A single match between two participants.

    Attributes
    ----------
    player1_id : str
        First participant.
    player2_id : str
        Second participant.
    player1_score : int
        Score of the first participant, 0 until played.
    player2_score : int
        Score of the second participant, 0 until played.
    status : MatchStatus
        Lifecycle status.
    winner_id : str or None
        Winner reference. None means a draw or not yet decided.
    group_id : str or None
        Owning group for group-stage matches.
    round : MatchRound
        Phase the match belongs to.
    match_number : int
        Ordering within the group schedule or knockout round (1-indexed).
    id : str or None
        Identifier assigned by the persistence layer. Matches built by the
        core carry None until stored.
    """

    player1_id: str
    player2_id: str
    player1_score: int = 0
    player2_score: int = 0
    status: MatchStatus = MatchStatus.PENDING
    winner_id: Optional[str] = None
    group_id: Optional[str] = None
    round: MatchRound = MatchRound.GROUP
    match_number: int = 1
    id: Optional[str] = None

    @property
    def is_completed(self) -> bool:
        return self.status is MatchStatus.COMPLETED

    def involves(self, participant1_id: str, participant2_id: str) -> bool:
        """Check whether this match is directly between the two participants."""
        return {self.player1_id, self.player2_id} == {participant1_id, participant2_id}

    def decide_winner(self) -> Optional[str]:
        """Winner implied by the scores, or None when the scores are level."""
        if self.player1_score > self.player2_score:
            return self.player1_id
        if self.player1_score < self.player2_score:
            return self.player2_id
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "id": self.id,
            "player1_id": self.player1_id,
            "player2_id": self.player2_id,
            "player1_score": self.player1_score,
            "player2_score": self.player2_score,
            "status": self.status.value,
            "winner_id": self.winner_id,
            "group_id": self.group_id,
            "round": self.round.value,
            "match_number": self.match_number,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary.

        Accepts both the snake_case keys written by :meth:`to_dict` and the
        camelCase keys used by the web application.
        """
        match_id = data.get("id")
        return cls(
            id=str(match_id) if match_id is not None else None,
            player1_id=str(_read(data, "player1_id", "player1Id")),
            player2_id=str(_read(data, "player2_id", "player2Id")),
            player1_score=int(_read(data, "player1_score", "player1Score", 0)),
            player2_score=int(_read(data, "player2_score", "player2Score", 0)),
            status=MatchStatus(data.get("status", MatchStatus.PENDING.value)),
            winner_id=_read(data, "winner_id", "winnerId"),
            group_id=_read(data, "group_id", "groupId"),
            round=MatchRound(data.get("round", MatchRound.GROUP.value)),
            match_number=int(_read(data, "match_number", "matchNumber", 1)),
        )
