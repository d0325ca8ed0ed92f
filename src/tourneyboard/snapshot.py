"""Tournament snapshots: the plain data the core reads and returns.

A snapshot is the JSON form of a tournament at one point in time, as handed
over by the persistence layer.
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

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from tourneyboard.exceptions import SnapshotException, TourneyBoardException
from tourneyboard.models import (
    Group,
    Match,
    MatchRound,
    Participant,
    TournamentConfig,
)
from tourneyboard.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class TournamentSnapshot:
    """Consistent view of one tournament.

    Attributes
    ----------
    config : TournamentConfig
        Group sizes, point values and phase.
    participants : list of Participant
        Tournament roster, in roster order.
    groups : list of Group
        Drawn groups; empty before the draw.
    matches : list of Match
        Group and knockout matches.
    """

    config: TournamentConfig
    participants: List[Participant] = field(default_factory=list)
    groups: List[Group] = field(default_factory=list)
    matches: List[Match] = field(default_factory=list)

    @property
    def participant_ids(self) -> List[str]:
        return [p.id for p in self.participants]

    @property
    def group_matches(self) -> List[Match]:
        return [m for m in self.matches if m.round is MatchRound.GROUP]

    @property
    def knockout_matches(self) -> List[Match]:
        return [m for m in self.matches if m.round.is_knockout]

    def get_group(self, group_id: str) -> Optional[Group]:
        for group in self.groups:
            if group.id == group_id:
                return group
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize snapshot to dictionary."""
        return {
            "config": self.config.to_dict(),
            "participants": [p.to_dict() for p in self.participants],
            "groups": [g.to_dict() for g in self.groups],
            "matches": [m.to_dict() for m in self.matches],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentSnapshot":
        """Deserialize snapshot from dictionary."""
        if "config" not in data:
            raise SnapshotException("Snapshot has no 'config' section")
        try:
            return cls(
                config=TournamentConfig.from_dict(data["config"]),
                participants=[
                    Participant.from_dict(p) for p in data.get("participants", [])
                ],
                groups=[
                    Group.from_dict(g, order=index)
                    for index, g in enumerate(data.get("groups", []))
                ],
                matches=[Match.from_dict(m) for m in data.get("matches", [])],
            )
        except TourneyBoardException:
            raise
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotException(f"Malformed snapshot: {e}") from e


def load_snapshot(path: Union[str, Path]) -> TournamentSnapshot:
    """Load a snapshot from a JSON file.

    Raises:
        SnapshotException: If the file cannot be read or parsed
    """
    path = Path(path)
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except OSError as e:
        raise SnapshotException(f"Cannot read snapshot {path}: {e}") from e
    except json.JSONDecodeError as e:
        raise SnapshotException(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotException(f"Snapshot {path} must contain a JSON object")

    snapshot = TournamentSnapshot.from_dict(data)
    logger.debug(
        f"Loaded snapshot {path}: {len(snapshot.participants)} participants, "
        f"{len(snapshot.groups)} groups, {len(snapshot.matches)} matches"
    )
    return snapshot


def save_snapshot(snapshot: TournamentSnapshot, path: Union[str, Path]) -> None:
    """Write a snapshot to a JSON file."""
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        json.dump(snapshot.to_dict(), f, indent=2)
    logger.info(f"Snapshot written to {path}")
