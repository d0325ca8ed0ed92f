"""Group data class."""

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
from typing import Any, Dict, List, Optional

from tourneyboard.constants import GROUP_LETTERS, GROUP_NAME_PREFIX


def group_name(index: int) -> str:
    """Display name of the group at ``index``: "Group A", "Group B", ...

    Past Z the names continue with the 1-based number ("Group 27").
    """
    if 0 <= index < len(GROUP_LETTERS):
        return f"{GROUP_NAME_PREFIX} {GROUP_LETTERS[index]}"
    return f"{GROUP_NAME_PREFIX} {index + 1}"


@dataclass
class Group:
    """A fixed-size group of participants playing a round-robin.

    Attributes
    ----------
    id : str
        Group identifier.
    name : str
        Display name.
    order : int
        Ordinal position within the tournament (0-indexed).
    participant_ids : list of str
        Assigned participants. Membership never changes after the draw.
    """

    id: str
    name: str
    order: int
    participant_ids: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize group to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "order": self.order,
            "participant_ids": list(self.participant_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any], order: Optional[int] = None) -> "Group":
        """Deserialize group from dictionary."""
        position = data.get("order", order if order is not None else 0)
        return cls(
            id=str(data["id"]),
            name=data.get("name", group_name(position)),
            order=position,
            participant_ids=[
                str(p) for p in data.get("participant_ids", data.get("participantIds", []))
            ],
        )
