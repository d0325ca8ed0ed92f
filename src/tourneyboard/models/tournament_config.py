"""TournamentConfig data class."""

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
from typing import Any, Dict, List

from tourneyboard.constants import (
    DEFAULT_DRAW_POINTS,
    DEFAULT_LOSS_POINTS,
    DEFAULT_TOURNAMENT_NAME,
    DEFAULT_WIN_POINTS,
)
from tourneyboard.exceptions import InvalidConfigurationException
from tourneyboard.models.enums import TournamentPhase
from tourneyboard.utils.validation import (
    validate_configuration_strict,
    validate_group_sizes_strict,
)


@dataclass
class TournamentConfig:
    """Tournament configuration settings.

    Attributes
    ----------
    group_sizes : list of int
        Size of each group, in group order. Must sum to the participant count
        before any draw.
    name : str
        Tournament name.
    win_points : int
        Points awarded for a win.
    loss_points : int
        Points awarded for a loss.
    draw_points : int
        Points awarded to each side of a draw.
    phase : TournamentPhase
        Current phase, tracked for the caller. The core does not enforce it.
    """

    group_sizes: List[int]
    name: str = DEFAULT_TOURNAMENT_NAME
    win_points: int = DEFAULT_WIN_POINTS
    loss_points: int = DEFAULT_LOSS_POINTS
    draw_points: int = DEFAULT_DRAW_POINTS
    phase: TournamentPhase = TournamentPhase.SETUP

    def __post_init__(self) -> None:
        self.group_sizes = list(self.group_sizes)
        validate_configuration_strict(
            self.group_sizes, self.win_points, self.loss_points, self.draw_points
        )

    @property
    def num_groups(self) -> int:
        return len(self.group_sizes)

    @property
    def participant_count(self) -> int:
        """Number of participants the configured groups hold."""
        return sum(self.group_sizes)

    def validate(self, participant_count: int) -> None:
        """Check the group sizes against a roster size.

        Raises:
            DrawValidationException: If the sizes do not sum to ``participant_count``
        """
        validate_group_sizes_strict(participant_count, self.group_sizes)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "name": self.name,
            "group_sizes": list(self.group_sizes),
            "win_points": self.win_points,
            "loss_points": self.loss_points,
            "draw_points": self.draw_points,
            "phase": self.phase.value,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TournamentConfig":
        """Deserialize configuration from dictionary.

        Accepts the flat ``group_sizes`` key or the web application's nested
        ``{"groupConfig": {"groupSizes": [...]}}`` form.
        """
        if "group_sizes" in data:
            group_sizes = data["group_sizes"]
        elif "groupConfig" in data:
            group_sizes = data["groupConfig"].get("groupSizes", [])
        else:
            raise InvalidConfigurationException("Missing group sizes in configuration")

        try:
            phase = TournamentPhase(data.get("phase", TournamentPhase.SETUP.value))
        except ValueError as e:
            raise InvalidConfigurationException(
                f"Unknown tournament phase: {data.get('phase')!r}"
            ) from e

        return cls(
            group_sizes=list(group_sizes),
            name=data.get("name", DEFAULT_TOURNAMENT_NAME),
            win_points=data.get("win_points", data.get("winPoints", DEFAULT_WIN_POINTS)),
            loss_points=data.get(
                "loss_points", data.get("lossPoints", DEFAULT_LOSS_POINTS)
            ),
            draw_points=data.get(
                "draw_points", data.get("drawPoints", DEFAULT_DRAW_POINTS)
            ),
            phase=phase,
        )
