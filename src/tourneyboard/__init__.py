"""Tourney Board: tournament computation core for scoreboards.

Group draw, round-robin scheduling, group standings and knockout
advancement as pure functions over plain data.
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

import logging

from tourneyboard.exceptions import (
    DrawValidationException,
    InvalidStateException,
    TourneyBoardException,
    ValidationException,
)
from tourneyboard.models import (
    Group,
    GroupStanding,
    Match,
    MatchRound,
    MatchStatus,
    NotReady,
    Pairing,
    Participant,
    TournamentConfig,
    TournamentPhase,
)
from tourneyboard.tournament import (
    compute_standings,
    draw_groups,
    final_from_semifinals,
    generate_round_robin,
    semifinals_from_groups,
    validate_manual_assignment,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "DrawValidationException",
    "Group",
    "GroupStanding",
    "InvalidStateException",
    "Match",
    "MatchRound",
    "MatchStatus",
    "NotReady",
    "Pairing",
    "Participant",
    "TourneyBoardException",
    "TournamentConfig",
    "TournamentPhase",
    "ValidationException",
    "compute_standings",
    "draw_groups",
    "final_from_semifinals",
    "generate_round_robin",
    "semifinals_from_groups",
    "validate_manual_assignment",
]
