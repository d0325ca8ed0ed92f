"""Enumerations describing tournament, match and round state."""

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

from enum import Enum

from tourneyboard.constants import (
    PHASE_COMPLETED,
    PHASE_GROUP_DRAW,
    PHASE_GROUP_STAGE,
    PHASE_KNOCKOUT,
    PHASE_SETUP,
    ROUND_FINAL,
    ROUND_GROUP,
    ROUND_SEMIFINAL,
    STATUS_CANCELLED,
    STATUS_COMPLETED,
    STATUS_IN_PROGRESS,
    STATUS_PENDING,
)


class TournamentPhase(Enum):
    """Phase of a tournament.

    The core never enforces transitions; callers invoke each operation only
    in the phase it belongs to.
    """

    SETUP = PHASE_SETUP
    GROUP_DRAW = PHASE_GROUP_DRAW
    GROUP_STAGE = PHASE_GROUP_STAGE
    KNOCKOUT = PHASE_KNOCKOUT
    COMPLETED = PHASE_COMPLETED


class MatchStatus(Enum):
    """Lifecycle status of a match."""

    PENDING = STATUS_PENDING
    IN_PROGRESS = STATUS_IN_PROGRESS
    COMPLETED = STATUS_COMPLETED
    CANCELLED = STATUS_CANCELLED


class MatchRound(Enum):
    """Which phase a match belongs to."""

    GROUP = ROUND_GROUP
    SEMIFINAL = ROUND_SEMIFINAL
    FINAL = ROUND_FINAL

    @property
    def is_knockout(self) -> bool:
        return self is not MatchRound.GROUP
