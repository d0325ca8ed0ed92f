"""Data model for the tournament core."""

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

from tourneyboard.models.enums import MatchRound, MatchStatus, TournamentPhase
from tourneyboard.models.group import Group, group_name
from tourneyboard.models.match import Match
from tourneyboard.models.pairing import (
    FinalResolution,
    GroupSchedule,
    GroupStandings,
    NotReady,
    Pairing,
    SemifinalPairings,
)
from tourneyboard.models.participant import Participant
from tourneyboard.models.standing import GroupStanding
from tourneyboard.models.tournament_config import TournamentConfig

__all__ = [
    "FinalResolution",
    "Group",
    "GroupSchedule",
    "GroupStanding",
    "GroupStandings",
    "Match",
    "MatchRound",
    "MatchStatus",
    "NotReady",
    "Pairing",
    "Participant",
    "SemifinalPairings",
    "TournamentConfig",
    "TournamentPhase",
    "group_name",
]
