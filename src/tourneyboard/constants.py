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

# --- Constants ---
# Default point values for group matches
DEFAULT_WIN_POINTS = 3
DEFAULT_LOSS_POINTS = 0
DEFAULT_DRAW_POINTS = 1

# Tournament phases, in the order a tournament moves through them
PHASE_SETUP = "SETUP"
PHASE_GROUP_DRAW = "GROUP_DRAW"
PHASE_GROUP_STAGE = "GROUP_STAGE"
PHASE_KNOCKOUT = "KNOCKOUT"
PHASE_COMPLETED = "COMPLETED"

# Match status values
STATUS_PENDING = "PENDING"
STATUS_IN_PROGRESS = "IN_PROGRESS"
STATUS_COMPLETED = "COMPLETED"
STATUS_CANCELLED = "CANCELLED"

# Match round tags
ROUND_GROUP = "GROUP"
ROUND_SEMIFINAL = "SEMIFINAL"
ROUND_FINAL = "FINAL"

# Semifinals are drawn from exactly this many groups
KNOCKOUT_GROUP_COUNT = 2
SEMIFINAL_COUNT = 2

# Group naming: "Group A", "Group B", ...
GROUP_NAME_PREFIX = "Group"
GROUP_LETTERS = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"

DEFAULT_TOURNAMENT_NAME = "Untitled Tournament"
