"""Tournament computation core for Tourney Board.

This package provides the pure computations behind tournament mode: group
draw, round-robin scheduling, standings and knockout advancement.
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

from tourneyboard.tournament.advancement import (
    build_semifinal_matches,
    final_from_semifinals,
    resolve_final_match,
    semifinals_from_groups,
)
from tourneyboard.tournament.draw import (
    assign_groups,
    build_groups,
    draw_groups,
    validate_group_sizes,
    validate_manual_assignment,
)
from tourneyboard.tournament.schedule import (
    build_group_matches,
    generate_group_schedules,
    generate_round_robin,
)
from tourneyboard.tournament.standings import (
    StandingsCalculator,
    calculate_head_to_head,
    calculate_match_points,
    compare_standings,
    compute_all_standings,
    compute_standings,
    group_stage_complete,
)

__all__ = [
    "StandingsCalculator",
    "assign_groups",
    "build_group_matches",
    "build_groups",
    "build_semifinal_matches",
    "calculate_head_to_head",
    "calculate_match_points",
    "compare_standings",
    "compute_all_standings",
    "compute_standings",
    "draw_groups",
    "final_from_semifinals",
    "generate_group_schedules",
    "generate_round_robin",
    "group_stage_complete",
    "resolve_final_match",
    "semifinals_from_groups",
    "validate_group_sizes",
    "validate_manual_assignment",
]
