"""Command-line interface for the tournament core.

Each subcommand reads a tournament snapshot (JSON), runs one core
computation and prints the result as JSON.
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

import argparse
import json
import logging
import random
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from tourneyboard.exceptions import (
    InvalidStateException,
    SnapshotException,
    TourneyBoardException,
)
from tourneyboard.models import MatchRound, NotReady, TournamentPhase
from tourneyboard.snapshot import load_snapshot, save_snapshot
from tourneyboard.tournament import (
    assign_groups,
    build_group_matches,
    build_groups,
    build_semifinal_matches,
    compute_all_standings,
    final_from_semifinals,
    generate_group_schedules,
    group_stage_complete,
    semifinals_from_groups,
)
from tourneyboard.utils import configure_logging, setup_logger

logger = setup_logger(__name__)


def _emit(payload: Dict[str, Any]) -> None:
    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")


def _load_assignment(path: Path) -> Dict[str, int]:
    """Read a manual ``{participant_id: group_index}`` assignment file."""
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise SnapshotException(f"Cannot read assignment {path}: {e}") from e

    if not isinstance(data, dict):
        raise SnapshotException(f"Assignment {path} must contain a JSON object")
    return data


def cmd_draw(args: argparse.Namespace) -> int:
    """Assign participants to groups and optionally write the updated snapshot."""
    snapshot = load_snapshot(args.snapshot)
    config = snapshot.config
    participant_ids = snapshot.participant_ids

    manual = _load_assignment(args.assignment) if args.assignment else None
    rng = random.Random(args.seed) if args.seed is not None else None

    assignment = assign_groups(participant_ids, config.group_sizes, manual, rng)
    groups = build_groups(assignment, config.group_sizes, participant_ids)

    if args.output:
        snapshot.groups = groups
        snapshot.config.phase = TournamentPhase.GROUP_DRAW
        save_snapshot(snapshot, args.output)

    _emit(
        {
            "groups": [g.to_dict() for g in groups],
            "assignment": assignment,
        }
    )
    return 0


def cmd_schedule(args: argparse.Namespace) -> int:
    """Generate round-robin matches for every drawn group."""
    snapshot = load_snapshot(args.snapshot)
    if not snapshot.groups:
        raise SnapshotException("Snapshot has no groups; run the draw first")

    schedules = generate_group_schedules(sorted(snapshot.groups, key=lambda g: g.order))
    matches = [m for schedule in schedules for m in build_group_matches(schedule)]

    if args.output:
        snapshot.matches = snapshot.knockout_matches + matches
        snapshot.config.phase = TournamentPhase.GROUP_STAGE
        save_snapshot(snapshot, args.output)

    _emit({"schedules": [s.to_dict() for s in schedules]})
    return 0


def cmd_standings(args: argparse.Namespace) -> int:
    """Print ranked standings of every group, or of one group."""
    snapshot = load_snapshot(args.snapshot)
    groups = snapshot.groups
    if args.group:
        group = snapshot.get_group(args.group)
        if group is None:
            raise SnapshotException(f"Unknown group: {args.group}")
        groups = [group]

    standings = compute_all_standings(
        groups, snapshot.group_matches, snapshot.participants, snapshot.config
    )
    _emit({"groups": [g.to_dict() for g in standings]})
    return 0


def cmd_semifinals(args: argparse.Namespace) -> int:
    """Print cross-seeded semifinal pairings from the final group standings."""
    snapshot = load_snapshot(args.snapshot)
    if args.output and any(
        m.round is MatchRound.SEMIFINAL for m in snapshot.knockout_matches
    ):
        raise InvalidStateException("Semifinal matches already exist in snapshot")
    if not args.force and not group_stage_complete(snapshot.group_matches):
        logger.error("Not all group matches are completed")
        return 1

    standings = compute_all_standings(
        snapshot.groups, snapshot.group_matches, snapshot.participants, snapshot.config
    )
    pairings = semifinals_from_groups(standings)

    if args.output:
        snapshot.matches = snapshot.matches + build_semifinal_matches(pairings)
        snapshot.config.phase = TournamentPhase.KNOCKOUT
        save_snapshot(snapshot, args.output)

    _emit(pairings.to_dict())
    return 0


def cmd_final(args: argparse.Namespace) -> int:
    """Print the final pairing, or why it cannot be determined yet."""
    snapshot = load_snapshot(args.snapshot)
    semifinals = sorted(
        (m for m in snapshot.knockout_matches if m.round is MatchRound.SEMIFINAL),
        key=lambda m: m.match_number,
    )
    resolution = final_from_semifinals(semifinals)
    if isinstance(resolution, NotReady):
        _emit(resolution.to_dict())
        return 0

    payload = {"ready": True}
    payload.update(resolution.to_dict())
    _emit(payload)
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="tourneyboard",
        description="Group draw, schedules, standings and knockout advancement",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr"
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log errors"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    draw = subparsers.add_parser("draw", help="Draw participants into groups")
    draw.add_argument("snapshot", type=Path, help="Tournament snapshot (JSON)")
    draw.add_argument(
        "--assignment",
        type=Path,
        help="Manual assignment file ({participant_id: group_index})",
    )
    draw.add_argument("--seed", type=int, help="Seed for a reproducible random draw")
    draw.add_argument("-o", "--output", type=Path, help="Write updated snapshot here")
    draw.set_defaults(func=cmd_draw)

    schedule = subparsers.add_parser("schedule", help="Generate group matches")
    schedule.add_argument("snapshot", type=Path, help="Tournament snapshot (JSON)")
    schedule.add_argument(
        "-o", "--output", type=Path, help="Write updated snapshot here"
    )
    schedule.set_defaults(func=cmd_schedule)

    standings = subparsers.add_parser("standings", help="Show group standings")
    standings.add_argument("snapshot", type=Path, help="Tournament snapshot (JSON)")
    standings.add_argument("--group", help="Only this group id")
    standings.set_defaults(func=cmd_standings)

    semifinals = subparsers.add_parser(
        "semifinals", help="Determine semifinal pairings"
    )
    semifinals.add_argument("snapshot", type=Path, help="Tournament snapshot (JSON)")
    semifinals.add_argument(
        "--force",
        action="store_true",
        help="Advance even if group matches are still open",
    )
    semifinals.add_argument(
        "-o", "--output", type=Path, help="Write updated snapshot here"
    )
    semifinals.set_defaults(func=cmd_semifinals)

    final = subparsers.add_parser("final", help="Determine the final pairing")
    final.add_argument("snapshot", type=Path, help="Tournament snapshot (JSON)")
    final.set_defaults(func=cmd_final)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command-line interface.

    Returns:
        Process exit status
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.INFO)
    elif args.quiet:
        configure_logging(logging.ERROR)
    else:
        configure_logging(logging.WARNING)

    try:
        return args.func(args)
    except TourneyBoardException as e:
        logger.error(str(e))
        return 1


__all__ = ["main", "build_parser"]
