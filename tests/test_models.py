import pytest

from tourneyboard.exceptions import (
    DrawValidationException,
    InvalidConfigurationException,
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
    group_name,
)


def test_group_names():
    assert group_name(0) == "Group A"
    assert group_name(1) == "Group B"
    assert group_name(25) == "Group Z"
    assert group_name(26) == "Group 27"


def test_match_winner_from_scores():
    assert Match("a", "b", 3, 1).decide_winner() == "a"
    assert Match("a", "b", 0, 2).decide_winner() == "b"
    assert Match("a", "b", 1, 1).decide_winner() is None


def test_match_involves_either_order():
    match = Match("a", "b")
    assert match.involves("a", "b")
    assert match.involves("b", "a")
    assert not match.involves("a", "c")


def test_match_defaults():
    match = Match("a", "b")
    assert (match.player1_score, match.player2_score) == (0, 0)
    assert match.status is MatchStatus.PENDING
    assert match.round is MatchRound.GROUP
    assert match.winner_id is None
    assert not match.is_completed


def test_match_from_web_application_keys():
    match = Match.from_dict(
        {
            "id": "m1",
            "player1Id": "a",
            "player2Id": "b",
            "player1Score": 2,
            "player2Score": 1,
            "status": "COMPLETED",
            "winnerId": "a",
            "groupId": "g1",
            "round": "GROUP",
            "matchNumber": 4,
        }
    )
    assert match.id == "m1"
    assert match.is_completed
    assert (match.winner_id, match.group_id, match.match_number) == ("a", "g1", 4)
    assert Match.from_dict(match.to_dict()) == match


def test_match_rejects_unknown_status():
    with pytest.raises(ValueError):
        Match.from_dict({"player1_id": "a", "player2_id": "b", "status": "DONE"})


def test_knockout_round_flag():
    assert not MatchRound.GROUP.is_knockout
    assert MatchRound.SEMIFINAL.is_knockout
    assert MatchRound.FINAL.is_knockout


def test_standing_goal_difference_refresh():
    standing = GroupStanding("a", "A", goals_for=4, goals_against=6)
    standing.refresh_goal_difference()
    assert standing.goal_difference == -2
    assert standing.to_dict()["goal_difference"] == -2


def test_pairing_keeps_side_order():
    assert Pairing("a", "b") == Pairing("a", "b")
    assert Pairing("a", "b") != Pairing("b", "a")


def test_not_ready_serializes():
    assert NotReady("waiting").to_dict() == {"ready": False, "reason": "waiting"}


def test_config_defaults():
    config = TournamentConfig(group_sizes=[6, 5])
    assert (config.win_points, config.loss_points, config.draw_points) == (3, 0, 1)
    assert config.phase is TournamentPhase.SETUP
    assert config.num_groups == 2
    assert config.participant_count == 11


def test_config_validate_against_roster():
    config = TournamentConfig(group_sizes=[3, 3])
    config.validate(6)
    with pytest.raises(DrawValidationException):
        config.validate(7)


@pytest.mark.parametrize("sizes", [[], [0, 3], [-1], [2.5], ["3"]])
def test_config_rejects_bad_group_sizes(sizes):
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(group_sizes=sizes)


def test_config_requires_group_sizes():
    with pytest.raises(TypeError):
        TournamentConfig()


def test_config_rejects_non_numeric_points():
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig(group_sizes=[2], win_points="3")


def test_config_from_web_application_shape():
    config = TournamentConfig.from_dict(
        {"name": "Cup", "groupConfig": {"groupSizes": [4, 4]}, "phase": "GROUP_STAGE"}
    )
    assert config.group_sizes == [4, 4]
    assert config.phase is TournamentPhase.GROUP_STAGE
    assert TournamentConfig.from_dict(config.to_dict()) == config


def test_config_from_dict_errors():
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig.from_dict({"name": "Cup"})
    with pytest.raises(InvalidConfigurationException):
        TournamentConfig.from_dict({"group_sizes": [2], "phase": "LOBBY"})


def test_group_and_participant_round_trip():
    group = Group(id="g1", name="Group A", order=0, participant_ids=["a", "b"])
    assert Group.from_dict(group.to_dict()) == group
    assert Group.from_dict({"id": "g9", "participantIds": ["x"]}, order=1).name == "Group B"

    participant = Participant(id="a", name="Alice")
    assert Participant.from_dict(participant.to_dict()) == participant
