"""Unit tests for players and the turn order."""

import pytest
from fire_breaker.brigade import FireBrigade
from fire_breaker.errors import ErrorKind, InvariantViolation, RuleViolation
from fire_breaker.player import Player, PlayerManagement, RoundPhase
from fire_breaker.position import Coordinate


@pytest.fixture
def management():
    """Player management for a 5x5 board with every starting brigade handed out."""
    players = PlayerManagement(5, 5)
    for _ in range(4):
        players.next_initial_placement()
    return players


def burn_all(player):
    for brigade in player.brigades.values():
        brigade.caught_by_fire = True


def roll(management):
    management.begin_fire_roll()
    return management.fire_roll_turn()


class TestPlayer:
    """Test cases for Player."""

    def test_player_creation(self):
        """Test the starting values of a player."""
        player = Player("A", Coordinate(0, 0))
        assert player.reputation == 5
        assert player.brigades == {}
        assert not player.is_alive

    @pytest.mark.parametrize(
        "base, expected",
        [
            (Coordinate(0, 0), Coordinate(1, 1)),
            (Coordinate(4, 4), Coordinate(3, 3)),
            (Coordinate(4, 0), Coordinate(3, 1)),
            (Coordinate(0, 4), Coordinate(1, 3)),
        ],
    )
    def test_first_brigade_position(self, base, expected):
        """Test that the first brigade stands diagonally next to the station."""
        assert Player("A", base).first_brigade_position() == expected

    def test_buying_costs_reputation(self):
        """Test that a brigade costs five reputation points."""
        player = Player("A", Coordinate(0, 0))
        brigade = player.create_brigade()
        player.add_brigade(brigade)
        assert player.reputation == 0
        with pytest.raises(RuleViolation) as excinfo:
            player.create_brigade()
        assert excinfo.value.kind is ErrorKind.INSUFFICIENT_REPUTATION

    def test_identifiers_count_up(self):
        """Test that brigade identifiers carry a sequence number."""
        player = Player("B", Coordinate(4, 4))
        player.add_brigade(player.new_brigade(), paid=False)
        assert player.create_brigade().identifier == "B1"

    def test_find_brigade(self):
        """Test looking up brigades by identifier."""
        player = Player("A", Coordinate(0, 0))
        brigade = player.new_brigade()
        player.add_brigade(brigade, paid=False)
        assert player.find_brigade("A0") is brigade
        with pytest.raises(RuleViolation) as excinfo:
            player.find_brigade("A7")
        assert excinfo.value.kind is ErrorKind.BRIGADE_NOT_FOUND

    def test_alive_while_a_brigade_is_not_caught(self):
        """Test that a player is alive as long as one brigade is not caught."""
        player = Player("A", Coordinate(0, 0))
        first, second = FireBrigade("A0"), FireBrigade("A1")
        player.add_brigade(first, paid=False)
        player.add_brigade(second, paid=False)
        first.caught_by_fire = True
        assert player.is_alive
        second.caught_by_fire = True
        assert not player.is_alive
        assert player.remove_caught_brigades() == ["A0", "A1"]
        assert player.brigades == {}

    def test_str(self):
        """Test string representation of a player."""
        player = Player("A", Coordinate(0, 0))
        brigade = player.new_brigade()
        brigade.position = Coordinate(1, 1)
        player.add_brigade(brigade, paid=False)
        assert str(player) == "A,5\nA0,3,3,1,1"


class TestPlayerManagement:
    """Test cases for the turn manager."""

    def test_initial_placements(self):
        """Test that every player gets one free brigade next to its station."""
        players = PlayerManagement(5, 5)
        placements = [players.next_initial_placement() for _ in range(4)]
        assert [p.brigade.identifier for p in placements] == ["A0", "B0", "C0", "D0"]
        assert [p.target for p in placements] == [
            Coordinate(1, 1), Coordinate(3, 3), Coordinate(3, 1), Coordinate(1, 3),
        ]
        assert all(player.reputation == 5 for player in players.players)

    def test_fifth_initial_placement(self, management):
        """Test that a fifth starting brigade is a programming error."""
        with pytest.raises(InvariantViolation):
            management.next_initial_placement()

    def test_round_robin(self, management):
        """Test the turn order within a round."""
        assert management.current_player.name == "A"
        assert management.advance_turn() == (False, "B")
        assert management.advance_turn() == (False, "C")
        assert management.advance_turn() == (False, "D")

    def test_round_complete_requires_fire_roll(self, management):
        """Test that the last turn of a round makes a fire roll due."""
        for _ in range(3):
            management.advance_turn()
        assert management.advance_turn() == (True, "B")
        assert management.phase is RoundPhase.AWAITING_FIRE_ROLL
        with pytest.raises(RuleViolation) as excinfo:
            management.advance_turn()
        assert excinfo.value.kind is ErrorKind.MUST_ROLL_FIRE_FIRST

    def test_start_player_rotates(self, management):
        """Test that every round starts one player later."""
        for _ in range(4):
            management.advance_turn()
        assert roll(management) == "OK"
        assert [management.advance_turn() for _ in range(4)] == [
            (False, "C"), (False, "D"), (False, "A"), (True, "C"),
        ]

    def test_roll_too_early(self, management):
        """Test that the fire cannot be rolled in the middle of a round."""
        with pytest.raises(RuleViolation) as excinfo:
            management.begin_fire_roll()
        assert excinfo.value.kind is ErrorKind.ROLL_NOT_ALLOWED

    def test_turn_resets_brigades(self, management):
        """Test that ending a turn restores the current player's brigades."""
        brigade = management.find_brigade("A0")
        brigade.apply_extinguish(Coordinate(2, 2))
        management.advance_turn()
        assert brigade.action_points == 3
        assert brigade.tank_level == 2

    def test_other_player_eliminated(self, management):
        """Test that the current player is reported when someone else dies."""
        for _ in range(4):
            management.advance_turn()
        burn_all(management.player("C"))
        assert roll(management) == "B"
        assert management.dead_players == {"C"}
        assert [management.advance_turn() for _ in range(3)] == [
            (False, "D"), (False, "A"), (True, "D"),
        ]

    def test_current_player_eliminated(self, management):
        """Test that the turn passes on when the current player dies."""
        for _ in range(4):
            management.advance_turn()
        burn_all(management.player("B"))
        assert roll(management) == "C"
        assert management.current_player.name == "C"

    def test_no_player_left(self, management):
        """Test that asking for a successor without survivors is a programming error."""
        for player in management.players:
            burn_all(player)
        with pytest.raises(InvariantViolation):
            management.next_alive_player(management.current_player)

    def test_game_over(self, management):
        """Test that nothing happens after the game ended."""
        management.end_game()
        with pytest.raises(RuleViolation) as excinfo:
            management.advance_turn()
        assert excinfo.value.kind is ErrorKind.GAME_OVER
        with pytest.raises(RuleViolation) as excinfo:
            management.begin_fire_roll()
        assert excinfo.value.kind is ErrorKind.GAME_OVER

    def test_buy_for_current(self, management):
        """Test buying a brigade for the current player."""
        brigade = management.create_brigade_for_current()
        management.add_brigade_to_current(brigade)
        assert brigade.identifier == "A1"
        assert management.current_player.reputation == 0
        with pytest.raises(RuleViolation) as excinfo:
            management.create_brigade_for_current()
        assert excinfo.value.kind is ErrorKind.INSUFFICIENT_REPUTATION
