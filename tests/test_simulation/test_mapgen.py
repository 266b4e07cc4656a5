"""Tests for procedural world generation."""

from tallgrass.config import MAP_SIZE, STARTER_SPECIES, WILD_POKEMON_COUNT
from tallgrass.simulation.board import Board, Status
from tallgrass.simulation.entity import EntityType, SPECIES
from tallgrass.simulation.geometry import Point
from tallgrass.simulation.mapgen import cellular_automata, generate_terrain
from tallgrass.simulation.state import GameState


def _terrain(state):
    board = state.board
    size = board.get_size()
    return [
        board.get_tile(Point(x, y)).glyph.ch
        for y in range(size.y) for x in range(size.x)
    ]


class TestCellularAutomata:
    def test_border_always_filled(self):
        state = GameState(seed=7, board=Board(Point(5, 5)))
        size = Point(12, 9)
        layer = cellular_automata(size, state.next_random)
        for p in layer.points():
            if p.x in (0, size.x - 1) or p.y in (0, size.y - 1):
                assert layer.get(p), p

    def test_full_fill_stays_full(self):
        layer = cellular_automata(Point(8, 8), lambda bound: 0)
        assert all(layer.get(p) for p in layer.points())

    def test_deterministic(self):
        a = GameState(seed=3, board=Board(Point(5, 5)))
        b = GameState(seed=3, board=Board(Point(5, 5)))
        la = cellular_automata(Point(20, 20), a.next_random)
        lb = cellular_automata(Point(20, 20), b.next_random)
        assert [la.get(p) for p in la.points()] == [lb.get(p) for p in lb.points()]


class TestGenerateTerrain:
    def test_border_is_trees(self):
        board = Board(Point(16, 10))
        state = GameState(seed=1, board=board)
        generate_terrain(board, state.next_random)
        for x in range(16):
            assert board.get_status(Point(x, 0)) == Status.BLOCKED
            assert board.get_status(Point(x, 9)) == Status.BLOCKED
        for y in range(10):
            assert board.get_status(Point(0, y)) == Status.BLOCKED
            assert board.get_status(Point(15, y)) == Status.BLOCKED

    def test_uses_only_known_tiles(self):
        board = Board(Point(20, 20))
        generate_terrain(board, GameState(seed=9, board=board).next_random)
        glyphs = {board.get_tile(p).glyph.ch
                  for p in (Point(x, y) for y in range(20) for x in range(20))}
        assert glyphs <= {".", '"', "#"}
        assert "#" in glyphs


class TestPopulateWorld:
    def test_same_seed_same_world(self):
        a = GameState(seed=42)
        b = GameState(seed=42)
        assert _terrain(a) == _terrain(b)
        assert [e.pos for e in a.board.get_entities()] == \
            [e.pos for e in b.board.get_entities()]
        assert a.rng_state == b.rng_state

    def test_different_seeds_differ(self):
        assert _terrain(GameState(seed=1)) != _terrain(GameState(seed=2))

    def test_player_at_centre(self, game_state):
        player = game_state.player
        assert player is not None and player.is_player
        assert player.pos == Point(MAP_SIZE // 2, MAP_SIZE // 2)
        assert game_state.board.get_entities()[0] is player

    def test_player_gets_a_starter(self, game_state):
        board = game_state.board
        player = game_state.player
        owned = [e for e in board.get_entities()
                 if e.entity_type == EntityType.POKEMON
                 and board.get_trainer(e) is player]
        assert len(owned) == 1
        starter = owned[0]
        assert starter.name == STARTER_SPECIES
        assert (starter.pos - player.pos).len_walking() == 1
        assert board.get_entities()[1] is starter

    def test_wild_pokemon_spawned(self, game_state):
        board = game_state.board
        wild = [e for e in board.get_entities()
                if e.entity_type == EntityType.POKEMON
                and board.get_trainer(e) is None]
        assert len(wild) == WILD_POKEMON_COUNT
        assert all(e.data.species.name in SPECIES for e in wild)
        assert len(board.get_entities()) == WILD_POKEMON_COUNT + 2

    def test_entities_stand_on_open_ground(self, game_state):
        board = game_state.board
        positions = [e.pos for e in board.get_entities()]
        assert len(set(positions)) == len(positions)
        for p in positions:
            assert not board.get_tile(p).blocked
            assert board.get_entity(p) is not None
