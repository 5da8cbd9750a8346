"""Tests for the game loop and object binding."""

import pytest

from legion import Class, Environment, Game, ObjectId, get_registry


def _tick(self, dt):
    self.ticks += 1
    self.elapsed += dt


@pytest.fixture
def unit_cls():
    Unit = Class.extend({"class_name": "TestGameUnit", "ticks": 0, "elapsed": 0.0, "update": _tick})
    yield Unit
    get_registry().unregister("TestGameUnit")


@pytest.fixture
def game():
    return Game(environment=Environment(frame_interval=0.25), client_id="host")


def test_game_types_are_registered():
    assert get_registry()["Game"] is Game
    assert get_registry()["Environment"] is Environment


def test_create_and_loop_game():
    """A loop override that pauses and chains to parent stops the loop."""
    done = []

    def loop(self, parent):
        self.paused = True
        parent()
        done.append(True)

    PausingGame = Game.extend({"class_name": "PausingGame", "loop": loop})
    try:
        g = PausingGame()
        g.environment = Environment()
        g.loop()
    finally:
        get_registry().unregister("PausingGame")

    assert done == [True]
    assert g.environment.pending() == 0
    assert g.frame == 0


def test_loop_updates_objects_each_frame(game, unit_cls):
    unit = game.add(unit_cls())

    game.loop()
    assert (game.frame, unit.ticks) == (1, 1)
    assert game.environment.pending() == 1

    assert game.environment.run(max_frames=3) == 3
    assert (game.frame, unit.ticks, unit.elapsed) == (4, 4, 1.0)

    game.paused = True
    assert game.environment.run() == 1
    assert game.environment.pending() == 0
    assert game.frame == 4


def test_loop_without_environment_fails():
    with pytest.raises(RuntimeError, match="no environment"):
        Game().loop()


def test_add_binds_identity(game, unit_cls):
    first = game.add(unit_cls())
    second = game.add(unit_cls())

    assert isinstance(first.id, ObjectId)
    assert first.id != second.id
    assert first.client_id == "host"
    assert first.game is game
    assert game.get(first.id) is first
    assert game.objects() == [first, second]


def test_remove_releases_id(game, unit_cls):
    first = game.add(unit_cls())
    old_id = first.id

    game.remove(first)

    assert first.game is None
    assert first.id == old_id
    assert game.get(old_id) is None

    replacement = game.add(unit_cls())
    assert replacement.id.index == old_id.index
    assert replacement.id.generation == old_id.generation + 1


def test_remove_unknown_object(game, unit_cls):
    with pytest.raises(KeyError, match="not in this game"):
        game.remove(unit_cls())


def test_readding_keeps_identity(game, unit_cls):
    unit = game.add(unit_cls())
    other = Game(environment=Environment(), client_id="guest")

    other.add(unit)

    assert unit.client_id == "host"
    assert other.get(unit.id) is unit


def test_game_client_id_from_settings(fresh_settings, monkeypatch):
    monkeypatch.setenv("LEGION_CLIENT_ID", "from-env")

    assert Game().client_id == "from-env"


def test_environment_frame_interval_from_settings(fresh_settings, monkeypatch):
    monkeypatch.setenv("LEGION_FRAME_INTERVAL", "0.1")

    assert Environment().frame_interval == 0.1


def test_environment_defers_callbacks_requested_mid_frame():
    env = Environment()
    order = []

    def first():
        order.append("first")
        env.request_frame(lambda: order.append("second"))

    env.request_frame(first)

    assert env.run(max_frames=1) == 1
    assert order == ["first"]
    assert env.pending() == 1
    assert env.run() == 1
    assert order == ["first", "second"]


def test_add_rejects_foreign_object_with_taken_id(game, unit_cls):
    """CRITICAL: an object from another game never replaces a local one.

    Why: both games number ids from zero, so ids collide across games.
    """
    mine = game.add(unit_cls())
    other = Game(environment=Environment(), client_id="guest")
    foreign = other.add(unit_cls())
    assert foreign.id == mine.id

    with pytest.raises(ValueError, match="is taken"):
        game.add(foreign)

    assert game.objects() == [mine]
    assert game.get(mine.id) is mine
    assert foreign.game is other


def test_new_ids_skip_ids_held_by_foreign_objects(game, unit_cls):
    other = Game(environment=Environment(), client_id="guest")
    other.add(unit_cls())
    foreign = game.add(other.add(unit_cls()))
    assert foreign.id == ObjectId(index=1)

    first = game.add(unit_cls())
    second = game.add(unit_cls())

    assert first.id == ObjectId(index=0)
    assert second.id == ObjectId(index=2)
    assert len(game.objects()) == 3


def test_revived_game_can_add_and_remove(unit_cls):
    revived = get_registry().revive({"id": 7, "clientID": "host", "className": "Game"})

    assert type(revived) is Game
    assert revived.objects() == []

    unit = revived.add(unit_cls())
    assert unit.client_id == "host"
    assert revived.get(unit.id) is unit

    revived.remove(unit)
    assert revived.objects() == []


def test_revived_environment_runs_frames(fresh_settings, monkeypatch):
    monkeypatch.setenv("LEGION_FRAME_INTERVAL", "0.5")
    revived = get_registry().revive(Environment().serialize())
    ran = []

    revived.request_frame(lambda: ran.append(True))

    assert revived.frame_interval == 0.5
    assert revived.pending() == 1
    assert revived.run() == 1
    assert ran == [True]


def test_revived_game_loops_on_environment(unit_cls):
    revived = get_registry().revive(Game(client_id="host").serialize())
    revived.environment = Environment(frame_interval=0.25)
    unit = revived.add(unit_cls())

    revived.loop()
    revived.environment.run(max_frames=1)

    assert (revived.frame, unit.ticks, unit.elapsed) == (2, 2, 0.5)
