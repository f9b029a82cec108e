"""Tests for hivewar.colony - tunnels, economy and turn phases."""

from numpy.random import Generator

from hivewar.colony.colony import Colony
from hivewar.insects.ants import EaterAnt, GrowerAnt, GuardAnt, ScubaAnt, ThrowerAnt
from hivewar.insects.bee import Bee
from hivewar.simulation.errors import CommandError


class AlwaysFood:
    """Generator stand-in that makes every grower roll food."""

    def random(self) -> float:
        return 0.0


class TestTunnels:
    """Tests for tunnel construction."""

    def test_dimensions(self, colony: Colony) -> None:
        assert len(colony.places) == 2
        assert all(len(row) == 5 for row in colony.places)
        assert len(colony.entrances) == 2

    def test_links(self, colony: Colony) -> None:
        row = colony.places[0]
        assert row[0].exit is colony.queen_place
        for step in range(1, 5):
            assert row[step].exit is row[step - 1]
            assert row[step - 1].entrance is row[step]
        assert colony.entrances[0] is row[4]
        assert row[4].entrance is None

    def test_names(self, moat_colony: Colony) -> None:
        names = [p.name for p in moat_colony.places[0]]
        assert names == [
            "tunnel[0,0]",
            "tunnel[0,1]",
            "water[0,2]",
            "tunnel[0,3]",
            "tunnel[0,4]",
            "water[0,5]",
        ]
        assert [p.water for p in moat_colony.places[0]] == [
            False,
            False,
            True,
            False,
            False,
            True,
        ]

    def test_default_boosts(self, colony: Colony) -> None:
        assert colony.boosts == {
            "FlyingLeaf": 1,
            "StickyLeaf": 1,
            "IcyLeaf": 1,
            "BugSpray": 0,
        }
        assert colony.boost_names() == ["FlyingLeaf", "StickyLeaf", "IcyLeaf"]


class TestEconomy:
    """Tests for food and boost bookkeeping."""

    def test_deploy_then_occupied(self, colony: Colony) -> None:
        place = colony.places[0][0]
        assert colony.deploy_ant(ThrowerAnt(), place) is None
        assert colony.food == 6
        assert colony.deploy_ant(ThrowerAnt(), place) == CommandError.OCCUPIED
        assert colony.deploy_ant(ThrowerAnt(), place) == "occupied"
        assert colony.food == 6

    def test_deploy_without_food(self, colony: Colony) -> None:
        colony.food = 3
        place = colony.places[0][0]
        result = colony.deploy_ant(ThrowerAnt(), place)
        assert result == CommandError.INSUFFICIENT_RESOURCES
        assert place.ant is None
        assert colony.food == 3

    def test_deploy_exact_food(self, colony: Colony) -> None:
        colony.food = 5
        assert colony.deploy_ant(ScubaAnt(), colony.places[1][1]) is None
        assert colony.food == 0

    def test_deploy_guard_over_ant(self, colony: Colony) -> None:
        place = colony.places[0][0]
        colony.deploy_ant(GrowerAnt(), place)
        assert colony.deploy_ant(GuardAnt(), place) is None
        assert colony.food == 5

    def test_remove_ant(self, colony: Colony) -> None:
        place = colony.places[0][0]
        ant = GrowerAnt()
        colony.deploy_ant(ant, place)
        assert colony.remove_ant(place) is ant
        assert place.ant is None

    def test_discover_boost(self, colony: Colony) -> None:
        colony.discover_boost("BugSpray")
        colony.discover_boost("Mystery")
        assert colony.boosts["BugSpray"] == 1
        assert colony.boosts["Mystery"] == 1
        assert "Mystery" in colony.boost_names()

    def test_apply_boost(self, colony: Colony) -> None:
        place = colony.places[0][0]
        ant = ThrowerAnt()
        colony.deploy_ant(ant, place)
        assert colony.apply_boost("IcyLeaf", place) is None
        assert ant.boost == "IcyLeaf"
        assert colony.boosts["IcyLeaf"] == 1

    def test_apply_boost_goes_to_guard(self, colony: Colony) -> None:
        place = colony.places[0][0]
        ant = ThrowerAnt()
        guard = GuardAnt()
        place.add_ant(ant)
        place.add_ant(guard)
        colony.apply_boost("FlyingLeaf", place)
        assert guard.boost == "FlyingLeaf"
        assert ant.boost is None

    def test_apply_missing_boost(self, colony: Colony) -> None:
        place = colony.places[0][0]
        ant = ThrowerAnt()
        place.add_ant(ant)
        assert colony.apply_boost("BugSpray", place) == CommandError.NO_SUCH_BOOST
        assert colony.apply_boost("Nope", place) == CommandError.NO_SUCH_BOOST
        assert ant.boost is None

    def test_apply_boost_to_empty_place(self, colony: Colony) -> None:
        result = colony.apply_boost("IcyLeaf", colony.places[0][0])
        assert result == CommandError.NO_DEFENDER


class TestPhases:
    """Tests for the ant, bee and place phases."""

    def test_get_all_ants_order(self, colony: Colony) -> None:
        a = GrowerAnt()
        b = ThrowerAnt()
        guard = GuardAnt()
        c = EaterAnt()
        colony.places[1][0].add_ant(c)
        colony.places[0][3].add_ant(b)
        colony.places[0][3].add_ant(guard)
        colony.places[0][1].add_ant(a)
        assert colony.get_all_ants() == [a, guard, b, c]

    def test_each_ant_acts_once(self, colony: Colony) -> None:
        colony.places[0][0].add_ant(GrowerAnt())
        colony.places[1][2].add_ant(GrowerAnt())
        colony.ants_act(AlwaysFood())  # type: ignore[arg-type]
        assert colony.food == 12

    def test_guarded_ant_acts_twice(self, colony: Colony) -> None:
        """A guard triggers its charge, which then also takes its own turn."""
        place = colony.places[0][0]
        place.add_ant(GrowerAnt())
        place.add_ant(GuardAnt())
        colony.ants_act(AlwaysFood())  # type: ignore[arg-type]
        assert colony.food == 12

    def test_lone_guard_does_nothing(self, colony: Colony, rng: Generator) -> None:
        colony.places[0][0].add_ant(GuardAnt())
        colony.ants_act(rng)
        assert colony.food == 10

    def test_dead_ants_are_skipped(self, colony: Colony, rng: Generator) -> None:
        place = colony.places[0][2]
        thrower = ThrowerAnt(boost="BugSpray")
        guard = GuardAnt()
        place.add_ant(thrower)
        place.add_ant(guard)
        place.add_bee(Bee(3, 1))
        colony.ants_act(rng)
        assert place.ant is None
        assert place.guard is guard
        assert place.bees == []

    def test_bees_act_once_each(self, colony: Colony) -> None:
        front = Bee(3, 1)
        back = Bee(3, 1)
        colony.places[0][3].add_bee(front)
        colony.places[0][4].add_bee(back)
        colony.bees_act()
        assert front.place is colony.places[0][2]
        assert back.place is colony.places[0][3]

    def test_get_all_bees_order(self, colony: Colony) -> None:
        a = Bee(3, 1)
        b = Bee(3, 1)
        c = Bee(3, 1)
        colony.places[1][0].add_bee(c)
        colony.places[0][4].add_bee(a)
        colony.places[0][4].add_bee(b)
        assert colony.get_all_bees() == [a, b, c]

    def test_queen_has_bees(self, colony: Colony) -> None:
        assert not colony.queen_has_bees()
        colony.places[0][0].add_bee(Bee(3, 1))
        colony.bees_act()
        assert colony.queen_has_bees()

    def test_places_act_floods(self, moat_colony: Colony) -> None:
        dry = ThrowerAnt()
        wet = ThrowerAnt()
        scuba = ScubaAnt()
        moat_colony.places[0][0].add_ant(dry)
        moat_colony.places[0][2].add_ant(wet)
        moat_colony.places[0][5].add_ant(scuba)
        moat_colony.places_act()
        assert dry.place is moat_colony.places[0][0]
        assert wet.place is None
        assert scuba.place is moat_colony.places[0][5]
