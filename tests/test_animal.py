from ZooSim.core.random_source import NumpyRandomSource
from ZooSim.domain.types import Climate, Diet, Habitat


class TestAnimalComputations:
    def test_price_example(self, make_animal):
        animal = make_animal(weight=20, age_in_days=40, climate=Climate.FOREST)
        assert animal.calculate_price() == 145

    def test_price_aquatic_carnivore(self, make_animal):
        animal = make_animal(weight=50, age_in_days=0, climate=Climate.OCEAN, is_carnivore=True)
        # 60 + 100 + 100 + 150 + 200
        assert animal.calculate_price() == 610

    def test_price_floor(self, make_animal):
        animal = make_animal(weight=0, age_in_days=3000, climate=Climate.DESERT)
        assert animal.calculate_price() == 10

    def test_price_is_idempotent(self, make_animal):
        animal = make_animal(weight=33, age_in_days=95)
        assert animal.calculate_price() == animal.calculate_price()

    def test_maintenance_cost_doubles_for_aquatic(self, make_animal):
        assert make_animal(weight=30, climate=Climate.OCEAN).calculate_maintenance_cost() == 60
        assert make_animal(weight=30, climate=Climate.FOREST).calculate_maintenance_cost() == 30

    def test_habitat_follows_climate(self, make_animal):
        assert make_animal(climate=Climate.OCEAN).habitat is Habitat.AQUATIC
        for climate in (Climate.DESERT, Climate.FOREST, Climate.ARCTIC):
            assert make_animal(climate=climate).habitat is Habitat.LAND

    def test_diet(self, make_animal):
        assert make_animal(is_carnivore=True).diet is Diet.CARNIVORE
        assert make_animal(is_carnivore=False).diet is Diet.HERBIVORE

    def test_display_name_and_parents(self, make_animal):
        assert make_animal(name="").display_name == "(sans nom)"
        assert make_animal().describe_parents() == "Parents inconnus"
        child = make_animal(parents=("Boris", "Nina"))
        assert child.describe_parents() == "Parents : Boris et Nina"


class TestOldAge:
    def test_no_draw_until_threshold(self, make_animal, rng):
        animal = make_animal(age_in_days=60)
        assert animal.dies_of_old_age(rng) is False
        assert rng.percents == []

    def test_day_61_is_one_percent_trial(self, make_animal, rng):
        animal = make_animal(age_in_days=61)
        animal.dies_of_old_age(rng)
        assert rng.percents == [1]

    def test_day_160_always_dies(self, make_animal):
        animal = make_animal(age_in_days=160)
        source = NumpyRandomSource(seed=3)
        assert all(animal.dies_of_old_age(source) for _ in range(50))

    def test_grow_older(self, make_animal):
        animal = make_animal(age_in_days=4)
        animal.grow_older()
        assert animal.age_in_days == 5
