from nmode import random_source


def test_seed_makes_sequence_repeatable():
    random_source.initialise(42)
    first = [random_source.unit() for _ in range(5)]
    random_source.initialise(42)
    second = [random_source.unit() for _ in range(5)]
    assert first == second


def test_unit_in_range():
    random_source.initialise(1)
    values = [random_source.unit() for _ in range(1000)]
    assert all(0.0 <= v < 1.0 for v in values)


def test_rand_in_range():
    random_source.initialise(2)
    values = [random_source.rand(-3.0, 5.0) for _ in range(1000)]
    assert all(-3.0 <= v < 5.0 for v in values)


def test_randi_covers_inclusive_bounds():
    random_source.initialise(3)
    values = {random_source.randi(0, 4) for _ in range(2000)}
    assert values == {0, 1, 2, 3, 4}


def test_randi_equal_bounds():
    random_source.initialise(4)
    assert random_source.randi(7, 7) == 7


def test_unseeded_initialise_reports(capsys):
    random_source.initialise()
    out = capsys.readouterr().out
    assert out.startswith("random initialised:")
    assert len(out.split(":")[1].split()) == 10