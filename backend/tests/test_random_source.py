from cookiemilk.services.games.random_source import DEFAULT_SEED, RandomSource


def _draw(rng, n=64):
    return [rng.next_bool() for _ in range(n)]


def test_default_seed_is_2024():
    assert DEFAULT_SEED == 2024
    assert RandomSource().seed_value == 2024


def test_same_seed_same_sequence():
    assert _draw(RandomSource(2024)) == _draw(RandomSource(2024))


def test_reseed_restarts_sequence():
    rng = RandomSource(2024)
    first = _draw(rng)
    _draw(rng)
    rng.seed(2024)
    assert _draw(rng) == first


def test_different_seeds_differ():
    assert _draw(RandomSource(2024)) != _draw(RandomSource(2025))


def test_seed_is_masked_to_64_bits():
    rng = RandomSource((1 << 64) + 7)
    assert rng.seed_value == 7
    assert _draw(rng) == _draw(RandomSource(7))


def test_next_bool_returns_bools():
    values = _draw(RandomSource(2024), 256)
    assert all(isinstance(v, bool) for v in values)
    assert True in values and False in values
