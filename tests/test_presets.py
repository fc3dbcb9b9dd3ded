import pytest

from presets import PRESETS, load_preset, preset_list


def test_single_cell_at_right_edge():
    tape = load_preset("single", 8)
    assert tape == [False] * 7 + [True]


def test_alternating():
    assert load_preset("alternating", 5) == [True, False, True, False, True]


def test_fixed_pattern_placed_near_right_edge():
    data = PRESETS["spaceship_A"].data
    tape = load_preset("spaceship_A", 20)
    offset = 20 - len(data) - 2
    assert tape[offset:offset + len(data)] == [bool(x) for x in data]
    assert not any(tape[:offset])
    assert tape[-2:] == [False, False]


def test_fixed_pattern_truncated_on_short_tape():
    tape = load_preset("chaos_B", 5)
    assert tape == [bool(x) for x in PRESETS["chaos_B"].data[:5]]


def test_dense_block():
    tape = load_preset("dense", 20)
    assert sum(tape) == 11
    assert tape[5:16] == [True] * 11
    # narrow tapes clip the block instead of wrapping
    assert load_preset("dense", 4) == [True] * 4


def test_random_is_seeded():
    assert load_preset("random", 64, seed=7) == load_preset("random", 64, seed=7)
    assert load_preset("random", 64, seed=7) != load_preset("random", 64, seed=8)


@pytest.mark.parametrize("key", sorted(PRESETS))
def test_every_preset_fits_tape(key):
    for cols in (3, 16, 40):
        tape = load_preset(key, cols)
        assert len(tape) == cols
        assert all(isinstance(x, bool) for x in tape)


def test_unknown_preset():
    with pytest.raises(ValueError):
        load_preset("glider_gun_9000", 10)


def test_non_positive_cols():
    with pytest.raises(ValueError):
        load_preset("single", 0)


def test_preset_list():
    listed = preset_list()
    assert [p["key"] for p in listed] == list(PRESETS)
    assert all(p["name"] and p["description"] for p in listed)
