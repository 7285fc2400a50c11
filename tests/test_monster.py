import pytest

from scaregames.monster import Monster


def test_str_format():
    assert str(Monster("Mike", 115)) == "Mike (Power: 115)"


def test_default_monster():
    monster = Monster()
    assert monster.name == ""
    assert monster.scream_power == 0


def test_ordering_uses_scream_power_only():
    weak = Monster("Zed", 10)
    strong = Monster("Abe", 20)
    assert weak < strong
    assert strong > weak
    assert not (weak > strong)
    assert not (strong < weak)


def test_equal_power_is_neither_greater_nor_less():
    a = Monster("A", 5)
    b = Monster("B", 5)
    assert not (a > b)
    assert not (a < b)
    assert a != b


def test_equality_needs_name_and_power():
    assert Monster("Mike", 115) == Monster("Mike", 115)
    assert Monster("Mike", 115) != Monster("Mike", 116)
    assert Monster("Mike", 115) != Monster("Sulley", 115)


def test_sorting_by_power():
    monsters = [Monster("B", 20), Monster("C", 5), Monster("A", 10)]
    assert [m.name for m in sorted(monsters)] == ["C", "A", "B"]


def test_comparison_with_other_type_fails():
    with pytest.raises(TypeError):
        Monster("A", 1) < 3