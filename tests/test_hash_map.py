import pytest

from wordhash.hash_map import HashMap
from wordhash.hashtable import CollisionType

PARAMS = {
    CollisionType.CHAIN: [31, 5],
    CollisionType.LINEAR: [31, 5],
    CollisionType.DOUBLE: [31, 37, 5, 7],
}


@pytest.mark.parametrize("kind", list(CollisionType))
def test_insert_and_get(kind):
    m = HashMap(kind, PARAMS[kind])
    m.insert("apple", "red")
    m.insert("Kiwi", "green")
    assert m.get("apple") == "red"
    assert m.get("Kiwi") == "green"
    assert m.get("plum") is None
    assert len(m) == 2


@pytest.mark.parametrize("kind", list(CollisionType))
def test_existing_key_keeps_first_value(kind):
    m = HashMap(kind, PARAMS[kind])
    m.insert("apple", "red")
    m.insert("apple", "yellow")
    assert m.get("apple") == "red"
    assert len(m) == 1


def test_rendering_of_single_entry():
    m = HashMap(CollisionType.LINEAR, [31, 3])
    m.insert("a", "x")
    parts = str(m).split(" | ")
    assert parts[m.get_slot("a")] == "(a , x)"
    assert parts.count("<EMPTY>") == 2


def test_chain_collision_rendering():
    m = HashMap(CollisionType.CHAIN, [31, 5])
    assert m.get_slot("a") == m.get_slot("f")
    m.insert("a", "1")
    m.insert("f", "2")
    parts = str(m).split(" | ")
    assert parts[m.get_slot("a")] == "(a , 1) ; (f , 2)"
    assert m.get("f") == "2"


def test_linear_collision_probes_forward():
    m = HashMap(CollisionType.LINEAR, [31, 5])
    m.insert("a", "1")
    m.insert("f", "2")
    parts = str(m).split(" | ")
    home = m.get_slot("a")
    assert parts[(home + 1) % 5] == "(f , 2)"
    assert m.get("f") == "2"


def test_linear_full_raises():
    m = HashMap(CollisionType.LINEAR, [31, 2])
    m.insert("a", "1")
    m.insert("b", "2")
    with pytest.raises(RuntimeError, match="HashMap table full"):
        m.insert("c", "3")


def test_double_fills_every_slot():
    m = HashMap(CollisionType.DOUBLE, [31, 37, 5, 7])
    words = ["a", "h", "o", "v", "B", "I", "P"]
    for i, w in enumerate(words):
        m.insert(w, str(i))
    assert m.load_factor() == 1.0
    assert [m.get(w) for w in words] == [str(i) for i in range(len(words))]
    with pytest.raises(RuntimeError):
        m.insert("zz", "8")


def test_chain_grows_past_table_size():
    m = HashMap(CollisionType.CHAIN, [31, 2])
    for w in ["a", "b", "c", "d"]:
        m.insert(w, w.upper())
    assert len(m) == 4
    assert m.load_factor() == 4 / 2
    assert m.get("d") == "D"