import io

import pytest

from wordhash.hashtable import HashTable, main
from wordhash.probing import DoubleHashProber, LinearProber
from wordhash.strhash import StringHash


@pytest.fixture(params=["linear", "double"])
def table(request):
    if request.param == "linear":
        return HashTable(0.4, LinearProber())
    return HashTable(0.7, DoubleHashProber(StringHash()))


def test_new_table_is_empty(table):
    assert len(table) == 0
    assert not table
    assert table.find("x") is None


def test_insert_and_lookup(table):
    table.insert("alpha", 1)
    table["beta"] = 2
    assert table.find("alpha") == ("alpha", 1)
    assert table.at("beta") == 2
    assert table["alpha"] == 1
    assert "beta" in table
    assert "gamma" not in table
    assert len(table) == 2
    assert table


def test_insert_existing_updates_value(table):
    table.insert("k", 1)
    table.insert("k", 5)
    assert table["k"] == 5
    assert len(table) == 1


def test_missing_key_raises(table):
    with pytest.raises(KeyError):
        table.at("nope")
    with pytest.raises(KeyError):
        table["nope"]


def test_remove(table):
    for i in range(5):
        table.insert(f"k{i}", i)
    table.remove("k2")
    table.remove("absent")
    assert len(table) == 4
    assert table.find("k2") is None
    assert table["k3"] == 3
    table.insert("k2", 22)
    assert table["k2"] == 22
    assert len(table) == 5


def test_many_inserts_survive_resize(table):
    keys = [f"word{i}" for i in range(300)]
    for i, key in enumerate(keys):
        table.insert(key, i)
    assert len(table) == len(keys)
    assert all(table[key] == i for i, key in enumerate(keys))


def test_increment_through_indexing(table):
    table["hi1"] = 1
    table["hi1"] += 1
    assert table["hi1"] == 2


def test_full_table_without_resize_raises():
    ht = HashTable(2.0)
    for i in range(11):
        ht.insert(i, i)
    with pytest.raises(RuntimeError):
        ht.insert(100, 100)


def test_custom_hash_and_equality():
    ht = HashTable(hasher=lambda k: hash(k.lower()), key_equal=lambda a, b: a.lower() == b.lower())
    ht.insert("Hello", 1)
    ht.insert("HELLO", 2)
    assert len(ht) == 1
    assert ht["hello"] == 2


def test_report_all_lists_buckets():
    ht = HashTable(hasher=lambda k: k)
    ht.insert(3, "three")
    ht.insert(14, "fourteen")
    out = io.StringIO()
    ht.report_all(out)
    assert out.getvalue() == "Bucket 3: 3 three\nBucket 4: 14 fourteen\n"


def test_total_probes_count_and_clear():
    ht = HashTable(hasher=lambda k: k)
    ht.insert(0, "a")
    ht.insert(11, "b")
    assert ht.total_probes() > 0
    ht.clear_total_probes()
    assert ht.total_probes() == 0
    ht.find(11)
    assert ht.total_probes() == 2


def test_main_output(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "Found hi1",
        "Incremented hi1's value to: 2",
        "Did not find: doesnotexist",
        "HT size: 10",
        "HT size: 8",
        "Did not find hi9",
        "size: 9",
    ]