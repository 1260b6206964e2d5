from chaintable.datastructures.linked_list import Chain, Entry


def test_insert_or_replace_prepends_new_keys():
    c = Chain()
    assert c.insert_or_replace("a", 1) is True
    assert c.insert_or_replace("b", 2) is True
    assert list(c.items()) == [("b", 2), ("a", 1)]
    assert len(c) == 2


def test_insert_or_replace_updates_in_place():
    c = Chain()
    c.insert_or_replace("a", 1)
    c.insert_or_replace("b", 2)
    assert c.insert_or_replace("a", 10) is False
    assert list(c.items()) == [("b", 2), ("a", 10)]


def test_find_and_find_entry():
    c = Chain()
    assert c.find("a") is None
    c.insert_or_replace("a", 0)
    assert c.find("a") == 0
    assert c.find_entry("a").value == 0
    assert c.find_entry("missing") is None


def test_delete_head_middle_tail():
    c = Chain()
    for k in "abcd":
        c.insert_or_replace(k, ord(k))
    # order: d c b a
    assert c.delete("d") is True
    assert c.delete("b") is True
    assert c.delete("a") is True
    assert list(c.items()) == [("c", ord("c"))]
    assert c.delete("zz") is False


def test_prepend_and_clear():
    c = Chain()
    c.prepend(Entry("x", 1))
    c.prepend(Entry("y", 2))
    assert bool(c)
    head = c.head
    assert c.clear() == 2
    assert not c
    assert head.next is None
    assert len(c) == 0
