from lexitrie.trie import ROOT_VALUE, TrieNode


def test_new_node_is_empty():
    node = TrieNode()
    assert node.value == ROOT_VALUE
    assert not node.is_word
    assert list(node) == []


def test_add_child_keeps_ascending_order():
    node = TrieNode()
    for c in "dbeac":
        node.add_child(c)
    assert [child.value for child in node] == ["a", "b", "c", "d", "e"]


def test_add_child_is_idempotent():
    node = TrieNode()
    first = node.add_child("x")
    first.is_word = True
    again = node.add_child("x")
    assert again is first
    assert again.is_word
    assert len(node) == 1


def test_get_child_and_has_child():
    node = TrieNode()
    b = node.add_child("b")
    assert node.get_child("b") is b
    assert node.get_child("a") is None
    assert node.get_child("c") is None
    assert node.has_child("b")
    assert not node.has_child("z")


def test_get_child_does_not_insert():
    node = TrieNode()
    node.get_child("q")
    assert len(node) == 0


def test_setting_is_word_has_no_other_effect():
    node = TrieNode("a")
    node.is_word = True
    assert node.is_word
    assert node.value == "a"
    assert len(node) == 0
    node.is_word = False
    assert not node.is_word


def test_iteration_is_restartable():
    node = TrieNode()
    node.add_child("b")
    node.add_child("a")
    assert [c.value for c in node] == [c.value for c in node] == ["a", "b"]
