from lexitrie import MarisaLexicon


def test_trie_rebuilt_after_add():
    lex = MarisaLexicon(["cat"])
    first = lex.trie
    assert lex.trie is first
    lex.add_word("dog")
    assert lex.trie is not first
    assert "dog" in lex.trie


def test_trie_not_rebuilt_after_remove():
    lex = MarisaLexicon(["cat", "dog"])
    first = lex.trie
    lex.remove_word("dog")
    assert lex.trie is first
    assert lex.words_with_prefix("d") == []


def test_readding_removed_word_does_not_rebuild():
    lex = MarisaLexicon(["cat"])
    lex.remove_word("cat")
    first = lex.trie
    assert lex.add_word("cat")
    assert lex.trie is first
    assert lex.match_regex("c_t") == {"cat"}


def test_match_uses_literal_prefix():
    lex = MarisaLexicon(["cart", "care", "bare", "scare"])
    assert lex.match_regex("car_") == {"cart", "care"}
    assert lex.match_regex("*are") == {"care", "bare", "scare"}
