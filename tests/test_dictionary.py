import pytest

from estudos.dictionary import (
    MAX_RESULTS,
    MAX_WORD_LENGTH,
    Trie,
    edit_distance,
    load_dictionary,
    main,
    process_queries,
)


def test_edit_distance_classic_example():
    assert edit_distance("kitten", "sitting") == 3


def test_edit_distance_identity_and_case():
    assert edit_distance("casa", "casa") == 0
    assert edit_distance("CaSa", "casa") == 0


def test_edit_distance_against_empty_is_length():
    assert edit_distance("", "palavra") == len("palavra")
    assert edit_distance("abc", "") == len("abc")


@pytest.mark.parametrize("a,b", [("gato", "pato"), ("carro", "caro"), ("abc", "xyz")])
def test_edit_distance_symmetric(a, b):
    assert edit_distance(a, b) == edit_distance(b, a)


def test_insert_normalises_letters():
    trie = Trie()
    trie.insert("Casa")
    trie.insert("né-2")
    assert list(trie.words()) == ["casa", "n"]


def test_words_are_alphabetical():
    trie = Trie()
    for word in ["b", "ab", "a"]:
        trie.insert(word)
    assert list(trie.words()) == ["a", "ab", "b"]


def test_search_finds_close_words():
    trie = Trie()
    for word in ["gato", "pato", "rato", "cachorro"]:
        trie.insert(word)
    assert trie.search("gato", 1) == ["gato", "pato", "rato"]
    assert trie.search("gato", 0) == ["gato"]


def test_search_caps_results():
    trie = Trie()
    for first in "abcdefghijklmnopqrstuvwxyz":
        trie.insert(first + "a")
    results = trie.search("za", 1)
    assert len(results) == MAX_RESULTS
    assert results == sorted(results)


def test_load_dictionary_skips_long_word_and_rest_of_line(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("x" * MAX_WORD_LENGTH + " perdida\nfica\n", encoding="utf-8")
    trie = Trie()
    load_dictionary(trie, str(path))
    assert list(trie.words()) == ["fica"]


def test_load_dictionary_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_dictionary(Trie(), str(tmp_path / "missing.txt"))


def test_process_queries(tmp_path):
    trie = Trie()
    for word in ["gato", "pato", "mesa"]:
        trie.insert(word)
    path = tmp_path / "q.txt"
    path.write_text("gato 1\nmesa 0\nzzzz 0\n", encoding="utf-8")
    assert process_queries(trie, str(path)) == ["gato:gato,pato", "mesa:mesa", "zzzz:"]


def test_process_queries_missing_limit(tmp_path):
    path = tmp_path / "q.txt"
    path.write_text("gato\n", encoding="utf-8")
    with pytest.raises(ValueError):
        process_queries(Trie(), str(path))


def test_main_prints_words_and_answers(tmp_path, monkeypatch, capsys):
    (tmp_path / "dict.txt").write_text("Pato gato\n", encoding="utf-8")
    (tmp_path / "consultas.txt").write_text("rato 1\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    assert main(["dict.txt"]) == 0
    assert capsys.readouterr().out == "gato\npato\nrato:gato,pato\n"


def test_main_usage_error(capsys):
    assert main([]) == 1
    assert "Use:" in capsys.readouterr().err