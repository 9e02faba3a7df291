import itertools

import pytest

from charmarkov.analytics.markov import empty, add, add_list, merge
from charmarkov.core.elements import START, END, Character


def test_empty_is_all_zero():
    m = empty("abc")
    assert all(m.count(x, y) == 0 for x in m.alphabet for y in m.alphabet)
    assert m.matrix.size == len(m.alphabet) == 5


def test_add_increments_one_cell():
    m = empty("ab")
    m2 = add(Character('a'), Character('b'), m)
    assert m2.count(Character('a'), Character('b')) == 1
    assert m2.matrix.total() == 1
    assert m.matrix.total() == 0


def test_add_unknown_element_is_noop():
    m = empty("ab")
    assert add(Character('z'), Character('a'), m) is m
    assert add(Character('a'), Character('z'), m) is m


def test_cat_example():
    m = add_list(["cat"], empty(['c', 'a', 't']))
    assert m.count(START, Character('c')) == 1
    assert m.count(Character('c'), Character('a')) == 1
    assert m.count(Character('a'), Character('t')) == 1
    assert m.count(Character('t'), END) == 1
    assert m.matrix.total() == 4


def test_empty_strings_skipped():
    m = empty("ab")
    assert add_list(["", ""], m) == m


def test_unknown_chars_skip_only_their_pairs():
    m = add_list(["axb"], empty("ab"))
    assert m.count(START, Character('a')) == 1
    assert m.count(Character('b'), END) == 1
    assert m.matrix.total() == 2


def test_order_independent():
    words = ["ana", "nab", "ban", "a"]
    base = empty("abn")
    results = {add_list(p, base).matrix for p in itertools.permutations(words)}
    assert len(results) == 1
    split = add_list(words[2:], add_list(words[:2], base))
    assert split.matrix in results


def test_merge_sums_counts():
    base = empty("ab")
    left = add_list(["ab"], base)
    right = add_list(["ba", "ab"], base)
    assert merge(left, right) == add_list(["ab", "ba", "ab"], base)
    with pytest.raises(ValueError):
        merge(left, empty("abc"))


def test_add_non_element_is_noop():
    m = empty("ab")
    assert add("a", "b", m) is m


def test_add_list_matches_pairwise_add():
    base = empty("abn")
    words = ["banana", "", "naan", "bxa"]
    expected = base
    for w in words:
        if not w:
            continue
        seq = [START, *map(Character, w), END]
        for prev, cur in zip(seq, seq[1:]):
            expected = add(prev, cur, expected)
    assert add_list(words, base) == expected
