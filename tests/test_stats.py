import pytest

from charmarkov.analytics.markov import empty, add_list, MarkovModel
from charmarkov.analytics.stats import transition_probabilities, row_entropy, chain_stats
from charmarkov.core.elements import START, END, Character


def _abc_model():
    # rows a/b/c with counts (1,2,1) / (3,2,5) / (0,1,0)
    m = empty("abc")
    counts = {'a': (1, 2, 1), 'b': (3, 2, 5), 'c': (0, 1, 0)}
    matrix = m.matrix
    for src, row in counts.items():
        for dst, n in zip("abc", row):
            matrix = matrix.set(m.index_of(Character(src)), m.index_of(Character(dst)), n)
    return MarkovModel(matrix=matrix, alphabet=m.alphabet)


def test_row_major_probabilities():
    p = transition_probabilities(_abc_model(), Character('a'))
    assert p[Character('a')] == pytest.approx(0.25)
    assert p[Character('b')] == pytest.approx(0.5)
    assert p[Character('c')] == pytest.approx(0.25)
    assert transition_probabilities(_abc_model(), Character('c')) == {Character('b'): 1.0}


def test_probabilities_unknown_or_zero_row():
    m = _abc_model()
    assert transition_probabilities(m, Character('z')) == {}
    assert transition_probabilities(m, END) == {}


def test_row_entropy():
    m = _abc_model()
    assert row_entropy(m, Character('a')) == pytest.approx(1.5)
    assert row_entropy(m, Character('c')) == 0.0


def test_chain_stats():
    m = add_list(["ab", "b"], empty("ab"))
    s = chain_stats(m)
    assert s.total == 5
    assert s.counts == m.matrix.to_lists()
    start_row = s.transition[m.index_of(START)]
    assert start_row[m.index_of(Character('a'))] == pytest.approx(0.5)
    assert s.entropy['start'] == pytest.approx(1.0)
    assert s.transition[m.index_of(END)] == [0.0, 0.0, 0.0, 0.0]
