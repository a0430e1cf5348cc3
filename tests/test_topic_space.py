import numpy as np
import pytest

from protolda import Index, build_topic_space


def test_prototype_prior_row():
    word_index = Index(['pear', 'apple', 'plum'])
    ts = build_topic_space(0, [('T1', ['apple', 'banana'])], word_index, 3, 0.01, 1.0)

    assert ts.n_topic == 1
    assert len(word_index) == 4
    row = ts.proto_beta[0]
    for word in ('apple', 'banana'):
        assert row[word_index.get_id(word)] == pytest.approx(0.01 + 1.0)
    for word in ('pear', 'plum'):
        assert row[word_index.get_id(word)] == pytest.approx(0.01)


def test_topic_ids_and_beta_sum():
    word_index = Index(['a', 'b', 'c'])
    ts = build_topic_space(2, [('x', ['a', 'b']), ('y', ['b', 'd', 'd'])], word_index, 3, 0.5, 2.0)

    assert ts.labels.items() == ['Topic_0', 'Topic_1', 'x', 'y']
    assert (ts.n_regular, ts.n_proto, ts.n_topic, ts.n_voca) == (2, 2, 4, 4)
    # 3 corpus types, 3 distinct seed words
    assert ts.beta_sum == pytest.approx(3 * 0.5 + 2.0 * 3)
    assert ts.proto_beta[1, word_index.get_id('d')] == pytest.approx(2.5)


def test_mapping_is_ordered_by_name():
    seeds = {'zebra': ['stripe'], 'ant': ['hill'], 'moth': ['lamp']}
    first = build_topic_space(1, seeds, Index(), 0, 0.01, 1.0)
    second = build_topic_space(1, dict(reversed(list(seeds.items()))), Index(), 0, 0.01, 1.0)
    assert first.labels.items() == ['Topic_0', 'ant', 'moth', 'zebra']
    assert second.labels.items() == first.labels.items()


def test_word_prior():
    ts = build_topic_space(2, [('x', ['a'])], Index(['a', 'b']), 2, 0.1, 1.0)
    expected = np.array([[0.1, 0.1], [0.1, 0.1], [1.1, 0.1]])
    np.testing.assert_allclose(ts.word_prior(), expected)


def test_invalid_topic_spaces():
    with pytest.raises(ValueError):
        build_topic_space(0, None, Index(), 0, 0.01, 1.0)
    with pytest.raises(ValueError):
        build_topic_space(-1, [('x', ['a'])], Index(), 0, 0.01, 1.0)
    with pytest.raises(ValueError):
        build_topic_space(1, [('x', ['a']), ('x', ['b'])], Index(), 0, 0.01, 1.0)
    with pytest.raises(ValueError):
        build_topic_space(1, [('Topic_0', ['a'])], Index(), 0, 0.01, 1.0)


@pytest.mark.parametrize('name', ['fruit salad', ' fruit', 'fruit\n', 'a\tb', ''])
def test_topic_names_with_whitespace_are_rejected(name):
    with pytest.raises(ValueError, match='whitespace'):
        build_topic_space(2, [(name, ['apple'])], Index(), 0, 0.01, 1.0)
