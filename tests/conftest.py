import pytest

from protolda import Corpus


@pytest.fixture
def corpus():
    corpus = Corpus()
    corpus.add_document('d1', 'apple banana apple cherry'.split(), ['news'], ['food'])
    corpus.add_document('d2', 'car engine wheel car'.split(), ['news'], ['cars'])
    corpus.add_document('d3', 'banana cherry engine apple wheel'.split(), ['blog'], ['food', 'cars'])
    return corpus
