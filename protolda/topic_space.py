from collections.abc import Mapping

import numpy as np

from .corpus import Index


class TopicSpace():
    """ Regular topics followed by prototype topics

    Attributes
    ----------
    labels: Index
        topic label of each topic id, 'Topic_<i>' for regular topics, then the prototype names
    n_regular: int
        number of regular topics, ids [0, n_regular)
    n_proto: int
        number of prototype topics, ids [n_regular, n_topic)
    proto_beta: ndarray, shape (n_proto, n_voca)
        asymmetric Dirichlet prior of the prototype topics, beta + gamma on seed words, beta elsewhere
    beta_sum: float
        n_types * beta + gamma * (number of distinct seed words)
    """

    def __init__(self, labels, n_regular, proto_beta, beta, beta_sum):
        self.labels = labels
        self.n_regular = n_regular
        self.n_proto = proto_beta.shape[0]
        self.n_topic = n_regular + self.n_proto
        self.n_voca = proto_beta.shape[1]
        self.proto_beta = proto_beta
        self.beta = beta
        self.beta_sum = beta_sum

    def word_prior(self):
        """ Dirichlet prior of every topic over the vocabulary, shape (n_topic, n_voca) """
        prior = np.zeros([self.n_topic, self.n_voca]) + self.beta
        prior[self.n_regular:] = self.proto_beta
        return prior


def build_topic_space(n_regular, proto_topics, word_index, n_types, beta, gamma):
    """ Merge regular topics with prototype topics and build the prototype prior

    Parameters
    ----------
    n_regular: int
        number of unsupervised topics
    proto_topics: Mapping or sequence of (name, seed words)
        a mapping is taken in sorted name order, a sequence in its own order
    word_index: Index
        vocabulary, seed words missing from it are registered
    n_types: int
        number of word types of the training corpus
    beta: float
    gamma: float

    Returns
    -------
    TopicSpace
    """
    if n_regular < 0:
        raise ValueError('number of regular topics must be non-negative, got %d' % n_regular)
    if proto_topics is None:
        proto_topics = []
    elif isinstance(proto_topics, Mapping):
        proto_topics = sorted(proto_topics.items())

    labels = Index('Topic_%d' % ti for ti in range(n_regular))
    seeds = list()
    for name, words in proto_topics:
        if name in labels:
            raise ValueError('duplicate topic name: %s' % name)
        # labels are written space separated next to their proportions
        if len(name.split()) != 1 or name.strip() != name:
            raise ValueError('topic name must be non-empty and free of whitespace: %r' % name)
        labels.put(name)
        seeds.append([word_index.put(word) for word in words])
    if len(labels) == 0:
        raise ValueError('topic space is empty, at least one regular or prototype topic is required')

    proto_beta = np.zeros([len(seeds), len(word_index)]) + beta
    for pi, word_ids in enumerate(seeds):
        proto_beta[pi, sorted(set(word_ids))] += gamma

    proto_words = set(word_id for word_ids in seeds for word_id in word_ids)
    beta_sum = n_types * beta + gamma * len(proto_words)
    return TopicSpace(labels, n_regular, proto_beta, beta, beta_sum)
