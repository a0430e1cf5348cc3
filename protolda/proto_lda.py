import time

import numpy as np
from scipy.special import gammaln

from .base import BaseGibbsParamTopicModel, NotTrainedError
from .corpus import Corpus
from .formatted_logger import formatted_logger
from .sampler import GibbsSampler, InferCommit, LearnCommit
from .topic_space import build_topic_space
from .utils import get_top_words, write_top_words

logger = formatted_logger('ProtoLDA')


class ProtoLDA(BaseGibbsParamTopicModel):
    """
    Latent Dirichlet allocation with prototype topics

    Regular topics share a symmetric prior over words, while each prototype topic
    puts an extra `gamma` of prior mass on its own seed words. Topics are learned
    with collapsed Gibbs sampling, and the trained counts are then kept frozen to
    infer the topics of unseen documents.

    Attributes
    ----------
    topic_space: TopicSpace
        topic labels, prototype prior and normaliser
    gamma: float
        additive prior boost of a prototype topic's seed words
    trained: boolean
        set once `train` has completed
    """

    def __init__(self, n_topic, corpus, proto_topics=None, alpha=0.1, beta=0.01, gamma=1.0, **kwargs):
        self._word_index = corpus.word_index
        topic_space = build_topic_space(n_topic, proto_topics, corpus.word_index, corpus.n_types, beta, gamma)
        super(ProtoLDA, self).__init__(n_voca=topic_space.n_voca, n_topic=topic_space.n_topic,
                                       alpha=alpha, beta=beta, **kwargs)
        self.topic_space = topic_space
        self.gamma = gamma
        self.trained = False

    @property
    def word_index(self):
        return self._word_index

    @property
    def topic_labels(self):
        return self.topic_space.labels.items()

    def new_corpus(self):
        """ Empty corpus sharing the vocabulary of the model, for documents to infer """
        return Corpus(word_index=self._word_index)

    def train(self, max_iter, corpus):
        """ Gibbs sampling of the topics of the training corpus

        Parameters
        ----------
        max_iter: int
            number of Gibbs sampling sweeps over the corpus
        corpus: Corpus
        """
        self.counts.reset()
        sampler = GibbsSampler(self.topic_space, self.counts, self.alpha, LearnCommit(self.counts),
                               self.random_state)
        self._run(sampler, max_iter, corpus, '[ITER]', self.log_likelihood)
        self.trained = True

    def infer(self, max_iter, corpus):
        """ Gibbs sampling of the topics of unseen documents, conditioned on the trained model

        Parameters
        ----------
        max_iter: int
            number of Gibbs sampling sweeps over the corpus
        corpus: Corpus
            documents sharing the word index of the model, see `new_corpus`
        """
        if not self.trained:
            raise NotTrainedError('infer() requires a model trained with train()')
        sampler = GibbsSampler(self.topic_space, self.counts, self.alpha, InferCommit(), self.random_state)
        self._run(sampler, max_iter, corpus, '[INFER]')

    def _run(self, sampler, max_iter, corpus, tag, score=None):
        for doc in corpus:
            sampler.initialize_document(doc)
        logger.info('Sampler initialized. %d regular topics, %d proto-topics and %d documents.',
                    self.topic_space.n_regular, self.topic_space.n_proto, len(corpus))

        for iteration in range(max_iter):
            prev = time.time()
            for doc in corpus:
                sampler.resample_document(doc)

            if not self.verbose:
                continue
            if score is None:
                logger.info('%s %d,\telapsed time:%.2f', tag, iteration, time.time() - prev)
            else:
                logger.info('%s %d,\telapsed time:%.2f,\tlog_likelihood:%.2f', tag, iteration, time.time() - prev,
                            score(corpus))

    def topic_distribution(self, doc, smooth=0.0):
        """ Topic proportions of a document, in descending order, up to the first zero proportion

        A document without in-vocabulary tokens has no proportions and yields an empty list.

        Returns
        -------
        list of (topic label, proportion)
        """
        DT = doc.topic_counts(self.n_topic)
        doc_len = DT.sum()
        if doc_len == 0:
            return []
        proportions = (smooth + DT) / float(doc_len)

        distribution = list()
        for topic in np.argsort(-proportions, kind='mergesort'):
            if proportions[topic] == 0.0:
                break
            distribution.append((self.topic_space.labels.get_item(topic), float(proportions[topic])))
        return distribution

    def write_topic_distributions(self, filepath, corpus, smooth=0.0):
        """ Write the learned or inferred topic proportions of every document of `corpus` """
        with open(filepath, 'w', encoding='utf-8') as f:
            f.write('source\ttopic:proportion...\n')
            for doc in corpus:
                pairs = ['%s %r' % (label, proportion) for label, proportion in self.topic_distribution(doc, smooth)]
                f.write('%s\t%s\n' % (doc.source, ' '.join(pairs)))

    def topic_word(self):
        """ Posterior mean of the topic-word distributions, shape (n_topic, n_voca) """
        TW = self.topic_space.word_prior() + self.TW
        return TW / TW.sum(1)[:, np.newaxis]

    def get_top_words(self, topic, n_words=20):
        return get_top_words(self.topic_word(), self._word_index.items(), topic, n_words)

    def write_top_words(self, filepath, n_words=20):
        write_top_words(self.topic_word(), self._word_index.items(), filepath, labels=self.topic_labels,
                        n_words=n_words)

    def log_likelihood(self, corpus):
        """
        likelihood function
        """
        prior = self.topic_space.word_prior()
        prior_sum = prior.sum(1)

        ll = len(corpus) * gammaln(self.alpha * self.n_topic)
        ll -= len(corpus) * self.n_topic * gammaln(self.alpha)
        ll += (gammaln(prior_sum) - gammaln(prior).sum(1)).sum()

        for doc in corpus:
            DT = doc.topic_counts(self.n_topic)
            ll += gammaln(DT + self.alpha).sum() - gammaln(DT.sum() + self.alpha * self.n_topic)
        for ki in range(self.n_topic):
            ll += gammaln(self.TW[ki, :] + prior[ki]).sum() - gammaln(self.sum_T[ki] + prior_sum[ki])

        return ll
