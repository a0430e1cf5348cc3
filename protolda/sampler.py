from .corpus import UNASSIGNED
from .utils import sampling_from_dist


class LearnCommit():
    """ Commits every count update to the global model counts """

    def __init__(self, counts):
        self.counts = counts

    def increment(self, topic, word):
        self.counts.sum_T[topic] += 1
        self.counts.TW[topic, word] += 1

    def decrement(self, topic, word):
        self.counts.sum_T[topic] -= 1
        self.counts.TW[topic, word] -= 1


class InferCommit():
    """ Leaves the global model counts frozen """

    def increment(self, topic, word):
        pass

    def decrement(self, topic, word):
        pass


class GibbsSampler():
    """ Collapsed Gibbs sampler over regular and prototype topics

    The same sampler trains a model or infers topics of unseen documents,
    depending on the commit strategy it is given (LearnCommit or InferCommit).
    Word ids outside [0, n_voca) stay UNASSIGNED and are never sampled.

    Attributes
    ----------
    topic_space: TopicSpace
    counts: ModelCounts
        global counts the conditional distribution is computed from
    alpha: float
    commit: LearnCommit or InferCommit
    random_state: numpy.random.RandomState
    """

    def __init__(self, topic_space, counts, alpha, commit, random_state):
        self.topic_space = topic_space
        self.counts = counts
        self.alpha = alpha
        self.commit = commit
        self.random_state = random_state
        self.n_topic = topic_space.n_topic
        self.n_regular = topic_space.n_regular
        self.n_voca = counts.n_voca

    def in_vocabulary(self, word):
        return 0 <= word < self.n_voca

    def initialize_document(self, doc):
        """ Random initialization of the topics of a document """
        for wi in range(len(doc)):
            word = doc.tokens[wi]
            if not self.in_vocabulary(word):
                doc.topics[wi] = UNASSIGNED
                continue
            topic = self.random_state.randint(self.n_topic)
            doc.topics[wi] = topic
            self.commit.increment(topic, word)

    def resample_document(self, doc):
        """ One Gibbs sweep over the in-vocabulary positions of a document """
        DT = doc.topic_counts(self.n_topic)
        for wi in range(len(doc)):
            word = doc.tokens[wi]
            if not self.in_vocabulary(word):
                continue
            old_topic = doc.topics[wi]

            self.commit.decrement(old_topic, word)
            DT[old_topic] -= 1

            new_topic = self.sample_topic(word, DT)

            doc.topics[wi] = new_topic
            self.commit.increment(new_topic, word)
            DT[new_topic] += 1

    def conditional(self, word, DT):
        """ Unnormalised conditional probability of each topic for `word`

        Parameters
        ----------
        word: int
        DT: ndarray, shape (n_topic)
            topic counts of the current document, excluding the current token

        Returns
        -------
        prob: ndarray, shape (n_topic)
        """
        ts = self.topic_space
        R = self.n_regular
        prob = (self.alpha + DT) / (ts.beta_sum + self.counts.sum_T)
        prob[:R] *= ts.beta + self.counts.TW[:R, word]
        prob[R:] *= ts.proto_beta[:, word]
        return prob

    def sample_topic(self, word, DT):
        return sampling_from_dist(self.conditional(word, DT), self.random_state)
