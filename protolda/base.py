import numpy as np


class SamplingError(ValueError):
    """ Raised when the conditional distribution of a token has no positive mass,
    which only happens when the hyperparameters are not strictly positive.
    """


class NotTrainedError(RuntimeError):
    """ Raised when inference is requested from a model that has not been trained. """


class ModelCounts():
    """ Global sufficient statistics of the collapsed Gibbs sampler

    Attributes
    ----------
    TW: ndarray, shape (n_topic, n_voca)
        word-topic matrix, keeps the number of assigned word tokens for each topic-word pair
    sum_T: ndarray, shape (n_topic)
        number of word tokens assigned for each topic
    """

    def __init__(self, n_topic, n_voca):
        self.n_topic = n_topic
        self.n_voca = n_voca
        self.TW = np.zeros([self.n_topic, self.n_voca], dtype=np.int64)
        self.sum_T = np.zeros(self.n_topic, dtype=np.int64)

    def reset(self):
        self.TW[:] = 0
        self.sum_T[:] = 0

    def copy(self):
        counts = ModelCounts(self.n_topic, self.n_voca)
        counts.TW[:] = self.TW
        counts.sum_T[:] = self.sum_T
        return counts

    def consistent(self):
        """ True if every topic total equals the sum of its word-topic counts """
        return bool(np.array_equal(self.sum_T, self.TW.sum(1)))


class BaseTopicModel():
    """
    Attributes
    ----------
    n_voca: int
        the vocabulary size of the corpus
    verbose: boolean
        if True, log each iteration step while sampling.
    """
    def __init__(self, n_voca, **kwargs):
        self.n_voca = n_voca
        self.verbose = kwargs.pop('verbose', True)


class BaseGibbsParamTopicModel(BaseTopicModel):
    """ Base class of parametric topic models with Gibbs sampling inference

    Attributes
    ----------
    n_topic: int
        total number of topics to be inferred through the Gibbs sampling
    counts: ModelCounts
        global word-topic and topic counts, owned by the model and mutated only while training
    alpha: float
        symmetric parameter of Dirichlet prior for document-topic distribution
    beta: float
        symmetric parameter of Dirichlet prior for topic-word distribution
    random_state: numpy.random.RandomState
        source of the uniform draws; built from the `seed` keyword (default 20)
        unless a `random_state` keyword is given
    """

    def __init__(self, n_voca, n_topic, alpha, beta, **kwargs):
        random_state = kwargs.pop('random_state', None)
        seed = kwargs.pop('seed', 20)
        super(BaseGibbsParamTopicModel, self).__init__(n_voca=n_voca, **kwargs)
        self.n_topic = n_topic
        self.counts = ModelCounts(self.n_topic, self.n_voca)

        self.alpha = alpha
        self.beta = beta

        if random_state is None:
            random_state = np.random.RandomState(seed)
        self.random_state = random_state

    @property
    def TW(self):
        return self.counts.TW

    @property
    def sum_T(self):
        return self.counts.sum_T
