import numpy as np

from .base import SamplingError


def sampling_from_dist(prob, random_state=np.random):
    """ Sample index from a list of unnormalised probability distribution
        same as np.random.multinomial(1, prob/np.sum(prob)).argmax()

    Parameters
    ----------
    prob: ndarray
        array of unnormalised probability distribution
    random_state: numpy.random.RandomState
        source of the uniform draw

    Returns
    -------
    new_topic: return a sampled index

    Raises
    ------
    SamplingError
        if the total mass is not strictly positive
    """
    prob_sum = prob.sum()
    if not prob_sum > 0:
        raise SamplingError('total sampling weight is %r, hyperparameters must be positive' % prob_sum)

    thr = prob_sum * random_state.rand()
    last = len(prob) - 1
    new_topic = 0
    tmp = prob[new_topic]
    # accumulated mass can fall short of the sum by rounding, stop at the last index
    while tmp < thr and new_topic < last:
        new_topic += 1
        tmp += prob[new_topic]
    return new_topic


def get_top_words(topic_word_matrix, vocab, topic, n_words=20):
    if not isinstance(vocab, np.ndarray):
        vocab = np.array(vocab)
    top_words = vocab[topic_word_matrix[topic].argsort(kind='mergesort')[::-1][:n_words]]
    return top_words


def write_top_words(topic_word_matrix, vocab, filepath, labels=None, n_words=20, delimiter=',', newline='\n'):
    if labels is None:
        labels = ['%d' % ti for ti in range(topic_word_matrix.shape[0])]
    with open(filepath, 'w', encoding='utf-8') as f:
        for ti in range(topic_word_matrix.shape[0]):
            top_words = get_top_words(topic_word_matrix, vocab, ti, n_words)
            f.write(labels[ti])
            for word in top_words:
                f.write(delimiter + word)
            f.write(newline)
