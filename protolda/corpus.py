import numpy as np

from .formatted_logger import formatted_logger

logger = formatted_logger('Corpus')

UNASSIGNED = -1


class Index():
    """ Bidirectional mapping between items and dense integer ids, ids follow insertion order """

    def __init__(self, items=()):
        self._ids = dict()
        self._items = list()
        for item in items:
            self.put(item)

    def put(self, item):
        if item not in self._ids:
            self._ids[item] = len(self._items)
            self._items.append(item)
        return self._ids[item]

    def get_id(self, item):
        return self._ids.get(item)

    def get_item(self, item_id):
        return self._items[item_id]

    def items(self):
        return list(self._items)

    def __contains__(self, item):
        return item in self._ids

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)


class Document():
    """
    Attributes
    ----------
    tokens: ndarray
        word id of each position
    topics: ndarray
        topic assigned to each position, UNASSIGNED until the sampler sees the document
    source: str
        identifier of the document in the input file
    types: list
        document category ids
    labels: list
        class label ids
    """

    def __init__(self, tokens, source, types=(), labels=()):
        self.tokens = np.asarray(tokens, dtype=np.int64)
        self.topics = np.zeros(len(self.tokens), dtype=np.int64) + UNASSIGNED
        self.source = source
        self.types = list(types)
        self.labels = list(labels)

    def topic_counts(self, n_topic):
        """ number of assigned tokens per topic, UNASSIGNED positions excluded """
        topics = self.topics[self.topics != UNASSIGNED]
        return np.bincount(topics, minlength=n_topic)

    def __len__(self):
        return len(self.tokens)


class Corpus():
    """ Iterable container of documents with its word, label and document type indexes.

    Corpora that must share word ids, e.g. a training and a test corpus, are built
    around the same `word_index`.
    """

    def __init__(self, word_index=None, label_index=None, type_index=None):
        self.word_index = Index() if word_index is None else word_index
        self.label_index = Index() if label_index is None else label_index
        self.type_index = Index() if type_index is None else type_index
        self.documents = list()
        self._word_types = set()

    def add_document(self, source, words, types=(), labels=()):
        tokens = [self.word_index.put(word) for word in words]
        self._word_types.update(tokens)
        document = Document(tokens, source,
                            [self.type_index.put(doc_type) for doc_type in types],
                            [self.label_index.put(label) for label in labels])
        self.documents.append(document)
        return document

    def read_file(self, filepath):
        """ Read four column, tab separated documents:
        source id, comma separated document types, comma separated labels, whitespace tokenized text.
        Blank lines are ignored.
        """
        n_before = len(self.documents)
        with open(filepath, 'r', encoding='utf-8') as f:
            for line_no, line in enumerate(f, 1):
                if not line.strip():
                    continue
                fields = line.rstrip('\r\n').split('\t')
                if len(fields) < 4:
                    raise ValueError('%s:%d: expected 4 tab separated fields, found %d' % (filepath, line_no, len(fields)))
                self.add_document(fields[0], fields[3].split(), fields[1].split(','), fields[2].split(','))
        logger.info('read %d documents from %s', len(self.documents) - n_before, filepath)

    @property
    def n_words(self):
        """ size of the word index, possibly shared with other corpora """
        return len(self.word_index)

    @property
    def n_types(self):
        """ number of distinct word types occurring in this corpus """
        return len(self._word_types)

    @property
    def n_labels(self):
        return len(self.label_index)

    @property
    def n_doc_types(self):
        return len(self.type_index)

    def __iter__(self):
        return iter(self.documents)

    def __len__(self):
        return len(self.documents)

    def __getitem__(self, di):
        return self.documents[di]


def read_proto_topics(filepath):
    """ Read prototype topics, one per line: topic name, a tab, whitespace separated seed words.

    Returns
    -------
    list of (name, words) in file order
    """
    proto_topics = list()
    with open(filepath, 'r', encoding='utf-8') as f:
        for line_no, line in enumerate(f, 1):
            if not line.strip():
                continue
            fields = line.rstrip('\r\n').split('\t')
            if len(fields) < 2:
                raise ValueError('%s:%d: expected a topic name and its seed words' % (filepath, line_no))
            proto_topics.append((fields[0], fields[1].split()))
    return proto_topics
