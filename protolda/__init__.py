from .base import ModelCounts, NotTrainedError, SamplingError
from .corpus import Corpus, Document, Index, read_proto_topics
from .proto_lda import ProtoLDA
from .sampler import GibbsSampler, InferCommit, LearnCommit
from .topic_space import TopicSpace, build_topic_space
