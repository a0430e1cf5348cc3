import argparse
import sys

from .corpus import Corpus, read_proto_topics
from .formatted_logger import formatted_logger
from .proto_lda import ProtoLDA


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='protolda',
                                     description='Train an LDA model with prototype topics and write '
                                                 'the topic distribution of every document.')
    parser.add_argument('train_file', help='four column, tab separated training corpus')
    parser.add_argument('output', help='file to write the topic distributions to')
    parser.add_argument('--test-file', help='corpus to infer topics for; its distributions are written '
                                            'instead of the training ones')
    parser.add_argument('--proto-topics', help='prototype topics, one per line: name<TAB>seed words')
    parser.add_argument('--topics', type=int, default=10, help='number of regular topics')
    parser.add_argument('--alpha', type=float, default=0.1)
    parser.add_argument('--beta', type=float, default=0.01)
    parser.add_argument('--gamma', type=float, default=1.0)
    parser.add_argument('--iterations', type=int, default=100, help='training sweeps')
    parser.add_argument('--infer-iterations', type=int, default=100, help='inference sweeps')
    parser.add_argument('--smooth', type=float, default=0.0, help='smoothing of the written proportions')
    parser.add_argument('--top-words', help='file to write the most probable words of each topic to')
    parser.add_argument('--n-words', type=int, default=20)
    parser.add_argument('--seed', type=int, default=20)
    parser.add_argument('--log-level', default='info')
    parser.add_argument('--log-file')
    parser.add_argument('--quiet', action='store_true', help='do not compute the per iteration log likelihood')
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    for label in ('ProtoLDA', 'Corpus'):
        formatted_logger(label, args.log_level, file_path=args.log_file)

    corpus = Corpus()
    corpus.read_file(args.train_file)
    proto_topics = read_proto_topics(args.proto_topics) if args.proto_topics else None

    model = ProtoLDA(args.topics, corpus, proto_topics, alpha=args.alpha, beta=args.beta, gamma=args.gamma,
                     seed=args.seed, verbose=not args.quiet)
    model.train(args.iterations, corpus)

    if args.test_file:
        test_corpus = model.new_corpus()
        test_corpus.read_file(args.test_file)
        model.infer(args.infer_iterations, test_corpus)
        corpus = test_corpus

    model.write_topic_distributions(args.output, corpus, args.smooth)
    if args.top_words:
        model.write_top_words(args.top_words, args.n_words)
    return 0


if __name__ == '__main__':
    sys.exit(main())
