# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Settings record built once from the command line and passed down
# explicitly.
from sastats.suffix_array import PROVIDERS

PREDICATE_NAMES = ('all', 'rotation', 'reverse', 'either', 'arithmetic')

class AnalysisParams:
    @classmethod
    def from_docopt_args(cls, args):
        return cls(threads = int(args['--threads']),
                   min_limit = int(args['--minlimit']),
                   max_limit = int(args['--maxlimit']),
                   example = args['--ex'] or '',
                   generator = args['--generator'] or '',
                   append_string = args['--appendString'] or '',
                   prepend_string = args['--prependString'] or '',
                   strip_sentinel = bool(args['--stripDollar']),
                   zero_index = bool(args['--zeroindex']),
                   predicate = args['--predicate'],
                   provider = args['--provider'],
                   verbose = bool(args['--verbose']))

    def __init__(self,
                 threads = 4, min_limit = 0, max_limit = 1 << 40,
                 example = '', generator = '',
                 append_string = '', prepend_string = '',
                 strip_sentinel = False, zero_index = False,
                 predicate = 'all', provider = 'divsufsort',
                 verbose = False):
        if threads < 1:
            raise ValueError('--threads must be at least 1')
        if min_limit < 0 or min_limit > max_limit:
            fmt = 'Bad range [%d, %d) given by --minlimit and --maxlimit'
            raise ValueError(fmt % (min_limit, max_limit))
        if predicate not in PREDICATE_NAMES:
            s = ', '.join(PREDICATE_NAMES)
            raise ValueError('--predicate must be one of %s' % s)
        if provider not in PROVIDERS:
            s = ', '.join(sorted(PROVIDERS))
            raise ValueError('--provider must be one of %s' % s)
        self.threads = threads
        self.min_limit = min_limit
        self.max_limit = max_limit
        self.example = example
        self.generator = generator
        self.append_string = append_string
        self.prepend_string = prepend_string
        self.strip_sentinel = strip_sentinel
        self.zero_index = zero_index
        self.predicate = predicate
        self.provider = provider
        self.verbose = verbose

    def to_string(self):
        fmt = '%s[%d, %d) threads=%d predicate=%s provider=%s%s'
        args = (self.generator or repr(self.example),
                self.min_limit, self.max_limit,
                self.threads, self.predicate, self.provider,
                ' stripped' if self.strip_sentinel else '')
        return fmt % args
