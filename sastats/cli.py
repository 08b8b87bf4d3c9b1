# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
"""String stats

Usage:
    string-stats [options]

Prints the suffix array, inverse suffix array, LCP, LPF, psi, LF and
BWT arrays of the text given with --ex, or of every text with index in
[--minlimit, --maxlimit) produced by the chosen --generator:

    b  binary words         f  Fibonacci words
    r  rabbit sequence      l  l-factorized Fibonacci words
    s  standard words       7  LZ77-factorized Fibonacci words

Options:
    -h --help                  show this screen
    --threads=<uint>           Number of threads [default: 4]
    --minlimit=<uint>          Starting number of sequence [default: 0]
    --maxlimit=<uint>          Ending number of sequence (exclusive)
                               [default: 1099511627776]
    --ex=<string>              String to examine
    --generator=<string>       Use a generator sequence
    --appendString=<string>    Append a string to the sequence
    --prependString=<string>   Prepend a string to the sequence
    --stripDollar              Strip the delimiting character of the string
    --zeroindex                Start counting indices at zero
    --predicate=<string>       Report only matching texts: all, rotation,
                               reverse, either or arithmetic [default: all]
    --provider=<string>        Suffix array construction: divsufsort or
                               doubling [default: divsufsort]
    --verbose                  Print progress to stderr
"""
from docopt import docopt
from sastats.generators import get_generator
from sastats.params import AnalysisParams
from sastats.parallel import enumerate_matches
from sastats.stats import (PREDICATES,
                           StringStats,
                           report_lines,
                           stats_to_lines)
from sastats.utils import SP, term_table
import sys

USAGE_MESSAGE = ('You need to provide either a string with --ex or '
                 'a string generator with --generator.')

# Rows of the help table: name, type, default and description.
FLAGS = [
    ('--threads', 'uint', '4', 'Number of threads'),
    ('--minlimit', 'uint', '0', 'Starting number of sequence'),
    ('--maxlimit', 'uint', str(1 << 40),
     'Ending number of sequence (exclusive)'),
    ('--ex', 'string', '', 'String to examine'),
    ('--generator', 'string', '', 'Use a generator sequence'),
    ('--appendString', 'string', '', 'Append a string to the sequence'),
    ('--prependString', 'string', '', 'Prepend a string to the sequence'),
    ('--stripDollar', 'bool', 'false',
     'Strip the delimiting character of the string'),
    ('--zeroindex', 'bool', 'false', 'Start counting indices at zero'),
    ('--predicate', 'string', 'all',
     'Report only matching texts: all, rotation, reverse, either or '
     'arithmetic'),
    ('--provider', 'string', 'divsufsort',
     'Suffix array construction: divsufsort or doubling'),
    ('--verbose', 'bool', 'false', 'Print progress to stderr')
]

def print_help(prg_name = 'string-stats'):
    print('%s (options) {--ex=(string) | --generator=[bfrls7]}' % prg_name)
    print(USAGE_MESSAGE)
    print()
    header = ['Parameter', 'Type', 'Default', 'Description']
    rows = [[name, type, '(%s)' % default, desc]
            for (name, type, default, desc) in FLAGS]
    print(term_table(rows, header))

def print_lines(lines):
    print('\n'.join(lines), flush = True)

def main(argv = None):
    if argv is None:
        argv = sys.argv[1:]
    if not argv or argv[0] in ('-h', '--help', '-help'):
        print_help()
        return 0
    args = docopt(__doc__, argv = argv, version = 'String stats 1.0')
    params = AnalysisParams.from_docopt_args(args)
    SP.enabled = params.verbose
    SP.print('Parameters: %s' % params.to_string())

    if params.example:
        stats = StringStats.from_text(params.example, params)
        print_lines(stats_to_lines(stats, params.zero_index))
        return 0

    generator = None
    if params.generator:
        generator = get_generator(params.generator,
                                  params.prepend_string,
                                  params.append_string)
    if generator is None:
        print_help()
        return 0

    def report(index, stats):
        print_lines(report_lines(index, stats, params))
    enumerate_matches(generator, params,
                      PREDICATES[params.predicate], report)
    return 0

if __name__ == '__main__':
    sys.exit(main())
