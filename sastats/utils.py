# Copyright (C) 2020 Björn Lindqvist <bjourne@gmail.com>
#
# Progress printing and help tables.
import sys
from contextlib import contextmanager
from termtables import to_string
from termtables.styles import markdown

class StructuredPrinter:
    '''Indented progress messages. They go to stderr so that reports on
    stdout stay clean.'''
    def __init__(self, enabled, file = None):
        self.indent = 0
        self.enabled = enabled
        self.file = file

    def print_indented(self, text):
        if self.enabled:
            print(' ' * self.indent + text, file = self.file or sys.stderr)

    def header(self, name, fmt = None, args = None):
        if fmt is not None:
            self.print_indented('* %s %s' % (name, fmt % args))
        else:
            self.print_indented('* %s' % name)
        self.indent += 2

    def print(self, fmt, args = None):
        if args is not None:
            s = fmt % args
        else:
            s = str(fmt)
        self.print_indented(s)

    def leave(self):
        self.indent -= 2
        assert self.indent >= 0

    @contextmanager
    def section(self, name, fmt = None, args = None):
        '''Header whose indentation is undone on exit, also when the
        body raises.'''
        self.header(name, fmt, args)
        try:
            yield self
        finally:
            self.leave()

SP = StructuredPrinter(False)

def term_table(rows, header):
    return to_string(rows,
                     header = header,
                     padding = (0, 1),
                     alignment = 'l' * len(header),
                     style = markdown)
