# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Per-text snapshot of all derived arrays and its textual report.
from collections import namedtuple
from sastats.arrays import ArrayFunctional
from sastats.params import AnalysisParams
from sastats.rotation import reverse_rotation_order, rotation_order
from sastats.suffix_array import (encode_text,
                                  inverse,
                                  lcp_array,
                                  lf_array,
                                  lpf_array,
                                  psi_array,
                                  suffix_array)

DOLLAR = '$'
SEPARATOR = '-' * 18

_StringStats = namedtuple('_StringStats', [
    'text', 'data', 'stripped',
    'sa', 'isa', 'lcp', 'lpf', 'psi', 'lf'
])

class StringStats(_StringStats):
    '''Immutable bundle of a text and its SA, ISA, LCP, LPF, psi and LF
    arrays. data is the byte string the arrays index, i.e. the text
    plus the sentinel unless stripped.'''
    __slots__ = ()

    @classmethod
    def from_text(cls, text, params = None):
        if params is None:
            params = AnalysisParams()
        stripped = params.strip_sentinel
        data = encode_text(text, stripped)
        if not isinstance(text, str):
            # Byte symbols map one to one onto latin-1
            text = bytes(text).decode('latin-1')
        sa = suffix_array(data, params.provider)
        isa = inverse(sa)
        lcp = lcp_array(data, sa, isa)
        lpf = lpf_array(lcp, isa)
        return cls(text, data, stripped,
                   sa, isa, lcp, lpf,
                   psi_array(sa, isa), lf_array(sa, isa))

    def size(self):
        return len(self.sa)

    def symbol(self, i):
        ch = self.data[i]
        if ch == 0 and not self.stripped:
            return DOLLAR
        return chr(ch)

    @property
    def plcp(self):
        return ArrayFunctional(self.size(),
                               lambda i: self.lcp[self.isa[i]])

    @property
    def bwt(self):
        def bwt_symbol(i):
            ch = self.data[self.sa[self.lf[i]]]
            return DOLLAR if ch == 0 else chr(ch)
        return ArrayFunctional(self.size(), bwt_symbol)

    def rotation_order(self):
        return rotation_order(self.sa, self.isa)

    def reverse_rotation_order(self):
        return reverse_rotation_order(self.sa, self.isa)

def arithmetic_progression(sa):
    '''Returns (q, m) if sa[i] = sa[i - 1] + m (mod n) for all i >= 2
    where q = sa[0] and m = n + sa[1] - sa[0], else None.'''
    n = len(sa)
    if n < 2:
        return None
    q = sa[0]
    m = n + sa[1] - sa[0]
    for i in range(2, n):
        if sa[i] != (sa[i - 1] + m) % n:
            return None
    return q, m

PREDICATES = {
    'all' : lambda st: True,
    'rotation' : lambda st: st.rotation_order() is not None,
    'reverse' : lambda st: st.reverse_rotation_order() is not None,
    'either' : lambda st: (st.rotation_order() is not None
                           or st.reverse_rotation_order() is not None),
    'arithmetic' : lambda st: arithmetic_progression(st.sa) is not None
}

def value_line(label, value):
    return '%s: %s' % (label, value)

def array_line(width, label, arr):
    return '%4s ' % label + ''.join('%*s ' % (width, v) for v in arr)

def order_string(order):
    return '-1' if order is None else str(order)

def stats_to_lines(stats, zero_index = False):
    ofs = 0 if zero_index else 1
    n = stats.size()
    width = len(str(len(stats.text) + 1))

    def shifted(arr):
        return ArrayFunctional(n, lambda i: arr[i] + ofs)

    text = stats.text
    return [
        value_line('T', text),
        value_line('|T|', len(text)),
        array_line(width, 'i', ArrayFunctional(n, lambda i: i + ofs)),
        array_line(width, 'T', ArrayFunctional(n, stats.symbol)),
        array_line(width, 'SA', shifted(stats.sa)),
        array_line(width, 'LCP', stats.lcp),
        array_line(width, 'PLCP', stats.plcp),
        array_line(width, 'LPF', stats.lpf),
        array_line(width, 'ISA', shifted(stats.isa)),
        array_line(width, 'psi', shifted(stats.psi)),
        array_line(width, 'LF', shifted(stats.lf)),
        array_line(width, 'BWT', stats.bwt),
        value_line('a', text.count('a')),
        value_line('b', text.count('b')),
        value_line('rotation_order', order_string(stats.rotation_order())),
        value_line('reverse_rotation_order',
                   order_string(stats.reverse_rotation_order()))
    ]

def report_lines(index, stats, params):
    '''The block printed for one matching candidate.'''
    lines = [value_line('index', index)]
    lines.extend(stats_to_lines(stats, params.zero_index))
    if params.predicate == 'arithmetic':
        q, m = arithmetic_progression(stats.sa)
        lines.append(value_line('q', q))
        lines.append(value_line('m', m))
    lines.append(SEPARATOR)
    return lines
