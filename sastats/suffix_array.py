# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Suffix array construction and the arrays derived from it.
from pydivsufsort import divsufsort
from sastats.arrays import CheckedArray, InvariantViolation, check_index
import numpy as np

SENTINEL = b'\0'
UNDEF = -1

def encode_text(text, strip_sentinel = False):
    '''Returns the byte string the arrays are built over: the text
    followed by the sentinel, unless it is stripped.'''
    if isinstance(text, str):
        try:
            data = text.encode('latin-1')
        except UnicodeEncodeError as e:
            ch = text[e.start]
            raise ValueError('Symbol %r is not byte-sized!' % ch) from e
    else:
        data = bytes(text)
    if strip_sentinel:
        return data
    if SENTINEL in data:
        raise ValueError('Text contains the sentinel symbol!')
    return data + SENTINEL

def suffix_array_doubling(seq):
    '''Prefix doubling: O(n log^2 n) but only needs numpy.'''
    if not seq:
        return []
    vocab = sorted(set(seq))

    ch2idx = {ch: i for i, ch in enumerate(vocab)}
    cls = np.array([ch2idx[t] for t in seq] + [-1])

    n = 1
    while n < len(seq):
        cls1 = np.roll(cls, -n)
        inds = np.lexsort((cls1, cls))
        result = np.logical_or(np.diff(cls[inds]),
                               np.diff(cls1[inds]))
        cls[inds[0]] = 0
        cls[inds[1:]] = np.cumsum(result)

        n *= 2
    cls1 = np.roll(cls, n // 2)
    return np.lexsort((cls1, cls))[1:].tolist()

def suffix_array_divsufsort(data):
    if not data:
        return []
    arr = np.frombuffer(bytearray(data), dtype = np.uint8)
    return divsufsort(arr).tolist()

PROVIDERS = {
    'divsufsort' : suffix_array_divsufsort,
    'doubling' : suffix_array_doubling
}

def suffix_array(data, provider = 'divsufsort'):
    if provider not in PROVIDERS:
        s = ', '.join(sorted(PROVIDERS))
        raise ValueError('Provider must be one of %s' % s)
    sa = PROVIDERS[provider](data)
    if len(sa) != len(data):
        fmt = 'Provider %s returned %d entries for %d symbols'
        raise InvariantViolation(fmt % (provider, len(sa), len(data)))
    return CheckedArray(sa).freeze()

def inverse(sa):
    n = len(sa)
    isa = CheckedArray([UNDEF] * n)
    for i, pos in enumerate(sa):
        check_index(pos, n, 'permutation entry')
        if isa[pos] != UNDEF:
            raise InvariantViolation('%d occurs twice in permutation' % pos)
        isa[pos] = i
    return isa.freeze()

def lcp_array(seq, sa, isa):
    '''Kasai et al. Text positions are visited in text order so the
    match length drops by at most one per step.'''
    n = len(sa)
    lcp = CheckedArray.zeros(n)
    h = 0
    for i in range(n):
        r = isa[i]
        if r == 0:
            continue
        j = sa[r - 1]
        while i + h < n and j + h < n and seq[i + h] == seq[j + h]:
            h += 1
        lcp[r] = h
        if h > 0:
            h -= 1
    return lcp.freeze()

def lpf_array(lcp, isa):
    '''Crochemore et al., "LPF computation revisited", IWOCA'09.

    Ranks are unlinked from a doubly linked list in decreasing text
    order, so when position i is visited only suffixes starting before
    it remain as neighbours.
    '''
    n = len(lcp)
    if len(isa) != n:
        fmt = 'LCP has %d entries but ISA has %d'
        raise InvariantViolation(fmt % (n, len(isa)))
    work = CheckedArray(list(lcp) + [0])
    prev = CheckedArray(range(-1, n - 1))
    next_ = CheckedArray(range(1, n + 1))
    lpf = CheckedArray.zeros(n)
    for j in range(n, 0, -1):
        i = j - 1
        r = isa[i]
        nr = next_[r]
        if not nr < n + 1:
            raise InvariantViolation('next[%d] = %d out of range' % (r, nr))
        lpf[i] = max(work[r], work[nr])

        work[nr] = min(work[r], work[nr])
        pr = prev[r]
        if pr != UNDEF:
            next_[pr] = nr
        if nr < n:
            prev[nr] = pr
    return lpf.freeze()

def psi_array(sa, isa):
    n = len(sa)
    return CheckedArray(isa[(sa[i] + 1) % n] for i in range(n)).freeze()

def lf_array(sa, isa):
    n = len(sa)
    return CheckedArray(isa[(sa[i] + n - 1) % n] for i in range(n)).freeze()
