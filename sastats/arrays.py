# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Bounds-checked containers for the derived arrays.
from collections.abc import Sequence

class InvariantViolation(AssertionError):
    '''Raised when an array invariant is broken. Unlike a plain assert
    it is never compiled out.'''
    pass

def check_index(i, n, what = 'index'):
    if not isinstance(i, int) or isinstance(i, bool):
        raise InvariantViolation('%s %r is not an integer' % (what, i))
    if not 0 <= i < n:
        raise InvariantViolation('%s %d not in [0, %d)' % (what, i, n))

class CheckedArray(Sequence):
    '''Owning integer array whose indexing is always bounds checked.

    Negative indices are rejected instead of wrapping around so that an
    undefined link such as -1 can never silently read the last
    element. Once frozen, writes raise.
    '''
    __slots__ = ('_data', '_frozen')

    def __init__(self, values = ()):
        self._data = list(values)
        self._frozen = False

    @classmethod
    def zeros(cls, n):
        return cls([0] * n)

    def freeze(self):
        self._frozen = True
        return self

    def __len__(self):
        return len(self._data)

    def __getitem__(self, i):
        check_index(i, len(self._data))
        return self._data[i]

    def __setitem__(self, i, value):
        if self._frozen:
            raise InvariantViolation('Write to frozen array at %r' % (i,))
        check_index(i, len(self._data))
        self._data[i] = value

    def __iter__(self):
        return iter(self._data)

    def __eq__(self, other):
        if isinstance(other, CheckedArray):
            return self._data == other._data
        if isinstance(other, (list, tuple)):
            return self._data == list(other)
        return NotImplemented

    __hash__ = None

    def __repr__(self):
        return 'CheckedArray(%r)' % self._data

class ArrayFunctional(Sequence):
    '''Simulates an array of the given length by calling fun(i) on
    demand. Nothing is materialized and it can be iterated any number
    of times.'''
    __slots__ = ('_length', '_fun')

    def __init__(self, length, fun):
        self._length = length
        self._fun = fun

    def __len__(self):
        return self._length

    def __getitem__(self, i):
        check_index(i, self._length)
        return self._fun(i)

    def __iter__(self):
        for i in range(self._length):
            yield self._fun(i)
