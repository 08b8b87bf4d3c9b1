# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Tests whether two index sequences are cyclic rotations of each
# other. Both sequences are aligned on their anchor, the first
# occurrence of 0.
from sastats.arrays import InvariantViolation

ANCHOR = 0

def find_anchors(a, b):
    n = len(a)
    if n == 0:
        raise InvariantViolation('Rotation of empty sequences is undefined')
    if len(b) != n:
        fmt = 'Sequences have different lengths %d and %d'
        raise InvariantViolation(fmt % (n, len(b)))
    try:
        return list(a).index(ANCHOR), list(b).index(ANCHOR)
    except ValueError:
        return None

def rotation_order(a, b):
    '''Returns the k in [0, n) such that a[azero + i] = b[bzero + i]
    for all i (indices mod n) and k = bzero - azero mod n, or None if
    a is not a rotation of b.'''
    anchors = find_anchors(a, b)
    if anchors is None:
        return None
    azero, bzero = anchors
    n = len(a)
    for i in range(n):
        if a[(azero + i) % n] != b[(bzero + i) % n]:
            return None
    return (bzero - azero) % n

def reverse_rotation_order(a, b):
    '''Like rotation_order, but b is traversed backwards from its
    anchor.'''
    anchors = find_anchors(a, b)
    if anchors is None:
        return None
    azero, bzero = anchors
    n = len(a)
    for i in range(n):
        if a[(azero + i) % n] != b[(n + bzero - i) % n]:
            return None
    return (bzero - azero) % n
