# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from pytest import raises
from sastats.arrays import ArrayFunctional, CheckedArray, InvariantViolation

def test_checked_indexing():
    arr = CheckedArray([4, 5, 6])
    assert arr[2] == 6
    arr[0] = 7
    assert arr == [7, 5, 6]
    for i in (-1, 3, 1.0, True):
        with raises(InvariantViolation):
            arr[i]
    with raises(InvariantViolation):
        arr[3] = 1

def test_invariant_violation_is_assertion():
    # Callers catching AssertionError also see these.
    with raises(AssertionError):
        CheckedArray.zeros(2)[2]

def test_freeze():
    arr = CheckedArray.zeros(3).freeze()
    assert arr == [0, 0, 0]
    with raises(InvariantViolation):
        arr[1] = 1

def test_array_functional():
    calls = []
    def square(i):
        calls.append(i)
        return i * i
    arr = ArrayFunctional(4, square)
    assert calls == []
    assert arr[3] == 9
    assert list(arr) == [0, 1, 4, 9]
    assert list(arr) == [0, 1, 4, 9]
    assert len(arr) == 4
    with raises(InvariantViolation):
        arr[4]
