# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
from pytest import raises
from sastats.params import AnalysisParams
from sastats.stats import (PREDICATES,
                           StringStats,
                           arithmetic_progression,
                           report_lines,
                           stats_to_lines)

def test_snapshot():
    st = StringStats.from_text('aab')
    assert st.size() == 4
    assert st.sa == [3, 0, 1, 2]
    assert st.isa == [1, 2, 3, 0]
    assert st.lcp == [0, 0, 1, 0]
    assert st.lpf == [0, 1, 0, 0]
    assert st.psi == [1, 2, 3, 0]
    assert st.lf == [3, 0, 1, 2]
    assert list(st.plcp) == [0, 1, 0, 0]
    assert list(st.bwt) == ['b', '$', 'a', 'a']
    assert st.rotation_order() == 2
    assert st.reverse_rotation_order() is None

def test_snapshot_is_immutable():
    st = StringStats.from_text('abab')
    with raises(AttributeError):
        st.sa = None
    with raises(AssertionError):
        st.lcp[0] = 3

def test_stripped():
    params = AnalysisParams(strip_sentinel = True)
    st = StringStats.from_text('aab', params)
    assert st.size() == 3
    assert st.sa == [0, 1, 2]
    assert st.lcp == [0, 1, 0]
    assert st.rotation_order() == 0
    assert arithmetic_progression(st.sa) == (0, 4)

def test_providers_give_same_snapshot():
    for text in ['abaababa', 'bbbb', 'mississippi']:
        a = StringStats.from_text(text)
        b = StringStats.from_text(text, AnalysisParams(provider = 'doubling'))
        assert a == b

def test_arithmetic_progression():
    assert arithmetic_progression([0]) is None
    assert arithmetic_progression([3, 0, 1, 2]) == (3, 1)
    assert arithmetic_progression([0, 2, 1]) == (0, 5)
    assert arithmetic_progression([3, 1, 0, 2]) is None

def test_predicates():
    st = StringStats.from_text('aab')
    assert PREDICATES['all'](st)
    assert PREDICATES['rotation'](st)
    assert not PREDICATES['reverse'](st)
    assert PREDICATES['either'](st)
    assert PREDICATES['arithmetic'](st)

def test_stats_to_lines():
    st = StringStats.from_text('aab')
    assert stats_to_lines(st) == [
        'T: aab',
        '|T|: 3',
        '   i 1 2 3 4 ',
        '   T a a b $ ',
        '  SA 4 1 2 3 ',
        ' LCP 0 0 1 0 ',
        'PLCP 0 1 0 0 ',
        ' LPF 0 1 0 0 ',
        ' ISA 2 3 4 1 ',
        ' psi 2 3 4 1 ',
        '  LF 4 1 2 3 ',
        ' BWT b $ a a ',
        'a: 2',
        'b: 1',
        'rotation_order: 2',
        'reverse_rotation_order: -1'
    ]

def test_bytes_text():
    st = StringStats.from_text(b'aab')
    assert st.text == 'aab'
    assert st == StringStats.from_text('aab')
    assert stats_to_lines(st) == stats_to_lines(StringStats.from_text('aab'))
    lines = stats_to_lines(st)
    assert lines[0] == 'T: aab'
    assert lines[-4:-2] == ['a: 2', 'b: 1']

def test_column_width():
    st = StringStats.from_text('abaababaab')
    lines = stats_to_lines(st, zero_index = True)
    assert lines[2] == '   i ' + ''.join('%2d ' % i for i in range(11))

def test_report_lines():
    params = AnalysisParams(strip_sentinel = True, predicate = 'arithmetic',
                            zero_index = True)
    st = StringStats.from_text('aab', params)
    lines = report_lines(7, st, params)
    assert lines[0] == 'index: 7'
    assert lines[3] == '   i 0 1 2 '
    assert lines[4] == '   T a a b '
    assert lines[-3:] == ['q: 0', 'm: 4', '-' * 18]
