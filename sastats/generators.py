# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Generators mapping an index to a text over {a, b}. All of them are
# pure so they can be called from any number of threads.

def unfold(bases, step, n):
    '''Term n (1-based) of the sequence whose first terms are bases and
    whose later terms are step(window), window being the preceding
    len(bases) terms. Terms before the first are empty.'''
    if n < 0:
        raise ValueError('Index must be non-negative, got %d' % n)
    if n == 0:
        return ''
    if n <= len(bases):
        return bases[n - 1]
    window = list(bases)
    for _ in range(n - len(bases)):
        window = window[1:] + [step(window)]
    return window[-1]

def binary_length(z):
    # floor(log2(2 + z)) without going through floats
    return (z + 2).bit_length() - 1

def int_to_string(z):
    '''The low binary_length(z) bits of z, least significant first,
    with 0 as a and 1 as b.'''
    return ''.join('b' if z & (1 << i) else 'a'
                   for i in range(binary_length(z)))

def int_to_standard_word(z):
    '''Walks down the tree of standard pairs, starting at (a, b), with
    bit i of z choosing the child:

        0 -> L(u, v) = (u, uv)
        1 -> R(u, v) = (vu, v)

    Bit 0 selects which word of the final pair is returned.
    '''
    u, v = 'a', 'b'
    for i in range(1, binary_length(z)):
        if z & (1 << i):
            u = v + u
        else:
            v = u + v
    return u if z & 1 else v

def fibonacci_word(n):
    return unfold(('b', 'a'), lambda w: w[1] + w[0], n)

def rabbit_sequence(n):
    return unfold(('a', 'b'), lambda w: w[1] + w[0], n)

def fib_lz77(n):
    '''Palindromic LZ77 factorization of the Fibonacci words.'''
    return unfold(('a', 'b', 'aa'), lambda w: w[1] + w[0] + w[1], n)

def fib_lzl(n):
    '''l-factorization of the Fibonacci words.'''
    bases = ('a', 'b', 'a', 'aba', 'baaba')
    return unfold(bases, lambda w: w[-2] + w[-1], n)

def prepend(generator, prefix):
    def prepended(n):
        return prefix + generator(n)
    return prepended

def append(generator, suffix):
    def appended(n):
        return generator(n) + suffix
    return appended

GENERATORS = {
    'b' : int_to_string,
    'f' : fibonacci_word,
    'r' : rabbit_sequence,
    'l' : fib_lzl,
    's' : int_to_standard_word,
    '7' : fib_lz77
}

def get_generator(name, prefix = '', suffix = ''):
    '''Looks up a generator by its first letter and decorates it. Returns
    None for unknown names.'''
    generator = GENERATORS.get(name[:1])
    if generator is None:
        return None
    if suffix:
        generator = append(generator, suffix)
    if prefix:
        generator = prepend(generator, prefix)
    return generator
