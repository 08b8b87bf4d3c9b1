# Copyright (C) 2021 Björn Lindqvist <bjourne@gmail.com>
#
# Fans the per-text pipeline out over a fixed pool of threads. The
# threads share a cursor over [left, right) and a lock around output;
# everything else a worker builds is private to it.
from concurrent.futures import ThreadPoolExecutor
from sastats.stats import StringStats
from sastats.utils import SP
from threading import Event, Lock

class AtomicCursor:
    '''Hands out each index in [start, stop) exactly once.'''
    def __init__(self, start, stop):
        self._next = start
        self.stop = stop
        self._lock = Lock()

    def claim(self):
        with self._lock:
            if self._next >= self.stop:
                return None
            i = self._next
            self._next += 1
            return i

    def claimed(self, start):
        with self._lock:
            return self._next - start

def map_parallel(generator, left, right, mapto, n_threads):
    '''Calls mapto(i, generator(i)) for every i in [left, right) using
    n_threads threads. The first exception raised by any worker stops
    the others from claiming more indices and is re-raised here.
    Returns the number of indices processed.'''
    cursor = AtomicCursor(left, right)
    failed = Event()

    def runnable():
        while not failed.is_set():
            i = cursor.claim()
            if i is None:
                break
            try:
                mapto(i, generator(i))
            except BaseException:
                failed.set()
                raise

    with ThreadPoolExecutor(max_workers = n_threads) as executor:
        futures = [executor.submit(runnable) for _ in range(n_threads)]
    for future in futures:
        future.result()
    return cursor.claimed(left)

def enumerate_matches(generator, params, predicate, report):
    '''Builds a StringStats for every generated text with index in
    [params.min_limit, params.max_limit) and calls report(index, stats)
    for those satisfying predicate. Reports never interleave. Returns
    the number of reported candidates.'''
    output_lock = Lock()
    n_reported = 0

    def mapto(index, text):
        nonlocal n_reported
        if not text:
            return
        stats = StringStats.from_text(text, params)
        if stats.size() == 0:
            return
        if predicate(stats):
            with output_lock:
                report(index, stats)
                n_reported += 1

    left, right = params.min_limit, params.max_limit
    with SP.section('ENUMERATING', '[%d, %d) with %d threads',
                    (left, right, params.threads)):
        n_examined = map_parallel(generator, left, right, mapto,
                                  params.threads)
        SP.print('Reported %d of %d candidates.', (n_reported, n_examined))
    return n_reported
