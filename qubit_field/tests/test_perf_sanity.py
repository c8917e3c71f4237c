# qubit_field/tests/test_perf_sanity.py
import time

import numpy as np

from qubit_field.circuit import Circuit

def build_chain(depth):
    c = Circuit.empty()
    for _ in range(depth):
        c.h().t().s().y()
    return c

def test_bench_runs_and_times():
    c = build_chain(250)   # 1000 gates, quick everywhere
    t0 = time.perf_counter()
    s1 = c.run(backend="serial")
    t1 = time.perf_counter() - t0

    t0 = time.perf_counter()
    s2 = c.run(backend="numpy")
    t2 = time.perf_counter() - t0

    # correctness; norm was already checked by run()
    assert np.allclose(s1.as_numpy(), s2.as_numpy(), atol=1e-9, rtol=0)
    # sanity: both timings are positive; no speed assertion (machines vary)
    assert t1 > 0 and t2 > 0
