"""utils/bench.py"""
import logging
import math
import time

import numpy as np

from config.config import BENCH_CONFIG

logger = logging.getLogger(__name__)


def bench(func, target_ms=None, min_ms=None, runs=None, initial_loops=None):
    """
    测量 func 的吞吐量（次/毫秒）
    每轮调用 loops 次，按 target_ms / dt 调整下一轮的 loops；
    耗时低于 min_ms 的轮次只用来调整 loops，不计入结果
    """
    target_ms = BENCH_CONFIG['target_ms'] if target_ms is None else target_ms
    min_ms = BENCH_CONFIG['min_ms'] if min_ms is None else min_ms
    runs = BENCH_CONFIG['runs'] if runs is None else runs
    loops = BENCH_CONFIG['initial_loops'] if initial_loops is None else initial_loops

    rates = []
    while len(rates) < runs:
        count = int(math.ceil(loops))
        t0 = time.perf_counter()
        for _ in range(count):
            func()
        dt = (time.perf_counter() - t0) * 1000
        logger.debug(f"{count} loops in {dt:.2f} ms")

        if dt > min_ms:
            rates.append(count / dt)
        if dt > 0:
            loops *= target_ms / dt
        else:
            loops *= 1000

    return float(np.mean(rates))


def benchmark_parse(formula=None, **kwargs):
    """解析吞吐量"""
    from expression import Expression
    formula = formula or BENCH_CONFIG['parse_formula']
    return bench(lambda: Expression(formula), **kwargs)


def benchmark_eval(formula=None, bindings=None, **kwargs):
    """求值吞吐量：先替换变量，计时部分只做栈求值"""
    from expression import Expression
    formula = formula or BENCH_CONFIG['eval_formula']
    expr = Expression(formula).substitute(bindings or {'x': math.e})
    return bench(expr.eval, **kwargs)
