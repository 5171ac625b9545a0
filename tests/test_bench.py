from utils.bench import bench, benchmark_eval, benchmark_parse

FAST = {"target_ms": 2, "min_ms": 0.5, "runs": 1}


def test_bench_counts_calls_per_millisecond():
    calls = []
    rate = bench(lambda: calls.append(1), **FAST)
    assert rate > 0
    assert calls


def test_benchmark_parse_and_eval():
    assert benchmark_parse(**FAST) > 0
    assert benchmark_eval(**FAST) > 0
