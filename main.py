"""主程序入口 - 表达式求值 / 求根 / 采样命令行"""
import argparse
import logging
import sys

from config.config import SOLVER_CONFIG, SAMPLER_CONFIG, BENCH_CONFIG, CLI_CONFIG, validate_config
from core import ExpressionError, list_functions
from expression import Expression
from utils.bench import benchmark_parse, benchmark_eval

logger = logging.getLogger(__name__)


def parse_binding(text):
    """'x=2.5' -> ('x', 2.5)"""
    name, sep, value = text.partition('=')
    name = name.strip()
    if not sep or len(name) != 1 or not name.isalpha():
        raise argparse.ArgumentTypeError(f"Binding must look like x=1.5, got '{text}'")
    try:
        return name, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Binding value is not a number: '{text}'")


def _bindings(args):
    return dict(args.var or [])


def cmd_eval(args):
    expr = Expression(args.expression)
    logger.info(f"Evaluating {expr.label()}")
    print(expr.eval(_bindings(args)))


def cmd_solve(args):
    expr = Expression(args.expression)
    root = expr.solve(args.variable, args.iterations, args.low, args.high,
                      bindings=_bindings(args), check_bracket=args.check_bracket)
    logger.info(f"Root of {expr.label()} in [{args.low}, {args.high}]: {root}")
    print(root)


def cmd_sample(args):
    expr = Expression(args.expression)
    high = args.high
    if args.plot:
        # 绘图折线：右端多采样一段
        high += SAMPLER_CONFIG['plot_padding']
    step = args.step
    if step is None and args.plot:
        step = SAMPLER_CONFIG['plot_step']

    series = expr.sample_series(args.variable, args.low, high, step, bindings=_bindings(args))
    logger.info(f"Sampled {len(series)} points of {expr.label()}")

    if args.output_path:
        logger.info(f"Saving samples to {args.output_path}")
        series.to_frame(name='y').to_csv(args.output_path)
    else:
        print(series.to_string())


def cmd_min(args):
    expr = Expression(args.expression)
    x, value = expr.nmin(args.variable, args.low, args.high, args.step, bindings=_bindings(args))
    print(f"{args.variable} = {x}, min = {value}")


def cmd_nsolve(args):
    expr = Expression(args.expression)
    x, error = expr.nsolve(args.variable, args.value, args.low, args.high, args.step,
                           bindings=_bindings(args))
    print(f"{args.variable} = {x}, error = {error}")


def cmd_functions(args):
    for name, arity in sorted(list_functions().items()):
        print(f"{name}/{arity}")


def cmd_bench(args):
    # min_ms 必须小于 target_ms，否则永远凑不够有效轮次
    kwargs = {
        'target_ms': args.target_ms,
        'min_ms': min(BENCH_CONFIG['min_ms'], args.target_ms / 10),
        'runs': args.runs,
    }
    parse_rate = benchmark_parse(args.parse_formula, **kwargs)
    eval_rate = benchmark_eval(args.eval_formula, **kwargs)
    print(f"parse: {parse_rate:.2f} ops/ms")
    print(f"eval:  {eval_rate:.2f} ops/ms")


def build_parser():
    parser = argparse.ArgumentParser(description="Infix expression engine")
    parser.add_argument(
        "--log_level",
        type=str,
        default=CLI_CONFIG['log_level'],
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (DEBUG prints infix/postfix tokens)"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common(sub, interval=True):
        sub.add_argument("expression", type=str, help="Infix expression, e.g. '(x-1)^2+3'")
        sub.add_argument(
            "--var",
            type=parse_binding,
            action="append",
            help="Variable binding such as x=2 (repeatable)"
        )
        if interval:
            sub.add_argument("--variable", type=str, default="x", help="Variable to vary")
            sub.add_argument("--low", type=float, default=CLI_CONFIG['default_low'], help="Interval start")
            sub.add_argument("--high", type=float, default=CLI_CONFIG['default_high'], help="Interval end")

    sub = subparsers.add_parser("eval", help="Evaluate an expression")
    add_common(sub, interval=False)
    sub.set_defaults(func=cmd_eval)

    sub = subparsers.add_parser("solve", help="Find a root by bisection")
    add_common(sub)
    sub.add_argument("--iterations", type=int, default=SOLVER_CONFIG['iterations'], help="Maximum iterations")
    sub.add_argument(
        "--check_bracket",
        action="store_true",
        help="Fail when f(low) and f(high) have the same sign"
    )
    sub.set_defaults(func=cmd_solve)

    sub = subparsers.add_parser("sample", help="Sample an expression over an interval")
    add_common(sub)
    sub.add_argument("--step", type=float, default=None, help="Step (default (high-low)/1000)")
    sub.add_argument("--plot", action="store_true", help="Use the grapher's step and padding")
    sub.add_argument("--output_path", type=str, default=None, help="Save samples as CSV")
    sub.set_defaults(func=cmd_sample)

    sub = subparsers.add_parser("min", help="Minimize over a sampled interval")
    add_common(sub)
    sub.add_argument("--step", type=float, default=None, help="Step (default (high-low)/1000)")
    sub.set_defaults(func=cmd_min)

    sub = subparsers.add_parser("nsolve", help="Solve f(x) = value over a sampled interval")
    add_common(sub)
    sub.add_argument("--value", type=float, default=0.0, help="Target value")
    sub.add_argument("--step", type=float, default=None, help="Step (default (high-low)/1000)")
    sub.set_defaults(func=cmd_nsolve)

    sub = subparsers.add_parser("functions", help="List available functions")
    sub.set_defaults(func=cmd_functions)

    sub = subparsers.add_parser("bench", help="Measure parse and eval throughput")
    sub.add_argument("--parse_formula", type=str, default=BENCH_CONFIG['parse_formula'])
    sub.add_argument("--eval_formula", type=str, default=BENCH_CONFIG['eval_formula'])
    sub.add_argument("--target_ms", type=float, default=BENCH_CONFIG['target_ms'])
    sub.add_argument("--runs", type=int, default=BENCH_CONFIG['runs'])
    sub.set_defaults(func=cmd_bench)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format=CLI_CONFIG['log_format']
    )
    validate_config()

    try:
        args.func(args)
    except ExpressionError as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1
    except ValueError as e:
        logger.error(f"Invalid argument: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
