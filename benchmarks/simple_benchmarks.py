from timeit import timeit

from eta.interpreter import Interpreter
from eta.evaluation.evaluator import evaluate
from eta.reader.parser import parse
from eta.types.environment import Environment
from eta.types.symbol import Symbol


def time_interpreter(setup: str, code: str, rounds: int) -> float:
    """Time the evaluator only: parse once and repeatedly evaluate the same form."""
    itp = Interpreter(prelude=setup)
    [expr] = parse(code)
    # Warmup
    evaluate(expr, itp.env)
    # Timed
    return timeit(lambda: evaluate(expr, itp.env), number=rounds)


# Environment lookup chain (does not involve the evaluator)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.define(key, 42.0)
    env = root
    for _ in range(n_envs):
        env = Environment(outer=env)
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    return timeit(lambda: env.lookup(key), number=n_lookups)


LAMBDA_APPLY_CODE = "((lambda (x y) (+ x y)) 1 2)"

FACT_SETUP = r"""
(let fact (lambda (n acc)
  (cond ((< n 2) acc)
        (#t (fact (- n 1) (* n acc))))))
"""

SUM_SETUP = r"""
(let sum-n (lambda (n acc)
  (cond ((< n 1) acc)
        (#t (sum-n (- n 1) (+ acc n))))))
"""

FIB_SETUP = r"""
(let fib (lambda (x)
  (cond ((< x 2) x)
        (#t (+ (fib (- x 1)) (fib (- x 2)))))))
"""


def _print(name: str, setup: str, code: str, rounds: int) -> None:
    t = time_interpreter(setup, code, rounds)
    print(f"Benchmark: {name}")
    print(f"  interpreter: {t:.6f}s  [rounds={rounds}]")


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    _print("lambda application", "", LAMBDA_APPLY_CODE, rounds=20000)
    _print("tail recursion (factorial)", FACT_SETUP, "(fact 100 1)", rounds=500)
    _print("arithmetic sum 1..100000 (tail-rec)", SUM_SETUP, "(sum-n 100000 0)", rounds=3)
    _print("tree recursion (fib 18)", FIB_SETUP, "(fib 18)", rounds=3)
