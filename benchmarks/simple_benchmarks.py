from timeit import timeit

from sable.evaluation.evaluator import evaluate
from sable.reader.parser import read, read_all
from sable.types.environment import Environment
from sable.types.values import Integer, Symbol


def time_read(code: str, rounds: int) -> float:
    """Time the reader alone on one source string."""
    # Warmup
    read_all(code)
    return timeit(lambda: read_all(code), number=rounds)


def time_evaluate(code: str, rounds: int) -> float:
    """Parse once, then repeatedly evaluate the same datum in a fresh session env."""
    env = Environment()
    env.bind(Symbol("x"), Integer(1))
    expr = read(code)
    evaluate(env, expr)
    return timeit(lambda: evaluate(env, expr), number=rounds)


# Environment lookup chain (no reader involved)

def bench_lookup_chain(n_envs: int = 1000, n_lookups: int = 10000) -> float:
    # Build an environment chain with a binding at the root
    root = Environment()
    key = Symbol("answer")
    root.bind(key, Integer(42))
    env = root
    for _ in range(n_envs):
        env = env.extend()
    # Warmup
    for _ in range(1000):
        env.lookup(key)
    # Timed
    t = timeit(lambda: env.lookup(key), number=n_lookups)
    return t


RADIX_CODE = " ".join(f"#x{n:x} #b{n:b} #o{n:o} {n}" for n in range(0, 5000, 7))

NESTED_CODE = "'" + "(a #(1 \"two\" #\\3) " * 50 + ")" * 50

QUASIQUOTE_CODE = "`(1 ,x ,@'(2 3) #(,x ,x) (nested `(,,x)))"


if __name__ == "__main__":
    print("Benchmark: environment lookup chain (pure Python env lookup)")
    print(f"  time: {bench_lookup_chain():.6f}s")

    print("Benchmark: reader")
    print(f"  radix literals: {time_read(RADIX_CODE, rounds=50):.6f}s  [rounds=50]")
    print(f"  nested data:    {time_read(NESTED_CODE, rounds=2000):.6f}s  [rounds=2000]")

    print("Benchmark: evaluator")
    print(f"  quote:          {time_evaluate(NESTED_CODE, rounds=20000):.6f}s  [rounds=20000]")
    print(f"  quasiquote:     {time_evaluate(QUASIQUOTE_CODE, rounds=20000):.6f}s  [rounds=20000]")
