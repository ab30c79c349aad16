from lfsr_engine.analysis import analyze
from lfsr_engine.engine import create
from lfsr_engine.polynomials import MAX_SIZE, MIN_SIZE


if __name__ == "__main__":
    print(f"{'n':>3} {'period':>7} {'max':>7} {'ones':>6} {'zeros':>6}  polynomial")
    for n in range(MIN_SIZE, MAX_SIZE + 1):
        r = analyze(create(n, 1))
        period = "-" if r.period is None else str(r.period)
        flag = "" if r.is_maximal else "  (not maximal)"
        print(f"{r.size:>3} {period:>7} {r.max_period:>7} {r.ones:>6} {r.zeros:>6}  {r.polynomial}{flag}")
