"""Classic recursive algorithms: factorials, combinations, Fibonacci,
powers, the exponential Taylor series and the Tower of Hanoi."""

from __future__ import annotations

__all__ = [
    "factorial",
    "combinations",
    "combinations_pascal",
    "fibonacci_iterative",
    "fibonacci_recursive",
    "fibonacci_memo",
    "natural_sum",
    "natural_sum_formula",
    "power",
    "fast_power",
    "taylor_exp_terms",
    "taylor_exp_incremental",
    "taylor_exp_horner",
    "taylor_exp_loop",
    "tower_of_hanoi",
]


def _require_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def factorial(n: int) -> int:
    """Return ``n!`` computed recursively."""
    _require_non_negative("n", n)
    if n == 0:
        return 1
    return factorial(n - 1) * n


def _check_choose(n: int, r: int) -> None:
    _require_non_negative("r", r)
    if r > n:
        raise ValueError(f"r must not exceed n, got n={n}, r={r}")


def combinations(n: int, r: int) -> int:
    """Return ``nCr`` using ``n! / (r! * (n - r)!)``."""
    _check_choose(n, r)
    return factorial(n) // (factorial(r) * factorial(n - r))


def combinations_pascal(n: int, r: int) -> int:
    """Return ``nCr`` by recursing over Pascal's triangle."""
    _check_choose(n, r)
    if r == 0 or n == r:
        return 1
    return combinations_pascal(n - 1, r - 1) + combinations_pascal(n - 1, r)


def fibonacci_iterative(n: int) -> int:
    """Return the ``n``-th Fibonacci number with a loop.

    The loop starts at 2, so for ``n < 2`` it does not run and 0 is returned.
    """
    result = 0
    previous, current = 0, 1
    for _ in range(2, n + 1):
        result = previous + current
        previous, current = current, result
    return result


def fibonacci_recursive(n: int) -> int:
    """Return the ``n``-th Fibonacci number by plain recursion."""
    if n <= 1:
        return n
    return fibonacci_recursive(n - 1) + fibonacci_recursive(n - 2)


def fibonacci_memo(n: int, memo: dict[int, int] | None = None) -> int:
    """Return the ``n``-th Fibonacci number, caching results in ``memo``."""
    if memo is None:
        memo = {}
    if n <= 1:
        memo[n] = n
        return n
    for k in (n - 1, n - 2):
        if k not in memo:
            memo[k] = fibonacci_memo(k, memo)
    return memo[n - 1] + memo[n - 2]


def natural_sum(n: int) -> int:
    """Return ``1 + 2 + ... + n`` recursively; ``n`` must be at least 1."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n == 1:
        return 1
    return natural_sum(n - 1) + n


def natural_sum_formula(n: int) -> int:
    """Return ``1 + 2 + ... + n`` using ``n * (n + 1) / 2``."""
    return n * (n + 1) // 2


def power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` with one multiplication per step."""
    _require_non_negative("exponent", exponent)
    if exponent == 0:
        return 1
    return power(base, exponent - 1) * base


def fast_power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` by repeated squaring."""
    _require_non_negative("exponent", exponent)
    if exponent == 0:
        return 1
    if exponent % 2 == 0:
        return fast_power(base * base, exponent // 2)
    return base * fast_power(base * base, (exponent - 1) // 2)


def taylor_exp_terms(x: float, n: int) -> float:
    """Approximate ``e**x`` with ``n`` Taylor terms, computing each term afresh."""
    _require_non_negative("n", n)
    if n == 0:
        return 1.0
    return taylor_exp_terms(x, n - 1) + fast_power(x, n) / factorial(n)


def _incremental(x: float, n: int) -> tuple[float, float, int]:
    if n == 0:
        return 1.0, 1, 1
    total, numerator, denominator = _incremental(x, n - 1)
    numerator *= x
    denominator *= n
    return total + numerator / denominator, numerator, denominator


def taylor_exp_incremental(x: float, n: int) -> float:
    """Approximate ``e**x``, carrying the running power and factorial through the recursion."""
    _require_non_negative("n", n)
    return _incremental(x, n)[0]


def _horner(x: float, n: int, acc: float) -> float:
    if n == 0:
        return acc
    return _horner(x, n - 1, 1 + (x / n) * acc)


def taylor_exp_horner(x: float, n: int) -> float:
    """Approximate ``e**x`` recursively with Horner's rule."""
    _require_non_negative("n", n)
    return _horner(x, n, 1.0)


def taylor_exp_loop(x: float, n: int) -> float:
    """Approximate ``e**x`` with Horner's rule in a loop."""
    _require_non_negative("n", n)
    result = 1.0
    for k in range(n, 0, -1):
        result = 1 + (x / k) * result
    return result


def tower_of_hanoi(
    n: int, source: str = "A", spare: str = "B", target: str = "C"
) -> list[tuple[str, str]]:
    """Return the moves that carry ``n`` discs from ``source`` to ``target``."""
    if n < 1:
        raise ValueError(f"n must be at least 1, got {n}")
    if n == 1:
        return [(source, target)]
    return [
        *tower_of_hanoi(n - 1, source, target, spare),
        (source, target),
        *tower_of_hanoi(n - 1, spare, source, target),
    ]