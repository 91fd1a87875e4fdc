"""Small number exercises: divisibility, primes, digit tricks and arithmetic."""

from __future__ import annotations

import math
import operator
import random
from typing import Callable, Optional, Sequence

MODULUS = 1_000_000_007
SIEVE_LIMIT = 2_000_000

_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}
_MENU = {1: "+", 2: "-", 3: "*", 4: "/"}


def clock_add(a: int, b: int) -> int:
    """Add two numbers on a 12-hour clock face."""
    return (a + b) % 12


def is_even(n: int) -> bool:
    return n % 2 == 0


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def is_prime(n: int) -> bool:
    """Trial division up to the square root of ``n``."""
    if n < 2:
        return False
    return all(n % d for d in range(2, math.isqrt(n) + 1))


def primes_in_interval(a: int, b: int) -> list[int]:
    """Primes between ``a`` and ``b`` inclusive; the bounds may come in either order."""
    if a == 1 or b == 1:
        raise ValueError("1 is neither prime nor composite; give a range excluding 1")
    low, high = sorted((a, b))
    return [n for n in range(low, high + 1) if is_prime(n)]


def _digits(n: int) -> list[int]:
    return [int(ch) for ch in str(abs(n))]


def is_armstrong(n: int) -> bool:
    """True if ``n`` equals the sum of its digits each raised to the digit count."""
    if n < 0:
        return False
    digits = _digits(n)
    return n == sum(d ** len(digits) for d in digits)


def is_neon(n: int) -> bool:
    """True if the digits of ``n * n`` add up to ``n``."""
    return sum(_digits(n * n)) == n


def gcd(a: int, b: int) -> int:
    while b:
        a, b = b, a % b
    return a


def lcm(a: int, b: int) -> int:
    divisor = gcd(a, b)
    if divisor == 0:
        raise ValueError("lcm is undefined for 0 and 0")
    return a * b // divisor


def factorial(n: int) -> int:
    if n < 0:
        raise ValueError("factorial is defined for non-negative integers only")
    return math.prod(range(2, n + 1))


def power(base: int, exponent: int) -> int:
    """``base`` multiplied by itself ``exponent`` times; 1 when ``exponent`` is not positive."""
    return base**exponent if exponent > 0 else 1


def power_mod(base: int, exponent: int) -> int:
    """``base ** exponent`` modulo 1 000 000 007."""
    if exponent < 0:
        raise ValueError("exponent must be non-negative")
    return pow(base, exponent, MODULUS)


def reverse_number(n: int) -> int:
    """Reverse the decimal digits of ``n``, keeping its sign."""
    reversed_abs = int(str(abs(n))[::-1])
    return -reversed_abs if n < 0 else reversed_abs


def is_happy(n: int) -> bool:
    """True if repeatedly summing the squares of the digits reaches 1."""
    seen: set[int] = set()
    while n != 1 and n not in seen:
        seen.add(n)
        n = sum(d * d for d in _digits(n))
    return n == 1


def century(year: int) -> int:
    if year <= 0:
        raise ValueError("year must be positive")
    return (year + 99) // 100


def quadrant(x: int, y: int) -> Optional[int]:
    """Quadrant number 1-4 of the point, or None when ``x`` is 0 (the origin case)."""
    if x > 0:
        return 1 if y > 0 else 4
    if x < 0:
        return 2 if y > 0 else 3
    return None


def can_form_triangle(a: int, b: int, c: int) -> bool:
    """True if the longest side is shorter than the other two together."""
    longest = max(a, b, c)
    return longest < a + b + c - longest


def fibonacci(n: int) -> list[int]:
    """The first ``n`` Fibonacci numbers, starting 0, 1."""
    result: list[int] = []
    current, following = 0, 1
    for _ in range(n):
        result.append(current)
        current, following = following, current + following
    return result


def fizzbuzz(limit: int = 100) -> list[str]:
    def word(i: int) -> str:
        if i % 15 == 0:
            return "FizzBuzz"
        if i % 3 == 0:
            return "Fizz"
        if i % 5 == 0:
            return "Buzz"
        return str(i)

    return [word(i) for i in range(1, limit + 1)]


def count_primes(n: int) -> int:
    """Number of primes not greater than ``n``, by the sieve of Eratosthenes."""
    if n > SIEVE_LIMIT:
        raise ValueError(f"n must not exceed {SIEVE_LIMIT}")
    if n < 2:
        return 0
    sieve = bytearray([1]) * (n + 1)
    sieve[0] = sieve[1] = 0
    for i in range(2, math.isqrt(n) + 1):
        if sieve[i]:
            sieve[i * i :: i] = bytes(len(range(i * i, n + 1, i)))
    return sum(sieve)


def calculate(a: float, op: str | int, b: float) -> float:
    """Apply ``+ - * /`` (or menu choice 1-4) to two numbers."""
    symbol = _MENU.get(op, op) if isinstance(op, int) else op
    try:
        func = _OPERATORS[symbol]
    except KeyError:
        raise ValueError(f"operator is not correct: {op!r}") from None
    return func(a, b)


def total(*args: int) -> int:
    return sum(args)


def average(*args: int) -> int:
    """Integer average, truncated towards zero."""
    if not args:
        raise ValueError("average needs at least one value")
    s = sum(args)
    quotient = abs(s) // len(args)
    return quotient if s >= 0 else -quotient


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """The smallest and the largest value."""
    if not values:
        raise ValueError("min_max needs at least one value")
    return min(values), max(values)


def matrix_multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> list[list[int]]:
    if not a or not b:
        raise ValueError("matrices must not be empty")
    inner = len(b)
    if any(len(row) != inner for row in a):
        raise ValueError("columns of the first matrix must equal rows of the second")
    width = len(b[0])
    if any(len(row) != width for row in b):
        raise ValueError("second matrix is not rectangular")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def random_in_range(n: int) -> int:
    """A uniformly chosen integer in ``[1, n]``."""
    if n < 1:
        raise ValueError("n must be at least 1")
    return random.randint(1, n)