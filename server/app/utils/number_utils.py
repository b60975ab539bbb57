import math
import re
from typing import Dict, Union

from .errors import DomainError

Number = Union[int, float]

_INTEGER_RE = re.compile(r'^\d+$')


def validate_integer(number_str: str) -> bool:
    """Validate that string represents a non-negative integer."""
    if not isinstance(number_str, str):
        return False

    # Check if string contains only digits
    return bool(_INTEGER_RE.match(number_str))


def prime_factorization(n: int) -> Dict[int, int]:
    """
    Factor n by trial division.

    Args:
        n: Positive integer to factor

    Returns:
        Mapping of prime -> exponent, primes in increasing order.
        An empty mapping for n == 1.

    Raises:
        DomainError: If n < 1
    """
    if n < 1:
        raise DomainError("Input must be a positive integer.")

    factors: Dict[int, int] = {}
    divisor = 2

    while n > 1:
        if divisor * divisor > n:
            # Remaining cofactor has no divisor below its square root
            factors[n] = factors.get(n, 0) + 1
            break
        while n % divisor == 0:
            factors[divisor] = factors.get(divisor, 0) + 1
            n //= divisor
        divisor += 1

    return factors


def calculate_lcm(factors: Dict[int, int]) -> int:
    """
    Multiply out a factor map.

    For a map produced by prime_factorization(n) this gives back n; the
    empty map gives 1.
    """
    lcm = 1
    for prime, exponent in factors.items():
        lcm *= int(prime) ** exponent
    return lcm


def factorial(n: int) -> int:
    """Calculate n! iteratively. Raises DomainError for negative n."""
    if n < 0:
        raise DomainError("Factorial is not defined for negative numbers.")

    result = 1
    for k in range(2, n + 1):
        result *= k
    return result


def gcd(a: int, b: int) -> int:
    """Calculate greatest common divisor using Euclidean algorithm."""
    while b:
        a, b = b, a % b
    return a


def sum_of_digits(n: Number) -> int:
    """Sum the decimal digits of n, ignoring the sign and any other non-digit."""
    return sum(int(ch) for ch in str(n) if ch.isdigit())


def is_perfect_square(n: int) -> bool:
    """Check whether n has an integer square root (exact for any size)."""
    if n < 0:
        return False
    root = math.isqrt(n)
    return root * root == n


def format_scientific(value: Number) -> str:
    """
    Format a large positive number as "<mantissa> × 10^<exponent>".

    The exponent is floor(log10(value)) and the mantissa is rounded to two
    decimal places. Integers are handled exactly regardless of size.

    Example:
        >>> format_scientific(10 ** 150)
        '1.00 × 10^150'

    Raises:
        DomainError: If value is not positive and finite
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise DomainError(f"Cannot format non-finite value: {value}")
    if value <= 0:
        raise DomainError(f"Cannot format non-positive value: {value}")

    if isinstance(value, int):
        exponent = len(str(value)) - 1
    else:
        exponent = math.floor(math.log10(value))

    mantissa = value / 10 ** exponent
    return f"{mantissa:.2f} × 10^{exponent}"
