"""
Unit tests for number utility functions.

Tests cover:
- Prime factorization and reconstruction
- Factorial, GCD, digit sum, perfect squares
- Scientific-notation formatting
"""
import math

import pytest
from app.utils.errors import DomainError
from app.utils.number_utils import (
    calculate_lcm,
    factorial,
    format_scientific,
    gcd,
    is_perfect_square,
    prime_factorization,
    sum_of_digits,
    validate_integer,
)


class TestPrimeFactorization:
    """Tests for trial-division factorization."""

    def test_small_composites(self):
        """Test factor maps of small composites."""
        assert prime_factorization(6) == {2: 1, 3: 1}
        assert prime_factorization(360) == {2: 3, 3: 2, 5: 1}
        assert prime_factorization(1024) == {2: 10}

    def test_one_has_no_factors(self):
        """Test that 1 gives an empty map."""
        assert prime_factorization(1) == {}

    def test_primes(self):
        """Test that a prime maps to itself with exponent 1."""
        for p in [2, 3, 5, 7, 97, 2147483647]:
            assert prime_factorization(p) == {p: 1}, f"{p} should be prime"

    def test_keys_ascending(self):
        """Test that primes are discovered in increasing order."""
        factors = prime_factorization(2 * 3 ** 2 * 7 * 13 ** 3 * 101)
        assert list(factors) == [2, 3, 7, 13, 101]

    def test_large_prime_cofactor(self):
        """Test a number with a large prime cofactor."""
        assert prime_factorization(2 * 1000000007) == {2: 1, 1000000007: 1}
        assert prime_factorization(999983 ** 2) == {999983: 2}

    def test_product_reconstructs_input(self):
        """Test that prod(p^e) == n for a range of inputs."""
        for n in range(1, 2000):
            product = 1
            for prime, exponent in prime_factorization(n).items():
                product *= prime ** exponent
            assert product == n

    def test_invalid_input_raises_error(self):
        """Test that n < 1 raises DomainError."""
        with pytest.raises(DomainError, match="positive integer"):
            prime_factorization(0)
        with pytest.raises(DomainError):
            prime_factorization(-12)


class TestCalculateLCM:
    """Tests for rebuilding a number from its factor map."""

    def test_empty_map(self):
        """Test the empty-product convention."""
        assert calculate_lcm({}) == 1

    def test_rebuilds_number(self):
        """Test calculate_lcm(prime_factorization(n)) == n."""
        for n in [1, 2, 6, 12, 360, 1001, 65536, 123456789]:
            assert calculate_lcm(prime_factorization(n)) == n

    def test_string_keys(self):
        """Test that map keys given as strings are accepted."""
        assert calculate_lcm({"2": 3, "5": 1}) == 40


class TestFactorial:
    """Tests for factorial."""

    def test_base_cases(self):
        assert factorial(0) == 1
        assert factorial(1) == 1

    def test_known_values(self):
        assert factorial(5) == 120
        assert factorial(6) == 720
        assert factorial(20) == 2432902008176640000

    def test_matches_math_factorial(self):
        """Test large arguments are exact (no recursion limit)."""
        assert factorial(1000) == math.factorial(1000)

    def test_negative_raises_error(self):
        with pytest.raises(DomainError, match="negative"):
            factorial(-1)


class TestGcd:
    """Tests for Euclidean GCD."""

    def test_known_values(self):
        assert gcd(48, 18) == 6
        assert gcd(18, 48) == 6
        assert gcd(17, 5) == 1

    def test_zero_arguments(self):
        assert gcd(7, 0) == 7
        assert gcd(0, 7) == 7
        assert gcd(0, 0) == 0

    def test_matches_math_gcd(self):
        for a in range(0, 60, 7):
            for b in range(0, 60, 5):
                assert gcd(a, b) == math.gcd(a, b)


class TestSumOfDigits:
    """Tests for digit sum."""

    def test_known_values(self):
        assert sum_of_digits(12345) == 15
        assert sum_of_digits(0) == 0
        assert sum_of_digits(6) == 6

    def test_negative_sign_ignored(self):
        assert sum_of_digits(-123) == 6

    def test_big_integer(self):
        assert sum_of_digits(10 ** 50) == 1
        assert sum_of_digits(factorial(100)) == 648


class TestIsPerfectSquare:
    """Tests for perfect-square detection."""

    def test_small_values(self):
        assert is_perfect_square(16)
        assert not is_perfect_square(15)
        assert is_perfect_square(0)
        assert is_perfect_square(1)

    def test_negative(self):
        assert not is_perfect_square(-4)

    def test_beyond_float_precision(self):
        """Test values where a float square root would misclassify."""
        root = 2 ** 53 + 1
        assert is_perfect_square(root * root)
        assert not is_perfect_square(root * root - 1)
        assert not is_perfect_square(root * root + 1)


class TestFormatScientific:
    """Tests for scientific-notation formatting."""

    def test_float_power_of_ten(self):
        assert format_scientific(1e150).startswith("1.00 × 10^150")

    def test_exact_integer(self):
        assert format_scientific(10 ** 150) == "1.00 × 10^150"
        assert format_scientific(factorial(70)) == "1.20 × 10^100"

    def test_mantissa_rounding(self):
        assert format_scientific(123456) == "1.23 × 10^5"
        assert format_scientific(2.5e-3) == "2.50 × 10^-3"

    def test_invalid_values(self):
        with pytest.raises(DomainError):
            format_scientific(0)
        with pytest.raises(DomainError):
            format_scientific(-5)
        with pytest.raises(DomainError):
            format_scientific(float("inf"))


class TestValidateInteger:
    """Tests for integer validation."""

    def test_valid_integers(self):
        assert validate_integer("0")
        assert validate_integer("123")
        assert validate_integer("007")

    def test_invalid_integers(self):
        assert not validate_integer("")
        assert not validate_integer("abc")
        assert not validate_integer("3.14")
        assert not validate_integer("-5")
        assert not validate_integer("1e10")

    def test_non_string_input(self):
        assert not validate_integer(123)
        assert not validate_integer(None)
