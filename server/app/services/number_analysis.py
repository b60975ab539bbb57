"""
Number Analysis Service

Turns one raw user input into a structured result record by running the
number-theory functions in sequence, and renders that record into the
display strings shown in each output region of the calculator page.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..constants import (
    PRIME_FACTORS_LABEL, LCM_LABEL, FACTORIAL_LABEL, FACTORIAL_APPROX_LABEL,
    DIGIT_SUM_LABEL, PERFECT_SQUARE_LABEL, EXACT_FACTORIAL_LABEL,
    INVALID_INPUT_MESSAGE,
)
from ..schemas.analysis import AnalysisResponse, RenderedAnalysis
from ..utils.errors import DomainError, FactorialTooLargeError, InvalidInputError
from ..utils.number_utils import (
    calculate_lcm, factorial, format_scientific, is_perfect_square,
    prime_factorization, sum_of_digits, validate_integer,
)

logger = logging.getLogger(__name__)


@dataclass
class AnalysisResult:
    """Everything computed for one input. Built per request, never stored."""
    number: int
    prime_factors: Dict[int, int] = field(default_factory=dict)
    lcm: int = 1
    factorial: Optional[int] = None
    factorial_error: Optional[str] = None
    factorial_is_abbreviated: bool = False
    digit_sum: int = 0
    is_perfect_square: bool = False


class NumberAnalysisService:
    """Validate input, compute the number's properties and render them."""

    def __init__(
        self,
        scientific_threshold: Optional[int] = None,
        max_input: Optional[int] = None,
        max_factorial_input: Optional[int] = None,
    ):
        # Limits come from config unless given explicitly
        from ..config import get_settings
        settings = get_settings()
        self.scientific_threshold = (
            scientific_threshold if scientific_threshold is not None else settings.scientific_threshold
        )
        self.max_input = max_input if max_input is not None else settings.max_input
        self.max_factorial_input = (
            max_factorial_input if max_factorial_input is not None else settings.max_factorial_input
        )

    def parse_input(self, raw: Optional[str]) -> int:
        """
        Convert raw user input into a positive integer.

        Raises:
            InvalidInputError: If input is blank, not an integer, not positive,
                or larger than max_input
        """
        value = (raw or "").strip()
        if not validate_integer(value):
            logger.debug(f"Rejected input: {raw!r}")
            raise InvalidInputError(INVALID_INPUT_MESSAGE)

        digits = value.lstrip('0') or '0'
        number = int(digits) if len(digits) <= len(str(self.max_input)) else None
        if number == 0:
            logger.debug(f"Rejected non-positive input: {raw!r}")
            raise InvalidInputError(INVALID_INPUT_MESSAGE)
        # Length checked before int(), which refuses very long digit strings
        if number is None or number > self.max_input:
            logger.debug(f"Rejected oversized input: {raw!r}")
            raise InvalidInputError(f"Please enter a positive integer no larger than {self.max_input}.")

        return number

    def analyze(self, number: int) -> AnalysisResult:
        """
        Compute all properties of a positive integer.

        Factorial failures (too large to compute) are recorded on the result
        instead of aborting, so the other values are still shown.

        Raises:
            DomainError: If number < 1
        """
        factors = prime_factorization(number)
        result = AnalysisResult(
            number=number,
            prime_factors=factors,
            lcm=calculate_lcm(factors),
            digit_sum=sum_of_digits(number),
            is_perfect_square=is_perfect_square(number),
        )

        try:
            result.factorial = self._factorial(number)
        except DomainError as e:
            logger.info(f"Factorial skipped for {number}: {e}")
            result.factorial_error = str(e)
        else:
            result.factorial_is_abbreviated = result.factorial > self.scientific_threshold

        logger.info(
            f"Analyzed {number}: {len(factors)} distinct prime(s), "
            f"perfect square={result.is_perfect_square}"
        )
        return result

    def analyze_input(self, raw: Optional[str]) -> AnalysisResult:
        """Parse raw input and analyze it."""
        return self.analyze(self.parse_input(raw))

    def _factorial(self, n: int) -> int:
        if n > self.max_factorial_input:
            raise FactorialTooLargeError(n, self.max_factorial_input)
        return factorial(n)

    @staticmethod
    def render(result: AnalysisResult) -> RenderedAnalysis:
        """Build the display string for each output region."""
        factor_map = json.dumps(
            {str(prime): exponent for prime, exponent in result.prime_factors.items()},
            separators=(',', ':'),
        )

        exact_factorial = None
        if result.factorial_error:
            factorial_text = result.factorial_error
        elif result.factorial_is_abbreviated:
            factorial_text = f"{FACTORIAL_APPROX_LABEL}: {format_scientific(result.factorial)}"
            exact_factorial = f"{EXACT_FACTORIAL_LABEL}: {result.factorial}"
        else:
            factorial_text = f"{FACTORIAL_LABEL}: {result.factorial}"

        return RenderedAnalysis(
            prime_factors=f"{PRIME_FACTORS_LABEL}: {factor_map}",
            lcm=f"{LCM_LABEL}: {result.lcm}",
            factorial=factorial_text,
            digit_sum=f"{DIGIT_SUM_LABEL}: {result.digit_sum}",
            perfect_square=f"{PERFECT_SQUARE_LABEL}: {'true' if result.is_perfect_square else 'false'}",
            exact_factorial=exact_factorial,
        )

    def to_response(self, result: AnalysisResult) -> AnalysisResponse:
        """Convert a result record to the JSON API schema (big values as strings)."""
        return AnalysisResponse(
            number=str(result.number),
            prime_factors={str(p): e for p, e in result.prime_factors.items()},
            lcm=str(result.lcm),
            factorial=str(result.factorial) if result.factorial is not None else None,
            factorial_error=result.factorial_error,
            factorial_is_abbreviated=result.factorial_is_abbreviated,
            digit_sum=result.digit_sum,
            is_perfect_square=result.is_perfect_square,
            display=self.render(result),
        )
