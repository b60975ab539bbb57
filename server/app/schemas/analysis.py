from pydantic import BaseModel, Field
from typing import Dict, Optional


class AnalysisRequest(BaseModel):
    number: str = Field(..., description="Raw input as typed by the user (e.g., '360')")


class RenderedAnalysis(BaseModel):
    """Display strings, one per output region."""
    prime_factors: str = Field(..., description="e.g. 'Prime Factorization: {\"2\":1,\"3\":1}'")
    lcm: str = Field(..., description="e.g. 'LCM: 6'")
    factorial: str = Field(..., description="Plain, scientific or error text for the factorial region")
    digit_sum: str = Field(..., description="e.g. 'Sum of Digits: 6'")
    perfect_square: str = Field(..., description="e.g. 'Is Perfect Square: false'")
    exact_factorial: Optional[str] = Field(
        None, description="Exact factorial text behind the disclosure control (abbreviated results only)"
    )


class AnalysisResponse(BaseModel):
    number: str = Field(..., description="The analyzed number")
    prime_factors: Dict[str, int] = Field(..., description="Prime -> exponent, primes ascending")
    lcm: str = Field(..., description="Product of prime^exponent over the factor map")
    factorial: Optional[str] = Field(None, description="Exact n! in decimal, if computed")
    factorial_error: Optional[str] = Field(None, description="Why n! was not computed")
    factorial_is_abbreviated: bool = Field(
        False, description="Whether n! exceeds the scientific-notation threshold"
    )
    digit_sum: int
    is_perfect_square: bool
    display: RenderedAnalysis


class GcdResponse(BaseModel):
    a: int
    b: int
    gcd: int
