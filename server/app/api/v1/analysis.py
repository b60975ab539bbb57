from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from ...dependencies import get_analysis_service, limiter, settings
from ...schemas.analysis import AnalysisRequest, AnalysisResponse, GcdResponse
from ...services.number_analysis import NumberAnalysisService
from ...utils.errors import NumberTheoryError
from ...utils.number_utils import gcd

router = APIRouter()

@router.post("/analyze", response_model=AnalysisResponse)
@limiter.limit(settings.rate_limit)
async def analyze_number(
    request: Request,
    payload: AnalysisRequest,
    service: NumberAnalysisService = Depends(get_analysis_service),
):
    """
    Analyze a positive integer.

    Returns the prime factorization, the number rebuilt from it, the factorial
    (exact, plus scientific notation when above the threshold), the digit sum
    and whether the number is a perfect square. Large values are returned as
    decimal strings.

    Invalid input (blank, non-integer, zero or too large) returns 400.
    """
    try:
        result = service.analyze_input(payload.number)
    except NumberTheoryError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return service.to_response(result)

@router.get("/gcd", response_model=GcdResponse)
@limiter.limit(settings.rate_limit)
async def greatest_common_divisor(
    request: Request,
    a: int = Query(..., ge=0, description="First non-negative integer"),
    b: int = Query(..., ge=0, description="Second non-negative integer"),
):
    """Greatest common divisor of two non-negative integers (Euclidean algorithm)."""
    return GcdResponse(a=a, b=b, gcd=gcd(a, b))
