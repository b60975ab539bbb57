from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import HTMLResponse
from typing import Optional

from ...constants import SHOW_EXACT_FACTORIAL_LABEL
from ...dependencies import get_analysis_service
from ...services.number_analysis import NumberAnalysisService
from ...templates import templates
from ...utils.errors import NumberTheoryError

router = APIRouter()

@router.get("/", response_class=HTMLResponse)
async def calculator(
    request: Request,
    number: Optional[str] = Query(None, description="Raw number entered in the form"),
    service: NumberAnalysisService = Depends(get_analysis_service),
):
    """
    Calculator page.

    Without a number the empty form is shown. Submitting the form reloads the
    page with ?number=...; each submission is computed from scratch, so the
    exact-factorial disclosure always starts hidden. Invalid input shows a
    single inline error and no results.
    """
    rendered = None
    error = None

    if number is not None:
        try:
            result = service.analyze_input(number)
            rendered = service.render(result)
        except NumberTheoryError as e:
            error = str(e)

    return templates.TemplateResponse(request, "public/calculator.html", {
        "number": number or "",
        "rendered": rendered,
        "error": error,
        "show_exact_label": SHOW_EXACT_FACTORIAL_LABEL,
    })
