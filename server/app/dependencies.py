from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import get_settings
from .services.number_analysis import NumberAnalysisService

settings = get_settings()

# Shared rate limiter; registered on app.state in main.py
limiter = Limiter(key_func=get_remote_address)


def get_analysis_service() -> NumberAnalysisService:
    """
    Dependency providing a NumberAnalysisService configured from settings.

    A fresh service per request keeps computations independent.
    """
    return NumberAnalysisService()
