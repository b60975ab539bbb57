from .analysis import AnalysisRequest, AnalysisResponse, RenderedAnalysis, GcdResponse

__all__ = [
    "AnalysisRequest",
    "AnalysisResponse",
    "RenderedAnalysis",
    "GcdResponse",
]
