"""Site analysis package.

Public API::

    from infsite.analysis import analyze
    analysis = await analyze("example.com")
    analysis.result.about
"""

from infsite.analysis.models import Analysis, AnalysisResult
from infsite.analysis.orchestrator import analyze

__all__ = ["analyze", "Analysis", "AnalysisResult"]
