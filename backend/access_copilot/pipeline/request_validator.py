from access_copilot.errors import ValidationError
from access_copilot.schemas import AnalysisRequest

REQUIRED_FIELDS = ("callType", "notes")


def validate_analysis_request(request: AnalysisRequest) -> AnalysisRequest:
    """Presence check only. No length or content rules."""
    for field_name in REQUIRED_FIELDS:
        if not getattr(request, field_name):
            raise ValidationError()
    return request
