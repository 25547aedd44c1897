from .client import (
    OracleClient,
    OracleCreditsExhaustedError,
    OracleError,
    OracleRateLimitError,
)
from .parse import extract_json_object
from .request import AnalysisRequest

__all__ = [
    "AnalysisRequest",
    "OracleClient",
    "OracleError",
    "OracleRateLimitError",
    "OracleCreditsExhaustedError",
    "extract_json_object",
]
