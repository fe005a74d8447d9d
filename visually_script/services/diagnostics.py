import logging
from typing import Any, Callable, Dict, List, Optional

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

INVALID_YOUTUBE_URL = "invalid-youtube-url"
CSV_WITHOUT_DATA = "csv-without-data"


class Diagnostic(BaseModel):
    code: str
    message: str
    input: Dict[str, Any] = Field(default_factory=dict)


class DiagnosticSink:
    """Collects non-fatal rejections, logs them and forwards them to an optional callback."""

    def __init__(self, callback: Optional[Callable[[Diagnostic], None]] = None):
        self.callback = callback
        self.events: List[Diagnostic] = []

    def emit(self, code: str, message: str, **offending: Any) -> Diagnostic:
        diagnostic = Diagnostic(code=code, message=message, input=offending)
        self.events.append(diagnostic)
        logger.warning(message)
        if self.callback:
            self.callback(diagnostic)
        return diagnostic
