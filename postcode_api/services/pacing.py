import time
import logging
from typing import Optional

from postcode_api.config import settings

logger = logging.getLogger(__name__)


class RequestPacer:
    """Fixed delay applied before each upstream lookup. A delay of 0 disables it."""

    def __init__(self, delay_seconds: Optional[float] = None):
        if delay_seconds is None:
            delay_seconds = settings.REQUEST_DELAY
        self.delay_seconds = max(0.0, float(delay_seconds))

    @property
    def enabled(self) -> bool:
        return self.delay_seconds > 0

    def wait(self) -> None:
        if not self.enabled:
            return
        logger.debug(f"Pacing upstream request by {self.delay_seconds:.2f}s")
        time.sleep(self.delay_seconds)
