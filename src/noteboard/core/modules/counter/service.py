import structlog

from noteboard.config import Config
from noteboard.core.core import Service
from noteboard.core.modules.counter.models import Counter, CounterType

logger = structlog.get_logger(__name__)


class CounterService(Service):
    """Service for managing auto-incrementing counters per entity type."""

    def __init__(self, config: Config) -> None:
        super().__init__(config)
        self._counters: dict[CounterType, Counter] = {}

    def on_start(self) -> None:
        logger.debug(
            "counter_service_started",
            **{counter_type.value: self.get_current_sequence(counter_type) for counter_type in CounterType},
        )

    def on_stop(self) -> None:
        logger.debug(
            "counter_service_stopped",
            **{counter_type.value: self.get_current_sequence(counter_type) for counter_type in CounterType},
        )

    def get_next_sequence(self, counter_type: CounterType) -> int:
        """Increment and return the next sequence number for a type."""
        counter = self._counters.setdefault(counter_type, Counter(counter_type=counter_type))
        counter.seq += 1
        return counter.seq

    def get_current_sequence(self, counter_type: CounterType) -> int:
        """Get the current sequence number without incrementing."""
        counter = self._counters.get(counter_type)
        if counter:
            return counter.seq
        return 0
