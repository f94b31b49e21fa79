# Broker Layer - Metadata lookups against the coordination authorities

from .coordinator_broker import CoordinatorBroker
from .status_mapper import classify_status, status_to_error
from .transforms import flatten_segment_index_infos

__all__ = ["CoordinatorBroker", "classify_status", "status_to_error", "flatten_segment_index_infos"]
