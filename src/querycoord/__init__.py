"""Metadata broker between a query node and its coordination authorities."""

from .bootstrap import create_broker
from .broker import CoordinatorBroker
from .errors import (
    BrokerError,
    CollectionNotFound,
    EntityNotFound,
    IndexNotFound,
    MissingCapability,
    PartitionNotFound,
    RemoteCallFailed,
    RemoteOperationFailed,
    SegmentNotFound,
)

__version__ = "0.1.0"

__all__ = [
    "CoordinatorBroker",
    "create_broker",
    "BrokerError",
    "CollectionNotFound",
    "EntityNotFound",
    "IndexNotFound",
    "MissingCapability",
    "PartitionNotFound",
    "RemoteCallFailed",
    "RemoteOperationFailed",
    "SegmentNotFound",
]
