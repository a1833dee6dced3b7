"""Application services shared by commands and queries."""

from makemeacube.application.services.aggregate_merge_service import (
    AggregateMergeService,
)
from makemeacube.application.services.identity_resolver import IdentityResolver

__all__ = ["AggregateMergeService", "IdentityResolver"]
