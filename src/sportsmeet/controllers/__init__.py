from sportsmeet.controllers.classifier import classify
from sportsmeet.controllers.eligibility import (
    category_group_key,
    eligible_pool,
    group_keys,
    pool_for_group,
)
from sportsmeet.controllers.lifecycle import MatchLifecycleController
from sportsmeet.controllers.registry import ParticipantRegistry
from sportsmeet.controllers.scheduler import (
    AutoScheduleResult,
    ManualSelection,
    MatchScheduler,
)
from sportsmeet.controllers.status import sport_statuses, status_of

__all__ = [
    "AutoScheduleResult",
    "ManualSelection",
    "MatchLifecycleController",
    "MatchScheduler",
    "ParticipantRegistry",
    "category_group_key",
    "classify",
    "eligible_pool",
    "group_keys",
    "pool_for_group",
    "sport_statuses",
    "status_of",
]
