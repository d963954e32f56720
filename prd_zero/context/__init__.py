# prd_zero/context/__init__.py
"""Answer history and consistency checking."""

from prd_zero.context.consistency import check_consistency
from prd_zero.context.memory import ContextMemory
from prd_zero.context.types import ConsistencyCheck, ContextEntry, ProjectContext

__all__ = ["ConsistencyCheck", "ContextEntry", "ContextMemory", "ProjectContext", "check_consistency"]
