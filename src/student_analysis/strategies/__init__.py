"""
Interchangeable record-filtering strategies.

- TreeStrategy: whole-document tree + dynamic XPath query
- StreamStrategy: forward-only events, one record of state
- DeclarativeStrategy: lazily composed filter predicates

All three return identical results for identical inputs.
"""

import logging
from typing import Dict, List, Optional, Type

from student_analysis.config import AnalysisSettings
from student_analysis.exceptions import UnknownStrategyError
from .base import AnalysisStrategy
from .tree import TreeStrategy
from .stream import StreamStrategy, StreamState, RecordState
from .declarative import DeclarativeStrategy

logger = logging.getLogger(__name__)

STRATEGIES: Dict[str, Type[AnalysisStrategy]] = {
    TreeStrategy.name: TreeStrategy,
    StreamStrategy.name: StreamStrategy,
    DeclarativeStrategy.name: DeclarativeStrategy,
}

# Conventional XML API names for the same algorithms
STRATEGY_ALIASES: Dict[str, str] = {
    'dom': TreeStrategy.name,
    'sax': StreamStrategy.name,
    'linq': DeclarativeStrategy.name,
}


def available_strategies() -> List[str]:
    """Canonical strategy names in registration order."""
    return list(STRATEGIES)


def create_strategy(
    name: str,
    settings: Optional[AnalysisSettings] = None
) -> AnalysisStrategy:
    """
    Create a strategy by name.

    Args:
        name: Canonical name or alias, case-insensitive
            ('tree'/'dom', 'stream'/'sax', 'declarative'/'linq')
        settings: Settings passed to the strategy

    Returns:
        New strategy instance

    Raises:
        UnknownStrategyError: If the name is not registered

    Example:
        >>> create_strategy('SAX')
        StreamStrategy()
    """
    key = name.strip().lower()
    key = STRATEGY_ALIASES.get(key, key)

    if key not in STRATEGIES:
        error_msg = (
            f"Unknown strategy: '{name}'. "
            f"Available: {available_strategies()} "
            f"(aliases: {sorted(STRATEGY_ALIASES)})"
        )
        logger.error(error_msg)
        raise UnknownStrategyError(error_msg)

    return STRATEGIES[key](settings=settings)


__all__ = [
    'AnalysisStrategy',
    'TreeStrategy',
    'StreamStrategy',
    'StreamState',
    'RecordState',
    'DeclarativeStrategy',
    'STRATEGIES',
    'STRATEGY_ALIASES',
    'available_strategies',
    'create_strategy',
]
