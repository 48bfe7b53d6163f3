"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from rdl_summary.core.config import AppSettings

log = logging.getLogger(__name__)

_LOG_LEVELS = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"})


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_log_level(settings)
    _check_store(settings)
    _check_disclosure(settings)


def _check_log_level(settings: AppSettings) -> None:
    level = settings.observability.log_level.upper()
    if level not in _LOG_LEVELS:
        raise ValueError(
            f"RDL_OBSERVABILITY_LOG_LEVEL={settings.observability.log_level!r} is not a valid level. "
            f"Use one of: {', '.join(sorted(_LOG_LEVELS))}."
        )


def _check_store(settings: AppSettings) -> None:
    if settings.store.max_entries <= 0:
        raise ValueError(
            f"RDL_STORE_MAX_ENTRIES must be positive, got {settings.store.max_entries}."
        )


def _check_disclosure(settings: AppSettings) -> None:
    """Warn when condition detail will be rendered for incomplete packets."""
    if not settings.disclosure.suppress_unconfirmed_conditions:
        log.warning(
            "RDL_DISCLOSURE_SUPPRESS_UNCONFIRMED_CONDITIONS=false. "
            "Condition detail will be rendered even when the evidence packet is incomplete."
        )
