"""Nested pydantic-settings configuration for the application.

Each group reads its own ``RDL_<GROUP>_*`` env vars::

    export RDL_OBSERVABILITY_LOG_LEVEL=DEBUG
    export RDL_DISCLOSURE_SUPPRESS_UNCONFIRMED_CONDITIONS=false
"""

from __future__ import annotations

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``RDL_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "RDL_OBSERVABILITY_"}

    service_name: str = "rdl-summary"
    log_level: str = "INFO"
    log_format: Literal["auto", "json", "console"] = "auto"


class DisclosureConfig(BaseSettings):
    """Presentation-side disclosure policy.

    The engine always returns full condition data; renderers consult this
    to decide whether condition detail is shown for unconfirmed packets.

    Env vars use ``RDL_DISCLOSURE_`` prefix.
    """

    model_config = {"env_prefix": "RDL_DISCLOSURE_"}

    suppress_unconfirmed_conditions: bool = True


class StoreConfig(BaseSettings):
    """In-process summary store.

    Env vars use ``RDL_STORE_`` prefix.
    """

    model_config = {"env_prefix": "RDL_STORE_"}

    max_entries: int = 500


class APIConfig(BaseSettings):
    """HTTP API configuration.

    Env vars use ``RDL_API_`` prefix.
    """

    model_config = {"env_prefix": "RDL_API_"}

    title: str = "rdl-summary"
    description: str = "Rating Decision Letter evidence validation and combined rating"
    host: str = "0.0.0.0"
    port: int = Field(default=8080, ge=1, le=65535)


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs."""

    observability: ObservabilityConfig = ObservabilityConfig()
    disclosure: DisclosureConfig = DisclosureConfig()
    store: StoreConfig = StoreConfig()
    api: APIConfig = APIConfig()
