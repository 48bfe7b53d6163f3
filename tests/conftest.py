"""Shared fixtures for rdl-summary tests."""

from __future__ import annotations

import copy
from typing import Any

import pytest

from tests.samples import RDL_PAYLOAD


@pytest.fixture
def rdl_payload() -> dict[str, Any]:
    """Decoded extractor output for an RDL with a complete evidence packet.

    Granted 50% and 30% combine to 70%.
    """
    return copy.deepcopy(RDL_PAYLOAD)


@pytest.fixture
def incomplete_payload(rdl_payload: dict[str, Any]) -> dict[str, Any]:
    """Same letter without the C&P exam or statement entries."""
    rdl_payload["evidence"] = [
        "DD Form 214",
        "VA Form 21-526EZ Application for Disability Compensation",
        "Service Treatment Records",
    ]
    return rdl_payload


@pytest.fixture
def not_rdl_payload() -> dict[str, Any]:
    return {"documentType": "Not RDL", "skip": True}
