"""
Unit Test Fixtures.

Sample result documents and a quiet Rich console shared by the unit tests.
"""

import io
import json
from typing import Any

import pytest
from rich.console import Console

from wolfcli.cli.params import QueryParams


# =============================================================================
# Result Documents
# =============================================================================


@pytest.fixture
def two_pod_document() -> dict[str, Any]:
    """Two pods with one subpod each."""
    return {
        "queryresult": {
            "success": True,
            "numpods": 2,
            "pods": [
                {
                    "title": "Input",
                    "numsubpods": 1,
                    "subpods": [{"plaintext": "integral x^2 dx"}],
                },
                {
                    "title": "Indefinite integral",
                    "numsubpods": 1,
                    "subpods": [{"plaintext": "x^3/3 + constant"}],
                },
            ],
        }
    }


@pytest.fixture
def four_pod_document() -> dict[str, Any]:
    """Four pods, the third with two subpods."""
    return {
        "queryresult": {
            "numpods": 4,
            "pods": [
                {"title": "Input", "numsubpods": 1, "subpods": [{"plaintext": "2 + 2"}]},
                {"title": "Result", "numsubpods": 1, "subpods": [{"plaintext": "4"}]},
                {
                    "title": "Number name",
                    "numsubpods": 2,
                    "subpods": [{"plaintext": "four"}, {"plaintext": "IV"}],
                },
                {"title": "Number line", "numsubpods": 1, "subpods": [{}]},
            ],
        }
    }


@pytest.fixture
def two_pod_body(two_pod_document: dict[str, Any]) -> str:
    """The two-pod document as a response body."""
    return json.dumps(two_pod_document)


# =============================================================================
# Console and Parameters
# =============================================================================


@pytest.fixture
def quiet_console() -> Console:
    """Console writing to an in-memory buffer, no colors."""
    return Console(file=io.StringIO(), width=120, color_system=None, force_terminal=False)


@pytest.fixture
def params() -> QueryParams:
    """Query parameters with built-in defaults."""
    return QueryParams(input="integrate x^2", appid="TEST-APPID")
