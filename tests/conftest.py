import os

import pytest

from fontfallback.core.metrics import FontMetrics, load_metrics_from_json
from fontfallback.issues import FontIssue


def get_fixture(name: str) -> str:
    """Get a fixture by name."""
    return os.path.join(os.path.dirname(__file__), "fixtures", name)


@pytest.fixture
def metrics_table() -> dict[str, FontMetrics]:
    """Metrics for Inter and Roboto Slab as published by capsize."""
    return load_metrics_from_json(get_fixture("metrics.json"))


@pytest.fixture
def inter_only_table() -> dict[str, FontMetrics]:
    """Table containing only the sans-serif Inter entry."""
    table = load_metrics_from_json(get_fixture("metrics.json"))
    return {"inter": table["inter"]}


@pytest.fixture
def issues() -> list[FontIssue]:
    """Issue list; pass ``issues.append`` as the sink."""
    return []
