"""Fixtures for module tests running the CLI over launch directories."""

import json
from pathlib import Path

import pytest


def write_result(directory: Path, data: dict[str, object]) -> None:
    """Write one result file named after its uid."""
    (directory / f"{data['uid']}-result.json").write_text(json.dumps(data))


@pytest.fixture
def checkout_launch(tmp_path: Path) -> Path:
    """Launch of checkout tests with rules for null pointer failures."""
    launch = tmp_path / "checkout"
    launch.mkdir()
    (launch / "categories.json").write_text(
        json.dumps(
            [
                {
                    "name": "Null pointers",
                    "matchedStatuses": ["failed", "broken"],
                    "messageRegex": "NPE.*",
                },
                {"name": "Flaky tests", "flaky": True},
            ]
        )
    )
    write_result(
        launch,
        {
            "uid": "cart-add",
            "name": "add to cart",
            "status": "failed",
            "statusMessage": "NPE at line 5",
            "statusDetails": {"message": "NPE at line 5\nat Cart.add", "flaky": False},
            "time": {"start": 200, "stop": 210, "duration": 10},
            "labels": [
                {"name": "epic", "value": "Checkout"},
                {"name": "feature", "value": "Cart"},
                {"name": "story", "value": "Add item"},
            ],
        },
    )
    write_result(
        launch,
        {
            "uid": "pay-card",
            "name": "pay by card",
            "status": "broken",
            "statusMessage": "Timeout",
            "statusDetails": {"message": "Timeout", "flaky": True},
            "time": {"start": 100, "stop": 150, "duration": 50},
            "labels": [
                {"name": "epic", "value": "Checkout"},
                {"name": "feature", "value": "Payment"},
            ],
        },
    )
    write_result(
        launch,
        {
            "uid": "pay-cash",
            "name": "pay by cash",
            "status": "passed",
            "time": {"start": 300, "stop": 301, "duration": 1},
            "labels": [
                {"name": "epic", "value": "Checkout"},
                {"name": "feature", "value": "Payment"},
            ],
        },
    )
    return launch


@pytest.fixture
def login_launch(tmp_path: Path) -> Path:
    """Launch of login tests without any categories file."""
    launch = tmp_path / "login"
    launch.mkdir()
    write_result(
        launch,
        {
            "uid": "login-ok",
            "name": "login works",
            "status": "failed",
            "statusMessage": "expected 200",
            "statusDetails": {"message": "expected 200"},
            "time": {"start": 50},
        },
    )
    return launch
