"""Self-describing helpers for the HTTP surface: schemas and defaults."""

from __future__ import annotations

from typing import Any

from ownership_cost.config import DEFAULT_CONSTANTS, OwnershipConfiguration, VehicleFacts


def get_input_schema() -> dict[str, Any]:
    """JSON Schemas for both pipeline inputs."""
    return {
        "facts": VehicleFacts.model_json_schema(),
        "configuration": OwnershipConfiguration.model_json_schema(),
    }


def get_default_configuration() -> dict[str, Any]:
    """Complete default OwnershipConfiguration as a plain dict."""
    return OwnershipConfiguration().model_dump(mode="json")


def get_defaults() -> dict[str, Any]:
    """Default configuration plus the constants tables the engine uses."""
    return {
        "configuration": get_default_configuration(),
        "constants": DEFAULT_CONSTANTS.model_dump(mode="json"),
    }
