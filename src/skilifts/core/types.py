"""Type aliases and key constants used across the SkiLifts service."""

from __future__ import annotations

from typing import Any

JsonDict = dict[str, Any]

STATIC_METADATA = "Static Data"
RESORT_LIFT = "Resort Data"
