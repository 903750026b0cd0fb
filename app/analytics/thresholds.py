"""
Threshold resolution.

Callers may pass nothing, a partial mapping (snake_case or camelCase
keys, as stored by the settings table), a :class:`ThresholdOverrides`
or a full :class:`ThresholdSettings`.  Every analytics entry point
resolves its input once through :func:`resolve_thresholds` so the
default policy lives in a single place.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Optional, Union

from app.schemas.thresholds import ThresholdOverrides, ThresholdSettings

ThresholdsInput = Union[ThresholdSettings, ThresholdOverrides, Mapping[str, Any], None]

DEFAULT_THRESHOLDS = ThresholdSettings()


def resolve_thresholds(thresholds: Optional[ThresholdsInput] = None) -> ThresholdSettings:
    """Return a complete, new :class:`ThresholdSettings`.

    Missing or ``None`` fields fall back to :data:`DEFAULT_THRESHOLDS`.
    The caller's object is never modified.
    """
    if thresholds is None:
        return DEFAULT_THRESHOLDS.model_copy()
    if isinstance(thresholds, ThresholdSettings):
        return thresholds.model_copy()
    if isinstance(thresholds, ThresholdOverrides):
        overrides = thresholds.model_dump(exclude_none=True)
    else:
        overrides = { key: value for key, value in thresholds.items() if value is not None }
    return ThresholdSettings.model_validate(overrides)
