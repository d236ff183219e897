"""Export/import of the whole app-state document as JSON text.

The document is the PersistedAppState shape with camelCase keys. Unset
optional fields are left out, except ``userProfile`` which is always present
(null when there is no profile).
"""

from __future__ import annotations

import json

from workout_logger.schemas.state import PersistedAppState


def export_state(state: PersistedAppState, indent: int | None = 2) -> str:
    data = state.model_dump(mode="json", by_alias=True, exclude_none=True)
    data.setdefault("userProfile", None)
    return json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)


def import_state(text: str) -> PersistedAppState:
    """Parse exported text. Raises pydantic.ValidationError on malformed input.

    Only structure is checked: dangling or duplicate ids are accepted.
    """
    return PersistedAppState.model_validate_json(text)
