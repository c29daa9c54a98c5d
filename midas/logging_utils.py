"""
midas/logging_utils.py

Structured request-event logging for the API routers.
"""

from __future__ import annotations

import json
import logging
from typing import Any

from midas.domain.identity import Actor

_REDACTED_FIELDS = frozenset({"password"})


def event_payload(event: str, *, actor: Actor | None = None, **fields: Any) -> dict[str, Any]:
    """
    Build the payload for one request event.

    The acting user's name and role are attached when known; credential
    fields are dropped.
    """

    payload: dict[str, Any] = {"event": event}
    if actor is not None:
        payload["username"] = actor.username
        payload["role"] = actor.role.value
    for key, value in fields.items():
        if key not in _REDACTED_FIELDS:
            payload[key] = value
    return payload


def log_event(
    logger: logging.Logger,
    level: int,
    event: str,
    *,
    actor: Actor | None = None,
    **fields: Any,
) -> None:
    """
    Emit one request event as a compact JSON line.
    """

    if not logger.isEnabledFor(level):
        return
    payload = event_payload(event, actor=actor, **fields)
    logger.log(level, json.dumps(payload, default=str, sort_keys=True))
