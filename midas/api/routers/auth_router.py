"""
midas/api/routers/auth_router.py

Sign-in endpoint.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException, status

from midas.logging_utils import log_event
from midas.schemas.auth import ActorResponse, LoginRequest
from midas.services.identity_service import LoginRejectedError, resolve_identity

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=ActorResponse)
def login(body: LoginRequest) -> ActorResponse:
    """
    Resolve the submitted credentials into an identity.

    Raises HTTP 401 if either field is empty.
    """

    try:
        actor = resolve_identity(body.username, body.password)
    except LoginRejectedError as exc:
        log_event(logger, logging.INFO, "login_rejected", username=body.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=exc.to_dict(),
        ) from exc

    log_event(logger, logging.INFO, "login_accepted", actor=actor)
    return ActorResponse.from_actor(actor)
