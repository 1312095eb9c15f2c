"""Verification of identity tokens issued by Firebase Authentication."""

from __future__ import annotations

import logging
import threading
from typing import Protocol

import firebase_admin
from firebase_admin import auth, credentials

from halluapp.config import Settings
from halluapp.domain.entities import ExternalIdentity
from halluapp.domain.exceptions import AuthenticationError

logger = logging.getLogger(__name__)

FIREBASE_APP_NAME = "halluapp"


class IdentityVerifier(Protocol):
    """Anything able to turn a bearer ID token into verified claims."""

    def verify(self, token: str) -> ExternalIdentity: ...


class FirebaseIdentityVerifier:
    """Verify Firebase ID tokens with the Admin SDK."""

    _lock = threading.Lock()

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    def _get_app(self) -> firebase_admin.App:
        with self._lock:
            try:
                return firebase_admin.get_app(FIREBASE_APP_NAME)
            except ValueError:
                pass

            credential = None
            if self._settings.firebase_credentials_file:
                credential = credentials.Certificate(self._settings.firebase_credentials_file)
            options = {}
            if self._settings.firebase_project_id:
                options["projectId"] = self._settings.firebase_project_id
            logger.info(
                "Initialising Firebase app for project %s",
                self._settings.firebase_project_id or "<from credentials>",
            )
            return firebase_admin.initialize_app(
                credential=credential, options=options, name=FIREBASE_APP_NAME
            )

    def verify(self, token: str) -> ExternalIdentity:
        """Return the identity asserted by ``token`` or raise ``AuthenticationError``."""

        try:
            claims = auth.verify_id_token(token, app=self._get_app())
        except (auth.InvalidIdTokenError, auth.CertificateFetchError, ValueError) as exc:
            logger.warning(
                "Firebase token verification failed for %s...: %s", token[:20], exc
            )
            raise AuthenticationError("Invalid authentication token") from exc

        return ExternalIdentity(
            uid=claims.get("uid") or claims["sub"],
            email=claims.get("email"),
            name=claims.get("name"),
        )


__all__ = ["FirebaseIdentityVerifier", "IdentityVerifier"]
