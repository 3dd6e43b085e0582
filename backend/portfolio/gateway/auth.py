# portfolio/gateway/auth.py
import logging
from datetime import datetime, timezone
from typing import List, Optional

from flask_jwt_extended import create_access_token, create_refresh_token, decode_token
from flask_jwt_extended.exceptions import JWTExtendedException
from jwt.exceptions import PyJWTError
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from portfolio.extensions import db
from portfolio.models.user import User
from .base import (
    SIGNED_IN,
    SIGNED_OUT,
    AuthCallback,
    AuthError,
    AuthGateway,
    GatewayError,
    GatewayUnavailable,
    Identity,
    Session,
    Subscription,
)

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def _identity(user: User) -> Identity:
    return Identity(id=user.id, email=user.email, role=user.role)


class SqlAuthClient(AuthGateway):
    """
    Password + JWT auth backed by the ``users`` table.

    One client lives for one request. It starts out holding the session
    carried by the request's bearer token (if any) and notifies listeners
    whenever sign-in, sign-up or sign-out changes it.
    """

    def __init__(self, access_token: Optional[str] = None):
        self._listeners: List[AuthCallback] = []
        self._session: Optional[Session] = None
        self._bearer = access_token

    # -------------------------------------------------
    # Listeners
    # -------------------------------------------------
    def on_auth_change(self, callback: AuthCallback) -> Subscription:
        self._listeners.append(callback)
        return Subscription(self._listeners, callback)

    def _emit(self, event: str, session: Optional[Session]) -> None:
        for callback in list(self._listeners):
            callback(event, session)

    # -------------------------------------------------
    # Token handling
    # -------------------------------------------------
    def _issue_session(self, user: User) -> Session:
        identity = _identity(user)
        claims = {"email": identity.email, "role": identity.role}
        access_token = create_access_token(identity=user.id, additional_claims=claims)
        refresh_token = create_refresh_token(identity=user.id)
        expires_at = datetime.fromtimestamp(decode_token(access_token)["exp"], tz=timezone.utc)
        return Session(
            access_token=access_token,
            refresh_token=refresh_token,
            expires_at=expires_at,
            user=identity,
        )

    def _load_user(self, user_id: str) -> Optional[User]:
        try:
            return db.session.get(User, user_id)
        except OperationalError as exc:
            raise GatewayUnavailable(str(exc.orig)) from exc
        except SQLAlchemyError as exc:
            raise GatewayError(str(exc)) from exc

    def get_user(self, access_token: str) -> Optional[Identity]:
        try:
            claims = decode_token(access_token)
        except (PyJWTError, JWTExtendedException):
            return None

        user = self._load_user(claims["sub"])
        if not user or not user.is_active:
            return None
        return _identity(user)

    # -------------------------------------------------
    # AuthGateway
    # -------------------------------------------------
    def get_session(self) -> Optional[Session]:
        if self._session is not None:
            return self._session

        if not self._bearer:
            return None

        try:
            claims = decode_token(self._bearer)
        except (PyJWTError, JWTExtendedException):
            logger.debug("Ignoring invalid bearer token")
            return None

        user = self._load_user(claims["sub"])
        if not user or not user.is_active:
            return None

        self._session = Session(
            access_token=self._bearer,
            expires_at=datetime.fromtimestamp(claims["exp"], tz=timezone.utc),
            user=_identity(user),
        )
        return self._session

    def sign_in(self, email: str, password: str) -> Session:
        try:
            user = User.query.filter_by(email=email.strip().lower()).first()
        except OperationalError as exc:
            raise GatewayUnavailable(str(exc.orig)) from exc

        if not user or not user.check_password(password):
            raise AuthError("Invalid login credentials")

        if not user.is_active:
            raise AuthError("User account disabled")

        self._session = self._issue_session(user)
        logger.info("User %s signed in", user.id)
        self._emit(SIGNED_IN, self._session)
        return self._session

    def sign_up(self, email: str, password: str) -> Session:
        email = email.strip().lower()
        if "@" not in email:
            raise AuthError("Unable to validate email address: invalid format")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise AuthError(f"Password should be at least {MIN_PASSWORD_LENGTH} characters")

        user = User()
        user.email = email
        user.set_password(password)

        try:
            db.session.add(user)
            db.session.commit()
        except IntegrityError as exc:
            db.session.rollback()
            raise AuthError("User already registered") from exc
        except OperationalError as exc:
            db.session.rollback()
            raise GatewayUnavailable(str(exc.orig)) from exc

        self._session = self._issue_session(user)
        logger.info("User %s signed up", user.id)
        self._emit(SIGNED_IN, self._session)
        return self._session

    def sign_out(self) -> None:
        self._session = None
        self._bearer = None
        self._emit(SIGNED_OUT, None)
