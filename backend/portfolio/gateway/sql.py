# portfolio/gateway/sql.py
import logging
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Dict, Iterator, List, Optional, Sequence

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError

from portfolio.extensions import db
from portfolio.models import (
    BlogPost,
    ContactMessage,
    Donation,
    PageView,
    Project,
    Service,
    ServicePurchase,
    Setting,
)
from portfolio.utils.audit import log_action
from portfolio.utils.media import save_file
from portfolio.utils.transaction import transactional
from .auth import SqlAuthClient
from .base import (
    ConstraintViolation,
    Gateway,
    GatewayError,
    GatewayUnavailable,
    RecordNotFound,
)
from .functions import FUNCTIONS

logger = logging.getLogger(__name__)

TABLES = {
    "projects": Project,
    "blog_posts": BlogPost,
    "services": Service,
    "service_purchases": ServicePurchase,
    "contact_messages": ContactMessage,
    "donations": Donation,
    "page_views": PageView,
    "settings": Setting,
}

# Insert-only tables; owner writes to every other table are audited
UNAUDITED_TABLES = {"page_views"}
READ_ONLY_COLUMNS = {"created_at", "updated_at"}


@contextmanager
def translate_errors() -> Iterator[None]:
    """Map SQLAlchemy failures onto the gateway error taxonomy."""
    try:
        yield
    except IntegrityError as exc:
        raise ConstraintViolation(str(exc.orig)) from exc
    except OperationalError as exc:
        raise GatewayUnavailable(str(exc.orig)) from exc
    except SQLAlchemyError as exc:
        raise GatewayError(str(exc)) from exc


class SqlGateway(Gateway):
    """Gateway backed by the application's SQLAlchemy database."""

    def __init__(self, access_token: Optional[str] = None):
        self.auth = SqlAuthClient(access_token=access_token)

    # -------------------------------------------------
    # Helpers
    # -------------------------------------------------
    @staticmethod
    def _model(table: str):
        try:
            return TABLES[table]
        except KeyError:
            raise GatewayError(f"Unknown table: {table}") from None

    @staticmethod
    def _column(model, name: str):
        if name not in model.column_names():
            raise GatewayError(f"Unknown column '{name}' on {model.__tablename__}")
        return getattr(model, name)

    def _apply_filters(self, query, model, filters: Optional[Dict[str, Any]]):
        for name, value in (filters or {}).items():
            column = self._column(model, name)
            if isinstance(value, (list, tuple, set)):
                query = query.filter(column.in_(list(value)))
            elif value is None:
                query = query.filter(column.is_(None))
            else:
                query = query.filter(column == value)
        return query

    def _clean_values(self, model, values: Dict[str, Any]) -> Dict[str, Any]:
        cleaned = {}
        for name, value in values.items():
            if name in READ_ONLY_COLUMNS:
                continue
            self._column(model, name)
            cleaned[name] = value
        return cleaned

    def _fetch(self, model, record_id: str):
        row = db.session.get(model, record_id)
        if row is None:
            raise RecordNotFound(f"{model.__tablename__} row {record_id} not found")
        return row

    # -------------------------------------------------
    # Rows
    # -------------------------------------------------
    def get(self, table: str, **match: Any) -> Optional[Dict[str, Any]]:
        model = self._model(table)
        with translate_errors():
            row = self._apply_filters(model.query, model, match).first()
        return row.to_dict() if row else None

    def list(
        self,
        table: str,
        *,
        filters: Optional[Dict[str, Any]] = None,
        order_by: Optional[Sequence[str]] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        since: Optional[datetime] = None,
        until: Optional[datetime] = None,
    ) -> List[Dict[str, Any]]:
        model = self._model(table)
        query = self._apply_filters(model.query, model, filters)

        if since is not None:
            query = query.filter(model.created_at >= since)
        if until is not None:
            query = query.filter(model.created_at <= until)

        ordering = []
        for name in order_by or ():
            column = self._column(model, name.lstrip("-"))
            ordering.append(column.desc() if name.startswith("-") else column.asc())
        # Ties fall back to insertion order
        ordering.extend([model.created_at.asc(), model.id.asc()])
        query = query.order_by(*ordering)

        if offset:
            query = query.offset(offset)
        if limit is not None:
            query = query.limit(limit)

        with translate_errors():
            return [row.to_dict() for row in query.all()]

    def count(self, table: str, *, filters: Optional[Dict[str, Any]] = None) -> int:
        model = self._model(table)
        with translate_errors():
            return self._apply_filters(model.query, model, filters).count()

    def create(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        model = self._model(table)
        row = model(**self._clean_values(model, values))

        with translate_errors(), transactional() as session:
            session.add(row)
            session.flush()  # ensures row.id exists

            if table not in UNAUDITED_TABLES:
                log_action(
                    action=f"{table}.create",
                    table_name=table,
                    record_id=row.id,
                    payload={"fields": sorted(values)},
                )

        return row.to_dict()

    def update(self, table: str, record_id: str, values: Dict[str, Any]) -> Dict[str, Any]:
        model = self._model(table)
        cleaned = self._clean_values(model, values)

        with translate_errors(), transactional():
            row = self._fetch(model, record_id)

            changed_fields = []
            for field, value in cleaned.items():
                if getattr(row, field) != value:
                    setattr(row, field, value)
                    changed_fields.append(field)

            if changed_fields:
                log_action(
                    action=f"{table}.update",
                    table_name=table,
                    record_id=row.id,
                    payload={"fields": changed_fields},
                )

        return row.to_dict()

    def delete(self, table: str, record_id: str) -> None:
        model = self._model(table)

        with translate_errors(), transactional() as session:
            row = self._fetch(model, record_id)
            session.delete(row)

            log_action(
                action=f"{table}.delete",
                table_name=table,
                record_id=record_id,
            )

    # -------------------------------------------------
    # Storage & functions
    # -------------------------------------------------
    def upload(self, file: Any, path: str) -> str:
        try:
            return save_file(file, path)
        except (OSError, ValueError) as exc:
            raise GatewayError(f"Upload failed: {exc}") from exc

    def invoke(self, function_name: str, body: Dict[str, Any]) -> Dict[str, Any]:
        function = FUNCTIONS.get(function_name)
        if function is None:
            raise GatewayError(f"Unknown function: {function_name}")
        return function(body)
