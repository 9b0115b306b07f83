# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Business logic shared by every entity resource: list / get / create / update / delete.

Outcomes are Result values; only unexpected failures raise.
"""
from typing import Any, Dict, Optional, Tuple, Type

from pydantic import BaseModel, ValidationError
from sqlalchemy.exc import IntegrityError

from membership.core.logging import get_logger
from membership.metrics import ENTITY_MUTATIONS
from membership.models.entities import Entity
from membership.repositories.base import EntityRepository
from membership.services.result import ErrorKind, Result

logger = get_logger(__name__)

ADMIN_ROLE = "admin"


class EntityService:
    entity: Entity
    create_schema: Type[BaseModel]
    update_schema: Type[BaseModel]

    def __init__(self, repo: EntityRepository):
        self._repo = repo

    # ── Shaping hooks ──────────────────────────────────────────────────

    def key_of(self, row: Dict[str, Any]) -> Tuple:
        return tuple(row[k] for k in self.entity.key)

    def summary(self, row: Dict[str, Any]) -> Dict[str, Any]:
        """List entry: just id & uri."""
        key = self.key_of(row)
        return {"_id": key[0], "_uri": self.entity.uri(*key)}

    def detail(self, key: Tuple, row: Dict[str, Any]) -> Dict[str, Any]:
        return {**row, "_id": key[0]}

    def describe(self, raw_key: Tuple) -> str:
        return f"{self.entity.label()} {'/'.join(str(k) for k in raw_key)}"

    # ── Helpers ────────────────────────────────────────────────────────

    def parse_key(self, raw_key: Tuple) -> Optional[Tuple[int, ...]]:
        """Path ids → ints; None when any part is not a positive integer."""
        if len(raw_key) != len(self.entity.key):
            return None
        key = []
        for part in raw_key:
            part = str(part).strip()
            if not part.isdigit() or int(part) < 1:
                return None
            key.append(int(part))
        return tuple(key)

    def _not_found(self, raw_key: Tuple) -> Result:
        return Result.failure(ErrorKind.NOT_FOUND, f"No {self.describe(raw_key)} found")

    @staticmethod
    def _forbidden_unless_admin(role: Optional[str]) -> Optional[Result]:
        if role != ADMIN_ROLE:
            return Result.failure(ErrorKind.FORBIDDEN, "Admin auth required")
        return None

    def _validate(self, schema: Type[BaseModel], body: Dict[str, Any]) -> Result:
        try:
            return Result.success(schema.model_validate(body or {}))
        except ValidationError as exc:
            errors = exc.errors()
            extra = [str(e["loc"][-1]) for e in errors if e["type"] == "extra_forbidden"]
            if extra:
                return Result.failure(
                    ErrorKind.UNRECOGNISED_FIELD,
                    f"Unrecognised {self.entity.name} field: {', '.join(extra)}",
                )
            detail = "; ".join(f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in errors)
            return Result.failure(ErrorKind.INVALID, detail)

    def _conflict(self, exc: IntegrityError) -> Result:
        logger.warning("%s integrity violation: %s", self.entity.name, exc.orig)
        return Result.failure(ErrorKind.CONFLICT, f"Could not save {self.entity.label()}: {exc.orig}")

    def _filter_failure(self, filters: Dict[str, Any]) -> Optional[Result]:
        unknown = self._repo.unknown_fields(filters)
        if unknown:
            return Result.failure(ErrorKind.UNRECOGNISED_FIELD, f"Unrecognised {self.entity.name} field")
        return None

    def _counted(self, operation: str, key: Tuple) -> None:
        ENTITY_MUTATIONS.labels(entity=self.entity.name, operation=operation).inc()
        logger.info("%s %s key=%s", self.entity.name, operation, "/".join(str(k) for k in key))

    # ── Read ───────────────────────────────────────────────────────────

    def list(self, filters: Optional[Dict[str, Any]] = None) -> Result:
        """Summary list; [] when nothing matches, the caller decides how to say so."""
        filters = dict(filters or {})
        failure = self._filter_failure(filters)
        if failure:
            return failure
        return Result.success([self.summary(row) for row in self._repo.list(filters)])

    def browse(self, filters: Optional[Dict[str, Any]] = None) -> Result:
        """Full rows for listing pages."""
        filters = dict(filters or {})
        failure = self._filter_failure(filters)
        if failure:
            return failure
        return Result.success(self._repo.list(filters))

    def get(self, *raw_key) -> Result:
        key = self.parse_key(raw_key)
        row = self._repo.get(*key) if key else None
        if row is None:
            return self._not_found(raw_key)
        return Result.success(self.detail(key, row))

    # ── Write (admin only) ─────────────────────────────────────────────

    def create(self, role: Optional[str], body: Dict[str, Any]) -> Result:
        """Result value is (key, row) of the newly created record."""
        failure = self._forbidden_unless_admin(role)
        if failure:
            return failure

        validated = self._validate(self.create_schema, body)
        if not validated.ok:
            return validated
        fields = validated.value.model_dump(mode="json", exclude_none=True)

        try:
            new_id = self._repo.insert(fields)
        except IntegrityError as exc:
            return self._conflict(exc)

        key = new_id if isinstance(new_id, tuple) else (new_id,)
        self._counted("insert", key)
        return Result.success((key, self._repo.get(*key)))

    def update(self, role: Optional[str], *raw_key, body: Dict[str, Any]) -> Result:
        failure = self._forbidden_unless_admin(role)
        if failure:
            return failure

        validated = self._validate(self.update_schema, body)
        if not validated.ok:
            return validated
        fields = validated.value.model_dump(mode="json", exclude_unset=True)

        key = self.parse_key(raw_key)
        if key is None:
            return self._not_found(raw_key)
        try:
            self._repo.update(*key, fields=fields)
        except IntegrityError as exc:
            return self._conflict(exc)

        row = self._repo.get(*key)
        if row is None:
            return self._not_found(raw_key)
        self._counted("update", key)
        return Result.success(row)

    def delete(self, role: Optional[str], *raw_key) -> Result:
        """Result value is the deleted record as it was."""
        failure = self._forbidden_unless_admin(role)
        if failure:
            return failure

        key = self.parse_key(raw_key)
        row = self._repo.get(*key) if key else None
        if row is None:
            return self._not_found(raw_key)

        try:
            self._repo.delete(*key)
        except IntegrityError as exc:
            return self._conflict(exc)
        self._counted("delete", key)
        return Result.success(row)
