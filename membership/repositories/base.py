# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""
Repository base: parameterised CRUD against one entity table.
NO business rules here — pure data access. Absence is None, never an exception.
"""
from typing import Any, Dict, Iterable, List, Optional

from membership.core.database import Database
from membership.models.entities import Entity
from membership.services import cast_boolean


class UnknownFieldError(ValueError):
    """A field name outside the entity's allow-list reached the SQL builder."""

    def __init__(self, entity: Entity, fields: Iterable[str]):
        self.entity = entity
        self.fields = sorted(fields)
        super().__init__(f"Unrecognised {entity.name} field: {', '.join(self.fields)}")


class EntityRepository:
    entity: Entity

    def __init__(self, db: Database):
        self._db = db

    # ── Allow-list ─────────────────────────────────────────────────────

    def unknown_fields(self, names: Iterable[str]) -> List[str]:
        allowed = set(self.entity.fields)
        return [n for n in names if n not in allowed]

    def _check_fields(self, names: Iterable[str]) -> None:
        unknown = self.unknown_fields(names)
        if unknown:
            raise UnknownFieldError(self.entity, unknown)

    def _key_clause(self) -> str:
        return " and ".join(f"{k} = :_key{i}" for i, k in enumerate(self.entity.key))

    def _key_params(self, key: tuple) -> Dict[str, Any]:
        if len(key) != len(self.entity.key):
            raise TypeError(f"{self.entity.name} key is {self.entity.key}, got {key!r}")
        return {f"_key{i}": v for i, v in enumerate(key)}

    # ── Read ───────────────────────────────────────────────────────────

    def get(self, *key) -> Optional[Dict[str, Any]]:
        sql = f"Select * From {self.entity.table_name} Where {self._key_clause()}"
        rows, _ = cast_boolean.from_db(self._db.query(sql, self._key_params(key)), self.entity.boolean_fields)
        return rows[0] if rows else None

    def list(self, filters: Optional[Dict[str, Any]] = None) -> List[Dict[str, Any]]:
        filters = dict(filters or {})
        self._check_fields(filters)
        filters = cast_boolean.to_storage(filters, self.entity.boolean_fields)

        sql = f"Select * From {self.entity.table_name}"
        if filters:
            sql += " Where " + " and ".join(f"{f} = :{f}" for f in filters)
        sql += " Order By " + ", ".join(self.entity.order_by)

        rows, _ = cast_boolean.from_db(self._db.query(sql, filters), self.entity.boolean_fields)
        return rows

    # ── Write ──────────────────────────────────────────────────────────

    def insert(self, fields: Dict[str, Any]):
        """Insert a row; returns the new id."""
        self._check_fields(fields)
        values = cast_boolean.to_storage(fields, self.entity.boolean_fields)
        columns = ", ".join(values)
        placeholders = ", ".join(f":{f}" for f in values)
        result, _ = self._db.execute(
            f"Insert Into {self.entity.table_name} ({columns}) Values ({placeholders})", values
        )
        return result.insert_id

    def update(self, *key, fields: Dict[str, Any]) -> int:
        """Update a row; returns the number of rows changed (0 is a no-op)."""
        self._check_fields(fields)
        if not fields:
            return 0
        values = cast_boolean.to_storage(fields, self.entity.boolean_fields)
        assignments = ", ".join(f"{f} = :{f}" for f in values)
        result, _ = self._db.execute(
            f"Update {self.entity.table_name} Set {assignments} Where {self._key_clause()}",
            {**values, **self._key_params(key)},
        )
        return result.affected_rows

    def delete(self, *key) -> int:
        result, _ = self._db.execute(
            f"Delete From {self.entity.table_name} Where {self._key_clause()}", self._key_params(key)
        )
        return result.affected_rows

    def _delete_with_memberships(self, key_field: str, key_value: Any) -> int:
        """Delete a row and its TeamMember rows atomically."""
        with self._db.transaction() as conn:
            self._db.execute(
                f"Delete From TeamMember Where {key_field} = :id", {"id": key_value}, conn
            )
            result, _ = self._db.execute(
                f"Delete From {self.entity.table_name} Where {key_field} = :id", {"id": key_value}, conn
            )
        return result.affected_rows
