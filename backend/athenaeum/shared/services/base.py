"""
Service Base Classes

Business-rule layer between handlers and repositories.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Services own the rules the database cannot express (required text must not
be blank, some types need an image, the owning admin must be known) and turn
"no such row" into NotFoundError. Slug and meta derivation live one level
down, in ContentRepository.

Class Layout:
=============
    CrudService[Model]              ← reads, delete, required-field checks
       ├── ContentService[Model]    ← slugged types (create/update/get_by_slug)
       └── BiographyAnnexService    ← annex rules (parent must exist)
"""

from typing import Any, Generic, Optional

from pydantic import BaseModel

from athenaeum.shared.core.exceptions import NotFoundError, ValidationError
from athenaeum.shared.repositories.base import BaseRepository, ModelType, Page
from athenaeum.shared.schemas.common import PaginationParams


def payload_values(payload: Any, *, partial: bool = False) -> dict[str, Any]:
    """
    Plain dict from a request schema or mapping.

    For partial updates only the keys the caller actually sent are kept,
    including ones sent as null.
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump(exclude_unset=partial)
    return dict(payload)


class CrudService(Generic[ModelType]):
    """
    Shared read/delete operations and validation helpers.

    Attributes:
        resource: Human-readable type name for error messages
        required_fields: Fields that must be present and non-blank on create
            and may not be blanked or nulled on update
    """

    resource: str = "Record"
    required_fields: tuple[str, ...] = ()
    # Non-nullable columns where an explicit null means "derive it again"
    rederived_fields: tuple[str, ...] = ()

    repo: BaseRepository[ModelType]

    # ═══════════════════════════════════════════════════════════════════════════
    # VALIDATION
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def _is_blank(value: Any) -> bool:
        return value is None or (isinstance(value, str) and not value.strip())

    @staticmethod
    def _label(field: str) -> str:
        return field.replace("_", " ").capitalize()

    def _require_admin(self, admin_id: Optional[int]) -> None:
        if not admin_id:
            raise ValidationError("Admin ID is required", details={"field": "admin_id"})

    def _validate_create(self, values: dict[str, Any]) -> None:
        for field in self.required_fields:
            if self._is_blank(values.get(field)):
                raise ValidationError(f"{self._label(field)} is required", details={"field": field})

    def _validate_update(self, changes: dict[str, Any]) -> None:
        for field in self.required_fields:
            if field in changes and self._is_blank(changes[field]):
                raise ValidationError(
                    f"{self._label(field)} cannot be empty", details={"field": field}
                )

        columns = self.repo.model.__table__.columns
        for field, value in changes.items():
            if value is None and field not in self.rederived_fields and field in columns:
                if not columns[field].nullable:
                    raise ValidationError(
                        f"{self._label(field)} cannot be null", details={"field": field}
                    )

    # ═══════════════════════════════════════════════════════════════════════════
    # READS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_all(
        self,
        params: Optional[PaginationParams] = None,
        is_published: Optional[bool] = None,
    ) -> Page[ModelType]:
        """Paginated listing, optionally narrowed to (un)published records."""
        return await self.repo.get_all(params, filters={"is_published": is_published})

    async def get_by_id(self, record_id: int) -> ModelType:
        """
        Raises:
            NotFoundError: If no record has this id
        """
        record = await self.repo.get(record_id)
        if record is None:
            raise NotFoundError(self.resource, record_id)
        return record

    async def _get_by_field(self, field: str, value: Any) -> ModelType:
        """Exact-match lookup that raises NotFoundError instead of returning None."""
        if self._is_blank(value):
            raise ValidationError(f"{self._label(field)} is required", details={"field": field})
        record = await self.repo.get_by(field, value)
        if record is None:
            raise NotFoundError(self.resource, value, field=field)
        return record

    # ═══════════════════════════════════════════════════════════════════════════
    # DELETE
    # ═══════════════════════════════════════════════════════════════════════════

    async def delete_by_id(self, record_id: int) -> ModelType:
        """
        Delete a record and return what was deleted.

        Raises:
            NotFoundError: If no record has this id
            RelatedRecordsError: If other records still reference it
        """
        return await self.repo.delete_by_id(record_id)
