"""
Tortoise ORM fixture models.

Table and column names follow the camel-cased, pluralized schema the test
suites query directly (``Users``, ``HistoryLogs``, ``ParanoidUsers``).
"""

from typing import Any, Optional

from tortoise import fields, timezone
from tortoise.backends.base.client import BaseDBAsyncClient
from tortoise.manager import Manager
from tortoise.models import Model
from tortoise.queryset import QuerySet


class TimestampedModel(Model):
    """Integer primary key plus creation and update timestamps."""

    id = fields.IntField(primary_key=True)
    created_at = fields.DatetimeField(auto_now_add=True, source_field="createdAt")
    updated_at = fields.DatetimeField(auto_now=True, source_field="updatedAt")

    class Meta:
        abstract = True


class ParanoidManager(Manager):
    """Manager that hides soft-deleted rows."""

    def get_queryset(self) -> QuerySet:
        return super().get_queryset().filter(deleted_at__isnull=True)


class ParanoidModel(TimestampedModel):
    """Soft-delete model: deleting stamps ``deletedAt`` instead of removing the row.

    Concrete subclasses must set ``manager = ParanoidManager()`` in their Meta
    so that default queries skip deleted rows.
    """

    deleted_at = fields.DatetimeField(null=True, source_field="deletedAt")

    class Meta:
        abstract = True

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    @classmethod
    def with_deleted(cls) -> QuerySet:
        """Query every row, soft-deleted ones included."""
        return QuerySet(cls)

    async def delete(
        self, using_db: Optional[BaseDBAsyncClient] = None, force: bool = False
    ) -> None:
        if force:
            await super().delete(using_db=using_db)
            return
        self.deleted_at = timezone.now()
        await self.save(using_db=using_db, update_fields=["deleted_at", "updated_at"])

    async def restore(self, using_db: Optional[BaseDBAsyncClient] = None) -> None:
        self.deleted_at = None
        await self.save(using_db=using_db, update_fields=["deleted_at", "updated_at"])


class User(TimestampedModel):
    """User fixture model."""

    username = fields.CharField(max_length=255, null=True)
    touched_at = fields.DatetimeField(
        default=timezone.now, null=True, source_field="touchedAt"
    )
    a_number = fields.IntField(null=True, source_field="aNumber")
    b_number = fields.IntField(
        null=True, description="B Number", source_field="bNumber"
    )
    validate_test = fields.IntField(null=True, source_field="validateTest")
    validate_custom = fields.CharField(max_length=255, source_field="validateCustom")
    date_allow_null_true = fields.DatetimeField(
        null=True, source_field="dateAllowNullTrue"
    )
    default_value_boolean = fields.BooleanField(
        default=True, null=True, source_field="defaultValueBoolean"
    )

    paranoid_users: fields.ReverseRelation["ParanoidUser"]

    class Meta:
        table = "Users"

    def __str__(self) -> str:
        return f"User({self.username})"


class HistoryLog(TimestampedModel):
    """History log fixture model with awkward column names."""

    some_text = fields.CharField(max_length=255, null=True, source_field="some Text")
    one_number = fields.IntField(null=True, source_field="1Number")
    a_random_id = fields.IntField(null=True, source_field="aRandomId")

    class Meta:
        table = "HistoryLogs"


class ParanoidUser(ParanoidModel):
    """Soft-deleting user that belongs to a User."""

    username = fields.CharField(max_length=255, null=True)
    user: fields.ForeignKeyNullableRelation[User] = fields.ForeignKeyField(
        "models.User",
        related_name="paranoid_users",
        null=True,
        on_delete=fields.SET_NULL,
        source_field="UserId",
    )

    class Meta:
        table = "ParanoidUsers"
        manager = ParanoidManager()

    def __str__(self) -> str:
        return f"ParanoidUser({self.username})"


FIXTURE_MODELS: tuple[Any, ...] = (User, HistoryLog, ParanoidUser)
