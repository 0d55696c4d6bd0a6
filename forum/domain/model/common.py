"""Base models for all domain entities."""

from typing import Any, ClassVar, Mapping, TypeVar, get_args

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.fields import FieldInfo

from forum.domain.error import ContentValidationError


class DomainModel(BaseModel):
    """Base class for all domain models.

    Provides common configuration for immutability and custom types.
    """

    model_config = ConfigDict(
        frozen=True,  # All domain models are immutable
        arbitrary_types_allowed=True,  # Allow custom value objects
    )


E = TypeVar("E", bound="Entity")


def _is_nullable(field: FieldInfo) -> bool:
    return type(None) in get_args(field.annotation)


def _is_absent(payload: Mapping[str, Any], name: str, field: FieldInfo) -> bool:
    """Check whether a required field is missing from a payload.

    Nullable fields only need the key to be present. Other fields also need a
    value that is neither None nor an empty string.
    """
    if name not in payload:
        return True
    if _is_nullable(field):
        return False
    value = payload[name]
    return value is None or value == ""


class Entity(DomainModel):
    """Domain entity built from a raw payload.

    Entities are validated in two passes by ``create``: first every required
    field must be present, then every field must match its declared type.
    Each pass fails with its own ``ContentValidationError`` code, prefixed
    with ``entity_name``.
    """

    model_config = ConfigDict(strict=True)

    entity_name: ClassVar[str] = "ENTITY"

    @classmethod
    def create(cls: type[E], payload: Mapping[str, Any]) -> E:
        """Validate a payload and build the entity.

        Args:
            payload: Mapping of field name to raw value. Unknown keys are ignored.

        Returns:
            The validated entity

        Raises:
            ContentValidationError: If a required field is missing or has the
                wrong type
        """
        for name, field in cls.model_fields.items():
            if field.is_required() and _is_absent(payload, name, field):
                raise ContentValidationError(
                    f"{cls.entity_name}.NOT_CONTAIN_NEEDED_PROPERTY"
                )

        data = {name: payload[name] for name in cls.model_fields if name in payload}
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise ContentValidationError(
                f"{cls.entity_name}.NOT_MEET_DATA_TYPE_SPECIFICATION"
            ) from e
