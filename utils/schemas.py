"""
Schemas Module - Request body validation

Pydantic models for every writable entity. Field names match the model
attributes; JSON keys are their camelCase aliases (``imageUrl``,
``startDate``...). Server-owned columns (``id``, ``createdAt``, message
``read``) are not part of any schema, so clients cannot set them.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Type

from pydantic import BaseModel, ConfigDict, Field, create_model
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

from .errors import ValidationError


class APIModel(BaseModel):
    """
    Base model for all request schemas.

    - strict typing: ``"70"`` is not an integer, ``"true"`` is not a boolean
    - unknown keys are dropped rather than rejected
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        strict=True,
        extra="ignore",
    )


# ---------------------------------------------------------------------------
# Entity schemas
# ---------------------------------------------------------------------------


class ProfileSchema(APIModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    phone: Optional[str] = Field(default=None, max_length=50)
    location: Optional[str] = Field(default=None, max_length=255)
    age: Optional[int] = Field(default=None, ge=0)
    position: Optional[str] = Field(default=None, max_length=255)
    tagline: Optional[str] = Field(default=None, max_length=500)
    bio: str
    image_url: Optional[str] = Field(default=None, max_length=500)


class ArticleSchema(APIModel):
    title: str = Field(min_length=1, max_length=255)
    content: str
    excerpt: str
    category: str = Field(min_length=1, max_length=100)
    image_url: Optional[str] = Field(default=None, max_length=500)
    published: bool = False


class SkillSchema(APIModel):
    name: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=100)
    percentage: int = Field(ge=0, le=100)
    icon: Optional[str] = Field(default=None, max_length=100)
    order: int = 0


class ExperienceSchema(APIModel):
    title: str = Field(min_length=1, max_length=255)
    company: str = Field(min_length=1, max_length=255)
    description: str
    start_date: str = Field(min_length=1, max_length=50)
    end_date: Optional[str] = Field(default=None, max_length=50)
    current: bool = False
    order: int = 0


class EducationSchema(APIModel):
    degree: str = Field(min_length=1, max_length=255)
    institution: str = Field(min_length=1, max_length=255)
    description: str
    start_date: str = Field(min_length=1, max_length=50)
    end_date: str = Field(max_length=50)
    order: int = 0


class ActivitySchema(APIModel):
    title: str = Field(min_length=1, max_length=255)
    description: str
    icon: str = Field(max_length=100)
    order: int = 0


class ValueSchema(APIModel):
    title: str = Field(min_length=1, max_length=255)
    description: str
    icon: str = Field(max_length=100)
    order: int = 0


class MessageSchema(APIModel):
    name: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=255)
    subject: str = Field(min_length=1, max_length=255)
    message: str = Field(min_length=1)


class SocialLinkSchema(APIModel):
    name: str = Field(min_length=1, max_length=100)
    icon: str = Field(min_length=1, max_length=100)
    url: str = Field(min_length=1, max_length=255)


class SenderSchema(APIModel):
    """Body of a self-service message deletion"""

    email: str = Field(min_length=1, max_length=255)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def partial_schema(schema: Type[APIModel]) -> Type[APIModel]:
    """
    Derive an update schema where every field may be omitted.

    Omitted fields keep an unvalidated ``None`` default and are dropped by
    ``exclude_unset``; a field that *is* sent must still satisfy the original
    type and constraints, so ``{"title": null}`` is rejected.
    """
    fields: Dict[str, Any] = {
        name: (field.rebuild_annotation(), None)
        for name, field in schema.model_fields.items()
    }
    return create_model(f"{schema.__name__}Update", __base__=APIModel, **fields)


def format_errors(exc: PydanticValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into ``[{field, message}]``"""
    errors = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error["loc"]) or None
        errors.append({"field": field, "message": error["msg"]})
    return errors


def validate_payload(schema: Type[APIModel], data: Any, label: str = "request") -> Dict[str, Any]:
    """
    Validate a decoded JSON body and return the supplied fields keyed by
    model attribute name. Raises ``ValidationError`` listing every bad field.
    """
    if not isinstance(data, dict):
        raise ValidationError(
            f"Invalid {label} data",
            errors=[{"field": None, "message": "Request body must be a JSON object"}],
        )
    try:
        parsed = schema.model_validate(data)
    except PydanticValidationError as exc:
        raise ValidationError(f"Invalid {label} data", errors=format_errors(exc)) from exc
    return parsed.model_dump(exclude_unset=True)


ProfileUpdateSchema = partial_schema(ProfileSchema)
ArticleUpdateSchema = partial_schema(ArticleSchema)
SkillUpdateSchema = partial_schema(SkillSchema)
ExperienceUpdateSchema = partial_schema(ExperienceSchema)
EducationUpdateSchema = partial_schema(EducationSchema)
ActivityUpdateSchema = partial_schema(ActivitySchema)
ValueUpdateSchema = partial_schema(ValueSchema)
SocialLinkUpdateSchema = partial_schema(SocialLinkSchema)
