"""Pydantic v2 schema for Microsoft Teams package metadata.

The build service receives Teams metadata as a JSON string in the first
slot of a build request's ``parameters``.  ``encode_teams_params`` and
``decode_teams_options`` are the only places that string is produced or read.
"""

import base64
import binascii
import json
from collections.abc import Sequence

from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator
from pydantic.alias_generators import to_camel

_REQUIRED_FIELDS = (
    "publisher_name",
    "short_description",
    "long_description",
    "privacy_url",
    "terms_of_use_url",
    "color_image_file",
)


class TeamsParams(BaseModel):
    """Teams app metadata collected by the publish form.

    Every field is optional at parse time so an incomplete form can be
    reported field by field; see ``missing_fields``.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    publisher_name: str | None = Field(default=None, description="Publisher display name")
    short_description: str | None = Field(default=None, description="Short app description")
    long_description: str | None = Field(default=None, description="Full app description")
    privacy_url: str | None = Field(default=None, description="Privacy policy URL")
    terms_of_use_url: str | None = Field(default=None, description="Terms of use URL")
    color_image_file: bytes | None = Field(default=None, description="Full-colour icon (base64 on the wire)")
    outline_image_file: bytes | None = Field(default=None, description="Outline icon (base64 on the wire)")

    @field_validator("color_image_file", "outline_image_file", mode="before")
    @classmethod
    def decode_image(cls, v: object) -> object:
        if isinstance(v, str):
            try:
                return base64.b64decode(v, validate=True)
            except binascii.Error as exc:
                msg = "image files must be base64 encoded"
                raise ValueError(msg) from exc
        return v

    @field_serializer("color_image_file", "outline_image_file")
    def encode_image(self, v: bytes | None) -> str | None:
        if v is None:
            return None
        return base64.b64encode(v).decode("ascii")

    def missing_fields(self) -> list[str]:
        """Wire names of required fields that are absent or empty."""
        return [to_camel(name) for name in _REQUIRED_FIELDS if not getattr(self, name)]


def encode_teams_params(params: TeamsParams) -> str:
    """Serialize Teams metadata to the JSON string the build service expects."""
    return params.model_dump_json(by_alias=True, exclude_none=True)


def decode_teams_options(options: Sequence[str] | None) -> TeamsParams:
    """Read Teams metadata from the first build option.

    Args:
        options: Build options as passed to a Teams build; absent options
            decode as an empty object.

    Returns:
        The parsed metadata (possibly with required fields missing).

    Raises:
        ValueError: If the option is not a JSON object string or a field has the
            wrong type (pydantic's ValidationError is a ValueError).
    """
    raw = options[0] if options else "{}"
    if not isinstance(raw, str | bytes):
        msg = "Teams options must be a JSON string"
        raise ValueError(msg)
    data = json.loads(raw)
    if not isinstance(data, dict):
        msg = "Teams options must be a JSON object"
        raise ValueError(msg)
    return TeamsParams.model_validate(data)
