"""In-memory model of an OpenAPI document.

Only the parts the lint rules inspect are modelled; every other key is
ignored. Optional containers default to empty ones so rules can iterate
without presence checks, while members inside a container stay nullable.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

HTTP_METHODS = ("GET", "PUT", "POST", "DELETE", "OPTIONS", "HEAD", "PATCH", "TRACE")


def _mapping(value: Any) -> Any:
    """Normalise a YAML mapping: null becomes {}, non-null keys become str."""
    if value is None:
        return {}
    if isinstance(value, dict):
        return {k if k is None else str(k): v for k, v in value.items()}
    return value


def _sequence(value: Any) -> Any:
    return [] if value is None else value


class Schema(BaseModel):
    """A schema; only ``properties`` and ``enum`` matter here."""

    properties: dict[str | None, "Schema | bool | None"] = {}  # bool: OpenAPI 3.1 true/false schema
    enum: list[Any] = []

    @field_validator("properties", mode="before")
    @classmethod
    def normalise_properties(cls, value):
        return _mapping(value)

    @field_validator("enum", mode="before")
    @classmethod
    def normalise_enum(cls, value):
        return _sequence(value)


class Parameter(BaseModel):
    """A path, query, header or cookie parameter."""

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = None
    location: str | None = Field(default=None, alias="in")  # path / query / header / cookie
    schema_: Schema | bool | None = Field(default=None, alias="schema")


class Operation(BaseModel):
    """A single HTTP-method handler under a path."""

    description: str | None = None
    parameters: list[Parameter | None] = []
    responses: dict[str, Any] = {}  # {status_code: response object}

    @field_validator("parameters", mode="before")
    @classmethod
    def normalise_parameters(cls, value):
        return _sequence(value)

    @field_validator("responses", mode="before")
    @classmethod
    def normalise_responses(cls, value):
        # YAML loads an unquoted 201 as an int
        return _mapping(value)


class PathItem(BaseModel):
    """Operations and shared parameters declared under one path."""

    parameters: list[Parameter | None] = []
    get: Operation | None = None
    put: Operation | None = None
    post: Operation | None = None
    delete: Operation | None = None
    options: Operation | None = None
    head: Operation | None = None
    patch: Operation | None = None
    trace: Operation | None = None

    @field_validator("parameters", mode="before")
    @classmethod
    def normalise_parameters(cls, value):
        return _sequence(value)

    def operations(self) -> list[tuple[str, Operation]]:
        """Return (METHOD, operation) pairs in canonical HTTP method order."""
        result = []
        for method in HTTP_METHODS:
            operation = getattr(self, method.lower())
            if operation is not None:
                result.append((method, operation))
        return result


class Components(BaseModel):
    """Reusable definitions; only named schemas are modelled."""

    schemas: dict[str, Schema | bool | None] = {}

    @field_validator("schemas", mode="before")
    @classmethod
    def normalise_schemas(cls, value):
        return _mapping(value)


class Document(BaseModel):
    """Root of a parsed OpenAPI document."""

    openapi: str | None = None
    paths: dict[str, PathItem | None] = {}
    components: Components = Field(default_factory=Components)

    @field_validator("openapi", mode="before")
    @classmethod
    def normalise_version(cls, value):
        # an unquoted 3.0 loads as a float
        return value if value is None else str(value)

    @field_validator("paths", mode="before")
    @classmethod
    def normalise_paths(cls, value):
        return _mapping(value)

    @field_validator("components", mode="before")
    @classmethod
    def normalise_components(cls, value):
        return {} if value is None else value
