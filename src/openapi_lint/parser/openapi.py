"""OpenAPI / Swagger document loader.

Reads JSON or YAML text into a Document. Anything that cannot be turned
into a Document raises DocumentParseError before any rule runs.
"""

import logging
import re
from pathlib import Path

import yaml
from pydantic import ValidationError

from .base import Document

logger = logging.getLogger(__name__)

BOOL_TAG = "tag:yaml.org,2002:bool"


class DocumentLoader(yaml.SafeLoader):
    """SafeLoader with YAML 1.2 booleans: only true/false, never on/off/yes/no."""


DocumentLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
DocumentLoader.add_implicit_resolver(
    BOOL_TAG, re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"), list("tTfF")
)


class DocumentParseError(ValueError):
    """Raised when text is not a usable OpenAPI document."""


def load_document(file_path: Path) -> Document:
    """Read an OpenAPI/Swagger file into a Document."""
    try:
        text = file_path.read_text(encoding="utf-8")
    except OSError as e:
        raise DocumentParseError(f"Cannot read {file_path}: {e}") from e
    logger.debug("Loaded %d characters from %s", len(text), file_path)
    return parse_document(text)


def parse_document(text: str) -> Document:
    """Parse JSON or YAML text into a Document."""
    try:
        data = yaml.load(text, Loader=DocumentLoader)
    except yaml.YAMLError as e:
        raise DocumentParseError(f"OpenAPI parsing errors: {e}") from e

    if not data:
        raise DocumentParseError("Parsed OpenAPI is empty")
    if not isinstance(data, dict):
        raise DocumentParseError(
            f"OpenAPI document must be a mapping, got {type(data).__name__}"
        )

    version = detect_version(data)
    if version is None:
        raise DocumentParseError("Missing 'openapi' or 'swagger' version field")

    if "swagger" in data and "components" not in data:
        # Swagger 2.0 keeps named schemas under "definitions"
        data = {**data, "components": {"schemas": data.get("definitions")}}

    try:
        document = Document.model_validate({**data, "openapi": version})
    except ValidationError as e:
        messages = [
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        ]
        raise DocumentParseError("OpenAPI parsing errors: " + "; ".join(messages)) from e

    logger.debug(
        "Parsed OpenAPI %s document with %d paths and %d schemas",
        version,
        len(document.paths),
        len(document.components.schemas),
    )
    return document


def detect_version(data: dict) -> str | None:
    """Return the declared ``openapi`` or ``swagger`` version, if any."""
    for key in ("openapi", "swagger"):
        if data.get(key) is not None:
            return str(data[key])
    return None
