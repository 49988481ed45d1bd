"""Inputs of the check command: provider names, subcategory lists and schemas."""

from __future__ import annotations

import json
import logging
import os
import re
from typing import Any, Mapping

logger = logging.getLogger(__name__)

PROVIDER_DIRECTORY_PREFIX = "terraform-provider-"

PROVIDER_SCHEMAS_FORMAT_VERSION_CONSTRAINTS = ">= 0.1, < 2.0"
_MINIMUM_FORMAT_VERSION = (0, 1, 0)
_MAXIMUM_FORMAT_VERSION = (2, 0, 0)

_VERSION_PATTERN = re.compile(
    r"v?(?P<numbers>\d+(?:\.\d+)*)"
    r"(?:-(?P<pre>[0-9A-Za-z\-~]+(?:\.[0-9A-Za-z\-~]+)*))?"
    r"(?:\+[0-9A-Za-z\-~]+(?:\.[0-9A-Za-z\-~]+)*)?"
)


class SchemaError(Exception):
    """An input file of the check command could not be read or is invalid."""


def allowed_subcategories_file(path: str) -> list[str]:
    """Return the subcategories listed one per line in the file."""
    logger.debug("Loading allowed subcategories file: %s", path)

    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError as err:
        raise SchemaError(f"error opening allowed subcategories file ({path}): {err}") from err
    except UnicodeDecodeError as err:
        raise SchemaError(f"error reading allowed subcategories file ({path}): {err}") from err

    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def provider_name_from_current_directory() -> str:
    """Return the provider name implied by the current working directory."""
    try:
        path = os.getcwd()
    except OSError:
        path = ""
    return provider_name_from_path(path)


def _base_name(path: str) -> str:
    if not path:
        return "."
    trimmed = path.rstrip("/" + os.sep)
    if not trimmed:
        return "/"
    return trimmed.replace(os.sep, "/").rsplit("/", 1)[-1]


def provider_name_from_path(path: str) -> str:
    """Return ``name`` for a path ending in ``terraform-provider-name``, else ``""``."""
    base = _base_name(path)
    if "." in base or "/" in base:
        return ""
    if not base.startswith(PROVIDER_DIRECTORY_PREFIX):
        return ""
    return base.removeprefix(PROVIDER_DIRECTORY_PREFIX)


def _check_mapping(value: Any, where: str) -> None:
    if value is not None and not isinstance(value, dict):
        raise ValueError(f"{where} should be an object, not {type(value).__name__}")


def _check_structure(document: Any) -> None:
    if not isinstance(document, dict):
        raise ValueError(f"providers schema should be an object, not {type(document).__name__}")

    format_version = document.get("format_version")
    if format_version is not None and not isinstance(format_version, str):
        raise ValueError("format_version should be a string")

    providers = document.get("provider_schemas")
    _check_mapping(providers, "provider_schemas")
    for name, provider in (providers or {}).items():
        _check_mapping(provider, f"provider_schemas[{name!r}]")
        for key in ("data_source_schemas", "resource_schemas"):
            _check_mapping((provider or {}).get(key), f"provider_schemas[{name!r}].{key}")


def _validate(document: Mapping[str, Any]) -> None:
    format_version = document.get("format_version") or ""
    if not format_version:
        raise ValueError("unexpected provider schema data, format version is missing")

    match = _VERSION_PATTERN.fullmatch(format_version)
    if match is None:
        raise ValueError(f"invalid format version {json.dumps(format_version)}: malformed version")

    numbers = tuple(int(part) for part in match.group("numbers").split("."))
    numbers = (numbers + (0, 0, 0))[: max(3, len(numbers))]
    in_range = _MINIMUM_FORMAT_VERSION <= numbers[:3] < _MAXIMUM_FORMAT_VERSION
    if match.group("pre") or not in_range:
        raise ValueError(
            f"unsupported provider schema format version: {json.dumps(format_version)} "
            f"does not satisfy {json.dumps(PROVIDER_SCHEMAS_FORMAT_VERSION_CONSTRAINTS)}"
        )


def provider_schemas(path: str) -> dict[str, Any]:
    """Read, parse and validate a ``terraform providers schema -json`` file."""
    logger.debug("Loading providers schema JSON file: %s", path)

    try:
        with open(path, "rb") as handle:
            content = handle.read()
    except OSError as err:
        raise SchemaError(f"error reading providers schema JSON file ({path}): {err}") from err

    try:
        document = json.loads(content)
        _check_structure(document)
    except (ValueError, UnicodeDecodeError) as err:
        raise SchemaError(f"error parsing providers schema JSON file ({path}): {err}") from err

    try:
        _validate(document)
    except ValueError as err:
        raise SchemaError(f"error validating providers schema JSON file ({path}): {err}") from err

    return document


def _find_provider(
    ps: Mapping[str, Any] | None, provider_name: str, provider_source: str
) -> Mapping[str, Any] | None:
    if ps is None:
        return None
    schemas = ps.get("provider_schemas")
    if schemas is None:
        return None

    for key in (provider_source, provider_name):
        if key in schemas:
            return schemas[key] or {}

    logger.warning(
        "Provider source (%s) and name (%s) not found in provider schema", provider_source, provider_name
    )
    return None


def provider_schemas_data_sources(
    ps: Mapping[str, Any] | None, provider_name: str, provider_source: str
) -> dict[str, Any] | None:
    """Return the provider's data source schemas, looked up by source then by name."""
    provider = _find_provider(ps, provider_name, provider_source)
    if provider is None:
        return None

    data_sources = provider.get("data_source_schemas")
    logger.debug("Found provider schema data sources: %s", sorted(data_sources or {}))
    return data_sources


def provider_schemas_resources(
    ps: Mapping[str, Any] | None, provider_name: str, provider_source: str
) -> dict[str, Any] | None:
    """Return the provider's resource schemas, looked up by source then by name."""
    provider = _find_provider(ps, provider_name, provider_source)
    if provider is None:
        return None

    resources = provider.get("resource_schemas")
    logger.debug("Found provider schema resources: %s", sorted(resources or {}))
    return resources