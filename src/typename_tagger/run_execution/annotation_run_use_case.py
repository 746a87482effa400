"""Fixture annotation use-case service."""

from __future__ import annotations

import logging

from typename_tagger.configuration import ConfigurationError, load_configuration
from typename_tagger.configuration.runtime_settings import Configuration
from typename_tagger.fixture_io import FixtureError, read_fixture, write_fixture
from typename_tagger.type_resolution import (
    TypenameResolutionError,
    ValueShape,
    annotate,
    classify_value,
)

from .run_contracts import RunOutcome, RunRequest

_LOGGER = logging.getLogger(__name__)


class RunExecutionError(Exception):
    """Raised when an annotation run cannot be completed."""


def execute_annotation_run(request: RunRequest) -> RunOutcome:
    """Annotate one fixture file and write the result."""
    try:
        configuration = load_configuration(request.config_path)
        fixture = read_fixture(request.input_path)
    except (ConfigurationError, FixtureError) as exc:
        raise RunExecutionError(str(exc)) from exc

    schema = configuration.type_schema
    parent_type_name, property_of_parent = _resolve_root_context(request, configuration)
    _LOGGER.info(
        "Annotating %s (parent_type_name=%s, property_of_parent=%s)",
        request.input_path,
        parent_type_name,
        property_of_parent,
    )
    try:
        if classify_value(fixture) is ValueShape.SEQUENCE:
            roots = list(fixture)  # type: ignore[call-overload]
            annotated: object = [
                annotate(root, schema, parent_type_name, property_of_parent) for root in roots
            ]
            root_count = len(roots)
        else:
            annotated = annotate(fixture, schema, parent_type_name, property_of_parent)
            root_count = 1
    except TypenameResolutionError as exc:
        raise RunExecutionError(f"Failed to annotate {request.input_path}: {exc}") from exc

    try:
        output_path = write_fixture(
            annotated, request.output_path, indent=configuration.output.indent
        )
    except (FixtureError, OSError) as exc:
        raise RunExecutionError(str(exc)) from exc
    _LOGGER.info("Wrote %d annotated root value(s) to %s", root_count, output_path)
    return RunOutcome(output_path=output_path, root_count=root_count)


def _resolve_root_context(
    request: RunRequest, configuration: Configuration
) -> tuple[str | None, str | None]:
    if request.parent_type_name is not None or request.property_of_parent is not None:
        return request.parent_type_name, request.property_of_parent
    if configuration.root_context is None:
        return None, None
    return (
        configuration.root_context.parent_type_name,
        configuration.root_context.property_of_parent,
    )
