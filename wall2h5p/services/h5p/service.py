# Copyright (C) 2025 Global Digital Labs (gdlabs.io)
# SPDX-License-Identifier: LGPL-3.0-or-later
"""Activity conversion service.

Entry points used by the outer layers (API routes, batch jobs):

- convert_activity(): convert one scraped activity, raising on failure.
- convert_many(): convert a batch, recording each outcome in a
  ConversionResult instead of aborting on the first failure.

Example:
    >>> result = convert_many([{"template": "Anagram", "words": [{"answer": "cat"}]}])[0]
    >>> result.success, result.content_type
    (True, 'anagram')
"""

import time
from collections.abc import Iterable, Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError

from wall2h5p.services.h5p.converters.registry import ConverterRegistry, get_registry
from wall2h5p.services.h5p.exceptions import H5PError
from wall2h5p.services.h5p.models import ActivityPayload, H5PPackageData
from wall2h5p.utils.logging import bound_context, get_logger

logger = get_logger(__name__)

ActivityInput = ActivityPayload | Mapping[str, Any]


class ConversionResult(BaseModel):
    """Outcome of converting one activity.

    Attributes:
        conversion_id: Activity id, or the batch position when the id is empty.
        success: Whether a package was produced.
        template: Template kind as declared by the activity.
        content_type: Content type of the converter used, if any.
        package: The converted package on success.
        warnings: Non-fatal diagnostics from the converter.
        error: Error message on failure.
        error_type: Exception class name on failure.
        latency_ms: Conversion time in milliseconds.
    """

    conversion_id: str
    success: bool
    template: str = ""
    content_type: str | None = None
    package: H5PPackageData | None = None
    warnings: list[str] = Field(default_factory=list)
    error: str | None = None
    error_type: str | None = None
    latency_ms: float = 0.0


def _to_payload(data: ActivityInput) -> ActivityPayload:
    if isinstance(data, ActivityPayload):
        return data
    return ActivityPayload.from_raw(data)


def convert_activity(
    data: ActivityInput,
    registry: ConverterRegistry | None = None,
    language: str | None = None,
) -> H5PPackageData:
    """Convert one scraped activity to H5P package data.

    Args:
        data: Activity payload or raw scraped mapping.
        registry: Converter registry. Defaults to get_registry().
        language: Language override.

    Returns:
        H5P package data.

    Raises:
        UnsupportedTemplateError: If no converter handles the template.
        H5PConversionError: If the converter failed.
    """
    activity = _to_payload(data)
    registry = registry or get_registry()

    with bound_context(activity_id=activity.id, template=activity.template):
        try:
            converter = registry.select(activity.template)
            package = converter.safe_convert(activity, language)
        except H5PError as e:
            logger.warning(
                "activity_conversion_failed",
                error=str(e),
                error_type=type(e).__name__,
            )
            raise

        logger.info(
            "activity_converted",
            content_type=converter.content_type,
            library=converter.library,
            warning_count=len(package.warnings),
        )
        return package


def convert_many(
    activities: Iterable[ActivityInput],
    registry: ConverterRegistry | None = None,
    language: str | None = None,
) -> list[ConversionResult]:
    """Convert a batch of activities sequentially.

    Conversion failures are recorded per activity; the batch always
    completes.

    Args:
        activities: Activity payloads or raw scraped mappings.
        registry: Converter registry. Defaults to get_registry().
        language: Language override applied to every activity.

    Returns:
        One ConversionResult per input, in input order.
    """
    registry = registry or get_registry()
    results: list[ConversionResult] = []

    for position, data in enumerate(activities):
        start = time.perf_counter()

        try:
            activity = _to_payload(data)
        except ValidationError as e:
            logger.warning("activity_rejected", position=position, error=str(e))
            result = ConversionResult(
                conversion_id=str(position),
                success=False,
                error=str(e),
                error_type=type(e).__name__,
            )
            result.latency_ms = round((time.perf_counter() - start) * 1000, 3)
            results.append(result)
            continue

        converter = registry.get(activity.template)

        try:
            package = convert_activity(activity, registry=registry, language=language)
        except H5PError as e:
            result = ConversionResult(
                conversion_id=activity.id or str(position),
                success=False,
                template=activity.template,
                content_type=converter.content_type if converter else None,
                error=str(e),
                error_type=type(e).__name__,
            )
        else:
            result = ConversionResult(
                conversion_id=activity.id or str(position),
                success=True,
                template=activity.template,
                content_type=converter.content_type if converter else None,
                package=package,
                warnings=list(package.warnings),
            )

        result.latency_ms = round((time.perf_counter() - start) * 1000, 3)
        results.append(result)

    succeeded = sum(1 for result in results if result.success)
    logger.info(
        "batch_converted",
        total=len(results),
        succeeded=succeeded,
        failed=len(results) - succeeded,
    )
    return results
