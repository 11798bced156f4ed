"""
Lambda handler storing or resetting a field instance's formatter settings.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.models.errors import InvalidConfigurationError
from core.services.formatter_settings import FormatterSettingsService
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import UpdateFormatterSettingsRequest

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle PUT and DELETE /v1/fields/{field_id}/settings.

    PUT validates the submitted settings and stores them; invalid settings
    are rejected with 422. DELETE drops stored overrides.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received formatter settings update",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    path_params = event.get("pathParameters") or {}
    is_delete = event.get("httpMethod") == "DELETE"

    body: Any = {}
    if not is_delete and event.get("body"):
        try:
            body = json.loads(event["body"])
        except json.JSONDecodeError:
            return ResponseBuilder.bad_request("Invalid JSON body")

    if not isinstance(body, dict):
        return ResponseBuilder.bad_request("Invalid request body, expected a JSON object")

    params = {
        "field_id": path_params.get("field_id"),
        "settings": body.get("settings", {}),
    }

    try:
        request = validate_request(UpdateFormatterSettingsRequest, params)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(list(exc.errors()))},
        )

    service = FormatterSettingsService()

    if is_delete:
        config = service.reset_settings(request.field_id)
        return ResponseBuilder.ok(
            {"field_id": request.field_id, "settings": config.to_settings()}
        )

    try:
        config = service.update_settings(request.field_id, request.settings)
    except InvalidConfigurationError as exc:
        return ResponseBuilder.validation_error(
            message=exc.message,
            error=exc.error_code,
            details=exc.details,
        )

    return ResponseBuilder.ok(
        {"field_id": request.field_id, "settings": config.to_settings()}
    )
