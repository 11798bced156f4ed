"""
Lambda handler returning a field instance's effective formatter settings.
"""

from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.pager.settings_form import describe_settings_form, summarize_settings
from core.services.formatter_settings import FormatterSettingsService
from core.utils.decorators import api_gateway_handler
from core.utils.response import ResponseBuilder
from core.utils.translation import CatalogTranslator
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import FormatterSettingsResponse, GetFormatterSettingsRequest

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle GET /v1/fields/{field_id}/settings.

    Returns the merged settings, a summary for the formatter overview and
    the settings form description.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response
    """
    logger.info(
        "Received formatter settings request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    path_params = event.get("pathParameters") or {}
    query_params = event.get("queryStringParameters") or {}

    params = {
        "field_id": path_params.get("field_id"),
        "langcode": query_params.get("langcode", "en"),
    }

    try:
        request = validate_request(GetFormatterSettingsRequest, params)
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
    config = service.get_config(request.field_id)
    translator = CatalogTranslator(langcode=request.langcode)

    response = FormatterSettingsResponse(
        field_id=request.field_id,
        settings=config.to_settings(),
        summary=summarize_settings(config, translator),
        form=describe_settings_form(config, translator),
    )

    return ResponseBuilder.ok(response.model_dump())
