"""
Lambda handler rendering one page of a paginated text field.
"""

import json
from typing import Any

from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from core.models.errors import IndexOutOfRangeError
from core.utils.decorators import api_gateway_handler
from core.utils.request import QueryUrlBuilder, RequestParams
from core.utils.response import ResponseBuilder
from core.utils.validators import sanitize_validation_errors, validate_request

from .models import RenderTextFieldRequest
from .service import RenderTextFieldService

logger = Logger(UTC=True)
tracer = Tracer()
metrics = Metrics()


@api_gateway_handler
@tracer.capture_lambda_handler
@metrics.log_metrics()
def handler(event: dict[str, Any], context: LambdaContext) -> dict[str, Any]:
    """
    Handle POST /v1/fields/{field_id}/render.

    The body carries the field items; the page index comes from the query
    string. A page that does not exist yields 404.

    Args:
        event: API Gateway Lambda proxy event
        context: AWS Lambda execution context

    Returns:
        API Gateway-compatible HTTP response with the pager view-model
    """
    logger.info(
        "Received text field render request",
        extra={
            "http_method": event.get("httpMethod"),
            "path": event.get("path"),
            "query_params": event.get("queryStringParameters"),
            "request_id": getattr(context, "aws_request_id", None),
        },
    )

    path_params = event.get("pathParameters") or {}

    try:
        body = json.loads(event.get("body") or "{}")
    except json.JSONDecodeError:
        return ResponseBuilder.bad_request("Invalid JSON body")

    if not isinstance(body, dict):
        return ResponseBuilder.bad_request("Invalid request body, expected a JSON object")

    params = {**body, "field_id": path_params.get("field_id")}

    try:
        request = validate_request(RenderTextFieldRequest, params)
    except ValidationError as exc:
        logger.error(
            "Request validation failed",
            extra={"errors": exc.errors()},
        )
        return ResponseBuilder.bad_request(
            message="Invalid request params",
            details={"errors": sanitize_validation_errors(list(exc.errors()))},
        )

    service = RenderTextFieldService()

    try:
        view = service.render(
            field_id=request.field_id,
            items=request.items,
            request=RequestParams.from_event(event),
            url_builder=QueryUrlBuilder.from_event(event),
            langcode=request.langcode,
        )
    except IndexOutOfRangeError as exc:
        logger.warning(
            "Requested page does not exist",
            extra={"field_id": request.field_id, **exc.details},
        )
        return ResponseBuilder.not_found(
            "Page not found",
            error=exc.error_code,
            details=exc.details,
        )

    return ResponseBuilder.ok(view.to_payload())
