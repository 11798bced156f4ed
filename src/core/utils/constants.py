"""Global constants used throughout the application.

This module centralizes all magic numbers, string literals, and configuration
values that are used across multiple modules. Using constants prevents hardcoding
values and makes it easy to change them globally.
"""

from typing import Any, Final

# ============================================================================
# Error Codes
# ============================================================================

# Validation Errors
ERROR_CODE_VALIDATION_FAILED = "VALIDATION_FAILED"
ERROR_CODE_INVALID_CONFIGURATION = "INVALID_CONFIGURATION"

# Not Found Errors
ERROR_CODE_RESOURCE_NOT_FOUND = "NOT_FOUND"
ERROR_CODE_INDEX_OUT_OF_RANGE = "INDEX_OUT_OF_RANGE"

# Rendering Errors
ERROR_CODE_RECURSION_LIMIT_EXCEEDED = "RECURSION_LIMIT_EXCEEDED"

# Settings / DynamoDB Errors
ERROR_CODE_SETTINGS_STORE = "SETTINGS_STORE_ERROR"
ERROR_CODE_SETTINGS_FETCH_FAILED = "SETTINGS_FETCH_FAILED"
ERROR_CODE_SETTINGS_SAVE_FAILED = "SETTINGS_SAVE_FAILED"
ERROR_CODE_SETTINGS_DELETE_FAILED = "SETTINGS_DELETE_FAILED"
ERROR_CODE_SETTINGS_INVALID_FORMAT = "SETTINGS_INVALID_FORMAT"

# ============================================================================
# Pager Defaults
# ============================================================================

DEFAULT_PAGE_INDEX_NAME = "page"
DEFAULT_MAX_PAGES_TO_SHOW = 5
DEFAULT_VIEW_MODE = "default"

DEFAULT_PAGER_SETTINGS: Final[dict[str, Any]] = {
    "pageIndexName": DEFAULT_PAGE_INDEX_NAME,
    "navigatePreviousNext": True,
    "navigateFirstLast": True,
    "navigateByNumbers": True,
    "maxPagesToShow": DEFAULT_MAX_PAGES_TO_SHOW,
    "showPageSummary": False,
}

PAGE_INDEX_NAME_PATTERN = r"^[A-Za-z_][A-Za-z0-9_-]*$"

NOT_FOUND_POLICY_RAISE = "raise"
NOT_FOUND_POLICY_EMPTY = "empty"

RECURSION_POLICY_RAISE = "raise"
RECURSION_POLICY_SKIP = "skip"

# ============================================================================
# Rendering Constraints
# ============================================================================

MAX_RENDER_DEPTH = 20

# ============================================================================
# Navigation Link Kinds
# ============================================================================

LINK_FIRST = "first"
LINK_PREVIOUS = "previous"
LINK_PAGE = "page"
LINK_NEXT = "next"
LINK_LAST = "last"

# ============================================================================
# API Gateway Configuration
# ============================================================================

CORS_ORIGIN = "*"
CORS_METHODS = "GET,POST,PUT,DELETE,OPTIONS"
CORS_HEADERS = "Content-Type,Authorization,X-Api-Key"
EXPOSE_HEADERS = "Content-Type,Content-Length"
DEFAULT_CONTENT_TYPE = "application/json"

# ============================================================================
# Environment Variable Names
# ============================================================================

ENV_AWS_ENDPOINT_URL = "AWS_ENDPOINT_URL"
ENV_FORMATTER_SETTINGS_TABLE_NAME = "FORMATTER_SETTINGS_TABLE_NAME"
ENV_AWS_REGION = "AWS_REGION"
