"""Canonical structured logging field names.

Error sinks and the HTTP boundary emit these keys so log consumers can index
failures by kind and status without parsing rendered messages.
"""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
EVENT = "event"

# Request correlation fields.
REQUEST_ID = "request_id"
METHOD = "method"
PATH = "path"
LOCALE = "locale"

# Classified error fields.
ERROR_EVENT = "error_classified"
ERROR_ID = "error_id"
ERROR_KIND = "error_kind"
HTTP_STATUS = "http_status"
STACK_TRACE = "stack_trace"
ERROR_TYPE = "error_type"

# Common service-level fields.
SERVICE = "service"
ENVIRONMENT = "environment"
