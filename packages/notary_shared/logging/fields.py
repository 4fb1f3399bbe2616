"""Log field names emitted by the notary formatters."""

TIMESTAMP = "timestamp"
LEVEL = "level"
LOGGER = "logger"
MESSAGE = "message"
SERVICE = "service"
ENVIRONMENT = "environment"

SUBMISSION_ID = "submission_id"
SUBMISSION_NAME = "submission_name"
