"""Shared logfire configuration."""

import os

import logfire

SERVICE_NAME = os.environ.get("TASK_INSIGHT_SERVICE_NAME", "task-insight")

# Configure logfire if token is set
if os.environ.get("LOGFIRE_TOKEN"):
    logfire.configure(
        service_name=SERVICE_NAME,
        scrubbing=False,
        send_to_logfire="if-token-present",
    )
