"""
Schedule extraction errors

Every failure that can end a schedule request is a ScheduleError subclass with
a stable ``code``. The HTTP layer maps all of them to a generic server error;
the code is what tells the kinds apart in logs and response bodies.
"""


class ScheduleError(Exception):
    """Base exception for all schedule extraction failures."""

    code = "SCHEDULE_ERROR"
    message = "schedule extraction failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class RequestSendFailed(ScheduleError):
    """The upstream request could not be sent or returned a non-2xx status."""

    code = "REQUEST_SEND_FAILED"
    message = "failed to send http request"


class ResponseBodyError(ScheduleError):
    """The upstream response body could not be read to the end."""

    code = "RESPONSE_BODY_ERROR"
    message = "failed while reading server response"


class ScriptMissing(ScheduleError):
    """No ``<script>`` element is a direct child of ``<body>``."""

    code = "SCRIPT_MISSING"
    message = "ssr script not found in response"


class JsContextError(ScheduleError):
    """The script sandbox could not be created."""

    code = "JS_CONTEXT_ERROR"
    message = "could not create javascript context"


class JsExecutionError(ScheduleError):
    """The page script, or reading state back from it, failed inside the sandbox."""

    code = "JS_EXECUTION_ERROR"
    message = "javascript execution error"


class ExtractionTimeout(ScheduleError):
    """Parsing and extraction did not finish within the configured timeout."""

    code = "EXTRACTION_TIMEOUT"
    message = "schedule extraction timed out"


class JsValueMismatch(ScheduleError):
    """The embedded state does not have the expected shape.

    Carries the location of the first mismatch along with the expected and
    actual value kinds, e.g. ``$[0].items[3].program: expected map, got null``.
    """

    code = "JS_VALUE_MISMATCH"
    message = "got a value from doing javascript that wasn't quite what was expected"

    def __init__(self, path: str = "$", expected: str | None = None, actual: str | None = None):
        self.path = path
        self.expected = expected
        self.actual = actual
        detail = f"{path}: expected {expected}, got {actual}" if expected else path
        super().__init__(f"{self.message} ({detail})")


class ParseTimeError(ScheduleError):
    """A show time range is not two ``HH:MM`` values."""

    code = "PARSE_TIME_ERROR"
    message = "failed to parse a time"


__all__ = [
    "ScheduleError",
    "RequestSendFailed",
    "ResponseBodyError",
    "ScriptMissing",
    "JsContextError",
    "JsExecutionError",
    "ExtractionTimeout",
    "JsValueMismatch",
    "ParseTimeError",
]
