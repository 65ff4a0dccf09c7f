"""
Embedded State Extraction Service

Reads the server-rendered application state out of a Nuxt page. The state is
assigned to ``window.__NUXT__`` by an inline script, usually as a function
call rather than a plain literal, so the script is run in a QuickJS sandbox
and the state is read back as JSON.

Reading back through ``JSON.stringify`` means non-finite numbers (``NaN``,
``Infinity``) arrive as null and keys holding ``undefined`` are dropped. A
schedule carrying such values therefore fails shape validation instead of
yielding non-finite timestamps, which JSON output could not represent anyway.
"""
import json
import logging
from typing import Any

import quickjs  # type: ignore

from radio_schedule.errors import JsContextError, JsExecutionError, JsValueMismatch, ScriptMissing
from radio_schedule.utils.html_document import find_first_body_script, text_of


logger = logging.getLogger(__name__)

WINDOW_STUB = "let window = {};"
SCHEDULE_STATE_PATH = "window.__NUXT__.state.schedule.schedule"


def create_sandbox(time_limit_seconds: float, memory_limit_bytes: int) -> quickjs.Context:
    """
    Create a fresh, bounded script context with a stub ``window`` global

    QuickJS contexts have no network or filesystem bindings; the limits bound
    CPU time and heap size for everything evaluated in the context.

    Raises:
        JsContextError: If the context cannot be created or seeded
    """
    try:
        context = quickjs.Context()
        context.set_time_limit(time_limit_seconds)
        context.set_memory_limit(memory_limit_bytes)
        context.eval(WINDOW_STUB)
    except (quickjs.JSException, MemoryError, RuntimeError) as e:
        logger.error(f"Failed to create script sandbox: {e}")
        raise JsContextError(f"could not create javascript context: {e}") from e
    return context


def evaluate_state(
    script: str,
    state_path: str,
    *,
    time_limit_seconds: float = 5.0,
    memory_limit_bytes: int = 64 * 1024 * 1024
) -> Any:
    """
    Run a page script and read one global value back as plain Python data

    Args:
        script: Script source taken from the page
        state_path: Expression naming the value to read, e.g. ``window.__NUXT__.state``

    Keyword Args:
        time_limit_seconds: CPU time budget for the context
        memory_limit_bytes: Heap budget for the context

    Returns:
        The value decoded from JSON: None, bool, int, float, str, list or dict

    Raises:
        JsContextError: If the sandbox cannot be created
        JsExecutionError: If the script or the path read throws, or a limit is hit
        JsValueMismatch: If the path evaluates to ``undefined``
    """
    context = create_sandbox(time_limit_seconds, memory_limit_bytes)

    try:
        logger.debug(f"  Executing page script ({len(script)} chars)...")
        context.eval(script)
        serialized = context.eval(f"JSON.stringify({state_path})")
    except (quickjs.JSException, MemoryError) as e:
        logger.error(f"Page script execution failed: {e}")
        raise JsExecutionError(f"javascript execution error: {e}") from e

    if serialized is None:
        logger.error(f"{state_path} is undefined after running page script")
        raise JsValueMismatch("$", "value", "undefined")

    return json.loads(serialized)


def extract_schedule_state(
    document,
    *,
    time_limit_seconds: float = 5.0,
    memory_limit_bytes: int = 64 * 1024 * 1024
) -> Any:
    """
    Pull the schedule state out of a parsed Radio 357 page

    Args:
        document: Parsed HTML document

    Returns:
        Structured value tree found at ``window.__NUXT__.state.schedule.schedule``

    Raises:
        ScriptMissing: If ``<body>`` has no direct ``<script>`` child
        JsContextError, JsExecutionError, JsValueMismatch: See evaluate_state
    """
    script = find_first_body_script(document)
    if script is None:
        logger.error("No <script> element found directly under <body>")
        raise ScriptMissing()

    return evaluate_state(
        text_of(script),
        SCHEDULE_STATE_PATH,
        time_limit_seconds=time_limit_seconds,
        memory_limit_bytes=memory_limit_bytes,
    )
