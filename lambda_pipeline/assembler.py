"""Composition of preprocessor, wrapped function and transformers.

``assemble_lambda_handler`` returns a :class:`Pipeline`. Calling a pipeline
with a user function returns a :class:`LambdaEntryPoint`, the callable handed
to AWS Lambda as the function handler::

    @api
    def handler(event, context):
        return {"hello": event["body"]["name"]}

Every stage may return a plain value or an awaitable. Whatever happens, the
completion callback is invoked exactly once per invocation.
"""
import asyncio
import concurrent.futures
import inspect
import time
from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from lambda_pipeline.completion import Callback, Completion
from lambda_pipeline.errors import CompletionError
from lambda_pipeline.observability import elapsed_ms, get_logger, log_exception, log_json

logger = get_logger(__name__)

Preprocessor = Callable[[Any, Any], Any]
Transformer = Callable[[Any, Completion, Any], Any]
UserFunction = Callable[[Any, Any], Any]

WAIT_FLAG = "callback_waits_for_empty_event_loop"


async def _settle(value: Any) -> Any:
    if inspect.isawaitable(value):
        return await value
    return value


def _run_sync(coro: Awaitable[Any]) -> Any:
    try:
        asyncio.get_running_loop()
    except RuntimeError:
        return asyncio.run(coro)
    # Called from inside a running loop: asyncio.run needs a thread of its own.
    with concurrent.futures.ThreadPoolExecutor(max_workers=1) as pool:
        return pool.submit(asyncio.run, coro).result()


def _mark_context(context: Any, wait_for_empty_event_loop: bool) -> None:
    if isinstance(context, MutableMapping):
        context[WAIT_FLAG] = wait_for_empty_event_loop
        return
    try:
        setattr(context, WAIT_FLAG, wait_for_empty_event_loop)
    except (AttributeError, TypeError):
        log_json(logger, "debug", "context_flag_not_settable", context_type=type(context).__name__)


@dataclass(frozen=True)
class Pipeline:
    preprocessor: Preprocessor
    on_success: Transformer
    on_failure: Transformer
    wait_for_empty_event_loop: bool = False

    def __call__(self, fn: UserFunction) -> "LambdaEntryPoint":
        return LambdaEntryPoint(self, fn)


class LambdaEntryPoint:
    def __init__(self, pipeline: Pipeline, fn: UserFunction):
        self.pipeline = pipeline
        self.fn = fn
        self.__name__ = getattr(fn, "__name__", type(self).__name__)
        self.__doc__ = getattr(fn, "__doc__", None)
        self.__wrapped__ = fn

    def __call__(self, event: Any, context: Any, callback: Optional[Callback] = None) -> Any:
        complete = Completion(callback)
        _run_sync(self._run(event, context, complete))
        if callback is None:
            return complete.outcome()
        return None

    async def invoke(self, event: Any, context: Any, callback: Optional[Callback] = None) -> Any:
        complete = Completion(callback)
        await self._run(event, context, complete)
        if callback is None:
            return complete.outcome()
        return None

    async def _run(self, event: Any, context: Any, complete: Completion) -> None:
        start_time = time.perf_counter()
        try:
            _mark_context(context, self.pipeline.wait_for_empty_event_loop)
            event, context = await _settle(self.pipeline.preprocessor(event, context))
            data = await _settle(self.fn(event, context))
            await _settle(self.pipeline.on_success(data, complete, context))
        except Exception as error:
            await self._fail(error, complete, context)
        except BaseException as error:
            # Cancellation and interpreter exits are not translated, only reported.
            if not complete.done:
                complete(error)
            raise

        if not complete.done:
            log_json(logger, "error", "pipeline_not_completed", function=self.__name__)
            complete(CompletionError("pipeline finished without completing"))

        log_json(
            logger,
            "debug",
            "pipeline_invocation_complete",
            function=self.__name__,
            failed=complete.error is not None,
            duration_ms=elapsed_ms(start_time),
        )

    async def _fail(self, error: Exception, complete: Completion, context: Any) -> None:
        if complete.done:
            log_exception(logger, "pipeline_error_after_completion", error, function=self.__name__)
            return
        try:
            await _settle(self.pipeline.on_failure(error, complete, context))
        except Exception as failure_error:
            log_exception(logger, "failure_transformer_failed", failure_error, function=self.__name__)
            if not complete.done:
                complete(failure_error)


def assemble_lambda_handler(
    preprocessor: Preprocessor,
    on_success: Transformer,
    on_failure: Transformer,
    *,
    wait_for_empty_event_loop: bool = False,
) -> Pipeline:
    return Pipeline(
        preprocessor=preprocessor,
        on_success=on_success,
        on_failure=on_failure,
        wait_for_empty_event_loop=wait_for_empty_event_loop,
    )
