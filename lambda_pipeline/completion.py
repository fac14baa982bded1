from typing import Any, Callable, Optional

from lambda_pipeline.errors import CompletionError

Callback = Callable[[Optional[BaseException], Any], None]


class Completion:
    """Single-shot ``(error, result)`` callback handed to the transformers.

    The first call records the outcome and forwards it to ``callback`` when one
    was given. Any further call raises :class:`CompletionError`.
    """

    def __init__(self, callback: Optional[Callback] = None):
        self._callback = callback
        self._done = False
        self._error: Optional[BaseException] = None
        self._result: Any = None

    @property
    def done(self) -> bool:
        return self._done

    @property
    def error(self) -> Optional[BaseException]:
        return self._error

    def __call__(self, error: Optional[BaseException] = None, result: Any = None) -> None:
        if self._done:
            raise CompletionError("completion callback invoked more than once")
        self._done = True
        self._error = error
        self._result = result
        if self._callback is not None:
            self._callback(error, result)

    def outcome(self) -> Any:
        if not self._done:
            raise CompletionError("invocation has not completed")
        if self._error is not None:
            raise self._error
        return self._result
