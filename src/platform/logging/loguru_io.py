from collections.abc import Awaitable
from functools import wraps
from inspect import iscoroutinefunction
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])
_P = ParamSpec('_P')
_T = TypeVar('_T')


class LoguruIO:
    """
    Decorator that logs a call's masked arguments and return value at DEBUG
    and its exception on the way out.

    Expected failures (CustomBaseError: ticket not found, toggle refused,
    backend unreachable) are logged as one ERROR line; anything else is logged
    with its traceback. The exception is re-raised unless `reraise=False`.
    Logged content is cut to MAX_CONTENT_LENGTH unless `truncate_content=False`.
    """

    # hook -> wrapper -> caller of the decorated function
    depth = 2

    def __init__(
        self, logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = True
    ) -> None:
        self._logger = logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}

    def _bound(self, depth: int) -> 'LoguruLogger':
        return self._logger.bind(**self.extra).opt(depth=depth)

    def _on_enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        # mask_sensitive walks the whole payload, only pay for it when it is printed
        if settings.DEBUG:
            self._bound(self.depth).debug(
                f'args: {self.mask_sensitive(args)}, kwargs: {self.mask_sensitive(kwargs)}'
            )

    def _on_return(self, return_value: Any) -> None:
        if settings.DEBUG:
            self._bound(self.depth).debug(f'return: {self.mask_sensitive(return_value)}')

    def _on_error(self, e: Exception) -> None:
        # Nested decorated calls see the same exception; log it once, where it was raised
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]

        logger = self._bound(self.depth)
        if isinstance(e, CustomBaseError):
            logger.error(f'{type(e).__name__}({e.status_code}): {e}')
        else:
            logger.exception(f'{type(e).__name__}: {e}')

    def mask_sensitive(self, data: Any) -> Any:
        if isinstance(data, dict):
            processed: Any = {
                key: self.mask_sensitive(should_mask_keyword(key, value))
                for key, value in data.items()
            }
        elif isinstance(data, list | tuple):
            processed = type(data)(self.mask_sensitive(item) for item in data)
        else:
            processed = mask_sensitive(data)

        return truncate_content(processed) if self.truncate_content else processed

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        # Attribute wrapper frames to loguru's file so tracebacks start at the decorated function
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._logger.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    self._on_enter(args, kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    return_value = await cast(Awaitable[Any], func(*args, **kwargs))
                    self._on_return(return_value)
                    return return_value
                except Exception as e:
                    self._on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self._on_enter(args, kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*args, **kwargs)
                self._on_return(return_value)
                return return_value
            except Exception as e:
                self._on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


class Logger:
    """
    `Logger.io` decorates use cases and adapters; `Logger.base` is for ad-hoc lines.

    Usage:
        @Logger.io
        async def execute(self, *, sno: str) -> TicketActivationResult: ...

        @Logger.io(truncate_content=False)  # log full payloads
        def build(...): ...
    """

    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return decorator(func) if func else decorator
