from __future__ import annotations

import functools
import logging
import os
import reprlib
from typing import Any, Callable, ClassVar, Optional, Type, TypeVar, Union, cast, overload

__all__ = ["TRACE", "LoggingDescriptor"]

TRACE = logging.DEBUG - 6
logging.addLevelName(TRACE, "TRACE")

_F = TypeVar("_F", bound=Callable[..., Any])

_repr_instance = reprlib.Repr()
_repr_instance.maxother = 100
_repr_instance.maxstring = 100


def _repr(o: Any) -> str:
    return _repr_instance.repr(o)


def _env_flag(name: str) -> bool:
    return name in os.environ and os.environ[name] not in ("", "0", "false", "False")


class LoggingDescriptor:
    """Class level access to a `logging.Logger` named after the owning class.

    Usage::

        class Walker:
            _logger = LoggingDescriptor()

            def walk(self) -> None:
                self._logger.debug(lambda: f"expensive {message}")

    Messages may be given as callables, they are only evaluated if the level is enabled.
    """

    _call_tracing_enabled: ClassVar[bool] = _env_flag("GLOBDIR_CALL_TRACING_ENABLED")
    _call_tracing_default_level: ClassVar[int] = TRACE

    def __init__(self, *, name: Optional[str] = None) -> None:
        self._name = name
        self._owner: Optional[Type[Any]] = None
        self._logger: Optional[logging.Logger] = None

    def __set_name__(self, owner: Type[Any], name: str) -> None:
        self._owner = owner

    def __get__(self, obj: Any, objtype: Optional[Type[Any]] = None) -> LoggingDescriptor:
        return self

    @property
    def logger(self) -> logging.Logger:
        if self._logger is None:
            if self._name is not None:
                name = self._name
            elif self._owner is not None:
                name = f"{self._owner.__module__}.{self._owner.__qualname__}"
            else:
                name = "globdir"

            self._logger = logging.getLogger(name)

        return self._logger

    @property
    def name(self) -> str:
        return self.logger.name

    def is_enabled_for(self, level: int) -> bool:
        return self.logger.isEnabledFor(level)

    def log(
        self,
        level: int,
        msg: Union[str, Callable[[], str]],
        *args: Any,
        stacklevel: int = 2,
        **kwargs: Any,
    ) -> None:
        if self.is_enabled_for(level):
            self.logger.log(level, msg() if callable(msg) else msg, *args, stacklevel=stacklevel, **kwargs)

    def trace(self, msg: Union[str, Callable[[], str]], *args: Any, **kwargs: Any) -> None:
        self.log(TRACE, msg, *args, stacklevel=3, **kwargs)

    def debug(self, msg: Union[str, Callable[[], str]], *args: Any, **kwargs: Any) -> None:
        self.log(logging.DEBUG, msg, *args, stacklevel=3, **kwargs)

    @classmethod
    def set_call_tracing(cls, value: bool) -> None:
        cls._call_tracing_enabled = value

    @overload
    def call(self, _func: _F) -> _F: ...

    @overload
    def call(self, *, level: Optional[int] = None, exiting: bool = False) -> Callable[[_F], _F]: ...

    def call(
        self, _func: Optional[_F] = None, *, level: Optional[int] = None, exiting: bool = False
    ) -> Union[_F, Callable[[_F], _F]]:
        """Logs calls of the decorated function if call tracing is enabled.

        Generator functions are logged when they are called, not while they are iterated.
        """

        def _decorator(func: _F) -> _F:
            skip_self = "." in func.__qualname__.split(".<locals>.")[-1]

            @functools.wraps(func)
            def _wrapper(*args: Any, **kwargs: Any) -> Any:
                if not type(self)._call_tracing_enabled:
                    return func(*args, **kwargs)

                log_level = level if level is not None else type(self)._call_tracing_default_level
                message_args = args[1:] if skip_self else args
                self.log(
                    log_level,
                    lambda: "{}({})".format(
                        func.__qualname__,
                        ", ".join(
                            [*(_repr(a) for a in message_args), *(f"{k}={_repr(v)}" for k, v in kwargs.items())]
                        ),
                    ),
                    stacklevel=3,
                )

                result = func(*args, **kwargs)

                if exiting:
                    self.log(log_level, lambda: f"{func.__qualname__}(...) -> {_repr(result)}", stacklevel=3)

                return result

            return cast(_F, _wrapper)

        if _func is not None:
            return _decorator(_func)

        return _decorator

    def __repr__(self) -> str:
        logger = self.logger
        level = logging.getLevelName(logger.getEffectiveLevel())
        return f"{type(self).__name__}(name={logger.name!r}, level={level!r})"
