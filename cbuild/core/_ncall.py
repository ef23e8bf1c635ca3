from __future__ import annotations

from typing import Any, Callable


class NCall:
    function: Callable
    args: dict[str, Any] | list[Any] | None
    nargs: dict[str, Any] | None
    error_map: dict[Any, Any] | None

    def __init__(
        self,
        function: Callable,
        args: dict[str, Any] | list | None = None,
        nargs: dict[str, Any] | None = None,
        error_map: dict[Any, Any] | None = None,
    ):
        self.function = function
        self.args = args
        self.nargs = nargs
        self.error_map = error_map

    def __repr__(self) -> str:
        return str(self.function)

    def invoke(self, return_error: bool = False) -> Any:
        """Invoke the native function.

        Exceptions whose type is a key of the error map are translated.
        A ``None`` mapping swallows the exception and, with
        ``return_error``, hands it back as the second tuple element.
        Any other mapping is an error class raised with the native
        message and chained to the native exception.
        """
        args = self.args if self.args is not None else dict()
        nargs = self.nargs if self.nargs is not None else dict()
        if isinstance(args, dict):
            kwargs = args | nargs
        else:
            kwargs = nargs
        try:
            if isinstance(args, list):
                result = self.function(*args, **kwargs)
            else:
                result = self.function(**kwargs)
            return (result, None) if return_error else result
        except Exception as e:
            if self.error_map is not None:
                error = self._map_error(e)
                if error is not None:
                    if self.error_map[error] is None:
                        return (None, e) if return_error else None
                    raise self.error_map[error](str(e)) from e
            raise

    def _map_error(self, e: Exception) -> Any:
        assert self.error_map is not None
        if type(e) in self.error_map:
            return type(e)
        for key in self.error_map:
            if isinstance(key, type) and isinstance(e, key):
                return key
        return None
