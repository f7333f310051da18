"""Error boundary handling for CLI commands.

This module provides a decorator to catch snow-plow errors at CLI entry points
and display clean error messages without stack traces.
"""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from snowplow.core.context import SnowPlowContext
from snowplow.core.errors import SnowPlowError

T = TypeVar("T", bound=Callable[..., Any])


def cli_error_boundary(func: T) -> T:
    """Decorator that reports SnowPlowError and exits with its exit code.

    Must sit below @click.pass_obj so the wrapped function receives the
    SnowPlowContext as its first argument. All other exceptions bubble up
    normally with full stack traces.

    Example:
        @click.command()
        @click.pass_obj
        @cli_error_boundary
        def my_command(ctx: SnowPlowContext) -> None:
            ...
    """

    @functools.wraps(func)
    def wrapper(ctx: SnowPlowContext, *args: Any, **kwargs: Any) -> Any:
        try:
            return func(ctx, *args, **kwargs)
        except SnowPlowError as e:
            for message in e.messages():
                ctx.feedback.error(message)
            raise SystemExit(e.exit_code) from None

    return wrapper  # type: ignore[return-value]
