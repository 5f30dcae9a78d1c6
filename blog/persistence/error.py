"""Translation of driver failures into domain errors."""

import functools
from typing import Awaitable, Callable, ParamSpec, TypeVar

import logfire
from sqlalchemy.exc import DBAPIError, InterfaceError, OperationalError

from blog.domain.error import StorageUnavailableError

P = ParamSpec("P")
R = TypeVar("R")


def storage_errors(
    func: Callable[P, Awaitable[R]],
) -> Callable[P, Awaitable[R]]:
    """Raise StorageUnavailableError when the database can't be reached.

    Constraint violations (IntegrityError) pass through untouched so
    services can react to them.
    """

    @functools.wraps(func)
    async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except (OperationalError, InterfaceError, OSError) as e:
            logfire.error(
                "Storage unavailable", operation=func.__qualname__, error=str(e)
            )
            raise StorageUnavailableError(str(e)) from e
        except DBAPIError as e:
            if not e.connection_invalidated:
                raise
            logfire.error(
                "Storage connection lost", operation=func.__qualname__, error=str(e)
            )
            raise StorageUnavailableError(str(e)) from e

    return wrapper
