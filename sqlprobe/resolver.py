"""Merge /db-connect query parameters with SQLSERVER_* environment defaults."""
import os
from dataclasses import dataclass, field
from typing import Callable, Mapping, Optional, TypeVar

from .errors import InvalidPortError, MissingParameterError

T = TypeVar("T")

HOST_ENV = "SQLSERVER_HOST"
PORT_ENV = "SQLSERVER_PORT"
USER_ENV = "SQLSERVER_USER"
PASSWORD_ENV = "SQLSERVER_PASSWORD"
DB_ENV = "SQLSERVER_DB"


@dataclass(frozen=True)
class ConnectionSpec:
    host: str
    port: int
    user: str
    password: str = field(repr=False)
    database: Optional[str] = None


def parse_port(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    if not (value.isascii() and value.isdigit()):
        return None
    port = int(value)
    if not 1 <= port <= 65535:
        return None
    return port


def _text(value: Optional[str]) -> Optional[str]:
    # empty strings count as absent
    return value or None


def first_of(*candidates: Optional[T]) -> Optional[T]:
    for c in candidates:
        if c is not None:
            return c
    return None


def _required(
    name: str,
    env_var: str,
    params: Mapping[str, str],
    environ: Mapping[str, str],
    convert: Callable[[Optional[str]], Optional[T]],
) -> T:
    value = first_of(convert(params.get(name)), convert(environ.get(env_var)))
    if value is None:
        if name == "port":
            raise InvalidPortError(env_var)
        raise MissingParameterError(name, env_var)
    return value


def resolve(params: Mapping[str, str], environ: Optional[Mapping[str, str]] = None) -> ConnectionSpec:
    """Build a ConnectionSpec, preferring request values over the environment.

    Fields are checked in the order host, port, user, password and the first
    one that cannot be resolved raises. The database is optional.
    Empty values, from the query or the environment, count as absent.
    """
    if environ is None:
        environ = os.environ

    host = _required("host", HOST_ENV, params, environ, _text)
    port = _required("port", PORT_ENV, params, environ, parse_port)
    user = _required("user", USER_ENV, params, environ, _text)
    password = _required("password", PASSWORD_ENV, params, environ, _text)
    database = first_of(_text(params.get("db")), _text(environ.get(DB_ENV)))

    return ConnectionSpec(host=host, port=port, user=user, password=password, database=database)
