"""One-shot SQL Server connectivity probe.

A probe opens a TCP connection to the target, then performs the login
handshake through the ODBC driver. Nothing is queried and nothing is kept:
both connections are closed as soon as the handshake succeeds. There are no
retries and no timeouts beyond the OS and driver defaults.
"""
import logging
import socket
from contextlib import closing
from typing import Optional

from . import db
from .errors import NetworkConnectError, ProtocolConnectError
from .resolver import ConnectionSpec

logger = logging.getLogger(__name__)

TCP_CONNECT_STAGE = "tcp connect failed"
NODELAY_STAGE = "set_nodelay failed"
PROTOCOL_STAGE = "protocol connect failed"

SUCCESS_MESSAGE = "Successfully connected to SQL Server"


def open_tcp(host: str, port: int) -> socket.socket:
    # bad hostnames (empty or over-long labels) fail IDNA encoding with UnicodeError
    try:
        sock = socket.create_connection((host, port))
    except (OSError, ValueError) as e:
        raise NetworkConnectError(TCP_CONNECT_STAGE, e) from e

    try:
        sock.setsockopt(socket.IPPROTO_TCP, socket.TCP_NODELAY, 1)
    except OSError as e:
        sock.close()
        raise NetworkConnectError(NODELAY_STAGE, e) from e
    return sock


def handshake(conn_str: str) -> None:
    try:
        conn = db.get_conn(conn_str)
    except Exception as e:
        raise ProtocolConnectError(PROTOCOL_STAGE, e) from e

    # login already succeeded; a failed logout does not change the result
    try:
        conn.close()
    except Exception as e:
        logger.warning("closing probe connection failed: %s", e)


def probe(
    spec: ConnectionSpec,
    *,
    driver: Optional[str] = None,
    encrypt: Optional[str] = None,
    trust_server_cert: Optional[str] = None,
) -> str:
    logger.info(
        "probing %s:%s as %s (database=%s)", spec.host, spec.port, spec.user, spec.database or "-"
    )
    conn_str = db.build_conn_str(spec, driver, encrypt, trust_server_cert)

    with closing(open_tcp(spec.host, spec.port)):
        handshake(conn_str)

    logger.info("probe of %s:%s succeeded", spec.host, spec.port)
    return SUCCESS_MESSAGE
