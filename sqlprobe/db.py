from typing import Optional

from .config import Config
from .resolver import ConnectionSpec


def odbc_value(value: str) -> str:
    # braces let values carry ';' and '='; a literal '}' is doubled
    if any(ch in value for ch in ";{}=") or value != value.strip():
        return "{" + value.replace("}", "}}") + "}"
    return value


def build_conn_str(
    spec: ConnectionSpec,
    driver: Optional[str] = None,
    encrypt: Optional[str] = None,
    trust_server_cert: Optional[str] = None,
) -> str:
    driver = driver or Config.DRIVER
    encrypt = encrypt or Config.ENCRYPT
    trust_server_cert = trust_server_cert or Config.TRUST_SERVER_CERT

    conn_str = (
        f"DRIVER={{{driver}}};"
        f"SERVER={odbc_value(spec.host)},{spec.port};"
        f"UID={odbc_value(spec.user)};"
        f"PWD={odbc_value(spec.password)};"
        f"Encrypt={encrypt};"
        f"TrustServerCertificate={trust_server_cert};"
    )
    if spec.database:
        conn_str += f"DATABASE={odbc_value(spec.database)};"
    return conn_str


def get_conn(conn_str: str):
    # pyodbc needs the unixODBC runtime, so it is loaded on first connect
    import pyodbc

    return pyodbc.connect(conn_str)
