from typing import Optional
from flask import jsonify


class ProbeError(Exception):
    """A terminal failure of one /db-connect request, prefixed by the stage that failed."""

    def __init__(self, stage: str, detail: object):
        self.stage = stage
        self.detail = str(detail)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return f"{self.stage}: {self.detail}"


MISSING_STAGE = "missing parameter"


class MissingParameterError(ProbeError):
    def __init__(self, field: str, env_var: str, reason: str = "not set"):
        self.field = field
        self.env_var = env_var
        self.reason = reason
        super().__init__(MISSING_STAGE, f"{env_var} {reason}")

    @property
    def message(self) -> str:
        return f"{self.env_var} {self.reason}"


class InvalidPortError(MissingParameterError):
    def __init__(self, env_var: str):
        super().__init__("port", env_var, "not set or invalid")


class NetworkConnectError(ProbeError):
    pass


class ProtocolConnectError(ProbeError):
    pass


class PoolConfigError(Exception):
    pass


class DatabaseConnectError(Exception):
    pass


def probe_result(ok: bool, message: str, http_status: Optional[int] = None):
    payload = {"ok": ok, "message": message}
    if http_status is None:
        http_status = 200 if ok else 500
    return jsonify(payload), http_status
