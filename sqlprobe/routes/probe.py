import logging

from flask import Blueprint, current_app, request

from ..errors import ProbeError, probe_result
from ..prober import probe
from ..resolver import resolve

bp = Blueprint("probe", __name__)
logger = logging.getLogger(__name__)


@bp.get("/db-connect")
def db_connect():
    # caller-side faults (missing params) also answer 500
    try:
        spec = resolve(request.args)
        message = probe(
            spec,
            driver=current_app.config["DRIVER"],
            encrypt=current_app.config["ENCRYPT"],
            trust_server_cert=current_app.config["TRUST_SERVER_CERT"],
        )
    except ProbeError as e:
        logger.warning("db-connect failed: %s", e.message)
        return probe_result(False, e.message)

    return probe_result(True, message)
