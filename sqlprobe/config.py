import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # fixed listen address, no override
    BIND_HOST = "127.0.0.1"
    BIND_PORT = 3001

    DRIVER = os.environ.get("DRIVER", "ODBC Driver 18 for SQL Server")
    ENCRYPT = os.environ.get("ENCRYPT", "yes")
    # "yes" skips server certificate validation; only for local dev servers
    TRUST_SERVER_CERT = os.environ.get("TRUST_SERVER_CERT", "no")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
