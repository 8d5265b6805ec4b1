import os

NATIVE_MODULE = os.environ.get("SYBSAFE_NATIVE_MODULE")

LIVE_TEST = bool(NATIVE_MODULE) and "SYBASE_SERVER" in os.environ
if LIVE_TEST:
    SERVER = os.environ["SYBASE_SERVER"]
    USER = os.environ.get("SYBASE_USER", "sa")
    PASSWORD = os.environ.get("SYBASE_PASSWORD", "")
    DATABASE = os.environ.get("SYBASE_DATABASE", "tempdb")

    CONNECT_ARGS = [SERVER, USER, PASSWORD]
