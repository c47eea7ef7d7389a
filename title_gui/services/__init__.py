from .clients import get_http_client  # noqa: F401
from .dispatcher import RequestDispatcher, build_url  # noqa: F401
