from dotenv import load_dotenv

load_dotenv()

from locale_detection.logging import configure_logging  # noqa: E402
from server import server  # noqa: E402

configure_logging()

server_app = server.handler
