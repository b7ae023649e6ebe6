import logging

from rich.console import Console
from rich.logging import RichHandler

__version__ = "0.3.0"

logging.basicConfig(
    level="INFO",
    format="%(message)s",
    datefmt="[%X]",
    handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True)],
)

log = logging.getLogger("graphql2jsonschema")
