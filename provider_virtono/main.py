"""Composition root: logging and the type registry."""

from provider_virtono import apis
from provider_virtono.config import settings
from provider_virtono.runtime.scheme import Scheme
from provider_virtono.utils.logger import get_logger, setup_logging

logger = get_logger(__name__)


def create_scheme() -> Scheme:
    """Build a scheme with every kind registered.

    Call once at start-up, before any object is encoded or decoded. A
    registration conflict propagates and should abort the process.
    """
    scheme = Scheme()
    apis.add_to_scheme(scheme)
    return scheme


def main() -> Scheme:
    setup_logging()
    scheme = create_scheme()
    logger.info(
        f"{settings.PROJECT_NAME} {settings.VERSION} ready",
        extra={"kinds": [str(gvk) for gvk in scheme.all_known_types()]},
    )
    return scheme


if __name__ == "__main__":
    main()
