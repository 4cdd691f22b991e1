import logging
import sys

from content_store.dependencies import get_content_store
from content_store.services.diagnostics import run_checks
from content_store.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

if __name__ == "__main__":
    store = get_content_store()
    try:
        status = run_checks(store)
    except Exception as e:
        logger.error(f"Content check crashed: {e}", exc_info=True)
        status = 2
    sys.exit(status)
