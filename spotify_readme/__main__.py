"""Entry point for the listening summary update"""
import json
import logging
import sys
import traceback

from spotify_readme.config import settings, SECRET_FIELDS
from spotify_readme.update import ReadmeUpdater

logger = logging.getLogger(__name__)

def run() -> None:
    """Update the generated document once."""
    try:
        logging.basicConfig(level=settings.LOG_LEVEL, format='%(message)s')

        # Log config (excluding sensitive data)
        logger.info("Using configuration:")
        safe_config = settings.model_dump(exclude=SECRET_FIELDS)
        logger.info(json.dumps(safe_config, indent=2))

        output_path = ReadmeUpdater(settings).run()
        logger.info(f"Listening summary written to {output_path}")

    except Exception as e:
        logger.error(f"Error during update: {e}")
        traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    run()
