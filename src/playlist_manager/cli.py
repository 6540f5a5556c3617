"""
Playlist Manager entrypoint.

Loads config, configures logging and runs the menu loop on stdin/stdout.
Logs go to stderr so they never mix with the menu.
"""

import sys
import logging
import random
from typing import Optional

from .config import Config, ConfigError
from .menu import MenuLoop
from .store import PlaylistStore

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s"

logger = logging.getLogger(__name__)


def build_store(config: Config) -> PlaylistStore:
    """Create the store, seeding its shuffle source if configured."""
    seed = config.shuffle_seed
    if seed is not None:
        logger.info(f"Shuffle seed: {seed}")
    return PlaylistStore(rng=random.Random(seed))


def main(config_path: Optional[str] = None) -> int:
    """Main entrypoint. Returns the process exit status."""
    logging.basicConfig(level=logging.ERROR, format=LOG_FORMAT, stream=sys.stderr)

    try:
        config = Config.load(config_path)
    except ConfigError as e:
        logger.error(f"Invalid configuration: {e}")
        return 1

    logging.getLogger().setLevel(config.log_level)
    logger.info(f"Config loaded: {config}")

    try:
        MenuLoop(build_store(config), title=config.title).run()
        return 0

    except EOFError:
        logger.info("End of input; exiting")
        return 0
    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except Exception as e:
        logger.error(f"Playlist manager failed: {e}", exc_info=True)
        return 1

