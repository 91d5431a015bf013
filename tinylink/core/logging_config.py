import logging
import sys

from tinylink.core.config import Settings, settings as default_settings

def configure_logging(settings: Settings = default_settings):
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )
    # basicConfig only takes effect once per process
    logging.getLogger().setLevel(settings.log_level)

    logging.getLogger("uvicorn.error").propagate = True

    # request logging is done by the tracing middleware
    logging.getLogger("uvicorn.access").disabled = True

    return logging.getLogger("tinylink")
