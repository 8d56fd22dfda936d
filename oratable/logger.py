import logging

logger = logging.getLogger("oratable")
