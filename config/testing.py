from .config import *  # noqa: F401,F403

DEBUG = False
TESTING = True

# Tests inject an in-memory log sheet; never replay a real spreadsheet.
SEED_FROM_LOG = False
LOG_POLICY = "action_tag"
