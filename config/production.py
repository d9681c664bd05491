import os

from .config import *  # noqa: F401,F403

HOST = os.getenv("HOST", "0.0.0.0")
DEBUG = False
