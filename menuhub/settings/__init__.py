from pathlib import Path

import environ

BASE_DIR = Path(__file__).resolve().parent.parent.parent

env = environ.Env()
environ.Env.read_env((BASE_DIR / ".env").as_posix())  # reading .env file

ENV_TYPE = env.str("ENV_TYPE", default="DEVELOPMENT")
