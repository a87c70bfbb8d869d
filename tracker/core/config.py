from os import getenv

class Settings:
    DATABASE_URL = getenv("DATABASE_URL", "postgresql+psycopg://tracker:tracker@db:5432/tracker")
    SQL_ECHO = getenv("SQL_ECHO", "false").lower() in ("1", "true", "yes")
    LOG_LEVEL = getenv("LOG_LEVEL", "INFO")
    BCRYPT_ROUNDS = int(getenv("BCRYPT_ROUNDS", "12"))  # abaisser en test pour aller plus vite

settings = Settings()
