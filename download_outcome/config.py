from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    env: str = "production" # Env: ENV
    log_verbose: bool = True # Env: LOG_VERBOSE
    log_level: str = "INFO" # Env: LOG_LEVEL

settings = Settings()
