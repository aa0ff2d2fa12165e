from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gpsd_host: str = "localhost"
    gpsd_port: int = 2947
    queue_max_size: int = 10
    timeout_seconds: float = 5.0
    log_level: str = "INFO"

    model_config = {"env_prefix": "NMEASTREAM_"}
