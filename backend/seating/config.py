from functools import lru_cache
from pathlib import Path
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field


load_dotenv()


class Settings(BaseModel):
    reservations_path: Path = Field(default=Path("./data/reservations.txt"))
    total_capacity: int = Field(default=30, ge=0)
    log_level: str = Field(default="INFO")


@lru_cache
def get_settings() -> Settings:
    return Settings(
        reservations_path=Path(
            os.getenv("RESERVATIONS_PATH", str(Settings.model_fields["reservations_path"].default))
        ),
        total_capacity=int(os.getenv("TOTAL_CAPACITY", str(Settings.model_fields["total_capacity"].default))),
        log_level=os.getenv("LOG_LEVEL", Settings.model_fields["log_level"].default).upper(),
    )
