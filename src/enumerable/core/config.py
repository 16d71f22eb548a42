import os
from pydantic import BaseModel, Field


class Settings(BaseModel):
    FAST_PATH: bool = Field(
        True,
        description="Use built-in list/tuple iteration instead of the generic index loop.",
    )
    LOG_LEVEL: str = Field("INFO", description="Default level of the package logger.")

    @classmethod
    def load(cls) -> "Settings":
        overrides = {}

        fast_path = os.getenv("ENUMERABLE_FAST_PATH")
        if fast_path is not None:
            overrides["FAST_PATH"] = fast_path

        log_level = os.getenv("ENUMERABLE_LOG_LEVEL") or os.getenv("LOG_LEVEL")
        if log_level:
            overrides["LOG_LEVEL"] = log_level

        return cls(**overrides)


settings = Settings.load()
