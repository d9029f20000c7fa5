import os
from typing import Literal
from pydantic import BaseModel, Field


RotationModulus = Literal["interval", "tuple"]


class Settings(BaseModel):
    log_level: str = Field(
        "INFO", description="Default level of the funseq logger (env LOG_LEVEL)."
    )
    rotation_modulus: RotationModulus = Field(
        "interval",
        description=(
            "How rotation counts are normalized. 'interval' reduces n modulo the "
            "length of the rotated range. 'tuple' reduces n modulo the size of the "
            "whole tuple and rejects counts larger than the range."
        ),
    )

    @classmethod
    def load(cls) -> "Settings":
        values = {}

        log_level = os.getenv("LOG_LEVEL")
        if log_level:
            values["log_level"] = log_level.upper()

        rotation_modulus = os.getenv("FUNSEQ_ROTATION_MODULUS")
        if rotation_modulus:
            values["rotation_modulus"] = rotation_modulus.lower()

        return cls(**values)


settings = Settings.load()
