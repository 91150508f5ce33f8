from __future__ import annotations

import logging

from pydantic import BaseModel, Field, field_validator

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


class DisplaySettings(BaseModel):
    """Window geometry and frame rate for the pygame board."""

    square_size: int = Field(default=80, ge=40, le=160, description="Pixel size of one board square")
    margin: int = Field(default=40, ge=0, le=200, description="Border around the board")
    info_height: int = Field(default=180, ge=120, le=400, description="Height of the status panel")
    fps: int = Field(default=60, ge=1, le=240, description="Frame rate cap")


class AppSettings(BaseModel):
    text_mode: bool = Field(default=False, description="Play in the terminal instead of a window")
    log_level: str = Field(default="warning", description="Logging level name")
    display: DisplaySettings = Field(default_factory=DisplaySettings)

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v):
        level = str(v).lower()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {_LOG_LEVELS}")
        return level

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper())
