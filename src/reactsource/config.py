"""Runtime settings for the mass source computation."""

from __future__ import annotations

import logging

import numpy as np
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings bound to a ``MassSourceComputer`` at construction.

    Values not passed explicitly are read from ``REACTSOURCE_*`` environment
    variables (``REACTSOURCE_VALIDATE_INPUTS``, ``REACTSOURCE_DTYPE``,
    ``REACTSOURCE_LOG_LEVEL``). Invalid values raise
    ``pydantic.ValidationError``.

    Attributes:
        validate_inputs: Check preconditions on every call. With ``False`` the
            checks are skipped and inconsistent inputs give undefined results.
        dtype: Working numeric type of the scratch and output buffers. Use
            ``"object"`` for exact or dual-number arithmetic.
        log_level: Level name for the package logger.
    """

    model_config = SettingsConfigDict(env_prefix="REACTSOURCE_", frozen=True)

    validate_inputs: bool = True
    dtype: str = "float64"
    log_level: str = "WARNING"

    @field_validator("dtype")
    @classmethod
    def _known_dtype(cls, value: str) -> str:
        try:
            np.dtype(value)
        except TypeError as exc:
            raise ValueError(f"Unknown dtype: {value!r}") from exc
        return value

    @field_validator("log_level")
    @classmethod
    def _known_level(cls, value: str) -> str:
        value = value.upper()
        if not isinstance(logging.getLevelName(value), int):
            raise ValueError(f"Unknown log level: {value!r}")
        return value

    @property
    def numpy_dtype(self) -> np.dtype:
        return np.dtype(self.dtype)
