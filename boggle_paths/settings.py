import os
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class Settings:
    BASE_DIR: Path = field(default_factory=lambda: Path(__file__).resolve().parent.parent)

    DICTIONARY_PATH: Path = field(init=False)

    MIN_WORD_LENGTH: int = 3
    MAX_RESULTS: int = 0
    MAX_GRID_CELLS: int = 400

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    PORT: int = 10001

    def __post_init__(self):
        self.DICTIONARY_PATH = self.BASE_DIR / "dictionary.txt"

        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(getattr(self, fld), env_val))


# Fields that may be changed while the service is running
EDITABLE_FIELDS: dict[str, type] = {
    "MIN_WORD_LENGTH": int,
    "MAX_RESULTS": int,
    "MAX_GRID_CELLS": int,
    "DEBUG": bool,
}


def _coerce(current, value):
    if isinstance(current, bool):
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("1", "true", "yes")
    if isinstance(current, int):
        if isinstance(value, (bool, float)):
            raise TypeError(f"expected an integer, got {type(value).__name__}")
        number = int(value)
        if number < 0:
            raise ValueError("must not be negative")
        return number
    if isinstance(current, float):
        return float(value)
    if isinstance(current, Path):
        return Path(value)
    return str(value)


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, /, **values) -> dict[str, str]:
    """Apply editable values to ``cfg``.

    Valid fields are applied even when others fail. Returns field -> error
    message for the ones that were rejected.
    """
    errors: dict[str, str] = {}
    for name, value in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            setattr(cfg, name, _coerce(getattr(cfg, name), value))
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid value {value!r}: {e}"
    return errors


settings = Settings()
