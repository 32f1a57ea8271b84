"""Environment-driven settings for building the rhyme engine."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from rhymer.utils.logging_config import LOG_LEVEL_ENV

DICT_PATH_ENV = "RHYMER_DICT_PATH"
STRICT_RHYMES_ENV = "RHYMER_STRICT_RHYMES"

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(value: Optional[str]) -> bool:
    if not value:
        return False
    return str(value).strip().lower() in _TRUTHY


@dataclass(frozen=True)
class RhymerSettings:
    """Where the dictionary comes from and how trie lookups behave.

    ``dict_path`` of ``None`` means the CMU dictionary shipped with
    :mod:`pronouncing` is used.
    """

    dict_path: Optional[Path] = None
    strict_rhymes: bool = False
    log_level: Optional[str] = None

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RhymerSettings":
        env = os.environ if environ is None else environ
        raw_path = (env.get(DICT_PATH_ENV) or "").strip()
        return cls(
            dict_path=Path(raw_path) if raw_path else None,
            strict_rhymes=_env_flag(env.get(STRICT_RHYMES_ENV)),
            log_level=env.get(LOG_LEVEL_ENV) or None,
        )

    def with_overrides(
        self,
        *,
        dict_path: Optional[Path | str] = None,
        strict_rhymes: Optional[bool] = None,
        log_level: Optional[str] = None,
    ) -> "RhymerSettings":
        """Return a copy where every non-``None`` argument replaces a field."""

        return RhymerSettings(
            dict_path=Path(dict_path) if dict_path is not None else self.dict_path,
            strict_rhymes=self.strict_rhymes if strict_rhymes is None else strict_rhymes,
            log_level=log_level if log_level is not None else self.log_level,
        )


__all__ = ["DICT_PATH_ENV", "STRICT_RHYMES_ENV", "RhymerSettings"]
