import hashlib
import os
from dataclasses import dataclass
from typing import Optional

DEFAULT_RECIPE = "greenwich_village"

MAX_SEED = 2**63 - 1

_FALSEY = {"0", "false", "no", ""}


def coerce_seed(raw) -> Optional[int]:
    """Convert an env/query seed (int or str) into a bounded integer.

    Numeric strings are used as-is; any other text is hashed so that the same
    string always yields the same layout variants. Blank means unseeded.
    """
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw % MAX_SEED
    s = str(raw).strip()
    if not s:
        return None
    if s.isdigit():
        return int(s) % MAX_SEED
    h = hashlib.sha256(s.encode("utf-8")).digest()
    return int.from_bytes(h[:8], "big") % MAX_SEED


@dataclass
class CityConfig:
    recipe: str = DEFAULT_RECIPE
    seed: Optional[int] = None
    enable_metrics: bool = True

    @classmethod
    def from_env(cls, **overrides) -> "CityConfig":
        """Build a config from CITYGRID_* environment variables.

        Keyword overrides win over the environment.
        """
        cfg = cls()
        if "CITYGRID_RECIPE" in os.environ:
            cfg.recipe = os.environ["CITYGRID_RECIPE"].strip() or DEFAULT_RECIPE
        cfg.seed = coerce_seed(os.environ.get("CITYGRID_SEED"))
        if "CITYGRID_ENABLE_METRICS" in os.environ:
            cfg.enable_metrics = os.environ["CITYGRID_ENABLE_METRICS"].strip().lower() not in _FALSEY
        for key, value in overrides.items():
            setattr(cfg, key, value)
        return cfg


__all__ = ["CityConfig", "DEFAULT_RECIPE", "coerce_seed"]
