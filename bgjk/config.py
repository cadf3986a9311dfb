from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

CONFIG_PATH = Path(__file__).parent / "config.yaml"


@dataclass(frozen=True)
class BGJKConfig:
    """
    Налаштування запиту.
    max_iterations: ліміт ітерацій головного циклу; None — без ліміту.
    """
    max_iterations: Optional[int] = 1000

    @classmethod
    def from_yaml(cls, path: Path = CONFIG_PATH) -> BGJKConfig:
        path = Path(path)
        if path.exists():
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
            return cls(**{k: v for k, v in data.items() if k in cls.__dataclass_fields__})
        return cls()


CONFIG = BGJKConfig.from_yaml()
