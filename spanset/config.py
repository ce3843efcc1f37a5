from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from spanset.spanset import ScanMode

################################################################################
# Config
################################################################################

CONFIG_FILE = Path('.spanset.yml')


@dataclass
class Config:
    # Scan used by the contained/intersected commands.
    scan: ScanMode = ScanMode.EARLY_STOP
    # Printed between spans when a set is rendered.
    separator: str = ' '
    # Coloured message marks.
    color: bool = True

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> 'Config':
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        config = cls()
        if 'scan' in raw:
            try:
                config.scan = ScanMode(raw['scan'])
            except ValueError:
                options = ', '.join(mode.value for mode in ScanMode)
                raise ValueError(f"Invalid value for 'scan': {raw['scan']!r}. Must be one of {options}.") from None
        if 'separator' in raw:
            if not isinstance(raw['separator'], str):
                raise ValueError(f"Invalid value for 'separator': {raw['separator']!r}. Must be a string.")
            config.separator = raw['separator']
        if 'color' in raw:
            if not isinstance(raw['color'], bool):
                raise ValueError(f"Invalid value for 'color': {raw['color']!r}. Must be true or false.")
            config.color = raw['color']
        return config


def load_config(path: Path | None = None) -> Config:
    """
    Reads the YAML config file. A missing default file means defaults; a
    missing file that was asked for explicitly is an error.
    """
    if path is None:
        path = CONFIG_FILE
        if not path.exists():
            return Config()

    with open(path, 'rt', encoding='utf-8') as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return Config()
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(raw).__name__}")
    return Config.from_dict(raw)
