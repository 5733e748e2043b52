# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "habitlog"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# Replaced by load_data_path_configuration() when config sets data_path
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)

STORAGE_KEY = "personal_dashboard_v1"


class Configuration(TypedDict):
    data_path: Optional[str]
    collation_locale: str
    weekly_goal: int
    chart_period_days: int
    default_sort: str
    seed_when_empty: bool


def get_default_configuration() -> Configuration:
    return {
        "data_path": None,
        "collation_locale": "ja",
        "weekly_goal": 7,
        "chart_period_days": 7,
        "default_sort": "date-desc",
        "seed_when_empty": True,
    }


def load_data_path_configuration() -> None:
    """
    Load the configuration and set DATA_PATH dynamically.

    Must run after the config file exists and before the entry
    repository is created.
    """
    global DATA_PATH

    if not APP_CONFIG_PATH.is_file():
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        DATA_PATH = Path(data_path_setting)
