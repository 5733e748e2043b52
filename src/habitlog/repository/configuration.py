# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from habitlog import configuration


class ConfigurationRepository:
    def __init__(self) -> None:
        self._config: Optional[configuration.Configuration] = None

    @property
    def config(self) -> configuration.Configuration:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        loaded = load(configuration.APP_CONFIG_PATH.read_text(), Loader=Loader)
        if loaded is None:
            raise ValueError(f"empty configuration: {configuration.APP_CONFIG_PATH}")

        # Fill in keys added after the file was first written
        defaults = configuration.get_default_configuration()
        for key, value in defaults.items():
            if key not in loaded:
                loaded[key] = value

        self._config = cast(configuration.Configuration, loaded)

    def __save_data(self, config: configuration.Configuration) -> None:
        configuration.APP_CONFIG_PATH.write_text(
            dump(dict(config), Dumper=Dumper, allow_unicode=True)
        )

    def get_config(self) -> configuration.Configuration:
        return deepcopy(self.config)

    def update_config(
        self,
        collation_locale: Optional[str] = None,
        weekly_goal: Optional[int] = None,
        chart_period_days: Optional[int] = None,
        default_sort: Optional[str] = None,
        seed_when_empty: Optional[bool] = None,
        data_path: Optional[str] = None,
        remove_data_path: bool = False,
    ) -> None:
        config = self.config
        if collation_locale is not None:
            config["collation_locale"] = collation_locale
        if weekly_goal is not None:
            config["weekly_goal"] = weekly_goal
        if chart_period_days is not None:
            config["chart_period_days"] = chart_period_days
        if default_sort is not None:
            config["default_sort"] = default_sort
        if seed_when_empty is not None:
            config["seed_when_empty"] = seed_when_empty
        if data_path is not None:
            config["data_path"] = data_path

        if remove_data_path:
            config["data_path"] = None

        self.__save_data(config)

    def reload(self) -> None:
        self._config = None


CONFIGURATION_REPO = ConfigurationRepository()
