import json
import argparse
from pathlib import Path
from typing import Any, Dict, Tuple, Type
from pydantic.fields import FieldInfo
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource


class ArgparseConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A settings source class that loads variables from command-line arguments.
    It dynamically creates arguments based on the fields defined in the Pydantic settings class.
    Unknown arguments are left alone so the source can live next to other parsers.
    """

    def __init__(self, settings_cls: Type[BaseSettings]):
        super().__init__(settings_cls)
        self.args, self.unknown = self._parse_args()

    def _parse_args(self):
        parser = argparse.ArgumentParser(
            description="Command line arguments", add_help=False, allow_abbrev=False
        )
        for field_name, field in self.settings_cls.model_fields.items():
            parser.add_argument(
                f"--{field_name}",
                help=f"{field_name} setting, type= {field.annotation}",
            )
        return parser.parse_known_args()

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        field_value = getattr(self.args, field_name, None)
        return field_value, field_name, False

    def __call__(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        for field_name in self.settings_cls.model_fields:
            field_value = getattr(self.args, field_name, None)
            if field_value is not None:
                d[field_name] = field_value
        return d


class JsonConfigSettingsSource(PydanticBaseSettingsSource):
    """
    A simple settings source class that loads variables from a JSON file
    in the working directory (``config.json`` unless the settings class
    overrides ``json_config_path``).
    """

    def _path(self) -> Path:
        return Path(getattr(self.settings_cls, "json_config_path", "config.json"))

    def _read(self) -> Dict[str, Any]:
        path = self._path()
        if not path.exists():
            return {}
        encoding = self.config.get("env_file_encoding") or "utf-8"
        content = json.loads(path.read_text(encoding))
        return content if isinstance(content, dict) else {}

    def get_field_value(
        self, field: FieldInfo, field_name: str
    ) -> Tuple[Any, str, bool]:
        return self._read().get(field_name), field_name, False

    def prepare_field_value(
        self, field_name: str, field: FieldInfo, value: Any, value_is_complex: bool
    ) -> Any:
        return value

    def __call__(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {}
        content = self._read()
        for field_name, field in self.settings_cls.model_fields.items():
            field_value = self.prepare_field_value(
                field_name, field, content.get(field_name), False
            )
            if field_value is not None:
                d[field_name] = field_value
        return d


class CustomizedSettings(BaseSettings):
    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: Type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> Tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,
            ArgparseConfigSettingsSource(settings_cls),
            JsonConfigSettingsSource(settings_cls),
            env_settings,
            dotenv_settings,
            file_secret_settings,
        )
