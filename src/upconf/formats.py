"""Serializers that turn a configuration mapping into file text and back."""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict
import yaml
from .utils.errors import ConfigurationError


class Serializer(ABC):
    """
    Abstract parse/stringify pair used by the file store.

    `parse` may raise any exception on malformed text; the store
    translates it into a ParseError.
    """

    name: str = ""

    @abstractmethod
    def parse(self, text: str) -> Any:
        """Parse file contents into a value."""
        pass

    @abstractmethod
    def stringify(self, value: Any) -> str:
        """Render a value as file contents."""
        pass


class JsonFormat(Serializer):
    """JSON text, indented two spaces."""

    name = "json"

    def __init__(self, indent: int = 2):
        self.indent = indent

    def parse(self, text: str) -> Any:
        return json.loads(text)

    def stringify(self, value: Any) -> str:
        return json.dumps(value, indent=self.indent)


class YamlFormat(Serializer):
    """YAML text via PyYAML's safe loader and dumper."""

    name = "yaml"

    def parse(self, text: str) -> Any:
        data = yaml.safe_load(text)
        # An empty document is an empty configuration
        return {} if data is None else data

    def stringify(self, value: Any) -> str:
        return yaml.safe_dump(value, default_flow_style=False, sort_keys=False)


json_format = JsonFormat()
yaml_format = YamlFormat()

FORMATS: Dict[str, Serializer] = {
    "json": json_format,
    "yaml": yaml_format,
    "yml": yaml_format,
}


def get_format(name: str) -> Serializer:
    """
    Look up a serializer by name.

    Raises:
        ConfigurationError: If no serializer is registered under `name`
    """
    try:
        return FORMATS[name.lower()]
    except KeyError:
        available = ", ".join(sorted(FORMATS))
        raise ConfigurationError(f"Unknown format '{name}'. Available formats: {available}")
