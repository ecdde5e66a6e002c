"""Construction options for the file store."""

import os
from typing import Any, Optional, Union
from pydantic import BaseModel, Field, ValidationError, field_validator
from .formats import get_format, json_format
from .utils.errors import ConfigurationError


class FileStoreOptions(BaseModel):
    """Options accepted by FileStore."""
    
    file: str = Field(..., min_length=1, description="Configuration file name or path")
    dir: str = Field(default_factory=os.getcwd, description="Default directory for the file")
    format: Any = Field(default=json_format, description="Serializer or registered format name")
    search: bool = Field(default=False, description="Search parent directories on construction")
    read_only: bool = Field(default=False, description="Refuse in-memory mutations")
    
    @field_validator("file", mode="before")
    @classmethod
    def _coerce_file(cls, value):
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value
    
    @field_validator("dir", mode="before")
    @classmethod
    def _default_dir(cls, value):
        if isinstance(value, os.PathLike):
            return os.fspath(value)
        return value or os.getcwd()
    
    @field_validator("format", mode="before")
    @classmethod
    def _coerce_format(cls, value):
        if value is None:
            return json_format
        if isinstance(value, str):
            return get_format(value)
        if not (callable(getattr(value, "parse", None)) and callable(getattr(value, "stringify", None))):
            raise ValueError("format must provide parse() and stringify()")
        return value


def parse_options(file: Optional[Union[str, os.PathLike]] = None, **options) -> FileStoreOptions:
    """
    Validate store options.
    
    Raises:
        ConfigurationError: If `file` is missing or an option is invalid
    """
    if not file:
        raise ConfigurationError("Missing required option `file`")
    
    try:
        return FileStoreOptions(file=file, **options)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid file store options: {e}")
