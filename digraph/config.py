"""YAML configuration for the digraph command."""

import logging
from abc import ABC, abstractmethod
from io import StringIO
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, TextIO, Type, TypeVar

import yaml

T = TypeVar("T", bound="Config")


class Config(ABC):

    """Base class for configuration loaded from a YAML mapping.

    Subclasses list their keys and defaults in "required" and "optional".
    After loading, the caller must call validate() to fill in defaults:

        cfg = LoadConfig.load(Path("digraph.yml"))
        cfg.validate()

    Problems with the file are logged as errors rather than raised.
    """

    def __init__(self, path: Path, data: Mapping[str, Any]):
        self.path = path
        self.data = data

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(path={self.path!r}, data={self.data!r})"

    @property
    @abstractmethod
    def required(self) -> Dict[str, Any]:
        """Keys that must be present, and defaults used when they are not."""

    @property
    @abstractmethod
    def optional(self) -> Dict[str, Any]:
        """Keys that may be present, and their defaults."""

    def validate(self, **defaults: Any):
        """Log missing required keys and unknown keys, then apply defaults.

        Keyword arguments override the defaults from required and optional.
        """
        for key in self.required:
            if key not in self.data:
                logging.error("%s: missing %r", self.path, key)
        for key in self.data:
            if key not in self.required and key not in self.optional:
                logging.warning("%s: unknown key %r", self.path, key)
        self.data = {**self.required, **self.optional, **defaults, **self.data}

    @classmethod
    def default(cls: Type[T]) -> T:
        """Return a configuration with every key set to its default."""
        cfg = cls(Path("<default>"), {})
        cfg.validate()
        return cfg

    @classmethod
    def load(cls: Type[T], path: Path) -> T:
        """Load configuration from a file."""
        with open(path) as f:
            return cls.load_from(path, f)

    @classmethod
    def loads(cls: Type[T], path: Path, content: str) -> T:
        """Load configuration from a string."""
        return cls.load_from(path, StringIO(content))

    @classmethod
    def load_from(cls: Type[T], path: Path, content: TextIO) -> T:
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as ex:
            logging.error("cannot parse %s: %s", path, ex)
            data = {}
        if data is None:
            data = {}
        if not isinstance(data, dict):
            logging.error("invalid YAML in %s: %s", path, type(data).__name__)
            data = {}
        return cls(path, data)

    def __getitem__(self, key: str) -> Any:
        return self.data[key]

    def get(self, key: str) -> Optional[Any]:
        """Get a configuration value, or None if it is not set."""
        return self.data.get(key)


class LoadConfig(Config):

    """Options for loading and printing graphs."""

    required: Dict[str, Any] = {}

    optional = {
        "strict": False,
        "sort_neighbors": False,
    }
