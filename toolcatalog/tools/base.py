"""Tool descriptor interface consumed by the catalog generator."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class LabelProvider:
    """Display metadata of a tool: canonical name and large icon reference."""

    name: str
    large_icon_url: str = ""


class ToolDescriptor(ABC):
    """Abstract base class for all registered analysis tools."""

    @property
    @abstractmethod
    def id(self) -> str:
        """Unique tool identifier."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Human readable tool name."""

    @property
    @abstractmethod
    def label_provider(self) -> LabelProvider:
        """Label provider with the sort name and icon of this tool."""

    @property
    def symbol_name(self) -> str:
        """Symbol used to invoke the tool from a pipeline script."""
        return ""

    @property
    def url(self) -> str:
        """Home page of the tool, empty if unknown."""
        return ""

    @property
    def help(self) -> str:
        """Optional HTML fragment with usage hints."""
        return ""

    def default_pattern(self) -> Optional[str]:
        """Return the default report file pattern.

        Only tools that parse report files carry a pattern; all other
        tools return None.
        """
        return None


class ParserDescriptor(ToolDescriptor):
    """A tool that parses report files matching a default pattern."""

    @property
    def pattern(self) -> str:
        return ""

    def default_pattern(self) -> Optional[str]:
        return self.pattern


class StaticToolDescriptor(ToolDescriptor):
    """Tool descriptor built from plain values."""

    def __init__(
        self,
        id: str,
        name: str,
        label_provider: Optional[LabelProvider] = None,
        symbol_name: str = "",
        url: str = "",
        help: str = "",
    ):
        self._id = id
        self._name = name
        self._label_provider = label_provider or LabelProvider(name=name)
        self._symbol_name = symbol_name
        self._url = url
        self._help = help

    @property
    def id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def label_provider(self) -> LabelProvider:
        return self._label_provider

    @property
    def symbol_name(self) -> str:
        return self._symbol_name

    @property
    def url(self) -> str:
        return self._url

    @property
    def help(self) -> str:
        return self._help

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id={self._id!r}, name={self._name!r})"


class StaticParserDescriptor(StaticToolDescriptor, ParserDescriptor):
    """Parser descriptor built from plain values."""

    def __init__(self, id: str, name: str, pattern: str = "", **kwargs):
        super().__init__(id, name, **kwargs)
        self._pattern = pattern

    @property
    def pattern(self) -> str:
        return self._pattern
