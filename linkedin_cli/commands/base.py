"""Shared option types for command functions."""

from dataclasses import dataclass
from typing import Optional

from linkedin_cli.config import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE


@dataclass
class OutputOptions:
    json: bool = False


@dataclass
class ConnectOptions(OutputOptions):
    message: Optional[str] = None


@dataclass
class PageOptions(OutputOptions):
    start: int = 0
    count: int = DEFAULT_PAGE_SIZE

    @property
    def page_size(self) -> int:
        return max(1, min(self.count, MAX_PAGE_SIZE))
