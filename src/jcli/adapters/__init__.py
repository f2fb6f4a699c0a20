"""Concrete adapters for the core interfaces (terminal, HTTP)."""

from jcli.adapters.http_client import HttpQueryClient, build_async_client
from jcli.adapters.terminal_input import TerminalInput

__all__ = [
	"HttpQueryClient",
	"TerminalInput",
	"build_async_client",
]
