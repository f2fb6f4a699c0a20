"""Actions and the JSON formatter.

Each action is a stateless function that receives its capabilities
(input source, query client, console) as explicit parameters.
"""

from jcli.core.services.api_fetch import fetch_json_api
from jcli.core.services.json_format import format_json, pretty_json
from jcli.core.services.json_print import pretty_print_json
from jcli.core.services.weather import show_weather

__all__ = [
	"fetch_json_api",
	"format_json",
	"pretty_json",
	"pretty_print_json",
	"show_weather",
]
