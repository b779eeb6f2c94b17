from typing import Any


# Type aliases for Python dictionaries
HandlerEvent = dict[str, Any]
HandlerResponse = dict[str, Any]
TrackEvent = dict[str, Any]
