"""Built-in configuration defaults."""

from typing import Any, Final

DEFAULT_CONFIG: Final[dict[str, Any]] = {  # pyright: ignore[reportExplicitAny]
    "logging": {
        "level": "info",
        "format": "json",
        "file": "",
    },
    "prompt": {
        "message": "Choose files to stage",
        "show_status": True,
    },
}
