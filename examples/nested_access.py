"""Reading nested values, with fallbacks, from a YAML service description."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from mappath import MapPath, from_yaml_file

SERVICE_FILE = Path(__file__).with_name("service.yaml")


def summarize(doc: MapPath) -> dict[str, Any]:
    """Collect the settings a service needs, applying defaults for absent keys."""
    service = doc.get_child("service")
    return {
        "name": service.get_string("name"),
        "debug": service.get_bool("debug", False),
        "timeout": service.get_float("timeout", 30.0),
        "retries": service.get_int("retries", 3),
        "first_port": service.get_int("listeners/0/port"),
        "tags": service.get_strings("tags"),
    }


def main() -> None:
    for key, value in summarize(from_yaml_file(SERVICE_FILE)).items():
        print(f"{key}: {value!r}")


if __name__ == "__main__":
    main()
