"""Working with sequences: typed lists and child handles."""

from __future__ import annotations

from pathlib import Path

from mappath import InvalidTypeError, MapPath, from_yaml_file

SERVICE_FILE = Path(__file__).with_name("service.yaml")


def listeners(doc: MapPath) -> list[str]:
    """Render every listener as ``host:port``, marking TLS ones."""
    rendered = []
    for listener in doc.get_children("service/listeners"):
        address = f"{listener.get_string('host')}:{listener.get_int('port')}"
        if listener.get_bool("tls", False):
            address += " (tls)"
        rendered.append(address)
    return rendered


def main() -> None:
    doc = from_yaml_file(SERVICE_FILE)
    for line in listeners(doc):
        print(line)
    try:
        doc.get_ints("service/tags")
    except InvalidTypeError as e:
        print(f"tags are not numeric: {e}")


if __name__ == "__main__":
    main()
