import argparse
import json
from pathlib import Path

from edgegeo.main import app  # FastAPI app

DEFAULT_OUT_PATH = Path("openapi") / "edge-geo.openapi.json"


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Write the service's OpenAPI schema to a file.")
    parser.add_argument("out", nargs="?", type=Path, default=DEFAULT_OUT_PATH)
    args = parser.parse_args(argv)

    schema = app.openapi()
    args.out.parent.mkdir(parents=True, exist_ok=True)
    args.out.write_text(json.dumps(schema, indent=2) + "\n")
    print(f"Wrote {args.out}")  # noqa: T201


if __name__ == "__main__":
    main()
