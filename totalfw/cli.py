"""Command that shows the framework's version and resolved directories."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from .framework import initialize_framework
from .paths import TPath


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="totalfw", description="Show the framework version and application paths."
    )
    parser.add_argument("--root", default="src", help="application base directory")
    args = parser.parse_args(argv)

    framework = initialize_framework()
    framework.path = TPath(args.root)
    path = framework.path

    print(f"Framework version: {framework.version}")
    logs_path = path.logs("debug.log")
    print(f'Application log path: "{logs_path}"')

    path.verify(logs_path.parent)
    print(f"Log file exists: {str(path.exists_dir(logs_path)).lower()}")

    plugin_route = path.route("_myplugin/public/style.css", "public")
    print(f'Plugin route: "{plugin_route}"')

    print(f'Public assets directory: "{path.public("assets")}"')
    print(f'Default template path: "{path.templates("default.html")}"')
    print("Test application completed!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())