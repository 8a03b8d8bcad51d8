"""Package entry point.

Preferred invocation is via the installed console script:

    ceai-analyzer ...

For convenience we also support:

    python -m ceai_analyzer ...
"""

from __future__ import annotations

from .cli import app


def main() -> None:
    """Entry point used by `python -m ceai_analyzer`."""

    app()


if __name__ == "__main__":
    main()
