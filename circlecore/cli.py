"""Command that reports the build configuration and next steps."""

from __future__ import annotations

import argparse
import platform
import sys
from collections.abc import Sequence

from circlecore.application import VERSION


def _report() -> str:
    return (
        "🔵 CircleOS Build System Check\n"
        "==============================\n\n"
        f"Version: {VERSION}\n"
        "Build system: CMake\n"
        f"Python: {platform.python_version()}\n\n"
        "✅ Build system is working correctly!\n\n"
        "Next steps:\n"
        "1. Install Qt6 dependencies:\n"
        "   ./scripts/setup-dev.sh\n\n"
        "2. Build full project:\n"
        "   ./build.sh\n\n"
        "3. Test in QEMU:\n"
        "   ./scripts/run-qemu.sh\n\n"
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Print the build check report; return the exit status."""
    parser = argparse.ArgumentParser(
        prog="circleos-info",
        description="Report the CircleOS version and build next steps.",
    )
    parser.parse_args(argv)
    sys.stdout.write(_report())
    return 0


if __name__ == "__main__":
    sys.exit(main())