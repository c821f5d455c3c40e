#!/usr/bin/env python3
from __future__ import annotations

import subprocess
import sys


SAMPLE_MANIFEST = "data/sample_manifest.json"


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.run(cmd, check=False).returncode


def main() -> int:
    checks = [
        [sys.executable, "-m", "unittest", "discover", "-s", "tests", "-p", "test_*.py"],
        [sys.executable, "-m", "app.galleryrows.main", SAMPLE_MANIFEST],
        [sys.executable, "-m", "app.galleryrows.main", SAMPLE_MANIFEST, "--row-width", "2"],
    ]
    for cmd in checks:
        code = run(cmd)
        if code != 0:
            print("\n❌ dev_check failed")
            return code

    print("\n✅ dev_check passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
