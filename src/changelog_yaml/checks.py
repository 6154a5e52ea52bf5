"""Quality gate for changelog-yaml.

Runs the linters, type checker and tests, builds a wheel, and renders a
sample changelog through the installed wheel in every output format.
"""

from __future__ import annotations

import shlex
import subprocess
from pathlib import Path
from typing import Mapping, Optional, Sequence

from .utils import configure_logging, format_bold, log_error, log_info, log_success

STATIC_CHECKS: Sequence[Sequence[str]] = (
    ("ruff", "format", "--check", "src", "tests"),
    ("ruff", "check", "src", "tests"),
    ("mypy",),
    ("pytest", "-q"),
)

SAMPLE_CHANGELOG = """\
repo: org/core
releases:
  - name: v1.0.0
    date: 2024-01-01
    notice: "NOTE: smoke test for @alice"
    repos:
      core:
        added:
          - "Initial support #5 ($1a2b3c)"
repos:
  core: org/core
"""

# Expected start of the rendered sample, per --format value.
SAMPLE_HEADINGS: Mapping[str, str] = {
    "md": "# Changelog\n\n## :bookmark: ",
    "adoc": "= Changelog\n\n== &#x1F516; ",
}


def _run(command: Sequence[str], *, stdin: Optional[str] = None) -> str:
    """Run ``command`` and return its stdout when ``stdin`` is given."""
    printable = " ".join(shlex.quote(part) for part in command)
    log_info(f"running {format_bold(printable)}")
    result = subprocess.run(
        command,
        check=False,
        input=stdin,
        text=True,
        capture_output=stdin is not None,
    )
    if result.returncode != 0:
        if result.stderr:
            log_error(result.stderr)
        raise SystemExit(result.returncode)
    return result.stdout or ""


def _latest_wheel(dist: Path) -> Path:
    wheel_candidates = list(dist.glob("*.whl"))
    if not wheel_candidates:
        raise SystemExit(f"uv build did not produce a wheel in {dist}/")
    return max(wheel_candidates, key=lambda path: path.stat().st_mtime)


def build_wheel(dist: Path) -> Path:
    _run(("uv", "build", "--wheel", "--out-dir", str(dist)))
    return _latest_wheel(dist)


def smoke_test(wheel: Path) -> None:
    """Check the packaged console script renders the sample in every format."""
    command = ("uvx", "--no-cache", "--from", str(wheel), "changelog-yaml")
    _run((*command, "--version"))
    for output_format, heading in SAMPLE_HEADINGS.items():
        rendered = _run((*command, "--format", output_format), stdin=SAMPLE_CHANGELOG)
        if not rendered.startswith(heading):
            log_error(f"unexpected {output_format} output:\n{rendered}")
            raise SystemExit(1)


def main() -> int:
    configure_logging(debug=False)
    for command in STATIC_CHECKS:
        _run(command)
    smoke_test(build_wheel(Path("dist")))
    log_success("all checks passed")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
