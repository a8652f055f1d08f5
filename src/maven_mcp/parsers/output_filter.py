"""Maven console output noise filter.

Keeps only the lines an automated caller can act on: errors, warnings,
build and test summaries, and the detail lines that follow a failure.
Download progress, plugin banners and generic ``[INFO]`` chatter are dropped.
"""

import re

DOWNLOAD_LINE = re.compile(r"^(Downloading|Downloaded|Progress \().*")
PLUGIN_BANNER = re.compile(r"^\[INFO\] --- .+:.+:.+ .+---$")

ACTIONABLE_KEYWORDS = (
    "BUILD FAILURE",
    "Reactor Summary",
    "Failed to execute goal",
    "Tests run:",
    "Failed tests:",
    "Tests in error:",
)
INFO_KEYWORDS = ("BUILD FAILURE", "BUILD SUCCESS", "Reactor Summary")


def filter_output(raw_output: str | None) -> str | None:
    """Filter raw Maven stdout down to actionable lines.

    Args:
        raw_output: Raw Maven console output.

    Returns:
        The kept lines joined with newlines, or None when nothing is kept.
    """
    if raw_output is None:
        return None

    kept: list[str] = []
    in_failure_block = False

    for line in raw_output.split("\n"):
        if not line.strip():
            continue
        if DOWNLOAD_LINE.match(line):
            continue
        if PLUGIN_BANNER.fullmatch(line):
            continue

        if line.startswith("[ERROR]"):
            kept.append(line)
            in_failure_block = True
            continue

        if line.startswith("[WARNING]"):
            kept.append(line)
            continue

        if _contains_actionable_keyword(line):
            kept.append(line)
            in_failure_block = True
            continue

        # Detail lines following a failure (indented messages, test names)
        if in_failure_block and not line.startswith("[INFO]"):
            kept.append(line)
            continue

        if line.startswith("[INFO]"):
            if any(keyword in line for keyword in INFO_KEYWORDS):
                kept.append(line)
                if "BUILD FAILURE" in line:
                    in_failure_block = True
            continue

        if in_failure_block:
            kept.append(line)

    return "\n".join(kept) if kept else None


def _contains_actionable_keyword(line: str) -> bool:
    return any(keyword in line for keyword in ACTIONABLE_KEYWORDS)
