"""Stack trace summarization.

A trace is split into segments: the top-level exception and each
``Caused by:`` link in its chain. Frames outside the application package are
collapsed into a single marker per run, and the last segment (the root cause)
is always kept, even when a hard line cap forces everything in between out.
"""

from dataclasses import dataclass

CAUSED_BY = "Caused by:"
ROOT_CAUSE_APP_FRAMES = 10
TRUNCATION_MARKER = "\t... (intermediate frames truncated)"


@dataclass(frozen=True)
class Segment:
    """One exception in a cause chain: its header line and its frame lines."""

    header: str
    frames: tuple[str, ...]


def summarize_stack_trace(
    stack_trace: str | None,
    app_package: str | None,
    max_lines: int,
) -> str | None:
    """Summarize a stack trace, preserving application frames and the root cause.

    Args:
        stack_trace: Raw stack trace text.
        app_package: Application package prefix; None or blank keeps every frame.
        max_lines: Hard cap on output lines (0 or negative = no cap).

    Returns:
        The summarized trace, or None when the input is None or blank.
    """
    if stack_trace is None or not stack_trace.strip():
        return None

    if app_package is not None and not app_package.strip():
        app_package = None

    segments = parse_segments(stack_trace.strip())
    top_level = segments[0]

    lines = [top_level.header]
    lines.extend(_collapse_frames(top_level.frames, app_package))

    if len(segments) > 1:
        for segment in segments[1:-1]:
            lines.append(segment.header)
            lines.extend(_collapse_frames(segment.frames, app_package))

        root_cause = segments[-1]
        lines.append(root_cause.header)
        lines.extend(
            _collapse_frames(root_cause.frames, app_package, max_app_frames=ROOT_CAUSE_APP_FRAMES)
        )

    if max_lines > 0 and len(lines) > max_lines:
        lines = _apply_hard_cap(lines, segments, max_lines)

    return "\n".join(lines)


def parse_segments(stack_trace: str) -> list[Segment]:
    """Split a trace into segments; the first line always opens segment 0."""
    segments: list[Segment] = []
    header: str | None = None
    frames: list[str] = []

    for line in stack_trace.split("\n"):
        if header is None:
            header = line
        elif line.startswith(CAUSED_BY):
            segments.append(Segment(header, tuple(frames)))
            header = line
            frames = []
        else:
            frames.append(line)

    if header is not None:
        segments.append(Segment(header, tuple(frames)))
    return segments


def is_application_frame(frame_line: str, app_package: str | None) -> bool:
    """Return True when a frame belongs to the application package.

    Frames look like ``\\tat com.example.Foo.bar(Foo.java:42)``. Lines such as
    ``\\t... 42 more`` are never application frames. Without a package prefix
    every line counts as an application frame.
    """
    if app_package is None or not app_package.strip():
        return True
    trimmed = frame_line.strip()
    if trimmed.startswith("at "):
        return trimmed[3:].startswith(app_package)
    return False


def _collapse_frames(
    frames: tuple[str, ...],
    app_package: str | None,
    max_app_frames: int | None = None,
) -> list[str]:
    if app_package is None:
        return list(frames)

    output: list[str] = []
    app_count = 0
    framework_count = 0
    for frame in frames:
        if is_application_frame(frame, app_package):
            if framework_count:
                output.append(_omitted(framework_count))
                framework_count = 0
            if max_app_frames is None or app_count < max_app_frames:
                output.append(frame)
                app_count += 1
        else:
            framework_count += 1
    if framework_count:
        output.append(_omitted(framework_count))
    return output


def _omitted(count: int) -> str:
    return f"\t... {count} framework frames omitted"


def _apply_hard_cap(lines: list[str], segments: list[Segment], max_lines: int) -> list[str]:
    if len(segments) == 1:
        return lines[:max_lines]

    root_header = segments[-1].header
    root_idx = -1
    for i in range(len(lines) - 1, -1, -1):
        if lines[i] == root_header:
            root_idx = i
            break

    if 0 <= root_idx < max_lines - 1:
        return lines[:max_lines]

    # Root cause would fall past the cap: keep top header, marker, root cause
    result = [lines[0], TRUNCATION_MARKER, root_header]
    remaining = max_lines - 3
    for line in lines[root_idx + 1:]:
        if remaining <= 0:
            break
        result.append(line)
        remaining -= 1
    return result
