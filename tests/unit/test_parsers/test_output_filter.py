"""Tests for the Maven output noise filter."""

from maven_mcp.parsers.output_filter import filter_output


class TestFilterOutputBasics:
    """Tests for empty and trivial input."""

    def test_none_input(self):
        """None input yields None."""
        assert filter_output(None) is None

    def test_empty_input(self):
        """Empty input yields None."""
        assert filter_output("") is None

    def test_only_noise(self):
        """Input consisting only of noise yields None."""
        raw = "\n".join([
            "[INFO] Scanning for projects...",
            "Downloading from central: https://repo.maven.apache.org/maven2/junit.pom",
            "Downloaded from central: https://repo.maven.apache.org/maven2/junit.pom (2 kB)",
            "",
            "[INFO] --- maven-compiler-plugin:3.11.0:compile (default-compile) @ demo ---",
        ])
        assert filter_output(raw) is None


class TestFilterOutputNoise:
    """Tests for dropped lines."""

    def test_download_and_progress_lines_dropped(self):
        """Download, Downloaded and Progress lines are removed."""
        raw = "\n".join([
            "[ERROR] something broke",
            "Downloading from central: https://repo/x.jar",
            "Downloaded from central: https://repo/x.jar (10 kB at 1 MB/s)",
            "Progress (1): 4.1/10 kB",
        ])
        assert filter_output(raw) == "[ERROR] something broke"

    def test_plugin_banner_dropped(self):
        """Plugin execution banners are removed."""
        raw = "\n".join([
            "[INFO] --- maven-surefire-plugin:3.2.2:test (default-test) @ demo ---",
            "[WARNING] deprecated API",
        ])
        assert filter_output(raw) == "[WARNING] deprecated API"

    def test_generic_info_dropped(self):
        """Generic [INFO] lines are removed."""
        raw = "\n".join([
            "[INFO] Building demo 1.0.0",
            "[INFO] Compiling 12 source files",
            "[WARNING] unchecked call",
        ])
        assert filter_output(raw) == "[WARNING] unchecked call"

    def test_info_lines_dropped_inside_failure_block(self):
        """Generic [INFO] lines stay dropped after a failure."""
        raw = "\n".join([
            "[ERROR] Failed to execute goal",
            "[INFO] Total time: 2.1 s",
        ])
        assert filter_output(raw) == "[ERROR] Failed to execute goal"

    def test_detail_lines_before_failure_dropped(self):
        """Untagged lines before any failure are removed."""
        raw = "\n".join([
            "  some detail",
            "[ERROR] compilation failed",
        ])
        assert filter_output(raw) == "[ERROR] compilation failed"


class TestFilterOutputKept:
    """Tests for kept lines."""

    def test_error_and_warning_kept(self):
        """[ERROR] and [WARNING] lines are kept in order."""
        raw = "\n".join([
            "[WARNING] first",
            "[INFO] noise",
            "[ERROR] second",
        ])
        assert filter_output(raw) == "[WARNING] first\n[ERROR] second"

    def test_build_status_lines_kept(self):
        """BUILD SUCCESS and BUILD FAILURE lines are kept."""
        assert filter_output("[INFO] BUILD SUCCESS") == "[INFO] BUILD SUCCESS"
        assert filter_output("[INFO] BUILD FAILURE") == "[INFO] BUILD FAILURE"

    def test_reactor_summary_kept(self):
        """Reactor Summary lines are kept."""
        assert filter_output("[INFO] Reactor Summary for demo 1.0.0:") == (
            "[INFO] Reactor Summary for demo 1.0.0:"
        )

    def test_tests_run_kept(self):
        """Test count lines are kept."""
        raw = "[INFO] Tests run: 4, Failures: 1, Errors: 0, Skipped: 0"
        assert filter_output(raw) == raw

    def test_detail_lines_after_failure_kept(self):
        """Untagged lines after a failure marker are kept."""
        raw = "\n".join([
            "[INFO] BUILD FAILURE",
            "  FailingTest.testEquals:15 expected: <5> but was: <4>",
            "",
            "Failed tests:",
            "  FailingTest.testNotNull:22",
        ])
        assert filter_output(raw) == "\n".join([
            "[INFO] BUILD FAILURE",
            "  FailingTest.testEquals:15 expected: <5> but was: <4>",
            "Failed tests:",
            "  FailingTest.testNotNull:22",
        ])

    def test_realistic_failure_log(self):
        """A realistic failing build keeps only actionable lines."""
        raw = "\n".join([
            "[INFO] Scanning for projects...",
            "[INFO] --- maven-compiler-plugin:3.11.0:compile (default-compile) @ demo ---",
            "Downloading from central: https://repo/plugin.pom",
            "[INFO] Compiling 3 source files",
            "[ERROR] /project/src/main/java/App.java:[10,5] cannot find symbol",
            "  symbol:   variable foo",
            "[INFO] BUILD FAILURE",
            "[INFO] Total time:  1.234 s",
            "[ERROR] Failed to execute goal org.apache.maven.plugins:maven-compiler-plugin",
        ])
        assert filter_output(raw) == "\n".join([
            "[ERROR] /project/src/main/java/App.java:[10,5] cannot find symbol",
            "  symbol:   variable foo",
            "[INFO] BUILD FAILURE",
            "[ERROR] Failed to execute goal org.apache.maven.plugins:maven-compiler-plugin",
        ])


class TestFilterOutputIdempotence:
    """Tests for repeated filtering."""

    def test_filtering_twice_is_stable(self):
        """Filtering already-filtered output changes nothing."""
        raw = "\n".join([
            "[INFO] Scanning for projects...",
            "[WARNING] old API",
            "[INFO] BUILD FAILURE",
            "  detail line",
            "[INFO] Total time: 1 s",
            "[ERROR] Failed to execute goal",
            "Tests in error:",
            "  ErrorTest.testThrows",
        ])
        once = filter_output(raw)
        assert filter_output(once) == once
