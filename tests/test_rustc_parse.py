"""
Tests for `rustc --version` parsing and toolchain invocation.

Validates that:
1. Released, beta, nightly and dev builds parse to the right channel
2. Only the last non-empty line is read
3. Malformed text raises VersionParseError quoting the text
4. Parsing is total: arbitrary text never raises anything else
5. The compiler is run once per process and failures are typed
"""

import random
import subprocess

import pytest

from rustgate.errors import ToolchainExecError, ToolchainOutputError, VersionParseError
from rustgate.toolchain import (
    BETA,
    DEV,
    STABLE,
    Channel,
    Date,
    Release,
    Version,
    get_version,
    parse_version,
    query_version_text,
)
from rustgate.toolchain import rustc as rustc_module


class TestParseVersion:
    """Test the accepted output shapes."""

    def test_beta(self):
        """Beta builds carry a numbered suffix that is ignored."""
        version = parse_version("rustc 1.35.0-beta.3 (c13114dc8 2019-04-27)")
        assert version == Version(Release(35, 0), BETA)

    def test_nightly(self):
        """Nightly builds take their date from the parenthetical."""
        version = parse_version("rustc 1.36.0-nightly (938d4ffe1 2019-04-27)")
        assert version.release == Release(36, 0)
        assert version.channel == Channel.nightly(Date(2019, 4, 27))

    def test_nightly_without_date_is_dev(self):
        """A nightly without the (hash date) tail was built locally."""
        assert parse_version("rustc 1.36.0-nightly").channel == DEV

    def test_dev(self):
        """The -dev suffix is a dev build."""
        assert parse_version("rustc 1.36.0-dev").channel == DEV

    def test_stable(self):
        """No suffix means stable; the parenthetical is ignored."""
        version = parse_version("rustc 1.24.1 (d3ae9a9e0 2018-02-27)")
        assert version == Version(Release(24, 1), STABLE)

    def test_trailing_parentheticals_tolerated(self):
        """Further parentheticals after the version are ignored."""
        version = parse_version("rustc 1.0.0 (a59de37e9 2015-05-13) (built 2015-05-14)")
        assert version == Version(Release(0, 0), STABLE)

    def test_missing_patch_is_zero(self):
        """1.<minor> without patch parses with patch 0."""
        assert parse_version("rustc 1.31").release == Release(31, 0)

    def test_only_last_line_is_read(self):
        """Warnings printed before the version line are skipped."""
        text = "warning: toolchain override in effect\nrustc 1.33.0 (2aa4c46cf 2019-02-28)\n\n"
        assert parse_version(text).release == Release(33, 0)

    def test_surrounding_whitespace_tolerated(self):
        """Leading and trailing whitespace on the line is ignored."""
        assert parse_version("  rustc 1.33.0  \n").release == Release(33, 0)


class TestParseVersionRejects:
    """Test that malformed output raises VersionParseError."""

    @pytest.mark.parametrize("text", [
        "",
        "\n\n",
        "rustc",
        "cargo 1.33.0 (f099fe94b 2019-02-12)",
        "rustc 2.0.0",
        "rustc 1",
        "rustc 1.x.0",
        "rustc 1.-3.0",
        "rustc 1.70000.0",
        "rustc 1.36.0-alpha",
        "rustc 1.36.0-nightly 938d4ffe1 2019-04-27",
        "rustc 1.36.0-nightly (938d4ffe1)",
        "rustc 1.36.0-nightly (938d4ffe1 2019-04-27",
        "rustc 1.36.0-nightly (938d4ffe1 2019-04-27)x",
        "rustc 1.36.0-nightly (938d4ffe1 2019-13-27)",
        "rustc 1.36.0-nightly (938d4ffe1 3000-01-01)",
        "rustc 1.33.0\nnot a version line",
    ])
    def test_rejected(self, text):
        """Each malformed shape raises VersionParseError."""
        with pytest.raises(VersionParseError):
            parse_version(text)

    def test_error_quotes_text(self):
        """The error asks for an issue report and quotes the output."""
        with pytest.raises(VersionParseError, match="please file an issue") as excinfo:
            parse_version("rustc banana")
        assert "'rustc banana'" in str(excinfo.value)
        assert excinfo.value.text == "rustc banana"

    def test_error_is_a_value_error(self):
        """Callers catching ValueError also catch parse failures."""
        with pytest.raises(ValueError):
            parse_version("garbage")


class TestParseVersionTotality:
    """Parsing returns a Version or raises VersionParseError, nothing else."""

    SEEDS = [
        "rustc 1.36.0-nightly (938d4ffe1 2019-04-27)",
        "rustc 1.35.0-beta.3 (c13114dc8 2019-04-27)",
        "rustc 1.24.1 (d3ae9a9e0 2018-02-27)",
        "rustc 1.36.0-dev",
    ]
    ALPHABET = "rustc 1.0-9nightlybetadev()\n\t\r.x-é\x00"

    def _mutate(self, rng: random.Random, text: str) -> str:
        chars = list(text)
        for _ in range(rng.randint(1, 4)):
            op = rng.randint(0, 2)
            pos = rng.randint(0, len(chars))
            if op == 0:
                chars.insert(pos, rng.choice(self.ALPHABET))
            elif op == 1 and chars:
                del chars[min(pos, len(chars) - 1)]
            elif chars:
                chars[min(pos, len(chars) - 1)] = rng.choice(self.ALPHABET)
        return "".join(chars)

    def test_random_text(self):
        """Random strings from the version alphabet never crash the parser."""
        rng = random.Random(20190427)
        for _ in range(2000):
            text = "".join(rng.choice(self.ALPHABET) for _ in range(rng.randint(0, 40)))
            try:
                assert isinstance(parse_version(text), Version)
            except VersionParseError:
                pass

    def test_mutated_valid_output(self):
        """Small edits of real output never crash the parser."""
        rng = random.Random(31)
        for _ in range(2000):
            text = self._mutate(rng, rng.choice(self.SEEDS))
            try:
                assert isinstance(parse_version(text), Version)
            except VersionParseError:
                pass


class TestToolchainInvocation:
    """Test running the compiler and caching its version."""

    def test_missing_compiler(self, tmp_path):
        """A compiler that cannot be spawned raises ToolchainExecError."""
        rustc = str(tmp_path / "no-such-rustc")
        with pytest.raises(ToolchainExecError, match="failed to run `.*no-such-rustc --version`"):
            query_version_text(rustc)

    def test_non_utf8_output(self, monkeypatch):
        """Output that is not UTF-8 raises ToolchainOutputError."""
        def fake_run(*args, **kwargs):
            return subprocess.CompletedProcess(args=args, returncode=0, stdout=b"rustc \xff\xfe", stderr=b"")

        monkeypatch.setattr(rustc_module.subprocess, "run", fake_run)
        with pytest.raises(ToolchainOutputError, match="failed to parse output of `rustc --version`"):
            query_version_text("rustc")

    def test_version_is_cached(self, monkeypatch):
        """The compiler runs once per process."""
        calls = []

        def fake_query(rustc):
            calls.append(rustc)
            return "rustc 1.33.0 (2aa4c46cf 2019-02-28)\n"

        monkeypatch.setattr(rustc_module, "query_version_text", fake_query)
        first = get_version()
        second = get_version()
        assert first is second
        assert first.release == Release(33, 0)
        assert calls == ["rustc"]

    def test_rustc_from_environment(self, monkeypatch):
        """RUSTC selects the compiler to run."""
        calls = []

        def fake_query(rustc):
            calls.append(rustc)
            return "rustc 1.36.0-nightly (938d4ffe1 2019-04-27)"

        monkeypatch.setenv("RUSTC", "/opt/rust/bin/rustc")
        monkeypatch.setattr(rustc_module, "query_version_text", fake_query)
        assert get_version().channel == Channel.nightly(Date(2019, 4, 27))
        assert calls == ["/opt/rust/bin/rustc"]

    def test_unexpected_output_is_a_parse_error(self, monkeypatch):
        """Garbage from the compiler surfaces as VersionParseError."""
        monkeypatch.setattr(rustc_module, "query_version_text", lambda rustc: "hello\n")
        with pytest.raises(VersionParseError):
            get_version()
