"""
Tests for settings resolution.
"""

from pathlib import Path

from hsacl.config import DEFAULT_LOG_LEVEL, Settings, load_settings


class TestLoadSettings:
    def test_defaults(self):
        settings = load_settings(env={})

        assert settings == Settings(
            base_dir=Path("."),
            output_path=Path("acl.hujson"),
            log_level=DEFAULT_LOG_LEVEL,
            log_file=None,
        )

    def test_environment_used_when_no_flags(self):
        env = {
            "HSACL_DIR": "/srv/acl",
            "HSACL_OUTPUT": "/etc/headscale/acl.hujson",
            "HSACL_LOG_LEVEL": "debug",
            "HSACL_LOG_FILE": "/var/log/hsacl.log",
        }

        settings = load_settings(env=env)

        assert settings.base_dir == Path("/srv/acl")
        assert settings.output_path == Path("/etc/headscale/acl.hujson")
        assert settings.log_level == "DEBUG"
        assert settings.log_file == Path("/var/log/hsacl.log")

    def test_flags_win_over_environment(self):
        env = {"HSACL_DIR": "/srv/acl", "HSACL_OUTPUT": "/env/out", "HSACL_LOG_LEVEL": "ERROR"}

        settings = load_settings("/cli/dir", "/cli/out", "info", env=env)

        assert settings.base_dir == Path("/cli/dir")
        assert settings.output_path == Path("/cli/out")
        assert settings.log_level == "INFO"

    def test_blank_environment_values_ignored(self):
        settings = load_settings(env={"HSACL_DIR": "   ", "HSACL_LOG_FILE": ""})

        assert settings.base_dir == Path(".")
        assert settings.log_file is None

    def test_reads_process_environment(self, monkeypatch):
        monkeypatch.setenv("HSACL_DIR", "/from/os/environ")
        assert load_settings().base_dir == Path("/from/os/environ")
