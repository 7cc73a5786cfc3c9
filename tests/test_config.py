"""Tests for configuration loading."""

from snippet_formatter.config import Config


class TestConfigDefaults:
    def test_defaults(self):
        cfg = Config()
        assert cfg.ENGINE == "command"
        assert cfg.ENGINE_COMMAND == "palantir-java-format"
        assert cfg.ENGINE_TIMEOUT == 30.0
        assert cfg.FIX_IMPORTS is True
        assert cfg.REFLOW_STRINGS is True
        assert cfg.LOG_DIR == ".snippetfmt/logs"
        assert cfg.LOG_LEVEL == "INFO"


class TestConfigSources:
    def test_yaml_values(self):
        cfg = Config({
            "engine": "my.pkg.Engine",
            "engine_command": ["java", "-jar", "fmt.jar"],
            "engine_timeout": "12.5",
            "reflow_strings": False,
            "log_level": "debug",
        })
        assert cfg.ENGINE == "my.pkg.Engine"
        assert cfg.ENGINE_COMMAND == ["java", "-jar", "fmt.jar"]
        assert cfg.ENGINE_TIMEOUT == 12.5
        assert cfg.REFLOW_STRINGS is False
        assert cfg.LOG_LEVEL == "DEBUG"

    def test_env_overrides_yaml(self, monkeypatch):
        monkeypatch.setenv("SNIPPETFMT_ENGINE_COMMAND", "gjf --aosp")
        monkeypatch.setenv("SNIPPETFMT_ENGINE_TIMEOUT", "3")
        monkeypatch.setenv("SNIPPETFMT_FIX_IMPORTS", "false")
        cfg = Config({"engine_command": ["other"], "engine_timeout": 9})
        assert cfg.ENGINE_COMMAND == "gjf --aosp"
        assert cfg.ENGINE_TIMEOUT == 3.0
        assert cfg.FIX_IMPORTS is False


class TestConfigLoad:
    def test_load_explicit_file(self, tmp_path):
        path = tmp_path / "fmt.yaml"
        path.write_text("engine_timeout: 7\nfix_imports: false\n", encoding="utf-8")
        cfg = Config.load(str(path))
        assert cfg.ENGINE_TIMEOUT == 7.0
        assert cfg.FIX_IMPORTS is False

    def test_missing_explicit_file_uses_defaults(self, tmp_path):
        cfg = Config.load(str(tmp_path / "absent.yaml"))
        assert cfg.ENGINE_TIMEOUT == 30.0

    def test_invalid_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("engine: [unclosed\n", encoding="utf-8")
        cfg = Config.load(str(path))
        assert cfg.ENGINE == "command"

    def test_finds_file_in_cwd(self, tmp_path, monkeypatch):
        (tmp_path / ".snippetfmt.yaml").write_text("engine_timeout: 4\n", encoding="utf-8")
        monkeypatch.chdir(tmp_path)
        assert Config.load().ENGINE_TIMEOUT == 4.0
