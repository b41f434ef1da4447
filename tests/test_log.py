"""Tests for the library's log records and handler setup."""
import logging


def test_package_logger_only_has_null_handler():
    import xdgdirs
    pkg = logging.getLogger("xdgdirs")
    assert pkg.propagate is True
    assert [type(h) for h in pkg.handlers] == [logging.NullHandler]
    assert xdgdirs.__version__


def test_module_loggers_are_namespaced():
    from xdgdirs import basedirs, config
    assert basedirs.logger.name == "xdgdirs.basedirs"
    assert config.logger.name == "xdgdirs.config"


def test_resolution_is_silent_at_warning(caplog):
    from xdgdirs.basedirs import resolve
    with caplog.at_level("WARNING", logger="xdgdirs"):
        resolve({"HOME": "/home/alice", "XDG_DATA_DIRS": "bad:relative"})
    assert caplog.records == []


def test_resolution_summary_at_debug(caplog):
    from xdgdirs.basedirs import resolve
    with caplog.at_level("DEBUG", logger="xdgdirs.basedirs"):
        resolve({"HOME": "/home/alice"})
    assert [r.name for r in caplog.records] == ["xdgdirs.basedirs"]
    assert "Resolved" in caplog.text
    assert "/home/alice/.cache" in caplog.text


def test_config_error_reaches_application_handlers(tmp_path, caplog):
    (tmp_path / "config.yaml").write_text("- not\n- a mapping\n")
    from xdgdirs.config import ConfigError, load_yaml
    with caplog.at_level("WARNING"):
        try:
            load_yaml(tmp_path / "config.yaml")
        except ConfigError:
            pass
    records = [r for r in caplog.records if r.name == "xdgdirs.config"]
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert records[0].getMessage().startswith(f"Ignoring {tmp_path / 'config.yaml'}")
