"""Unit tests for logging setup and deferred imports."""

import logging
from collections.abc import Iterator

import pytest
import structlog

from study_srs.config import LoggingSettings
from study_srs.logging import configure_logging
from study_srs.utils.lazy_import import lazy_import


@pytest.fixture
def restore_logging() -> Iterator[None]:
    root_level = logging.getLogger().level
    yield
    configure_logging()
    logging.getLogger().setLevel(root_level)


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.mark.usefixtures("restore_logging")
    def test_json_output(self) -> None:
        configure_logging(json_output=True)

        processors = structlog.get_config()["processors"]

        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    @pytest.mark.usefixtures("restore_logging")
    def test_level_name_and_quiet_drivers(self) -> None:
        configure_logging(level="error")

        assert logging.getLogger("pymongo").level == logging.ERROR
        assert logging.getLogger("motor").level == logging.ERROR

    def test_settings_reject_unknown_level(self) -> None:
        with pytest.raises(ValueError):
            LoggingSettings(level="LOUD")  # type: ignore[arg-type]


class TestLazyImport:
    """Tests for lazy_import."""

    def test_loads_attribute_once(self) -> None:
        loader = lazy_import("json", "dumps")

        first = loader()

        assert first is loader()
        assert first([1]) == "[1]"

    def test_loads_module(self) -> None:
        assert lazy_import("json")().__name__ == "json"  # type: ignore[attr-defined]

    def test_missing_module_raises_on_call(self) -> None:
        loader = lazy_import("study_srs_no_such_module")

        with pytest.raises(ImportError):
            loader()
