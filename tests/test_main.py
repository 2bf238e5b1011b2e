import importlib
import logging

import pytest

import nctable
from nctable.core.exceptions import IncongruentVariableError, SourceOpenError, UnknownVariableError
from nctable.core.logging_config import get_logger, set_log_level, setup_logging


def test_load_table(climate_source):
    view = nctable.load_table(climate_source, ["pr", "tas"])
    assert view.labels == ["time", "lat", "lon", "pr", "tas"]


def test_load_table_reports_all_unknown_variables(climate_source):
    with pytest.raises(UnknownVariableError) as exc_info:
        nctable.load_table(climate_source, ["pr", "huss", "uas"])
    assert exc_info.value.missing_variables == ["huss", "uas"]


def test_load_table_rejects_unknown_calendar(climate_source):
    with pytest.raises(ValueError):
        nctable.load_table(climate_source, ["pr"], default_calendar="martian")


def test_load_table_stops_at_incongruent_variable(climate_source):
    with pytest.raises(IncongruentVariableError):
        nctable.load_table(climate_source, ["pr", "orog", "tas"])


def test_open_table_missing_file(tmp_path):
    with pytest.raises(SourceOpenError):
        nctable.open_table(tmp_path / "missing.nc", ["pr"])


def test_open_table(tmp_path, climate_dataset):
    pytest.importorskip("netCDF4")
    path = tmp_path / "climate.nc"
    climate_dataset.to_netcdf(path, engine="netcdf4")
    source, view, pager = nctable.open_table(path, ["pr", "tas"], page_size=10)
    try:
        assert pager.page_count == 3277
        pager.last_page()
        assert pager.rows_on_current_page == 8
        assert pager.value(7, 3) == climate_dataset["pr"].values[0, -1, -1]
    finally:
        source.close()
    assert source.is_closed


def test_open_table_closes_source_on_failure(tmp_path, climate_dataset, monkeypatch):
    pytest.importorskip("netCDF4")
    path = tmp_path / "climate.nc"
    climate_dataset.to_netcdf(path, engine="netcdf4")
    opened = []
    real_open_source = nctable.main.open_source

    def tracking_open_source(*args, **kwargs):
        source = real_open_source(*args, **kwargs)
        opened.append(source)
        return source

    monkeypatch.setattr(nctable.main, "open_source", tracking_open_source)
    with pytest.raises(IncongruentVariableError):
        nctable.open_table(path, ["pr", "orog"])
    assert opened[0].is_closed


def test_setup_logging(tmp_path):
    log_file = tmp_path / "logs" / "nctable.log"
    logger = setup_logging("debug", log_file=log_file)
    try:
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        get_logger("table.view").debug("hello")
        set_log_level("error")
        assert all(handler.level == logging.ERROR for handler in logger.handlers)
        assert log_file.exists()
    finally:
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        logger.addHandler(logging.NullHandler())
        logger.setLevel(logging.WARNING)
        logger.propagate = True


@pytest.mark.parametrize("module", [
    "nctable.io.source", "nctable.coordinates.resolver", "nctable.table.view", "nctable.table.paging",
])
def test_module_loggers_belong_to_package(module):
    logger = importlib.import_module(module).logger
    assert logger is get_logger(module[len("nctable."):])
