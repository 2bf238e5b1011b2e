from nctable.table.view import TableView
from nctable.utils.info import (
    attribute_labels, describe_variable, dimension_labels, get_source_info, get_view_info, type_string
)


def test_type_strings(climate_source, station_source):
    assert type_string(climate_source.get_variable("pr")) == "float32"
    assert type_string(climate_source.get_variable("time")) == "time<float64>"
    assert type_string(station_source.get_variable("station_name")) == "char[8]"
    assert type_string(station_source.get_variable("time_obs")) == "time<int32>"


def test_describe_variable(climate_source, station_source):
    assert describe_variable(climate_source.get_variable("tas")) == "tas: float32[1, 128, 256]"
    assert describe_variable(station_source.get_variable("station_name")) == "station_name: char[8][3]"


def test_dimension_labels(climate_source):
    assert dimension_labels(climate_source.get_variable("pr")) == [
        "time[1] (unlimited)", "lat[128]", "lon[256]"
    ]


def test_attribute_labels_are_sorted(climate_source):
    assert attribute_labels(climate_source.get_variable("pr")) == [
        "long_name: precipitation", "units: kg m-2 s-1"
    ]


def test_source_info(climate_source):
    info = get_source_info(climate_source)
    assert info["location"] == "<memory>"
    assert info["dimensions"]["time"] == {"length": 1, "unlimited": True}
    assert info["variables"]["tas"]["description"] == "air temperature"
    assert list(info["variables"]) == sorted(info["variables"])


def test_view_info(climate_source):
    view = TableView(climate_source)
    assert get_view_info(view)["state"] == "empty"
    view.add_variable("pr")
    info = get_view_info(view)
    assert info["state"] == "bound"
    assert info["dimensions"] == ["time", "lat", "lon"]
    assert info["row_count"] == 32768
    assert info["columns"][0] == {"label": "time", "type": "str", "kind": "coordinate"}
    assert info["columns"][3] == {"label": "pr", "type": "float32", "kind": "data"}
