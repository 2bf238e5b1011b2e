import numpy as np
import pytest
import xarray as xr

from nctable.core.core_types import Dimension, SourceVariable
from nctable.core.exceptions import SourceClosedError, UnknownVariableError
from nctable.io.source import NetcdfSource

# Shared fixtures for the nctable tests.
#
# Most tests run against in-memory xarray datasets wrapped in a NetcdfSource.
# StubSource covers layouts that xarray refuses to hold in memory, such as a
# 2D character array named after its first dimension.

TIME_UNITS = "days since 2000-01-01 00:00:00"
NLAT = 128
NLON = 256


def char_array(strings, length):
    """Build an S1 character array padded with NUL bytes."""
    return np.array([list(s.ljust(length, "\0")) for s in strings], dtype="S1")


class StubSource:
    """Minimal in-memory data source."""

    location = "<stub>"

    def __init__(self, dimensions, arrays, attrs=None):
        self.dimensions = tuple(dimensions)
        by_name = {dim.name: dim for dim in self.dimensions}
        attrs = attrs or {}
        self._arrays = {}
        self._variables = {}
        for name, (dims, data) in arrays.items():
            data = np.asarray(data)
            self._arrays[name] = data
            self._variables[name] = SourceVariable(
                name, tuple(by_name[d] for d in dims), data.dtype, dict(attrs.get(name, {}))
            )
        self.is_closed = False
        self.reads = []

    @property
    def variables(self):
        return dict(self._variables)

    def find_variable(self, name):
        return self._variables.get(name)

    def get_variable(self, name):
        if name not in self._variables:
            raise UnknownVariableError([name], list(self._variables))
        return self._variables[name]

    def read_slice(self, variable, origin, shape):
        if self.is_closed:
            raise SourceClosedError("read")
        self.reads.append((variable.name, tuple(origin), tuple(shape)))
        key = tuple(slice(o, o + n) for o, n in zip(origin, shape))
        return self._arrays[variable.name][key]

    def close(self):
        self.is_closed = True


@pytest.fixture
def climate_dataset():
    time = xr.Variable(("time",), np.array([0.5]), {"units": TIME_UNITS, "calendar": "standard"})
    lat = xr.Variable(("lat",), np.linspace(-89.5, 89.5, NLAT), {"units": "degrees_north"})
    lon = xr.Variable(("lon",), np.linspace(0.0, 358.59375, NLON), {"units": "degrees_east"})
    pr = np.arange(NLAT * NLON, dtype=np.float32).reshape(1, NLAT, NLON)
    tas = (200.0 + pr / 1000.0).astype(np.float32)
    ds = xr.Dataset(
        {
            "pr": (("time", "lat", "lon"), pr, {"units": "kg m-2 s-1", "long_name": "precipitation"}),
            "tas": (("time", "lat", "lon"), tas, {"units": "K", "description": "air temperature"}),
            "tas_t": (("lon", "lat", "time"), tas.transpose(2, 1, 0), {"units": "K"}),
            "orog": (("lat", "lon"), np.zeros((NLAT, NLON), dtype=np.float32)),
        },
        coords={"time": time, "lat": lat, "lon": lon},
    )
    ds.encoding["unlimited_dims"] = {"time"}
    return ds


@pytest.fixture
def climate_source(climate_dataset):
    return NetcdfSource.from_dataset(climate_dataset)


@pytest.fixture
def station_dataset():
    names = ["alpha", "bravo", "charlie"]
    return xr.Dataset(
        {
            "station_name": (("station", "name_strlen"), char_array(names, 8)),
            "elevation": (("station",), np.array([10, 250, 1800], dtype=np.int32)),
            "time_obs": (
                ("station",), np.array([0, 24, 48], dtype=np.int32),
                {"units": "Hours since 2020-02-28", "calendar": "noleap"},
            ),
        }
    )


@pytest.fixture
def station_source(station_dataset):
    return NetcdfSource.from_dataset(station_dataset)


@pytest.fixture
def string_coordinate_source():
    """Dimension 'site' whose coordinate variable is a character array."""
    site = Dimension("site", 2)
    strlen = Dimension("strlen", 4)
    return StubSource(
        [site, strlen],
        {
            "site": (("site", "strlen"), char_array(["ab", "wxyz"], 4)),
            "count": (("site",), np.array([3, 7], dtype=np.int16)),
        },
    )
