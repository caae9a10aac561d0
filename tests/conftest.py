import numpy as np
import pytest
import rasterio
from rasterio.transform import from_origin

NODATA = -9999.0


@pytest.fixture
def make_raster(tmp_path):
    """Write a float32 GeoTIFF from a 2-D array and return its path."""

    def _make(data, name="input.tif", nodata=NODATA, **profile_kwargs):
        data = np.asarray(data, dtype=np.float32)
        path = tmp_path / name
        profile = {
            "driver": "GTiff",
            "dtype": "float32",
            "count": 1,
            "height": data.shape[0],
            "width": data.shape[1],
            "crs": "EPSG:4326",
            "transform": from_origin(0.0, float(data.shape[0]), 1.0, 1.0),
            "nodata": nodata,
        }
        profile.update(profile_kwargs)
        with rasterio.open(path, "w", **profile) as dst:
            dst.write(data, 1)
        return str(path)

    return _make


@pytest.fixture
def holey_surface():
    """A 40x40 sloping surface with a few holes of different sizes."""

    rows, cols = np.mgrid[0:40, 0:40]
    data = (100.0 + 0.5 * rows + 0.25 * cols).astype(np.float64)
    data[5:9, 5:12] = NODATA
    data[20, 20] = NODATA
    data[14:30, 30:34] = NODATA
    data[0:3, 36:40] = NODATA
    return data
