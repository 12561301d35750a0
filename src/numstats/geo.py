"""
Distances between points on the surface of the Earth, treated as a sphere.
"""
__all__ = ["EARTH_RADIUS_KM", "haversine_distance"]

import numpy as np

from .exceptions import MalformedCoordinateError

EARTH_RADIUS_KM = 6371.0
"""Mean radius of the Earth, in kilometres."""


def _lat_lon(coord, name):
    arr = np.asarray(coord, dtype=np.float64)
    if arr.ndim != 1 or arr.shape[0] < 2:
        raise MalformedCoordinateError(
            "`{}` should contain (latitude, longitude); found shape {}.".format(
                name, arr.shape
            )
        )
    lat, lon = arr[0], arr[1]
    if np.isnan(lat) or np.isnan(lon):
        raise MalformedCoordinateError("`{}` contains NaN: {}.".format(name, arr[:2]))
    return lat, lon


def haversine_distance(coord1, coord2, radius=EARTH_RADIUS_KM):
    """
    Great-circle distance between two points given in degrees, computed with
    the haversine formula:
        a = sin²(Δφ/2) + cos φ1 cos φ2 sin²(Δλ/2)
        d = 2 R arcsin(√a)

    Parameters
    ----------
    coord1 : array_like (2,)
        (latitude, longitude) of the first point, in degrees. Any further
        components are ignored.
    coord2 : array_like (2,)
        (latitude, longitude) of the second point, in degrees.
    radius : float, optional
        Radius of the sphere. The default is `EARTH_RADIUS_KM`, giving a
        distance in kilometres.

    Returns
    -------
    float
        Distance between the two points, in the units of `radius`.

    Raises
    ------
    MalformedCoordinateError
        If either coordinate has fewer than two components or a NaN latitude
        or longitude.

    Notes
    -----
    Coordinates are not range-checked, so a latitude of 100° is accepted and
    simply run through the trigonometry.

    Examples
    --------
    ```
    >>> paris, london = (48.8534, 2.3488), (51.5085, -0.1257)
    >>> bool(343 < haversine_distance(paris, london) < 345)
    True
    ```

    """
    lat1, lon1 = _lat_lon(coord1, "coord1")
    lat2, lon2 = _lat_lon(coord2, "coord2")

    phi1, phi2 = np.radians(lat1), np.radians(lat2)
    d_phi = np.radians(lat1 - lat2)
    d_lambda = np.radians(lon1 - lon2)

    a = np.sin(d_phi / 2) ** 2 + np.cos(phi1) * np.cos(phi2) * np.sin(d_lambda / 2) ** 2
    # Rounding can push `a` just past 1 for antipodal points.
    central_angle = 2 * np.arcsin(np.sqrt(np.minimum(a, 1.0)))
    return radius * central_angle
