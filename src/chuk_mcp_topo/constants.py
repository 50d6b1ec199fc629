"""
Constants for chuk-mcp-topo server.

All magic strings, sampling defaults, gradient bands, and configuration values live here.
"""

import os


class ServerConfig:
    NAME = "chuk-mcp-topo"
    VERSION = "0.1.0"
    DESCRIPTION = "Path Sampling, Elevation Profile & Gradient Analysis MCP Server"


class EnvVar:
    API_URL = "TOPO_API_URL"
    API_TIMEOUT = "TOPO_API_TIMEOUT"
    TWO_POINT_SAMPLES = "TOPO_TWO_POINT_SAMPLES"
    PATH_SAMPLES = "TOPO_PATH_SAMPLES"
    HTTP_HOST = "TOPO_HTTP_HOST"
    HTTP_PORT = "TOPO_HTTP_PORT"
    MCP_STDIO = "MCP_STDIO"


class RouteMode:
    TWO_POINT = "two-point"
    MULTI_POINT = "multi-point"


ROUTE_MODES = [RouteMode.TWO_POINT, RouteMode.MULTI_POINT]
DEFAULT_ROUTE_MODE = RouteMode.TWO_POINT
SUPPLIED_PROFILE_MODE = "profile"


class ProfileStatus:
    OK = "ok"
    EMPTY_RESULT = "empty_result"
    INVALID_PATH = "invalid_path"
    LOOKUP_UNAVAILABLE = "lookup_unavailable"
    LOOKUP_FAILED = "lookup_failed"


PROFILE_STATUSES = [
    ProfileStatus.OK,
    ProfileStatus.EMPTY_RESULT,
    ProfileStatus.INVALID_PATH,
    ProfileStatus.LOOKUP_UNAVAILABLE,
    ProfileStatus.LOOKUP_FAILED,
]

# Geodesy
EARTH_RADIUS_KM = 6371.0

# Sampling defaults
DEFAULT_TWO_POINT_SAMPLES = 100
DEFAULT_PATH_SAMPLES = 250
MIN_SAMPLES = 2
MIN_WAYPOINTS = 2

# Elevation lookup (Open-Elevation compatible POST endpoint)
DEFAULT_API_URL = "https://api.open-elevation.com/api/v1/lookup"
DEFAULT_API_TIMEOUT_S = 30.0

# HTTP transport
DEFAULT_HTTP_HOST = "localhost"
DEFAULT_HTTP_PORT = 8004

# Gradient bands, steepest climb first. A gradient belongs to the first band
# whose threshold it strictly exceeds; the last band has no threshold.
GRADIENT_BANDS: list[dict] = [
    {"key": "steep_climb", "label": "Steep climb", "above": 10.0, "color": "#d73027"},
    {"key": "climb", "label": "Climb", "above": 5.0, "color": "#fc8d59"},
    {"key": "gentle_climb", "label": "Gentle climb", "above": 1.0, "color": "#fee08b"},
    {"key": "flat", "label": "Flat", "above": -1.0, "color": "#91cf60"},
    {"key": "gentle_descent", "label": "Gentle descent", "above": -5.0, "color": "#91bfdb"},
    {"key": "descent", "label": "Descent", "above": -10.0, "color": "#4575b4"},
    {"key": "steep_descent", "label": "Steep descent", "above": None, "color": "#313695"},
]

GRADIENT_CLASS_KEYS = [band["key"] for band in GRADIENT_BANDS]

PROFILE_TOOLS = [
    "topo_profile_two_points",
    "topo_profile_path",
    "topo_sample_path",
    "topo_reduce_profile",
    "topo_nearest_point",
]
ROUTE_TOOLS = [
    "topo_route_click",
    "topo_route_set_mode",
    "topo_route_reset",
    "topo_route_analyze",
    "topo_route_hover",
    "topo_route_state",
]
DISCOVERY_TOOLS = ["topo_status", "topo_capabilities", "topo_gradient_legend"]


def get_api_url() -> str:
    """Return the elevation lookup URL from the environment, or the default."""
    return os.environ.get(EnvVar.API_URL, DEFAULT_API_URL).strip().rstrip("/")


def get_api_timeout() -> float:
    """Return the lookup HTTP timeout in seconds."""
    return float(os.environ.get(EnvVar.API_TIMEOUT, DEFAULT_API_TIMEOUT_S))


def get_two_point_samples() -> int:
    return int(os.environ.get(EnvVar.TWO_POINT_SAMPLES, DEFAULT_TWO_POINT_SAMPLES))


def get_path_samples() -> int:
    return int(os.environ.get(EnvVar.PATH_SAMPLES, DEFAULT_PATH_SAMPLES))


def get_http_host() -> str:
    return os.environ.get(EnvVar.HTTP_HOST, DEFAULT_HTTP_HOST)


def get_http_port() -> int:
    return int(os.environ.get(EnvVar.HTTP_PORT, DEFAULT_HTTP_PORT))


class ErrorMessages:
    INVALID_POINT = "Invalid point {}: must be [lat, lng]"
    INVALID_LATITUDE = "Latitude must be between -90 and 90, got {}"
    INVALID_LONGITUDE = "Longitude must be between -180 and 180, got {}"
    INVALID_SAMPLE_COUNT = "sample count must be >= 2, got {}"
    INVALID_ROUTE_MODE = "Invalid route mode '{}'. Available: {}"
    INVALID_SAMPLE = "Invalid profile sample {}: expected lat, lng and elevation"
    INVALID_PATH = "At least 2 waypoints are required to analyze a path, got {}"
    EMPTY_RESULT = "No elevation data found for this route"
    EMPTY_PROFILE = "Profile is empty: nothing to search"
    LOOKUP_UNAVAILABLE = "Network error: cannot reach the elevation service ({}). Try again later."
    LOOKUP_STATUS = "Elevation API request failed with status {}"
    LOOKUP_DETAIL = "Elevation API error: {}"
    LOOKUP_HTTP = "Elevation API request failed: {}"
    LOOKUP_MALFORMED = "Elevation API returned a malformed response: {}"
    LOOKUP_COUNT_MISMATCH = "Elevation API returned {} results for {} locations"
    LOOKUP_UNKNOWN = "An unknown error occurred while fetching elevation data"


class SuccessMessages:
    PROFILE_COMPLETE = "Profile extracted: {} points over {:.2f} km"
    PROFILE_REDUCED = "Profile reduced: {} points over {:.2f} km"
    SAMPLES_COMPUTED = "Sampled {} points along a {:.2f} km path"
    NEAREST_POINT = "Nearest profile point at {:.2f} km ({:.0f} m)"
    ROUTE_UPDATED = "Route updated ({} mode)"
    ROUTE_RESET = "Route reset ({} mode)"
    LEGEND = "{} gradient classes"
    CAPABILITIES = "{} tools available"
