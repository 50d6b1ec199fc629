"""
Response models for chuk-mcp-topo tools.

All tool responses are Pydantic models for type safety and consistent API.
"""

from pydantic import BaseModel, ConfigDict, Field


def format_response(model: BaseModel, output_mode: str = "json") -> str:
    """Format a response model as JSON or human-readable text.

    Args:
        model: Pydantic response model instance
        output_mode: "json" (default) or "text"

    Returns:
        Formatted string
    """
    if output_mode == "text" and hasattr(model, "to_text"):
        return str(model.to_text())
    return str(model.model_dump_json())


class ErrorResponse(BaseModel):
    """Error response model for tool failures."""

    model_config = ConfigDict(extra="forbid")

    error: str = Field(..., description="Error message describing what went wrong")
    category: str | None = Field(
        None, description="Failure category (invalid_path, lookup_unavailable, lookup_failed)"
    )

    def to_text(self) -> str:
        if self.category:
            return f"Error ({self.category}): {self.error}"
        return f"Error: {self.error}"


# ---------------------------------------------------------------------------
# Profile responses
# ---------------------------------------------------------------------------


class LocationInfo(BaseModel):
    """A sampled coordinate."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Latitude in degrees")
    lng: float = Field(..., description="Longitude in degrees")


class ProfilePointInfo(BaseModel):
    """Elevation data for a single point in a profile."""

    model_config = ConfigDict(extra="forbid")

    lat: float = Field(..., description="Latitude")
    lng: float = Field(..., description="Longitude")
    elevation_m: float = Field(..., description="Elevation in metres")
    distance_km: float = Field(..., description="Distance from start in kilometres", ge=0)


class ProfileStatsInfo(BaseModel):
    """Summary statistics for an elevation profile."""

    model_config = ConfigDict(extra="forbid")

    distance_km: float = Field(..., description="Total distance in kilometres", ge=0)
    max_elevation_m: float = Field(..., description="Highest elevation in metres")
    min_elevation_m: float = Field(..., description="Lowest elevation in metres")
    total_ascent_m: float = Field(..., description="Sum of elevation gains in metres", ge=0)
    total_descent_m: float = Field(..., description="Sum of elevation losses in metres", ge=0)

    def to_text(self) -> str:
        lines = [
            f"Distance: {self.distance_km:.2f} km",
            f"Elevation range: {self.min_elevation_m:.1f}m to {self.max_elevation_m:.1f}m",
            f"Ascent: {self.total_ascent_m:.1f}m, Descent: {self.total_descent_m:.1f}m",
        ]
        return "\n".join(lines)


class GradientSegmentInfo(BaseModel):
    """Gradient between two consecutive profile points."""

    model_config = ConfigDict(extra="forbid")

    start: list[float] = Field(..., description="Segment start [lat, lng]")
    end: list[float] = Field(..., description="Segment end [lat, lng]")
    distance_km: float = Field(..., description="Segment length in kilometres", ge=0)
    elevation_delta_m: float = Field(..., description="Elevation change in metres")
    gradient_percent: float = Field(..., description="Gradient in percent")
    gradient_class: str = Field(..., description="Gradient class key (e.g., steep_climb)")
    color: str = Field(..., description="Display colour for the gradient class")


class ProfileResponse(BaseModel):
    """Response model for elevation profile extraction."""

    model_config = ConfigDict(extra="forbid")

    mode: str = Field(
        ..., description="Route mode (two-point, multi-point) or profile for supplied samples"
    )
    status: str = Field(..., description="Outcome status (ok or empty_result)")
    waypoints: list[list[float]] = Field(..., description="Requested path points [lat, lng]")
    requested_samples: int = Field(..., description="Requested sample count", ge=0)
    num_points: int = Field(..., description="Number of profile points returned", ge=0)
    points: list[ProfilePointInfo] = Field(..., description="Profile points with elevation")
    stats: ProfileStatsInfo | None = Field(None, description="Profile statistics")
    gradients: list[GradientSegmentInfo] = Field(
        default_factory=list, description="Per-segment gradient classification"
    )
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"Profile: {self.mode} ({len(self.waypoints)} waypoints)",
            f"Status: {self.status}",
            f"Points: {self.num_points} (requested {self.requested_samples})",
        ]
        if self.stats:
            lines.append(self.stats.to_text())
        if self.gradients:
            counts: dict[str, int] = {}
            for g in self.gradients:
                counts[g.gradient_class] = counts.get(g.gradient_class, 0) + 1
            summary = ", ".join(f"{k}: {v}" for k, v in counts.items())
            lines.append(f"Gradient segments: {summary}")
        lines.append(self.message)
        return "\n".join(lines)


class SampleResponse(BaseModel):
    """Response model for path sampling without an elevation lookup."""

    model_config = ConfigDict(extra="forbid")

    waypoints: list[list[float]] = Field(..., description="Input path points [lat, lng]")
    sample_count: int = Field(..., description="Requested sample count", ge=2)
    path_distance_km: float = Field(..., description="Polyline length in kilometres", ge=0)
    samples: list[LocationInfo] = Field(..., description="Evenly spaced sample coordinates")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"Path: {len(self.waypoints)} waypoints, {self.path_distance_km:.2f} km",
            f"Samples: {len(self.samples)} (requested {self.sample_count})",
        ]
        if self.samples:
            first, last = self.samples[0], self.samples[-1]
            lines.append(f"First: ({first.lat:.6f}, {first.lng:.6f})")
            lines.append(f"Last: ({last.lat:.6f}, {last.lng:.6f})")
        return "\n".join(lines)


class NearestPointResponse(BaseModel):
    """Response model for the nearest profile point lookup."""

    model_config = ConfigDict(extra="forbid")

    query: list[float] = Field(..., description="Query location [lat, lng]")
    point: ProfilePointInfo = Field(..., description="Closest profile point")
    index: int = Field(..., description="Index of the closest point in the profile", ge=0)
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        return (
            f"Nearest to ({self.query[0]:.6f}, {self.query[1]:.6f}): "
            f"#{self.index} at {self.point.distance_km:.2f} km, {self.point.elevation_m:.0f}m"
        )


# ---------------------------------------------------------------------------
# Route session responses
# ---------------------------------------------------------------------------


class RouteStateResponse(BaseModel):
    """Response model for the interactive route session."""

    model_config = ConfigDict(extra="forbid")

    mode: str = Field(..., description="Route mode (two-point or multi-point)")
    start: list[float] | None = Field(None, description="Two-point start [lat, lng]")
    end: list[float] | None = Field(None, description="Two-point end [lat, lng]")
    waypoints: list[list[float]] = Field(
        default_factory=list, description="Multi-point waypoints [lat, lng]"
    )
    status: str | None = Field(None, description="Last analysis status")
    error: str | None = Field(None, description="Last analysis error message")
    is_loading: bool = Field(default=False, description="Whether an analysis is in flight")
    request_id: int = Field(..., description="Identifier of the latest action", ge=0)
    num_points: int = Field(default=0, description="Number of profile points", ge=0)
    points: list[ProfilePointInfo] = Field(default_factory=list, description="Profile points")
    stats: ProfileStatsInfo | None = Field(None, description="Profile statistics")
    hovered: ProfilePointInfo | None = Field(None, description="Highlighted profile point")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [f"Route: {self.mode}"]
        if self.start:
            lines.append(f"Start: ({self.start[0]:.6f}, {self.start[1]:.6f})")
        if self.end:
            lines.append(f"End: ({self.end[0]:.6f}, {self.end[1]:.6f})")
        if self.waypoints:
            lines.append(f"Waypoints: {len(self.waypoints)}")
        if self.status:
            lines.append(f"Status: {self.status}")
        if self.stats:
            lines.append(self.stats.to_text())
        if self.hovered:
            lines.append(
                f"Hover: {self.hovered.distance_km:.2f} km, {self.hovered.elevation_m:.0f}m"
            )
        if self.error:
            lines.append(f"Error: {self.error}")
        return "\n".join(lines)


# ---------------------------------------------------------------------------
# Discovery responses
# ---------------------------------------------------------------------------


class GradientBandInfo(BaseModel):
    """A gradient classification band."""

    model_config = ConfigDict(extra="forbid")

    key: str = Field(..., description="Band key (e.g., gentle_climb)")
    label: str = Field(..., description="Human-readable label")
    above_percent: float | None = Field(
        None, description="Gradients strictly above this value fall in the band (None = rest)"
    )
    color: str = Field(..., description="Display colour")


class GradientLegendResponse(BaseModel):
    """Response model for the gradient legend."""

    model_config = ConfigDict(extra="forbid")

    bands: list[GradientBandInfo] = Field(..., description="Bands, steepest climb first")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [self.message]
        for b in self.bands:
            bound = f"> {b.above_percent:g}%" if b.above_percent is not None else "otherwise"
            lines.append(f"  {b.color} {b.label} ({bound})")
        return "\n".join(lines)


class StatusResponse(BaseModel):
    """Response model for server status queries."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(default="chuk-mcp-topo", description="Server name")
    version: str = Field(default="0.1.0", description="Server version")
    api_url: str = Field(..., description="Elevation lookup endpoint")
    api_timeout_s: float = Field(..., description="Lookup timeout in seconds")
    two_point_samples: int = Field(..., description="Default two-point sample count")
    path_samples: int = Field(..., description="Default multi-point sample count")
    route_mode: str = Field(..., description="Current route session mode")

    def to_text(self) -> str:
        lines = [
            f"{self.server} v{self.version}",
            f"Lookup: {self.api_url} (timeout {self.api_timeout_s:g}s)",
            f"Samples: {self.two_point_samples} two-point, {self.path_samples} multi-point",
            f"Route mode: {self.route_mode}",
        ]
        return "\n".join(lines)


class CapabilitiesResponse(BaseModel):
    """Response model for server capabilities listing."""

    model_config = ConfigDict(extra="forbid")

    server: str = Field(..., description="Server name")
    version: str = Field(..., description="Server version")
    route_modes: list[str] = Field(..., description="Supported route modes")
    profile_tools: list[str] = Field(..., description="Profile tools")
    route_tools: list[str] = Field(..., description="Interactive route tools")
    discovery_tools: list[str] = Field(..., description="Discovery tools")
    gradient_classes: list[str] = Field(..., description="Gradient class keys")
    statuses: list[str] = Field(..., description="Possible profile statuses")
    tool_count: int = Field(..., description="Number of available tools", ge=0)
    llm_guidance: str = Field(..., description="LLM-friendly usage guidance for the server")
    message: str = Field(..., description="Operation result message")

    def to_text(self) -> str:
        lines = [
            f"{self.server} v{self.version}",
            f"Tools: {self.tool_count}",
            f"Route modes: {', '.join(self.route_modes)}",
            f"Profile tools: {', '.join(self.profile_tools)}",
            f"Route tools: {', '.join(self.route_tools)}",
            f"Discovery tools: {', '.join(self.discovery_tools)}",
            f"Gradient classes: {', '.join(self.gradient_classes)}",
            f"Guidance: {self.llm_guidance}",
        ]
        return "\n".join(lines)
