#!/usr/bin/env python3
"""
Grand Canyon Rim-to-Rim Route -- chuk-mcp-topo Demo

Builds a multi-point route from the South Rim down to the Colorado River
and up to the North Rim using the interactive route tools, compares it with
the straight two-point line, and plots the route profile coloured by
gradient class.

Usage:
    python examples/grand_canyon_route_demo.py

Output:
    examples/output/grand_canyon_route.png

Requirements:
    pip install chuk-mcp-topo matplotlib
    (Requires network access to the elevation lookup service)
"""

import asyncio
import sys
from pathlib import Path

import matplotlib.pyplot as plt

from tool_runner import ToolRunner

# -- Configuration -----------------------------------------------------------

# [lat, lng] waypoints roughly following Bright Angel and North Kaibab trails
ROUTE = [
    [36.0576, -112.1440],  # Bright Angel trailhead
    [36.0795, -112.1260],  # Havasupai Gardens
    [36.1000, -112.0950],  # Colorado River
    [36.1053, -112.0946],  # Phantom Ranch
    [36.1560, -112.0700],  # Cottonwood
    [36.2170, -112.0570],  # North Kaibab trailhead
]
TOTAL_SAMPLES = 300
OUTPUT_DIR = Path(__file__).parent / "output"


# -- Main pipeline -----------------------------------------------------------


async def main() -> None:
    OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    runner = ToolRunner()

    print("=" * 60)
    print("Grand Canyon -- Rim-to-Rim Route Profile")
    print("=" * 60)

    # Step 1: Straight line between the trailheads
    print("\nStep 1: Straight-line profile between trailheads...")
    line = await runner.run("topo_profile_two_points", start=ROUTE[0], end=ROUTE[-1])
    if line.get("status") != "ok":
        print(f"  ERROR: {line.get('error', line.get('message'))}")
        sys.exit(1)
    print(f"  {line['message']}")

    # Step 2: Click the waypoints into a multi-point route
    print(f"\nStep 2: Placing {len(ROUTE)} waypoints...")
    await runner.run("topo_route_set_mode", mode="multi-point")
    for lat, lng in ROUTE:
        await runner.run("topo_route_click", lat=lat, lng=lng)

    route = await runner.run("topo_route_analyze")
    if route["status"] != "ok":
        print(f"  ERROR ({route['status']}): {route['error']}")
        sys.exit(1)

    stats = route["stats"]
    print(f"  Distance: {stats['distance_km']:.1f} km")
    print(f"  Elevation range: {stats['min_elevation_m']:.0f}m to {stats['max_elevation_m']:.0f}m")
    print(f"  Ascent: {stats['total_ascent_m']:.0f}m, Descent: {stats['total_descent_m']:.0f}m")

    # Step 3: Gradient classification of the same path
    print("\nStep 3: Classifying gradients...")
    profile = await runner.run(
        "topo_profile_path", waypoints=ROUTE, total_samples=TOTAL_SAMPLES
    )
    if "error" in profile:
        print(f"  ERROR: {profile['error']}")
        sys.exit(1)

    counts: dict[str, int] = {}
    for g in profile["gradients"]:
        counts[g["gradient_class"]] = counts.get(g["gradient_class"], 0) + 1
    for key, count in counts.items():
        print(f"  {key:15s} {count:4d} segments")

    # Step 4: Render chart
    print("\nStep 4: Rendering route chart...")
    points = profile["points"]
    distances = [p["distance_km"] for p in points]
    elevations = [p["elevation_m"] for p in points]

    fig, ax = plt.subplots(1, 1, figsize=(14, 6))
    ax.fill_between(distances, elevations, min(elevations) - 50, alpha=0.15, color="sienna")
    for i, g in enumerate(profile["gradients"]):
        ax.plot(distances[i : i + 2], elevations[i : i + 2], color=g["color"], linewidth=2.5)

    # Mark the river
    min_idx = elevations.index(min(elevations))
    ax.annotate(
        f"River\n{elevations[min_idx]:.0f}m",
        xy=(distances[min_idx], elevations[min_idx]),
        xytext=(distances[min_idx], elevations[min_idx] - 250),
        fontsize=10,
        fontweight="bold",
        color="blue",
        arrowprops=dict(arrowstyle="->", color="blue"),
    )

    legend = await runner.run("topo_gradient_legend")
    for band in legend["bands"]:
        ax.plot([], [], color=band["color"], linewidth=4, label=band["label"])
    ax.legend(loc="upper right", fontsize=9)

    ax.set_xlabel("Distance (km)", fontsize=12)
    ax.set_ylabel("Elevation (m)", fontsize=12)
    ax.set_title(
        "Grand Canyon -- Rim-to-Rim Route Profile\n"
        f"{len(ROUTE)} waypoints | {len(points)} samples",
        fontsize=14,
        fontweight="bold",
    )
    ax.grid(True, alpha=0.3)
    ax.set_xlim(0, distances[-1])

    fig.tight_layout()
    output_path = OUTPUT_DIR / "grand_canyon_route.png"
    fig.savefig(output_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    print(f"  Saved: {output_path}")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print(f"  Route: {stats['distance_km']:.1f} km vs {line['stats']['distance_km']:.1f} km line")
    print(f"\nOutput: {output_path}")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
