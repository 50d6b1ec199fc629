#!/usr/bin/env python3
"""
Capabilities Demo -- chuk-mcp-topo

Quick-start script showing what the server can do, without any network
access. Prints server status, capabilities, the gradient legend, path
sampling, and reduction of a hand-made profile in both output modes.

Usage:
    python examples/capabilities_demo.py
"""

import asyncio

from tool_runner import ToolRunner

# A short hill walk as [lat, lng] waypoints
WAYPOINTS = [[54.4541, -3.2110], [54.4580, -3.2050], [54.4615, -3.2115]]

# Hand-made profile: up, down a little, up again
PROFILE = [
    {"lat": 54.4541, "lng": -3.2110, "elevation": 310.0},
    {"lat": 54.4560, "lng": -3.2080, "elevation": 395.0},
    {"lat": 54.4580, "lng": -3.2050, "elevation": 372.0},
    {"lat": 54.4615, "lng": -3.2115, "elevation": 520.0},
]


async def main() -> None:
    runner = ToolRunner()

    print("=" * 60)
    print("chuk-mcp-topo -- Server Capabilities")
    print("=" * 60)

    print(f"\nRegistered tools ({len(runner.tool_names)}):")
    for name in sorted(runner.tool_names):
        print(f"  - {name}")

    status = await runner.run("topo_status")
    print("\nServer Status:")
    print(f"  {status['server']} v{status['version']}")
    print(f"  Lookup: {status['api_url']} (timeout {status['api_timeout_s']}s)")
    print(f"  Samples: {status['two_point_samples']} two-point, {status['path_samples']} path")

    caps = await runner.run("topo_capabilities")
    print("\nCapabilities:")
    print(f"  Tools: {caps['tool_count']}")
    print(f"  Route modes: {', '.join(caps['route_modes'])}")
    print(f"  Statuses: {', '.join(caps['statuses'])}")
    print(f"  Guidance: {caps['llm_guidance']}")

    print("\nGradient legend:")
    print(await runner.run_text("topo_gradient_legend"))

    # ---------------------------------------------------------------
    # Sampling and reduction (no elevation lookup)
    # ---------------------------------------------------------------
    print("\n" + "-" * 60)
    print("Path sampling")
    print("-" * 60)

    samples = await runner.run("topo_sample_path", waypoints=WAYPOINTS, sample_count=5)
    print(f"  Path length: {samples['path_distance_km']:.3f} km")
    for s in samples["samples"]:
        print(f"  ({s['lat']:.5f}, {s['lng']:.5f})")

    print("\n" + "-" * 60)
    print("Profile reduction (output_mode='text')")
    print("-" * 60)
    print(await runner.run_text("topo_reduce_profile", samples=PROFILE))

    reduced = await runner.run("topo_reduce_profile", samples=PROFILE)
    print("\nPer-segment gradients:")
    for g in reduced["gradients"]:
        print(
            f"  {g['distance_km']:.3f} km  {g['elevation_delta_m']:+6.1f}m  "
            f"{g['gradient_percent']:+6.1f}%  {g['gradient_class']}"
        )

    nearest = await runner.run("topo_nearest_point", samples=PROFILE, location=[54.4579, -3.2052])
    print(f"\nNearest to a hover position: {nearest['message']}")

    print("\n" + "=" * 60)
    print("Demo complete!")
    print("=" * 60)


if __name__ == "__main__":
    asyncio.run(main())
