#!/usr/bin/env python3
"""
swingby Simulation Example
==========================

Example script demonstrating the simulation framework.
"""

import logging
import time

import numpy as np

from swingby.core.config import create_swingby_config
from swingby.core.projection import project_to_screen
from swingby.core.vector import Vector2D
from swingby.core.world import World
from swingby.scenarios.swingby import create_swingby_bodies


def run_quick_simulation():
    """Run the Earth-Moon-spacecraft system for ten host seconds."""
    print("=" * 60)
    print("swingby Quick Simulation")
    print("=" * 60)

    config = create_swingby_config()
    config.duration_seconds = config.time_step_seconds * 600

    world = World(config, create_swingby_bodies())

    print(f"\nSimulation Configuration:")
    print(f"  Duration: {config.duration_seconds / 86400:.0f} days")
    print(f"  Time step: {config.time_step_seconds:.0f} s")
    print(f"  Bodies: {', '.join(b.name for b in world.bodies)}")

    print("\nRunning simulation...")
    start_time = time.time()

    def progress(p):
        if p > 0:
            print(f"  Progress: {p*100:.0f}%", end='\r')

    history = world.run(progress_callback=progress)

    elapsed = time.time() - start_time
    print(f"\nSimulation complete in {elapsed:.2f}s")
    print(f"  Simulated {world.step_count} steps, {len(history)} logged states")

    print(f"\nFinal State (t = {world.clock.elapsed_days:.0f} days):")
    for body in world.bodies:
        screen = project_to_screen(body.position, config.screen)
        print(f"  {body.name:<12} position: ({body.position.x:.3e}, {body.position.y:.3e}) m  "
              f"speed: {body.speed:.2f} m/s  screen: ({screen.x:.1f}, {screen.y:.1f}) px")


def run_swingby_scenario():
    """Run swing-by scenario."""
    print("\n" + "=" * 60)
    print("Swing-by Scenario")
    print("=" * 60)

    from swingby.scenarios.swingby import SwingbyScenario, SwingbyScenarioConfig

    scenario = SwingbyScenario(SwingbyScenarioConfig(duration_frames=3600))
    scenario.run()

    print(scenario.get_summary())


def run_two_body_scenario():
    """Run circular two-body orbit and the Mars flyby."""
    print("\n" + "=" * 60)
    print("Two-Body Scenarios")
    print("=" * 60)

    from swingby.scenarios.two_body import (
        TwoBodyScenario,
        create_mars_flyby_scenario_config,
    )

    scenario = TwoBodyScenario()
    scenario.run()
    print(scenario.get_summary())

    flyby = TwoBodyScenario(create_mars_flyby_scenario_config())
    flyby.run()
    print(flyby.get_summary())


def run_random_system(seed: int):
    """Run a randomly generated system."""
    print("\n" + "=" * 60)
    print("Random System")
    print("=" * 60)

    from swingby.scenarios.random_system import RandomSystemScenario, RandomSystemScenarioConfig

    scenario = RandomSystemScenario(RandomSystemScenarioConfig(body_count=4, seed=seed))
    results = scenario.run()

    print(scenario.get_summary())
    if not results['finite']:
        print("  Bodies met head-on; state is no longer finite.")


def demonstrate_projection():
    """Show how positions map to host pixels."""
    print("\n" + "=" * 60)
    print("Screen Projection")
    print("=" * 60)

    config = create_swingby_config()
    for x_m in np.linspace(-5e9, 5e9, 5):
        px = project_to_screen(Vector2D(x_m, 0.0), config.screen)
        print(f"  x = {x_m:>9.2e} m -> ({px.x:7.1f}, {px.y:6.1f}) px")


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="swingby Simulation Examples")
    parser.add_argument('--all', action='store_true', help='Run all examples')
    parser.add_argument('--quick', action='store_true', help='Run quick simulation')
    parser.add_argument('--swingby', action='store_true', help='Run swing-by scenario')
    parser.add_argument('--two-body', action='store_true', help='Run two-body scenarios')
    parser.add_argument('--random', action='store_true', help='Run a random system')
    parser.add_argument('--projection', action='store_true', help='Demonstrate screen projection')
    parser.add_argument('--seed', type=int, default=0, help='Seed for --random')
    parser.add_argument('--debug', action='store_true', help='Log every step')

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    selected = [args.all, args.quick, args.swingby, args.two_body, args.random, args.projection]
    # Default to quick if no args
    if not any(selected):
        args.quick = True

    if args.all or args.quick:
        run_quick_simulation()

    if args.all or args.swingby:
        run_swingby_scenario()

    if args.all or args.two_body:
        run_two_body_scenario()

    if args.all or args.random:
        run_random_system(args.seed)

    if args.all or args.projection:
        demonstrate_projection()

    print("\n" + "=" * 60)
    print("Examples complete!")
    print("=" * 60)
