#!/usr/bin/env python3
"""Run *complete* swingby validations.

This script executes:
- Python unit tests (pytest)
- Every simulation scenario

It writes full logs + data + images into build/reports/.

Usage:
  python3 tools/run_all.py
  python3 tools/run_all.py --out build/reports --profile standard
"""

from __future__ import annotations

import argparse
import contextlib
import csv
import io
import json
import logging
import os
import shutil
import subprocess
import sys
from dataclasses import asdict, is_dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

# Force headless plotting
import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import numpy as np


REPO_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_OUT_ROOT = REPO_ROOT / "build" / "reports"

SCENARIO_NAMES = ("swingby", "two_body", "mars_flyby", "random_system")


def _utc_stamp() -> str:
    return datetime.now(timezone.utc).strftime("%Y%m%d_%H%M%SZ")


def _run_cmd(
    cmd: list[str],
    *,
    cwd: Path,
    log_path: Path,
    env: Optional[dict[str, str]] = None,
) -> int:
    log_path.parent.mkdir(parents=True, exist_ok=True)
    with log_path.open("w", encoding="utf-8") as f:
        f.write(f"$ {' '.join(cmd)}\n")
        f.write(f"cwd={cwd}\n\n")
        f.flush()
        proc = subprocess.Popen(
            cmd,
            cwd=str(cwd),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            env=env,
        )
        assert proc.stdout is not None
        for line in proc.stdout:
            f.write(line)
        return proc.wait()


def _git_info() -> dict[str, Any]:
    def _git(args: list[str]) -> str:
        try:
            return subprocess.check_output(["git", *args], cwd=str(REPO_ROOT), text=True).strip()
        except (OSError, subprocess.CalledProcessError):
            return ""

    return {
        "commit": _git(["rev-parse", "HEAD"]),
        "branch": _git(["rev-parse", "--abbrev-ref", "HEAD"]),
        "status_porcelain": _git(["status", "--porcelain"]),
    }


def _write_json(path: Path, obj: Any) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)

    def _default(o: Any):
        # Numpy types
        if isinstance(o, np.ndarray):
            return o.tolist()
        if isinstance(o, np.generic):
            return o.item()
        # Dataclasses
        if is_dataclass(o):
            return asdict(o)
        return str(o)

    path.write_text(json.dumps(obj, indent=2, sort_keys=True, default=_default) + "\n", encoding="utf-8")


def _world_to_rows(world) -> list[dict[str, Any]]:
    rows: list[dict[str, Any]] = []
    names = [body.name for body in world.bodies]
    for state in world.history:
        row: dict[str, Any] = {"time_s": float(state.time_s), "step": int(state.step)}
        for i, name in enumerate(names):
            row[f"{name}_x_m"] = float(state.positions_m[i, 0])
            row[f"{name}_y_m"] = float(state.positions_m[i, 1])
            row[f"{name}_speed_m_s"] = float(np.linalg.norm(state.velocities_m_s[i]))
        rows.append(row)
    return rows


def _write_csv(path: Path, rows: list[dict[str, Any]]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if not rows:
        path.write_text("", encoding="utf-8")
        return
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)


def _plot_trajectories(world, out_png: Path, title: str) -> None:
    out_png.parent.mkdir(parents=True, exist_ok=True)
    if not world.history:
        return

    t_days = np.array([s.time_s for s in world.history]) / 86400.0
    positions = np.array([s.positions_m for s in world.history])
    velocities = np.array([s.velocities_m_s for s in world.history])

    fig, axs = plt.subplots(1, 2, figsize=(14, 6))
    fig.suptitle(title)

    for i, body in enumerate(world.bodies):
        color = tuple(c / 255.0 for c in body.color)
        axs[0].plot(positions[:, i, 0], positions[:, i, 1], color=color, label=body.name)
        axs[0].plot(positions[-1, i, 0], positions[-1, i, 1], "o", color=color)
        axs[1].plot(t_days, np.linalg.norm(velocities[:, i, :], axis=1), color=color, label=body.name)

    axs[0].set_xlabel("x (m)")
    axs[0].set_ylabel("y (m)")
    axs[0].set_aspect("equal", adjustable="datalim")
    axs[0].grid(True)
    axs[0].legend()

    axs[1].set_xlabel("Time (days)")
    axs[1].set_ylabel("Speed (m/s)")
    axs[1].grid(True)
    axs[1].legend()

    fig.tight_layout(rect=(0, 0, 1, 0.95))
    fig.savefig(out_png, dpi=160)
    plt.close(fig)


def _build_scenario(name: str, profile: str):
    from swingby.scenarios.random_system import RandomSystemScenario, RandomSystemScenarioConfig
    from swingby.scenarios.swingby import SwingbyScenario, SwingbyScenarioConfig
    from swingby.scenarios.two_body import (
        TwoBodyScenario,
        TwoBodyScenarioConfig,
        create_mars_flyby_scenario_config,
    )

    factor = {"smoke": 0.1, "standard": 0.5, "full": 1.0}[profile]

    if name == "swingby":
        return SwingbyScenario(SwingbyScenarioConfig(duration_frames=int(7200 * factor)))
    if name == "two_body":
        return TwoBodyScenario(TwoBodyScenarioConfig(duration_steps=int(1000 * factor)))
    if name == "mars_flyby":
        config = create_mars_flyby_scenario_config()
        config.duration_steps = int(config.duration_steps * factor)
        return TwoBodyScenario(config)
    if name == "random_system":
        return RandomSystemScenario(
            RandomSystemScenarioConfig(body_count=4, seed=0, duration_frames=int(600 * factor))
        )
    raise ValueError(f"Unknown scenario: {name}")


def _run_simulation_bundle(out_dir: Path, *, profile: str, names: list[str]) -> dict[str, Any]:
    results: dict[str, Any] = {}

    def _capture(name: str, fn):
        buf = io.StringIO()
        handler = logging.StreamHandler(buf)
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
        root = logging.getLogger()
        root.addHandler(handler)
        try:
            with contextlib.redirect_stdout(buf), contextlib.redirect_stderr(buf):
                out = fn()
        finally:
            root.removeHandler(handler)
        (out_dir / "logs").mkdir(parents=True, exist_ok=True)
        (out_dir / "logs" / f"simulation_{name}.log").write_text(buf.getvalue(), encoding="utf-8")
        return out

    for name in names:
        scenario = _build_scenario(name, profile)

        res = _capture(name, scenario.run)
        results[name] = res
        _write_json(out_dir / "data" / f"{name}_results.json", res)

        world = scenario.world
        _write_csv(out_dir / "data" / f"{name}_timeseries.csv", _world_to_rows(world))
        world.export_trajectory(str(out_dir / "data" / f"{name}_trajectory.csv"))
        _plot_trajectories(world, out_dir / "images" / f"{name}_trajectories.png", f"Scenario: {name}")

    return results


def main() -> int:
    parser = argparse.ArgumentParser(description="Run complete tests + simulations and write artifacts into build/")
    parser.add_argument("--out", default=str(DEFAULT_OUT_ROOT), help="Output root (default: build/reports)")
    parser.add_argument("--skip-pytests", action="store_true", help="Skip pytest")
    parser.add_argument("--skip-sim", action="store_true", help="Skip simulations")
    parser.add_argument(
        "--scenario",
        action="append",
        choices=SCENARIO_NAMES,
        help="Scenario to run (repeatable, default: all)",
    )
    parser.add_argument(
        "--profile",
        choices=["smoke", "standard", "full"],
        default="smoke",
        help="Simulation workload profile (default: smoke)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO)

    out_root = Path(args.out)
    stamp = _utc_stamp()
    run_dir = out_root / stamp
    latest_dir = out_root / "latest"

    run_dir.mkdir(parents=True, exist_ok=True)
    (run_dir / "logs").mkdir(exist_ok=True)
    (run_dir / "data").mkdir(exist_ok=True)
    (run_dir / "images").mkdir(exist_ok=True)

    meta = {
        "timestamp_utc": stamp,
        "python": sys.version,
        "repo": str(REPO_ROOT),
        "git": _git_info(),
    }
    _write_json(run_dir / "meta.json", meta)

    summary: dict[str, Any] = {"meta": meta, "steps": {}}

    # Pytests
    if not args.skip_pytests:
        code = _run_cmd(
            [
                sys.executable,
                "-m",
                "pytest",
                "-q",
                "--disable-warnings",
                "--maxfail=1",
                f"--junitxml={str(run_dir / 'data' / 'pytest-junit.xml')}",
                "tests",
            ],
            cwd=REPO_ROOT,
            log_path=run_dir / "logs" / "pytest.log",
            env={**os.environ, "PYTHONPATH": str(REPO_ROOT)},
        )
        summary["steps"]["pytest"] = {"exit_code": code}

    # Simulations
    if not args.skip_sim:
        names = args.scenario or list(SCENARIO_NAMES)
        try:
            sim_results = _run_simulation_bundle(run_dir, profile=args.profile, names=names)
            _write_json(run_dir / "data" / "simulation_summary.json", sim_results)
            summary["steps"]["simulations"] = {"ok": True, "scenarios": list(sim_results.keys())}
        except KeyboardInterrupt:
            (run_dir / "logs" / "simulation_runner_error.log").write_text("KeyboardInterrupt\n", encoding="utf-8")
            summary["steps"]["simulations"] = {"ok": False, "error": "KeyboardInterrupt"}
        except Exception as e:
            logging.exception("Simulation bundle failed")
            (run_dir / "logs" / "simulation_runner_error.log").write_text(str(e) + "\n", encoding="utf-8")
            summary["steps"]["simulations"] = {"ok": False, "error": str(e)}

    _write_json(run_dir / "summary.json", summary)

    # Human-readable summary
    lines = [
        f"swingby Validation Report ({stamp})",
        f"Output: {run_dir}",
        "",
        "Steps:",
    ]
    for k, v in summary["steps"].items():
        lines.append(f"- {k}: {v}")
    (run_dir / "summary.txt").write_text("\n".join(lines) + "\n", encoding="utf-8")

    # Refresh latest/
    if latest_dir.exists():
        shutil.rmtree(latest_dir)
    shutil.copytree(run_dir, latest_dir)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
