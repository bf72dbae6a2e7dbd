#!/usr/bin/env python3
"""Launch the task tracker under uvicorn.

Command-line flags are exported as environment variables so the uvicorn
process builds its ``Settings`` from them. The store lives in process
memory, so the server always runs as a single worker.

    python run_server.py --id-policy unique_random --port 8080
"""

import argparse
import os
import subprocess
import sys

ID_POLICIES = ("reused_integer", "unique_random")
LOG_LEVELS = ("critical", "error", "warning", "info", "debug", "trace")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the in-memory task tracker")
    parser.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "3000")))
    parser.add_argument(
        "--id-policy",
        default=os.getenv("ID_POLICY", "reused_integer"),
        choices=ID_POLICIES,
        help="How new task ids are assigned (default: reused_integer)",
    )
    parser.add_argument("--log-level", default=os.getenv("LOG_LEVEL", "info"), choices=LOG_LEVELS)
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart on code changes; every restart empties the store",
    )
    return parser


def main() -> int:
    args = build_parser().parse_args()

    try:
        import uvicorn  # noqa: F401
    except ImportError:
        print("uvicorn is not installed (pip install -e .)", file=sys.stderr)
        return 1

    env = dict(os.environ)
    env.update(
        HOST=args.host,
        PORT=str(args.port),
        LOG_LEVEL=args.log_level,
        ID_POLICY=args.id_policy,
    )

    cmd = [
        sys.executable, "-m", "uvicorn", "tasktracker.main:app",
        "--host", args.host,
        "--port", str(args.port),
        "--log-level", args.log_level,
    ]
    if args.reload:
        cmd.append("--reload")

    try:
        subprocess.run(cmd, check=True, env=env)
    except KeyboardInterrupt:
        return 0
    except subprocess.CalledProcessError as e:
        return e.returncode
    return 0


if __name__ == "__main__":
    sys.exit(main())
