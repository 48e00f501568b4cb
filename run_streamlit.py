"""
Launcher script for the YouTube Tutorial Generator Streamlit app.
"""

import os
import sys
import argparse
import subprocess
from pathlib import Path

from app.config import config


def main():
    """Launch the Streamlit front end pointed at a running API server."""
    parser = argparse.ArgumentParser(description="YouTube Tutorial Generator Streamlit App")
    parser.add_argument("--port", type=int, default=8501, help="Port to run Streamlit on")
    parser.add_argument("--api-url", default=config.PUBLIC_URL, help="URL of the API server")
    args = parser.parse_args()

    project_dir = Path(__file__).parent.absolute()
    app_path = project_dir / "app" / "frontend" / "streamlit_app.py"

    env = os.environ.copy()
    env["PUBLIC_URL"] = args.api_url
    # streamlit runs the script directly, so the project root must be importable
    env["PYTHONPATH"] = str(project_dir) + os.pathsep + env.get("PYTHONPATH", "")

    print(f"Starting {config.APP_NAME} UI on port {args.port} (API: {args.api_url})")

    cmd = [
        "streamlit", "run", str(app_path),
        "--server.port", str(args.port),
        "--server.headless", "true",
        "--browser.gatherUsageStats", "false",
    ]

    try:
        subprocess.run(cmd, env=env, check=True)
    except KeyboardInterrupt:
        print("Streamlit app stopped")
    except subprocess.CalledProcessError as e:
        print(f"Streamlit exited with status {e.returncode}")
        sys.exit(e.returncode)


if __name__ == "__main__":
    main()
