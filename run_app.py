"""Run the NG Jobs Streamlit app from project root. Use: python run_app.py [streamlit options]"""
import subprocess
import sys
from pathlib import Path

APP_DIR = Path(__file__).resolve().parent / "ng_jobs"

if __name__ == "__main__":
    # app.py imports its siblings as top-level modules, so run from its directory
    cmd = [sys.executable, "-m", "streamlit", "run", "app.py", *sys.argv[1:]]
    sys.exit(subprocess.run(cmd, cwd=APP_DIR).returncode)
