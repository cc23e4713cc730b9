# -*- coding: utf-8 -*-
import os
import subprocess
import sys
from pathlib import Path

STEPS = [
    "examples/check_schemes.py",
    "examples/check_blending_factor.py",
    "examples/step01_advection_1d.py",
    "examples/step02_channel_blending.py",
]

def main():
    root = Path(__file__).resolve().parent
    env = os.environ.copy()
    env.setdefault("PYTHONIOENCODING", "utf-8")
    env.setdefault("MPLBACKEND", "Agg")

    for step in STEPS:
        script = root / step
        print("\n" + "="*100)
        print(f"RUNNING: {script}")
        print("="*100)
        result = subprocess.run([sys.executable, str(script)], env=env)
        if result.returncode != 0:
            print(f"FAILED: {script} (exit {result.returncode})")
            sys.exit(result.returncode)
    print("\nAll steps completed successfully.")

if __name__ == "__main__":
    main()
