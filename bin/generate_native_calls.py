#!/usr/bin/env python3
"""
Native Call Generator

Reads a list of C prototypes and generates:
  1. NativeCalls.<rid>.cs - DllImport declarations, one file per runtime
  2. NativeCalls.ref.cs   - throwing stubs for reference assembly builds
  3. linkcommands         - linker export list for the bridging shim

Usage:
    python generate_native_calls.py prototypes.txt --output-dir generated/
    python generate_native_calls.py prototypes.txt -o generated/ --runtime win-x64 --runtime linux-x64
"""

import sys
from pathlib import Path

# Add parent directory to path so nativecalls package can be found
sys.path.insert(0, str(Path(__file__).parent.parent))

from nativecalls.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
