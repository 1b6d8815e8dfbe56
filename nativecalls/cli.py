"""Command line entry point for the native call generator"""

import argparse
import time
from pathlib import Path

from .errors import NativeCallsError
from .export_generator import EXPORT_STYLES
from .generator import generate_native_calls
from .platforms import RUNTIMES, find_runtime


def main(argv=None):
    start_time = time.perf_counter()

    parser = argparse.ArgumentParser(description="Generate P/Invoke declarations from C prototypes")
    parser.add_argument("prototypes", help="Path to the prototypes file (one declaration per line)")
    parser.add_argument("--output-dir", "-o", default="generated", help="Output directory")
    parser.add_argument("--runtime", "-r", action="append", default=[],
                        choices=[r.runtime_identifier for r in RUNTIMES],
                        help="Runtime to generate bindings for (repeatable, default: all)")
    parser.add_argument("--namespace", "-n", default="", help="C# namespace")
    parser.add_argument("--class-name", default="", help="C# class holding the declarations")
    parser.add_argument("--export-style", default="plain", choices=sorted(EXPORT_STYLES),
                        help="Linker export directive format")
    parser.add_argument("--allow-duplicates", action="store_true",
                        help="Do not reject prototypes that repeat a name")
    args = parser.parse_args(argv)

    runtimes = [find_runtime(rid) for rid in args.runtime] if args.runtime else RUNTIMES

    try:
        paths = generate_native_calls(
            Path(args.prototypes),
            Path(args.output_dir),
            runtimes=runtimes,
            namespace=args.namespace,
            class_name=args.class_name,
            export_style=args.export_style,
            allow_duplicates=args.allow_duplicates,
        )
    except NativeCallsError as exc:
        raise SystemExit(f"{args.prototypes}: {exc}") from exc
    except OSError as exc:
        raise SystemExit(f"Generation failed: {exc}") from exc

    for path in paths:
        print(f"Generated: {path}")

    elapsed = time.perf_counter() - start_time
    print(f"Generation completed in {elapsed*1000:.2f} ms")
    return 0
