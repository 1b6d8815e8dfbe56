"""Fixed catalog of the runtimes native bindings are generated for"""

from .types import ParentRuntime, Runtime

LINUX = ParentRuntime("linux", "LINUX", "Linux", "so")
WINDOWS = ParentRuntime("win", "WIN", "Windows", "dll")
OSX = ParentRuntime("osx", "OSX", "OSX", "dylib")

PARENT_RUNTIMES: tuple[ParentRuntime, ...] = (LINUX, WINDOWS, OSX)

RUNTIMES: tuple[Runtime, ...] = (
    Runtime("win-x86",   "WIN_X86",   WINDOWS, False),
    Runtime("win-x64",   "WIN_X64",   WINDOWS, True),
    Runtime("linux-x86", "LINUX_X86", LINUX,   False),
    Runtime("linux-x64", "LINUX_X64", LINUX,   True),
    Runtime("osx-x64",   "OSX_X64",   OSX,     True),
)

REFERENCE_ASSEMBLY = "REFERENCE_ASSEMBLY"


def find_runtime(runtime_identifier: str) -> Runtime:
    for runtime in RUNTIMES:
        if runtime.runtime_identifier == runtime_identifier:
            return runtime
    known = ", ".join(r.runtime_identifier for r in RUNTIMES)
    raise KeyError(f"unknown runtime '{runtime_identifier}' (known: {known})")
