from __future__ import annotations

import os
import signal


def _stop(signum, frame) -> None:
    # In-flight task subprocesses are left to the OS.
    print("\n\nReady stopped 🛑", flush=True)
    os._exit(0)


def install_signal_handlers() -> None:
    signal.signal(signal.SIGINT, _stop)
    signal.signal(signal.SIGTERM, _stop)
