import asyncio
import sys

from .utils import log, error_dict

if __name__ == "__main__":
    from .app import CaptureRunner

    try:
        runner = CaptureRunner()
    except Exception as ex:
        log.error("Failed to start", error_dict(ex))
        sys.exit(1)

    try:
        asyncio.run(runner.run())
    except KeyboardInterrupt:
        log.info("Interrupted")
