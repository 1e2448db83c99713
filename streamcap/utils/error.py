import sys
import traceback


def stacktrace() -> str:
    exc_info = sys.exc_info()
    trace = traceback.format_exception(*exc_info)
    return "".join(trace)


def error_dict(ex: BaseException) -> dict:
    return {
        "error_type": type(ex).__name__,
        "error": str(ex),
    }
