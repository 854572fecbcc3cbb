import sys
import warnings

_MIN_PYTHON = (3, 11)
_MIN_PYTHON_STR = ".".join(map(str, _MIN_PYTHON))

if sys.version_info < _MIN_PYTHON:
    warnings.warn(
        f"a11ycheck is tested on Python {_MIN_PYTHON_STR}+ only. "
        "Backward compatibility with Python 3.10 is not guaranteed.",
        FutureWarning,
        stacklevel=2,
    )
