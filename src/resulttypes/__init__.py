import os

from beartype import BeartypeConf
from beartype.claw import beartype_all, beartype_this_package

from . import config

if os.environ.get(config.BEARTYPE_THIS_PACKAGE_ENV, "0") == "1":
    beartype_this_package()
if os.environ.get(config.BEARTYPE_ALL_ENV, "0") == "1":
    beartype_all(conf=BeartypeConf(violation_type=UserWarning))

from .control import EarlyReturn, coerce_return, try_unwrap  # noqa: E402
from .conversion import (  # noqa: E402
    common_result_type,
    convert,
    promote_result_type,
    promote_results,
)
from .coercion import coerce_value  # noqa: E402
from .errors import (  # noqa: E402
    ErrorKind,
    InexactConversionError,
    MalformedResultError,
    NotAnErrorResultError,
    ResultError,
    TypeMismatchError,
    render_error,
)
from .interop import from_returns, to_returns  # noqa: E402
from .result import (  # noqa: E402
    Result,
    ResultType,
    failure,
    is_error,
    render,
    success,
    unwrap,
    unwrap_as,
    unwrap_error,
)
from .safe import (  # noqa: E402
    EvalError,
    ParseError,
    parse_all_syntax,
    parse_syntax,
    register_parser,
    safe_eval,
    safe_parse,
    safe_parse_syntax,
    try_parse,
)

__all__: list[str] = [
    "EarlyReturn",
    "ErrorKind",
    "EvalError",
    "InexactConversionError",
    "MalformedResultError",
    "NotAnErrorResultError",
    "ParseError",
    "Result",
    "ResultError",
    "ResultType",
    "TypeMismatchError",
    "coerce_return",
    "coerce_value",
    "common_result_type",
    "convert",
    "failure",
    "from_returns",
    "is_error",
    "parse_all_syntax",
    "parse_syntax",
    "promote_result_type",
    "promote_results",
    "register_parser",
    "render",
    "render_error",
    "safe_eval",
    "safe_parse",
    "safe_parse_syntax",
    "success",
    "to_returns",
    "try_parse",
    "try_unwrap",
    "unwrap",
    "unwrap_as",
    "unwrap_error",
]
