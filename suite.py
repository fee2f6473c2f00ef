import time
import traceback
from functools import wraps
from typing import List, Dict, Any, Callable, Optional, Type
from collex.debug import DebugFailure, AssertionLevel, set_assertion_level

_suite_state: Dict[str, List[Dict[str, Any]]] = {
    'tests': [],
    'results': []
}

PASS_FACE = '(^ ω ^)'
FAIL_FACE = '(ﾉಥДಥ)ﾉ'
SUMMARY_FACE = '☆*:.｡.o(≧▽≦)o.｡.:*☆'


class _c:
    """a tiny, silent class for holding color codes."""
    ok = '\033[92m'
    fail = '\033[91m'
    warn = '\033[93m'
    info = '\033[94m'
    grey = '\033[90m'
    reset = '\033[0m'


# --- custom exception for assertions ---

class TestAssertionError(AssertionError):
    """custom error to distinguish assertion failures from other exceptions."""
    __test__ = False


# --- public api ---

def test(description: str) -> Callable:
    """decorator to register a function as a test case."""

    def decorator(func: Callable) -> Callable:
        _suite_state['tests'].append({'func': func, 'description': description})

        @wraps(func)
        def wrapper(*args, **kwargs):
            return func(*args, **kwargs)

        return wrapper

    return decorator


def assert_that(condition: Any, message: str = "assertion failed") -> None:
    """custom assertion that raises a specific, catchable error type."""
    if not condition:
        raise TestAssertionError(message)


def assert_raises(error_type: Type[BaseException], func: Callable, *args, message: Optional[str] = None,
                  **kwargs) -> BaseException:
    """
    calls func(*args, **kwargs) and asserts it raises `error_type`.
    returns the caught exception so tests can inspect it.
    a TestAssertionError from inside func is never mistaken for the expected error.
    """
    try:
        func(*args, **kwargs)
    except TestAssertionError:
        raise
    except error_type as e:
        return e
    raise TestAssertionError(message or f"expected {error_type.__name__} to be raised")


def describe_error(error: BaseException) -> str:
    """one-line report for a failed test. debug failures escaping collex are called out."""
    if isinstance(error, TestAssertionError):
        return f"assertion failed: {error}"
    if isinstance(error, DebugFailure):
        return f"unexpected collex precondition failure: {error}"
    return f"{type(error).__name__}: {error}"


def run(title: str = "test run", verbose_errors: bool = False, only: Optional[str] = None,
        assertion_level: Optional[AssertionLevel] = None) -> bool:
    """
    executes registered tests, prints a report and returns whether all passed.
    `only` keeps tests whose description contains it. when `assertion_level` is
    given, collex runs at that level for the duration of the run.
    """
    print(f"\n{_c.info}--- starting: {title} ---{_c.reset}")
    start_time = time.perf_counter()

    _suite_state['results'] = []
    tests_to_run = [t for t in _suite_state['tests'] if only is None or only in t['description']]
    previous_level = set_assertion_level(assertion_level) if assertion_level is not None else None

    for test_item in tests_to_run:
        func = test_item['func']
        description = test_item['description']

        passed = False
        error = None

        try:
            func()
            passed = True
        except TestAssertionError as e:
            error = describe_error(e)
        except Exception as e:
            error = describe_error(e)
            if verbose_errors:
                traceback.print_exc()

        _suite_state['results'].append({'passed': passed, 'description': description, 'error': error})

        if passed:
            print(f"  {_c.ok}✔ pass{_c.reset}  {PASS_FACE}  {description}")
        else:
            print(f"  {_c.fail}✖ fail{_c.reset}  {FAIL_FACE}  {description}")
            print(f"    {_c.grey}└─> {error}{_c.reset}")

    if previous_level is not None:
        set_assertion_level(previous_level)
    all_passed = _print_summary(start_time)

    # clear tests after run to allow for multiple, separate suite runs in a single script
    _suite_state['tests'] = []
    return all_passed


def _print_summary(start_time: float) -> bool:
    """prints the final summary of the test run."""
    duration = (time.perf_counter() - start_time) * 1000
    results = _suite_state['results']

    total = len(results)
    passed_count = sum(1 for r in results if r['passed'])
    failed_count = total - passed_count

    summary_color = _c.ok if failed_count == 0 else _c.fail

    print(f"\n{summary_color}--- summary ---{_c.reset}")
    print(f"  {SUMMARY_FACE}  ran {_c.info}{total}{_c.reset} tests in {_c.warn}{duration:.2f}ms{_c.reset}")
    print(f"  {_c.ok}passed: {passed_count}{_c.reset}, {_c.fail}failed: {failed_count}{_c.reset}")
    print(f"{summary_color}---------------{_c.reset}\n")
    return failed_count == 0
