import datetime
import io
import logging
import pathlib

import pytest

LOG_DIR = pathlib.Path(__file__).parent / "test-logs"


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    # Attach the TestReport to the item so fixtures can see the outcome in teardown
    outcome = yield
    rep = outcome.get_result()
    setattr(item, "rep_" + rep.when, rep)


@pytest.fixture(autouse=True)
def capture_test_logs(request):
    """Capture geoprim logging per test and persist it only when the test fails."""
    pkg_logger = logging.getLogger("geoprim")
    buf = io.StringIO()
    handler = logging.StreamHandler(buf)
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s"))
    pkg_logger.addHandler(handler)
    prev_level = pkg_logger.level
    pkg_logger.setLevel(logging.DEBUG)

    try:
        yield
    finally:
        pkg_logger.removeHandler(handler)
        pkg_logger.setLevel(prev_level)

        rep = getattr(request.node, "rep_call", None)
        if rep is not None and rep.outcome == "failed":
            nodeid = request.node.nodeid.replace("::", "__").replace("/", "_")
            ts = datetime.datetime.now().strftime("%Y%m%dT%H%M%S")
            LOG_DIR.mkdir(exist_ok=True)
            fname = LOG_DIR / "{}__{}.log".format(nodeid, ts)
            with open(fname, "w", encoding="utf-8") as f:
                f.write("=== Test: {}\n".format(request.node.nodeid))
                f.write("=== Timestamp: {}\n\n".format(ts))
                f.write(buf.getvalue())


@pytest.fixture
def triangle():
    """Vertices a, b, c of the reference triangle."""
    return (0.0, 0.0), (2.0, 0.0), (1.0, 2.0)
