import pytest

# Every test starts from the built-in defaults: evaluating read_expr,
# lenient primitive lookup, and "lisp" as the source name in parse errors.
SCHEMER_ENV_VARS = ("SCHEMER_EVALUATE", "SCHEMER_STRICT_APPLY", "SCHEMER_SOURCE_NAME")


@pytest.fixture(autouse=True)
def _clean_schemer_env(monkeypatch):
    for var in SCHEMER_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
