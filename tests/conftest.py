import pytest

from minilisp.evaluation.evaluator import evaluate
from minilisp.reader.parser import parse
from minilisp.types.scope import ScopeStack

# Most tests evaluate source text against one ScopeStack per test, so a test
# can define something in one call and use it in the next.


@pytest.fixture
def scope():
    """Fresh default scope: False and True pre-bound."""
    return ScopeStack.default()


@pytest.fixture
def run(scope):
    def _run(source: str):
        return evaluate(parse(source), scope)
    return _run
