import pytest
import tempfile
from pathlib import Path
from macro_engine.models import Macro
from macro_engine.config import EngineConfig
from macro_engine.dispatcher import MacroDispatcher
from macro_engine.replacement import ReplacementCompiler
from macro_engine.loader import load_default_macros


@pytest.fixture
def temp_dir():
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_templates():
    """Sample replacement templates for testing."""
    return {
        'plain': 'x^2 + y',
        'greek': r'\alpha',
        'fraction': r'\frac{$1}{$2}$0',
        'reversed_stops': '$2a$1b',
        'defaults': '${1:abc} $2',
        'exit_only': 'a$0b',
        'inline_math': '$$0$',
        'subscript': '[[0]]_{[[1]]}',
        'boxed': r'\boxed{${VISUAL}}',
        'underbrace': r'\underbrace{${VISUAL}}_{$1}$0',
    }


@pytest.fixture
def engine_config():
    """Default engine configuration."""
    return EngineConfig()


@pytest.fixture
def compiler(engine_config):
    """Replacement compiler instance."""
    return ReplacementCompiler(engine_config)


@pytest.fixture
def dispatcher(engine_config):
    """Macro dispatcher instance."""
    return MacroDispatcher(engine_config)


@pytest.fixture
def greek_macro():
    """Plain trigger expanding to a Greek letter."""
    return Macro(trigger=';a', replacement=r'\alpha')


@pytest.fixture
def fraction_macro(sample_templates):
    """Math-only fraction with two tab stops and an exit."""
    return Macro(trigger='/f', replacement=sample_templates['fraction'], options='mA')


@pytest.fixture
def sample_macros(sample_templates):
    """Small mixed macro set."""
    return [
        Macro(trigger=';a', replacement=r'\alpha', options='mA', id='alpha'),
        Macro(trigger='mk', replacement=sample_templates['inline_math'], options='tA', id='mk'),
        Macro(trigger='//', replacement=sample_templates['fraction'], options='mA', id='frac'),
        Macro(trigger=r'([A-Za-z])(\d)', replacement=sample_templates['subscript'],
              options='rmA', priority=-1, id='subscript'),
        Macro(trigger='B', replacement=sample_templates['boxed'], options='mA', id='boxed'),
    ]


@pytest.fixture
def default_macros():
    """Bundled default macro set."""
    return load_default_macros()
