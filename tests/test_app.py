from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


def _app() -> AppTest:
    return AppTest.from_file(APP_PATH, default_timeout=60)


def test_page_renders_with_random_seed():
    at = _app().run()
    assert not at.exception
    seed = at.sidebar.number_input[0]
    assert seed.value == -1
    assert seed.min == -1
    assert seed.step == 1


def test_page_renders_with_fixed_seed():
    at = _app().run()
    at.sidebar.number_input[0].set_value(42).run()
    assert not at.exception
