import pytest
from unittest.mock import patch

from hospital import __main__ as entrypoint
from hospital.config import page_size_limits


def test_page_size_limits_accepts_default_within_maximum():
    assert page_size_limits(10, 100) == (10, 100)
    assert page_size_limits(100, 100) == (100, 100)


@pytest.mark.parametrize("default, maximum", [(200, 100), (0, 100), (1, 0), (-5, 10)])
def test_page_size_limits_rejects_bad_configuration(default, maximum):
    with pytest.raises(ValueError):
        page_size_limits(default, maximum)


def test_main_serves_app_with_uvicorn():
    with patch("uvicorn.run") as run:
        entrypoint.main()
    run.assert_called_once()
    assert run.call_args.args == ("hospital.main:app",)
