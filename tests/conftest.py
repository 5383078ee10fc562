import pytest

from front_matter import clear_cache


@pytest.fixture(autouse=True)
def _clear_default_cache():
	"""Each test starts with an empty process-wide cache."""
	clear_cache()
	yield
	clear_cache()
