import pytest

from libsim.catalog import Catalog
from libsim.config import Settings, settings

SAMPLE_LINES = [
    "Tolkien, The Hobbit, 1937\n",
    "Austen, Emma, 1815\n",
    "Orwell, Animal Farm, 1945\n",
    "Austen, Persuasion, 1817\n",
    "Borges, Ficciones, 1944\n",
    "Austen, Sense and Sensibility, 1811\n",
]


def make_settings(**overrides) -> Settings:
    values = dict(
        allow_empty_catalog=False,
        insert_on_add=True,
        legacy_midpoint=False,
        max_field_length=51,
        min_year=1440,
    )
    values.update(overrides)
    return Settings(**values)


@pytest.fixture
def catalog_file(tmp_path):
    # Fresh catalog file per test
    path = tmp_path / "library.txt"
    path.write_text("".join(SAMPLE_LINES), encoding="utf-8")
    return str(path)


@pytest.fixture
def catalog(catalog_file):
    return Catalog.open(catalog_file, settings=make_settings())


@pytest.fixture
def cli_catalog_file(catalog_file, monkeypatch):
    # The CLI reads the module-level settings object
    monkeypatch.setattr(settings, "data_file", catalog_file)
    monkeypatch.setattr(settings, "allow_empty_catalog", False)
    monkeypatch.setattr(settings, "insert_on_add", True)
    monkeypatch.setattr(settings, "legacy_midpoint", False)
    monkeypatch.setenv("LIBSIM_OUTPUT", "plain")
    return catalog_file


@pytest.fixture
def settings_factory():
    return make_settings
