import logging

import pytest

from advising.catalog import Catalog
from advising.loader import load_courses
from advising.logger import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_logging():
    # setup_logging binds its handler to whatever stderr is current
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


@pytest.fixture
def write_courses(tmp_path):
    def _write(text, name="courses.csv"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write


@pytest.fixture
def s1_catalog(write_courses):
    path = write_courses(
        "MATH201,Discrete Mathematics\n"
        "CSCI100,Introduction to Computer Science\n"
        "CSCI101,Introduction to Programming in C++,CSCI100\n"
    )
    catalog = Catalog()
    assert load_courses(path, catalog) is not None
    return catalog
